"""
vocab/schema.py

What this file does:
- Declares the three spreadsheet layouts (verbs, substantives, indeclinables):
  source column names, normalized header lists, file names.
- Converts one raw spreadsheet row into a normalized record (all strings).
- Builds the typed datastore payload from one normalized record.

How it fits:
- convert/convert.py uses the row converters + headers to write the
  *-for-import.csv files.
- migrate/import_vocabulary.py reads those files back and uses the entry
  builders to create datastore entries.

Notes:
- Source headers are an external contract. A renamed spreadsheet column is
  not an error: its values just come back empty.
- The indeclinables sheet spells "Portugues" without the accent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from .fields import (
    clean_text,
    clean_verb_class,
    determine_subtype,
    map_gender,
    map_voice,
    parse_int,
    to_optional,
)

VERB = "verb"
SUBSTANTIVE = "substantive"
INDECLINABLE = "indeclinable"

WORD_TYPES = (VERB, SUBSTANTIVE, INDECLINABLE)

# ---------------------------
# Source spreadsheet columns
# ---------------------------

COL_DHATU = "धातु"
COL_GANA = "गण"
COL_PADA = "पद"
COL_LAT = "तिङन्तं लट्"
COL_LAN = "लङ् / Pasado Imperfecto"
COL_LIN = "लिङ् / Potencial"
COL_LOT = "लोट् / Imperativo"
COL_LIT = "लिट् / Pasado Perfecto"
COL_KTVA = "क्त्वा / Gerundio"
COL_TUMUN = "तुमुन् / Infinitivo"
COL_KTA = "क्त / PPP"

COL_SUBANTA = "सुबन्तं"
COL_LINGA = "लिङ्ग"

COL_AVYAYA = "अव्यय"
COL_VIBHAKTI = "विभक्ति"

COL_PT = "Portugués"
COL_PT_NO_ACCENT = "Portugues"
COL_ES = "Español"
COL_EN = "Inglés"
COL_ITRANS = "ITRANS"
COL_IAST = "IATS"
COL_HK = "Harvard-Kyoto"

# ---------------------------
# Normalized headers
# ---------------------------

VERB_HEADERS: List[str] = [
    "word_type", "word_devanagari", "root_devanagari", "verb_class", "voice",
    "standard_form", "meaning_pt", "meaning_es", "meaning_en",
    "past_imperfect", "potential", "imperative", "past_participle",
    "gerund", "infinitive", "ppp", "itrans", "iast", "harvard_kyoto",
    "is_published", "order_index",
]

SUBSTANTIVE_HEADERS: List[str] = [
    "word_type", "word_subtype", "word_devanagari", "gender",
    "meaning_pt", "meaning_es", "meaning_en",
    "itrans", "iast", "harvard_kyoto", "is_published", "order_index",
]

INDECLINABLE_HEADERS: List[str] = [
    "word_type", "word_devanagari", "grammatical_case",
    "meaning_pt", "meaning_es", "meaning_en",
    "itrans", "iast", "harvard_kyoto", "is_published", "order_index",
]

# Verb-only text fields
_VERB_FORMS = [
    ("standard_form", COL_LAT),
    ("past_imperfect", COL_LAN),
    ("potential", COL_LIN),
    ("imperative", COL_LOT),
    ("past_participle", COL_LIT),
    ("gerund", COL_KTVA),
    ("infinitive", COL_TUMUN),
    ("ppp", COL_KTA),
]

_TRANSLITERATIONS = [
    ("itrans", COL_ITRANS),
    ("iast", COL_IAST),
    ("harvard_kyoto", COL_HK),
]


def _meanings(row: Mapping[str, str], pt_column: str = COL_PT) -> Dict[str, str]:
    return {
        "meaning_pt": clean_text(row.get(pt_column)),
        "meaning_es": clean_text(row.get(COL_ES)),
        "meaning_en": clean_text(row.get(COL_EN)),
    }


def _transliterations(row: Mapping[str, str]) -> Dict[str, str]:
    return {field: clean_text(row.get(col)) for field, col in _TRANSLITERATIONS}


def _publication(order_index: int) -> Dict[str, str]:
    return {"is_published": "true", "order_index": str(order_index)}


# ---------------------------
# Raw row -> normalized record
# ---------------------------

def convert_verb_row(row: Mapping[str, str], order_index: int) -> Dict[str, str]:
    dhatu = clean_text(row.get(COL_DHATU))
    rec: Dict[str, str] = {
        "word_type": VERB,
        "word_devanagari": dhatu,
        "root_devanagari": dhatu,
        "verb_class": clean_verb_class(row.get(COL_GANA)),
        "voice": map_voice(row.get(COL_PADA)),
    }
    for field, col in _VERB_FORMS:
        rec[field] = clean_text(row.get(col))
    rec.update(_meanings(row))
    rec.update(_transliterations(row))
    rec.update(_publication(order_index))
    return rec


def convert_substantive_row(row: Mapping[str, str], order_index: int) -> Dict[str, str]:
    linga = row.get(COL_LINGA)
    rec: Dict[str, str] = {
        "word_type": SUBSTANTIVE,
        "word_subtype": determine_subtype(linga),
        "word_devanagari": clean_text(row.get(COL_SUBANTA)),
        "gender": map_gender(linga),
    }
    rec.update(_meanings(row))
    rec.update(_transliterations(row))
    rec.update(_publication(order_index))
    return rec


def convert_indeclinable_row(row: Mapping[str, str], order_index: int) -> Dict[str, str]:
    rec: Dict[str, str] = {
        "word_type": INDECLINABLE,
        "word_devanagari": clean_text(row.get(COL_AVYAYA)),
        "grammatical_case": clean_text(row.get(COL_VIBHAKTI)),
    }
    rec.update(_meanings(row, pt_column=COL_PT_NO_ACCENT))
    rec.update(_transliterations(row))
    rec.update(_publication(order_index))
    return rec


def has_devanagari(rec: Mapping[str, Optional[str]]) -> bool:
    return bool((rec.get("word_devanagari") or "").strip())


# ---------------------------
# Normalized record -> datastore payload
# ---------------------------

_SHARED_OPTIONAL = [
    "meaning_pt", "meaning_es", "meaning_en",
    "itrans", "iast", "harvard_kyoto",
]


def _entry(rec: Mapping[str, str], optional_fields: List[str]) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "word_type": rec.get("word_type"),
        "word_devanagari": (rec.get("word_devanagari") or "").strip(),
    }
    for field in optional_fields:
        data[field] = to_optional(rec.get(field))
    data["is_published"] = rec.get("is_published") == "true"
    data["order_index"] = parse_int(rec.get("order_index"))
    return data


def verb_entry(rec: Mapping[str, str]) -> Dict[str, Any]:
    data = _entry(
        rec,
        ["root_devanagari", "voice"]
        + [field for field, _ in _VERB_FORMS]
        + _SHARED_OPTIONAL,
    )
    data["verb_class"] = parse_int(rec.get("verb_class"))
    return data


def substantive_entry(rec: Mapping[str, str]) -> Dict[str, Any]:
    return _entry(rec, ["word_subtype", "gender"] + _SHARED_OPTIONAL)


def indeclinable_entry(rec: Mapping[str, str]) -> Dict[str, Any]:
    return _entry(rec, ["grammatical_case"] + _SHARED_OPTIONAL)


@dataclass(frozen=True)
class WordTypeSpec:
    word_type: str
    label: str                      # plural, used in progress output + stats
    source_file: str
    converted_file: str
    headers: List[str]
    convert_row: Callable[[Mapping[str, str], int], Dict[str, str]]
    build_entry: Callable[[Mapping[str, str]], Dict[str, Any]]


WORD_TYPE_SPECS: List[WordTypeSpec] = [
    WordTypeSpec(
        word_type=VERB,
        label="verbs",
        source_file="Vocabulario Glide - Verbos.csv",
        converted_file="verbs-for-import.csv",
        headers=VERB_HEADERS,
        convert_row=convert_verb_row,
        build_entry=verb_entry,
    ),
    WordTypeSpec(
        word_type=SUBSTANTIVE,
        label="substantives",
        source_file="Vocabulario Glide - Sustantivos.csv",
        converted_file="substantives-for-import.csv",
        headers=SUBSTANTIVE_HEADERS,
        convert_row=convert_substantive_row,
        build_entry=substantive_entry,
    ),
    WordTypeSpec(
        word_type=INDECLINABLE,
        label="indeclinables",
        source_file="Vocabulario Glide - Indeclinables.csv",
        converted_file="indeclinables-for-import.csv",
        headers=INDECLINABLE_HEADERS,
        convert_row=convert_indeclinable_row,
        build_entry=indeclinable_entry,
    ),
]
