"""
vocab/fields.py

What this file does:
- Normalizes single spreadsheet cells:
  1) free text (placeholder dashes and blanks become EMPTY)
  2) coded categories: pada -> voice, linga -> gender / word subtype
  3) integers for the datastore (verb class, order index)

How it fits:
- schema.py calls these per column when converting raw spreadsheet rows.
- The import migration calls to_optional / parse_int when building the typed
  payload for the datastore.

All mappers are total: unknown codes come back as EMPTY, never raise.
"""

from __future__ import annotations

import re
from typing import Optional

EMPTY = ""

# Cells the spreadsheet authors use for "nothing here"
_PLACEHOLDERS = {"—", "-"}

VOICES = {
  "P": "parasmaipada",
  "A": "atmanepada",
  "U": "ubhayapada",
}

GENDERS = {
  "m": "masculine",
  "f": "feminine",
  "n": "neuter",
}

_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def clean_text(text: Optional[str]) -> str:
  if text is None or text in _PLACEHOLDERS or not text.strip():
    return EMPTY
  return text.strip()

def map_voice(pada: Optional[str]) -> str:
  return VOICES.get((pada or "").upper(), EMPTY)

def map_gender(linga: Optional[str]) -> str:
  return GENDERS.get(linga or "", EMPTY)

def determine_subtype(linga: Optional[str]) -> str:
  if linga == "a":
    return "adjective"
  if linga == "p":
    return "pronoun"
  if linga in GENDERS:
    return "noun"
  return EMPTY

def clean_verb_class(gana: Optional[str]) -> str:
  # kept verbatim: classes like "1" or "10" are never reformatted
  if not gana or gana == "-":
    return EMPTY
  return gana

def to_optional(text: Optional[str]) -> Optional[str]:
  cleaned = clean_text(text)
  return cleaned if cleaned != EMPTY else None

def parse_int(text: Optional[str]) -> Optional[int]:
  """
  Leading-integer parse: "10" -> 10, "4a" -> 4, "" -> None.
  A non-empty value without leading digits raises ValueError.
  """
  cleaned = clean_text(text)
  if cleaned == EMPTY:
    return None
  m = _LEADING_INT_RE.match(cleaned)
  if m is None:
    raise ValueError(f"Expected an integer, got {text!r}")
  return int(m.group(0))
