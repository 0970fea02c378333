from __future__ import annotations

import copy
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pytest

from sanskrit_vocab_pipeline.store.db import SQLiteDatastore


class InMemoryDatastore:
    """
    Dict-backed stand-in for the datastore. transaction() snapshots the
    collections and restores them if the block raises.

    fail_on_create=N makes the N-th create() call (1-based) raise.
    """

    def __init__(self, fail_on_create: Optional[int] = None) -> None:
        self.collections: Dict[str, List[Dict[str, Any]]] = {}
        self.next_id = 1
        self.create_calls = 0
        self.fail_on_create = fail_on_create

    def create(self, collection: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        self.create_calls += 1
        if self.fail_on_create is not None and self.create_calls == self.fail_on_create:
            raise RuntimeError("insert failed")
        entry = {"id": self.next_id, **data}
        self.next_id += 1
        self.collections.setdefault(collection, []).append(entry)
        return dict(entry)

    def find_many(self, collection: str, limit: int = -1) -> List[Dict[str, Any]]:
        entries = [dict(e) for e in self.collections.get(collection, [])]
        return entries if limit < 0 else entries[:limit]

    def delete(self, collection: str, entry_id: int) -> None:
        self.collections[collection] = [
            e for e in self.collections.get(collection, []) if e["id"] != entry_id
        ]

    @contextmanager
    def transaction(self):
        snapshot = copy.deepcopy(self.collections)
        try:
            yield self
        except BaseException:
            self.collections = snapshot
            raise


@pytest.fixture
def memory_store() -> InMemoryDatastore:
    return InMemoryDatastore()


@pytest.fixture
def sqlite_store(tmp_path: Path):
    store = SQLiteDatastore.open(tmp_path / "vocabulary.db")
    yield store
    store.close()


VERBS_CSV = "\n".join([
    "धातु,गण,पद,तिङन्तं लट्,Portugués,Español,Inglés,लङ् / Pasado Imperfecto,लिङ् / Potencial,"
    "लोट् / Imperativo,लिट् / Pasado Perfecto,क्त्वा / Gerundio,तुमुन् / Infinitivo,क्त / PPP,"
    "ITRANS,IATS,Harvard-Kyoto",
    "गम्,1,P,गच्छति,ir,ir,to go,अगच्छत्,गच्छेत्,गच्छतु,जगाम,गत्वा,गन्तुम्,गत,gam,gam,gam",
    ",4,A,,,,,,,,,,,,,,",
    "लभ्,1,a,लभते,obter,obtener,\"to get, obtain\",—,-,,,,,,labh,labh,labh",
    ",,,,,,,,,,,,,,,,",
    "",
])

SUBSTANTIVES_CSV = "\n".join([
    "सुबन्तं,लिङ्ग,Portugués,Español,Inglés,ITRANS,IATS,Harvard-Kyoto",
    "देव,m,deus,dios,god,deva,deva,deva",
    "नदी,f,rio,río,river,nadI,nadī,nadI",
    "सुन्दर,a,belo,hermoso,beautiful,sundara,sundara,sundara",
    "तत्,p,isso,eso,that,tat,tat,tat",
    "फल,x,fruta,fruta,fruit,phala,phala,phala",
])

INDECLINABLES_CSV = "\n".join([
    "अव्यय,विभक्ति,Portugues,Español,Inglés,ITRANS,IATS,Harvard-Kyoto",
    "च,—,e,y,and,ca,ca,ca",
    "सह,तृतीया,com,con,with,saha,saha,saha",
])


@pytest.fixture
def spreadsheets_dir(tmp_path: Path) -> Path:
    d = tmp_path / "spread_sheets"
    d.mkdir()
    (d / "Vocabulario Glide - Verbos.csv").write_text(VERBS_CSV, encoding="utf-8")
    (d / "Vocabulario Glide - Sustantivos.csv").write_text(SUBSTANTIVES_CSV, encoding="utf-8")
    (d / "Vocabulario Glide - Indeclinables.csv").write_text(INDECLINABLES_CSV, encoding="utf-8")
    return d
