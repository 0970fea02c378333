"""
store/db.py

What this file does:
- Defines the SQLite schema for the vocabulary datastore.
- Provides connect() and init_db() helpers.
- Wraps a connection in SQLiteDatastore: the create / find_many / delete /
  transaction collaborator the migrations are written against.

How it fits:
- Migrations never open the DB themselves. Scripts (or tests) build a
  datastore and pass it in, so an in-memory fake can stand in for SQLite.

Notes:
- One collection: "vocabulary". Empty values are stored as NULL.
- Nothing here commits on its own except transaction(); create/delete only
  stage writes.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Protocol

SCHEMA_VERSION = 1

VOCABULARY_COLLECTION = "vocabulary"

VOCABULARY_COLUMNS = [
  "word_type",
  "word_subtype",
  "word_devanagari",
  "root_devanagari",
  "verb_class",
  "voice",
  "standard_form",
  "gender",
  "grammatical_case",
  "meaning_pt",
  "meaning_es",
  "meaning_en",
  "past_imperfect",
  "potential",
  "imperative",
  "past_participle",
  "gerund",
  "infinitive",
  "ppp",
  "itrans",
  "iast",
  "harvard_kyoto",
  "is_published",
  "order_index",
]

DDL = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS meta (
  key TEXT PRIMARY KEY,
  value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS vocabulary (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  word_type TEXT NOT NULL CHECK (word_type IN ('verb', 'substantive', 'indeclinable')),
  word_subtype TEXT CHECK (word_subtype IS NULL OR word_subtype IN ('noun', 'adjective', 'pronoun')),
  word_devanagari TEXT NOT NULL CHECK (TRIM(word_devanagari) != ''),
  root_devanagari TEXT,
  verb_class INTEGER,
  voice TEXT,
  standard_form TEXT,
  gender TEXT,
  grammatical_case TEXT,
  meaning_pt TEXT,
  meaning_es TEXT,
  meaning_en TEXT,
  past_imperfect TEXT,
  potential TEXT,
  imperative TEXT,
  past_participle TEXT,
  gerund TEXT,
  infinitive TEXT,
  ppp TEXT,
  itrans TEXT,
  iast TEXT,
  harvard_kyoto TEXT,
  is_published INTEGER NOT NULL DEFAULT 0,
  order_index INTEGER
);

CREATE INDEX IF NOT EXISTS idx_vocabulary_word_type ON vocabulary(word_type);

-- Which migrations have run (names are applied once, in order)
CREATE TABLE IF NOT EXISTS migrations (
  name TEXT PRIMARY KEY,
  applied_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS runs (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  kind TEXT NOT NULL,
  created_at TEXT NOT NULL,
  notes TEXT
);

CREATE INDEX IF NOT EXISTS idx_runs_kind ON runs(kind);
"""

_COLLECTION_TABLES = {VOCABULARY_COLLECTION: "vocabulary"}


class Datastore(Protocol):
  def create(self, collection: str, data: Mapping[str, Any]) -> Dict[str, Any]: ...

  def find_many(self, collection: str, limit: int = -1) -> List[Dict[str, Any]]: ...

  def delete(self, collection: str, entry_id: int) -> None: ...

  def transaction(self): ...


def connect(db_path: str | Path) -> sqlite3.Connection:
  conn = sqlite3.connect(str(db_path))
  conn.row_factory = sqlite3.Row
  return conn

def init_db(conn: sqlite3.Connection) -> None:
  conn.executescript(DDL)
  conn.execute(
    "INSERT OR REPLACE INTO meta(key, value) VALUES(?, ?)",
    ("schema_version", str(SCHEMA_VERSION)),
  )
  conn.commit()


class SQLiteDatastore:
  """
  Datastore over one sqlite3 connection.

  Rows come back as plain dicts; is_published is returned as a bool.
  """

  def __init__(self, conn: sqlite3.Connection) -> None:
    self.conn = conn

  @classmethod
  def open(cls, db_path: str | Path) -> "SQLiteDatastore":
    conn = connect(db_path)
    init_db(conn)
    return cls(conn)

  def close(self) -> None:
    self.conn.close()

  @staticmethod
  def _table(collection: str) -> str:
    table = _COLLECTION_TABLES.get(collection)
    if table is None:
      raise ValueError(f"Unknown collection: {collection!r}")
    return table

  @staticmethod
  def _to_dict(row: sqlite3.Row) -> Dict[str, Any]:
    out = dict(row)
    if "is_published" in out:
      out["is_published"] = bool(out["is_published"])
    return out

  def create(self, collection: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    table = self._table(collection)
    unknown = [k for k in data if k not in VOCABULARY_COLUMNS]
    if unknown:
      raise ValueError(f"Unknown fields for {collection!r}: {unknown}")

    cols = [k for k in VOCABULARY_COLUMNS if k in data]
    values = [int(data[k]) if k == "is_published" else data[k] for k in cols]
    placeholders = ",".join("?" for _ in cols)
    cur = self.conn.execute(
      f"INSERT INTO {table}({', '.join(cols)}) VALUES({placeholders})",
      values,
    )
    row = self.conn.execute(
      f"SELECT * FROM {table} WHERE id = ?",
      (cur.lastrowid,),
    ).fetchone()
    return self._to_dict(row)

  def find_many(self, collection: str, limit: int = -1) -> List[Dict[str, Any]]:
    table = self._table(collection)
    # sqlite treats a negative LIMIT as "no limit"
    rows = self.conn.execute(
      f"SELECT * FROM {table} ORDER BY id LIMIT ?",
      (int(limit),),
    ).fetchall()
    return [self._to_dict(r) for r in rows]

  def delete(self, collection: str, entry_id: int) -> None:
    table = self._table(collection)
    self.conn.execute(f"DELETE FROM {table} WHERE id = ?", (entry_id,))

  @contextmanager
  def transaction(self) -> Iterator["SQLiteDatastore"]:
    """
    All writes inside the block commit together; any exception rolls back
    every write made since the block started, then propagates.
    """
    try:
      yield self
    except BaseException:
      self.conn.rollback()
      raise
    else:
      self.conn.commit()

  # ---------------------------
  # Migration bookkeeping
  # ---------------------------

  def applied_migrations(self) -> List[str]:
    rows = self.conn.execute("SELECT name FROM migrations ORDER BY name").fetchall()
    return [r["name"] for r in rows]

  def mark_applied(self, name: str, applied_at: str) -> None:
    self.conn.execute(
      "INSERT OR REPLACE INTO migrations(name, applied_at) VALUES(?, ?)",
      (name, applied_at),
    )

  def unmark_applied(self, name: str) -> None:
    self.conn.execute("DELETE FROM migrations WHERE name = ?", (name,))

  def record_run(self, kind: str, created_at: str, notes: str | None = None) -> None:
    self.conn.execute(
      "INSERT INTO runs(kind, created_at, notes) VALUES(?,?,?)",
      (kind, created_at, notes),
    )
