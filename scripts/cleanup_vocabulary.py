#!/usr/bin/env python3
"""
scripts/cleanup_vocabulary.py

Delete every vocabulary entry from the DB (run before a re-import).
Does not touch the migrations table.

Usage:
  PYTHONPATH=src python scripts/cleanup_vocabulary.py --db data/vocabulary.db
"""

from __future__ import annotations

import argparse
from contextlib import closing
from pathlib import Path

from sanskrit_vocab_pipeline.migrate import cleanup_vocabulary
from sanskrit_vocab_pipeline.store.db import SQLiteDatastore


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", required=True, help="SQLite DB path")
    args = ap.parse_args()

    db_path = Path(args.db)
    if not db_path.exists():
        raise FileNotFoundError(f"DB not found: {db_path}")

    with closing(SQLiteDatastore.open(db_path)) as store:
        cleanup_vocabulary.up(store)


if __name__ == "__main__":
    main()
