#!/usr/bin/env python3
"""
scripts/migrate.py

Apply pending vocabulary migrations (cleanup, then import) to a SQLite DB,
or roll back the last applied one.

Usage:
  PYTHONPATH=src python scripts/migrate.py \
    --db data/vocabulary.db \
    --converted data/spread_sheets/converted

  PYTHONPATH=src python scripts/migrate.py --db data/vocabulary.db --rollback
"""

from __future__ import annotations

import argparse
from contextlib import closing
from pathlib import Path

from sanskrit_vocab_pipeline.migrate.runner import rollback_last, run_pending
from sanskrit_vocab_pipeline.store.db import SQLiteDatastore


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", required=True, help="SQLite DB path (created if missing)")
    ap.add_argument("--converted", default="data/spread_sheets/converted", help="Directory with *-for-import.csv files")
    ap.add_argument("--rollback", action="store_true", help="Roll back the last applied migration instead")
    args = ap.parse_args()

    db_path = Path(args.db)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with closing(SQLiteDatastore.open(db_path)) as store:
        if args.rollback:
            rollback_last(store)
            return

        converted = Path(args.converted)
        if not converted.is_dir():
            raise FileNotFoundError(f"Converted directory not found: {converted}")
        run_pending(store, converted_dir=converted)


if __name__ == "__main__":
    main()
