"""
main.py

What this file does:
- Converts the spreadsheet exports once, then applies any pending migrations
  (cleanup + import) to the project's vocabulary DB.

How to run:
- From project root:
  PYTHONPATH=src python main.py
"""

from __future__ import annotations

from contextlib import closing
from pathlib import Path

from sanskrit_vocab_pipeline.convert.convert import convert_spreadsheets
from sanskrit_vocab_pipeline.migrate.runner import run_pending
from sanskrit_vocab_pipeline.store.db import SQLiteDatastore

if __name__ == "__main__":
    spreadsheets_dir = Path("data/spread_sheets")
    converted_dir = spreadsheets_dir / "converted"
    db_path = Path("data/vocabulary.db")

    convert_spreadsheets(spreadsheets_dir, converted_dir)

    db_path.parent.mkdir(parents=True, exist_ok=True)
    with closing(SQLiteDatastore.open(db_path)) as store:
        run_pending(store, converted_dir=converted_dir)
    print(f"✅ Vocabulary DB ready: {db_path}")
