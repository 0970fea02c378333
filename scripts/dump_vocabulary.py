#!/usr/bin/env python3
"""
scripts/dump_vocabulary.py

Export the stored vocabulary collection to CSV for a quick look in a
spreadsheet, and print counts per word type.

Usage:
  PYTHONPATH=src python scripts/dump_vocabulary.py \
    --db  data/vocabulary.db \
    --out data/vocabulary_dump.csv
"""

from __future__ import annotations

import argparse
from contextlib import closing
from pathlib import Path

import pandas as pd

from sanskrit_vocab_pipeline.store.db import connect


def load_vocabulary(db_path: str | Path) -> pd.DataFrame:
    with closing(connect(db_path)) as conn:
        df = pd.read_sql_query(
            "SELECT * FROM vocabulary ORDER BY word_type, order_index, id",
            conn,
        )
    df["is_published"] = df["is_published"].astype(bool)
    return df


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", required=True, help="SQLite DB path")
    ap.add_argument("--out", required=True, help="Output CSV path")
    args = ap.parse_args()

    db_path = Path(args.db)
    if not db_path.exists():
        raise FileNotFoundError(f"DB not found: {db_path}")

    df = load_vocabulary(db_path)
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False, encoding="utf-8")

    print(f"✅ Wrote {len(df)} entries → {out_path}")
    for word_type, n in df["word_type"].value_counts().items():
        print(f"   {word_type}: {n}")


if __name__ == "__main__":
    main()
