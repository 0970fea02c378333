#!/usr/bin/env python3
"""
scripts/convert_spreadsheets.py

Convert the "Vocabulario Glide" spreadsheet exports (Verbos, Sustantivos,
Indeclinables) into the normalized *-for-import.csv files.

Usage:
  PYTHONPATH=src python scripts/convert_spreadsheets.py \
    --in  data/spread_sheets \
    --out data/spread_sheets/converted
"""

from __future__ import annotations

import argparse
from pathlib import Path

from sanskrit_vocab_pipeline.convert.convert import convert_spreadsheets


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--in", dest="in_dir", required=True, help="Directory holding the three spreadsheet CSV exports")
    ap.add_argument("--out", dest="out_dir", default=None, help="Output directory (default: <in>/converted)")
    args = ap.parse_args()

    in_dir = Path(args.in_dir)
    if not in_dir.is_dir():
        raise FileNotFoundError(f"Spreadsheets directory not found: {in_dir}")

    convert_spreadsheets(in_dir, args.out_dir)


if __name__ == "__main__":
    main()
