"""
convert/convert.py

Converts the three "Vocabulario Glide" spreadsheet exports into the normalized
*-for-import.csv files:
  1) Read + parse each source CSV
  2) Map every row through its word type's converter
  3) Number rows by source position (order_index, 1-based)
  4) Drop rows without a Devanagari headword
  5) Write the normalized CSV (every field quoted)

order_index is counted over all parsed rows, so dropped rows leave gaps and
the surviving entries keep the position they had in the spreadsheet.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from ..utils.io import read_csv_records, write_csv_records
from ..utils.report import print_summary
from ..vocab.schema import WORD_TYPE_SPECS, WordTypeSpec, has_devanagari

DEFAULT_SPREADSHEETS_DIR = Path("data/spread_sheets")
DEFAULT_CONVERTED_DIR = DEFAULT_SPREADSHEETS_DIR / "converted"


@dataclass
class ConvertStats:
  counts: Dict[str, int] = field(default_factory=dict)

  @property
  def total(self) -> int:
    return sum(self.counts.values())


def convert_rows(spec: WordTypeSpec, rows: List[Dict[str, str]]) -> List[Dict[str, str]]:
  out: List[Dict[str, str]] = []
  for i, row in enumerate(rows):
    rec = spec.convert_row(row, i + 1)
    if not has_devanagari(rec):
      continue
    out.append(rec)
  return out


def convert_file(spec: WordTypeSpec, spreadsheets_dir: str | Path, output_dir: str | Path) -> int:
  rows = read_csv_records(Path(spreadsheets_dir) / spec.source_file)
  converted = convert_rows(spec, rows)
  write_csv_records(Path(output_dir) / spec.converted_file, converted, spec.headers)
  return len(converted)


def convert_spreadsheets(
  spreadsheets_dir: str | Path = DEFAULT_SPREADSHEETS_DIR,
  output_dir: str | Path | None = None,
) -> ConvertStats:
  spreadsheets_dir = Path(spreadsheets_dir)
  output_dir = Path(output_dir) if output_dir is not None else spreadsheets_dir / "converted"
  output_dir.mkdir(parents=True, exist_ok=True)

  print("🚀 Starting CSV conversion...\n")

  stats = ConvertStats()
  for spec in WORD_TYPE_SPECS:
    print(f"📖 Converting {spec.label.capitalize()}...")
    n = convert_file(spec, spreadsheets_dir, output_dir)
    stats.counts[spec.label] = n
    print(f"  ✓ Converted {n} {spec.label}")

  print_summary("CONVERSION COMPLETE", stats.counts, total_label="Total entries converted")
  print(f"Converted files saved to: {output_dir}")
  for i, spec in enumerate(WORD_TYPE_SPECS, start=1):
    print(f"  {i}. {spec.converted_file} ({stats.counts[spec.label]} entries)")

  return stats
