"""
migrate/import_vocabulary.py

Vocabulary import migration.

up():
- Reads the three *-for-import.csv files written by the convert pass.
- Creates one datastore entry per row with a Devanagari headword.
- Everything runs inside ONE transaction: if any file or any insert fails,
  nothing from this run is kept.

down():
- Deletes every vocabulary entry (there is no per-run bookkeeping to undo
  more selectively).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from ..convert.convert import DEFAULT_CONVERTED_DIR
from ..store.db import VOCABULARY_COLLECTION, Datastore
from ..utils.io import read_csv_records
from ..utils.report import print_error, print_summary
from ..vocab.schema import WORD_TYPE_SPECS, WordTypeSpec, has_devanagari
from .cleanup_vocabulary import delete_all


@dataclass
class ImportStats:
  counts: Dict[str, int] = field(default_factory=dict)

  @property
  def total(self) -> int:
    return sum(self.counts.values())


def import_file(
  store: Datastore,
  spec: WordTypeSpec,
  converted_dir: str | Path,
  collection: str = VOCABULARY_COLLECTION,
) -> int:
  rows = read_csv_records(Path(converted_dir) / spec.converted_file)
  created = 0
  for row in rows:
    if not has_devanagari(row):
      continue
    store.create(collection, spec.build_entry(row))
    created += 1
  return created


def up(
  store: Datastore,
  converted_dir: str | Path = DEFAULT_CONVERTED_DIR,
  collection: str = VOCABULARY_COLLECTION,
) -> ImportStats:
  print("\n🚀 Starting Vocabulary Import Migration...\n")

  stats = ImportStats()
  with store.transaction():
    for spec in WORD_TYPE_SPECS:
      try:
        print(f"📖 Importing {spec.label.capitalize()}...")
        stats.counts[spec.label] = import_file(store, spec, converted_dir, collection)
        print(f"  ✓ Imported {stats.counts[spec.label]} {spec.label}")
      except Exception as e:
        print_error(f"Error importing {spec.label}: {e}")
        raise

  print_summary("IMPORT COMPLETE", stats.counts, total_label="Total entries imported")
  return stats


def down(store: Datastore, collection: str = VOCABULARY_COLLECTION) -> int:
  print("\n🔄 Rolling back Vocabulary Import...\n")
  deleted = delete_all(store, collection)
  print(f"✓ Deleted {deleted} vocabulary entries\n")
  return deleted
