"""
migrate/cleanup_vocabulary.py

Cleanup migration: delete every vocabulary entry.

Run before re-importing; the import only ever creates entries, it never
updates existing ones.
"""

from __future__ import annotations

from ..store.db import VOCABULARY_COLLECTION, Datastore


def delete_all(store: Datastore, collection: str = VOCABULARY_COLLECTION) -> int:
  with store.transaction():
    entries = store.find_many(collection, limit=-1)
    for entry in entries:
      store.delete(collection, entry["id"])
  return len(entries)


def up(store: Datastore, collection: str = VOCABULARY_COLLECTION) -> int:
  print("\n🧹 Cleaning up vocabulary entries...\n")
  deleted = delete_all(store, collection)
  print(f"✓ Deleted {deleted} vocabulary entries\n")
  return deleted


def down(store: Datastore, collection: str = VOCABULARY_COLLECTION) -> None:
  # deleted entries are not restored
  return None
