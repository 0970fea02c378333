"""
migrate/runner.py

Runs the vocabulary migrations once each, in name order, and remembers which
ones have been applied (migrations table). Every applied or rolled-back
migration also gets a row in runs.

Migration names sort chronologically; the cleanup sorts before the import so a
fresh database is wiped first, then filled.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from ..convert.convert import DEFAULT_CONVERTED_DIR
from ..store.db import SQLiteDatastore
from . import cleanup_vocabulary, import_vocabulary


@dataclass(frozen=True)
class Migration:
  name: str
  up: Callable[..., object]
  down: Callable[..., object]
  needs_converted_dir: bool = False


MIGRATIONS: List[Migration] = [
  Migration(
    name="2025-10-31-00-cleanup-vocabulary",
    up=cleanup_vocabulary.up,
    down=cleanup_vocabulary.down,
  ),
  Migration(
    name="2025-10-31-import-vocabulary",
    up=import_vocabulary.up,
    down=import_vocabulary.down,
    needs_converted_dir=True,
  ),
]


def _now() -> str:
  return datetime.now(timezone.utc).isoformat()

def pending_migrations(store: SQLiteDatastore, migrations: List[Migration] = MIGRATIONS) -> List[Migration]:
  applied = set(store.applied_migrations())
  return [m for m in sorted(migrations, key=lambda m: m.name) if m.name not in applied]

def run_pending(
  store: SQLiteDatastore,
  converted_dir: str | Path = DEFAULT_CONVERTED_DIR,
  migrations: List[Migration] = MIGRATIONS,
) -> List[str]:
  """
  Apply every migration not yet recorded. A migration that raises is not
  recorded and stops the run; earlier ones stay applied.
  """
  ran: List[str] = []
  for m in pending_migrations(store, migrations):
    print(f"▶ Running migration {m.name}")
    if m.needs_converted_dir:
      m.up(store, converted_dir=converted_dir)
    else:
      m.up(store)

    with store.transaction():
      now = _now()
      store.mark_applied(m.name, now)
      store.record_run("migrate:up", now, notes=m.name)
    ran.append(m.name)

  if not ran:
    print("✅ No pending migrations")
  return ran

def rollback_last(
  store: SQLiteDatastore,
  migrations: List[Migration] = MIGRATIONS,
) -> Optional[str]:
  applied = store.applied_migrations()
  if not applied:
    print("✅ Nothing to roll back")
    return None

  by_name = {m.name: m for m in migrations}
  name = applied[-1]
  m = by_name.get(name)
  if m is None:
    raise ValueError(f"Applied migration {name!r} is not registered")

  print(f"◀ Rolling back migration {m.name}")
  m.down(store)

  with store.transaction():
    now = _now()
    store.unmark_applied(m.name)
    store.record_run("migrate:down", now, notes=m.name)
  return m.name
