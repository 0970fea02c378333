import pytest

from sanskrit_vocab_pipeline.convert.convert import convert_spreadsheets
from sanskrit_vocab_pipeline.migrate.runner import MIGRATIONS, rollback_last, run_pending
from sanskrit_vocab_pipeline.store.db import VOCABULARY_COLLECTION


def test_run_pending_applies_each_migration_once(sqlite_store, spreadsheets_dir, tmp_path):
    out_dir = tmp_path / "converted"
    convert_spreadsheets(spreadsheets_dir, out_dir)

    ran = run_pending(sqlite_store, converted_dir=out_dir)
    assert ran == [m.name for m in MIGRATIONS]
    assert len(sqlite_store.find_many(VOCABULARY_COLLECTION)) == 9

    assert run_pending(sqlite_store, converted_dir=out_dir) == []
    assert len(sqlite_store.find_many(VOCABULARY_COLLECTION)) == 9

    runs = sqlite_store.conn.execute("SELECT kind, notes FROM runs ORDER BY id").fetchall()
    assert [(r["kind"], r["notes"]) for r in runs] == [("migrate:up", m.name) for m in MIGRATIONS]

def test_rollback_last_undoes_import(sqlite_store, spreadsheets_dir, tmp_path):
    out_dir = tmp_path / "converted"
    convert_spreadsheets(spreadsheets_dir, out_dir)
    run_pending(sqlite_store, converted_dir=out_dir)

    assert rollback_last(sqlite_store) == "2025-10-31-import-vocabulary"
    assert sqlite_store.find_many(VOCABULARY_COLLECTION) == []
    assert sqlite_store.applied_migrations() == ["2025-10-31-00-cleanup-vocabulary"]

    # re-running applies only the import again
    assert run_pending(sqlite_store, converted_dir=out_dir) == ["2025-10-31-import-vocabulary"]
    assert len(sqlite_store.find_many(VOCABULARY_COLLECTION)) == 9

def test_rollback_with_nothing_applied(sqlite_store):
    assert rollback_last(sqlite_store) is None

def test_failed_import_is_not_recorded(sqlite_store, tmp_path):
    with pytest.raises(FileNotFoundError):
        run_pending(sqlite_store, converted_dir=tmp_path / "missing")
    assert sqlite_store.applied_migrations() == ["2025-10-31-00-cleanup-vocabulary"]
