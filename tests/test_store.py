import sqlite3

import pytest

from sanskrit_vocab_pipeline.store.db import VOCABULARY_COLLECTION, SQLiteDatastore


def _data(word, **extra):
    data = {"word_type": "verb", "word_devanagari": word, "is_published": True, "order_index": 1}
    data.update(extra)
    return data


def test_create_returns_entry_with_id(sqlite_store):
    with sqlite_store.transaction():
        entry = sqlite_store.create(VOCABULARY_COLLECTION, _data("गम्", verb_class=1))
    assert entry["id"] >= 1
    assert entry["word_devanagari"] == "गम्"
    assert entry["verb_class"] == 1
    assert entry["is_published"] is True
    assert entry["gender"] is None

def test_find_many_limit(sqlite_store):
    with sqlite_store.transaction():
        for i, w in enumerate(["गम्", "भू", "कृ"], start=1):
            sqlite_store.create(VOCABULARY_COLLECTION, _data(w, order_index=i))

    assert len(sqlite_store.find_many(VOCABULARY_COLLECTION)) == 3
    assert [e["word_devanagari"] for e in sqlite_store.find_many(VOCABULARY_COLLECTION, limit=2)] == ["गम्", "भू"]

def test_delete(sqlite_store):
    with sqlite_store.transaction():
        entry = sqlite_store.create(VOCABULARY_COLLECTION, _data("गम्"))
        sqlite_store.delete(VOCABULARY_COLLECTION, entry["id"])
    assert sqlite_store.find_many(VOCABULARY_COLLECTION) == []

def test_transaction_rolls_back_on_error(sqlite_store):
    with pytest.raises(RuntimeError):
        with sqlite_store.transaction():
            sqlite_store.create(VOCABULARY_COLLECTION, _data("गम्"))
            sqlite_store.create(VOCABULARY_COLLECTION, _data("भू"))
            raise RuntimeError("boom")
    assert sqlite_store.find_many(VOCABULARY_COLLECTION) == []

def test_rollback_survives_reopen(tmp_path):
    db_path = tmp_path / "v.db"
    store = SQLiteDatastore.open(db_path)
    with store.transaction():
        store.create(VOCABULARY_COLLECTION, _data("गम्"))
    with pytest.raises(sqlite3.IntegrityError):
        with store.transaction():
            store.create(VOCABULARY_COLLECTION, _data("भू"))
            store.create(VOCABULARY_COLLECTION, _data("   "))
    store.close()

    reopened = SQLiteDatastore.open(db_path)
    try:
        assert [e["word_devanagari"] for e in reopened.find_many(VOCABULARY_COLLECTION)] == ["गम्"]
    finally:
        reopened.close()

def test_unknown_collection_and_fields_are_rejected(sqlite_store):
    with pytest.raises(ValueError):
        sqlite_store.create("api::other", _data("गम्"))
    with pytest.raises(ValueError):
        sqlite_store.create(VOCABULARY_COLLECTION, _data("गम्", color="red"))

def test_schema_version_in_meta(sqlite_store):
    row = sqlite_store.conn.execute("SELECT value FROM meta WHERE key='schema_version'").fetchone()
    assert row["value"] == "1"
