"""Tests for the SQLAlchemy document store."""

import pytest

from salesmaster.database.base import MAX_BATCH_OPERATIONS
from salesmaster.database.factories import create_sqlite_store, create_store
from salesmaster.domain.entities import Document
from salesmaster.domain.errors import ConfigurationError

COLLECTION = "artifacts/test/public/data/sales_master"


class TestDocuments:
    """Tests for create, list, count and delete."""

    def test_create_and_list(self, temp_store):
        first = temp_store.create_document(COLLECTION, {"Client": "Ana"})
        second = temp_store.create_document(COLLECTION, {"Client": "Luis"})

        documents = temp_store.list_documents(COLLECTION)

        assert [doc.id for doc in documents] == [first, second]
        assert isinstance(documents[0], Document)
        assert documents[0].data == {"Client": "Ana"}
        assert temp_store.count(COLLECTION) == 2

    def test_list_with_limit(self, temp_store):
        for i in range(5):
            temp_store.create_document(COLLECTION, {"n": i})

        assert [doc.data["n"] for doc in temp_store.list_documents(COLLECTION, limit=3)] == [0, 1, 2]

    def test_collections_are_separate(self, temp_store):
        temp_store.create_document(COLLECTION, {"a": 1})
        temp_store.create_document("other", {"b": 2})

        assert temp_store.count(COLLECTION) == 1
        assert temp_store.count("other") == 1

    def test_delete(self, temp_store):
        doc_id = temp_store.create_document(COLLECTION, {"a": 1})

        temp_store.delete_document(COLLECTION, doc_id)
        temp_store.delete_document(COLLECTION, "missing")

        assert temp_store.count(COLLECTION) == 0


class TestBatches:
    """Tests for write batches."""

    def test_batch_commit(self, temp_store):
        keep = temp_store.create_document(COLLECTION, {"a": 1})
        drop = temp_store.create_document(COLLECTION, {"a": 2})

        batch = temp_store.batch()
        new_id = batch.set(COLLECTION, {"a": 3})
        batch.delete(COLLECTION, drop)
        batch.commit()

        assert [doc.id for doc in temp_store.list_documents(COLLECTION)] == [keep, new_id]

    def test_batch_over_limit_rejected(self, temp_store):
        batch = temp_store.batch()
        for i in range(MAX_BATCH_OPERATIONS + 1):
            batch.set(COLLECTION, {"n": i})

        with pytest.raises(ValueError) as excinfo:
            batch.commit()

        assert "limit" in str(excinfo.value)
        assert temp_store.count(COLLECTION) == 0

    def test_batch_commit_once(self, temp_store):
        batch = temp_store.batch()
        batch.set(COLLECTION, {"a": 1})
        batch.commit()

        with pytest.raises(ValueError):
            batch.commit()


class TestSubscriptions:
    """Tests for snapshot subscriptions."""

    def test_initial_and_change_snapshots(self, temp_store):
        snapshots = []
        unsubscribe = temp_store.subscribe(COLLECTION, snapshots.append)

        temp_store.create_document(COLLECTION, {"a": 1})
        unsubscribe()
        temp_store.create_document(COLLECTION, {"a": 2})

        assert [len(s) for s in snapshots] == [0, 1]

    def test_batch_pushes_once(self, temp_store):
        snapshots = []
        temp_store.subscribe(COLLECTION, snapshots.append)

        batch = temp_store.batch()
        batch.set(COLLECTION, {"a": 1})
        batch.set(COLLECTION, {"a": 2})
        batch.commit()

        assert [len(s) for s in snapshots] == [0, 2]

    def test_refresh_picks_up_other_writers(self, temp_store):
        """Test changes made through another store reach subscribers on refresh."""
        other = create_sqlite_store(database_path=temp_store.database_path)
        snapshots = []
        temp_store.subscribe(COLLECTION, snapshots.append)

        temp_store.refresh()
        other.create_document(COLLECTION, {"a": 1})
        temp_store.refresh()
        temp_store.refresh()

        assert [len(s) for s in snapshots] == [0, 1]


class TestFactories:
    """Tests for store factories."""

    def test_bad_url(self):
        with pytest.raises(ConfigurationError) as excinfo:
            create_store("not a database url")

        assert excinfo.value.remediation

    def test_unwritable_path(self, tmp_path):
        with pytest.raises(ConfigurationError):
            create_sqlite_store(database_path=str(tmp_path / "missing" / "dir" / "x.db"))

    def test_file_that_is_not_sqlite(self, tmp_path):
        path = tmp_path / "notes.db"
        path.write_text("not a database\n" * 50)

        with pytest.raises(ConfigurationError) as excinfo:
            create_sqlite_store(database_path=str(path))

        assert excinfo.value.remediation

    def test_env_path(self, tmp_path, monkeypatch):
        db_path = tmp_path / "env.db"
        monkeypatch.setenv("SALESMASTER_DB_PATH", str(db_path))

        store = create_sqlite_store()
        store.create_document(COLLECTION, {"a": 1})

        assert db_path.exists()
