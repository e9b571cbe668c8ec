"""Tests for the SQLite document store."""

import pytest

from docstore import DocumentNotFoundError, DocumentStore


class TestCrud:
    def test_add_and_get(self, documents):
        doc = documents.add("u1", "goals", {"title": "Learn Rust"})
        assert doc["id"]
        assert documents.get("u1", "goals", doc["id"]) == {"title": "Learn Rust", "id": doc["id"]}

    def test_get_missing(self, documents):
        assert documents.get("u1", "goals", "nope") is None

    def test_list_insertion_order(self, documents):
        ids = [documents.add("u1", "goals", {"n": i})["id"] for i in range(3)]
        assert [d["id"] for d in documents.list("u1", "goals")] == ids

    def test_add_ignores_supplied_id(self, documents):
        doc = documents.add("u1", "goals", {"id": "mine", "title": "x"})
        assert doc["id"] != "mine"

    def test_users_are_isolated(self, documents):
        documents.add("u1", "goals", {"title": "a"})
        assert documents.list("u2", "goals") == []

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "data" / "store.db"
        doc = DocumentStore(path).add("u1", "stash", {"title": "x"})
        assert DocumentStore(path).get("u1", "stash", doc["id"])["title"] == "x"


class TestUpdate:
    def test_merges_fields(self, documents):
        doc = documents.add("u1", "goals", {"title": "a", "description": "b"})
        updated = documents.update("u1", "goals", doc["id"], {"title": "c"})
        assert updated == {"title": "c", "description": "b", "id": doc["id"]}

    def test_none_removes_field(self, documents):
        doc = documents.add("u1", "goals", {"title": "a", "description": "b"})
        updated = documents.update("u1", "goals", doc["id"], {"description": None})
        assert "description" not in updated

    def test_missing_raises(self, documents):
        with pytest.raises(DocumentNotFoundError) as exc:
            documents.update("u1", "goals", "nope", {"title": "x"})
        assert exc.value.doc_id == "nope"
        assert exc.value.collection == "goals"


class TestDelete:
    def test_delete(self, documents):
        doc = documents.add("u1", "goals", {"title": "a"})
        assert documents.delete("u1", "goals", doc["id"]) is True
        assert documents.get("u1", "goals", doc["id"]) is None

    def test_delete_missing(self, documents):
        assert documents.delete("u1", "goals", "nope") is False

    def test_delete_cascades_to_nested_collections(self, documents):
        parent = documents.add("u1", "todoLists", {"name": "Work"})
        other = documents.add("u1", "todoLists", {"name": "Home"})
        documents.add("u1", f"todoLists/{parent['id']}/tasks", {"title": "t"})
        documents.add("u1", f"todoLists/{other['id']}/tasks", {"title": "keep"})

        documents.delete("u1", "todoLists", parent["id"])

        assert documents.list("u1", f"todoLists/{parent['id']}/tasks") == []
        assert len(documents.list("u1", f"todoLists/{other['id']}/tasks")) == 1


class TestCollectionPaths:
    @pytest.mark.parametrize("path", ["", "todoLists/abc", "a//b", "/goals"])
    def test_invalid_paths(self, documents, path):
        with pytest.raises(ValueError):
            documents.list("u1", path)

    def test_nested_path_allowed(self, documents):
        assert documents.list("u1", "todoLists/abc/tasks") == []
