"""Tests for todo list and task routes."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def enrichment():
    service = MagicMock()
    service.tasks_from_prompt.return_value = ["Milk", "Eggs"]
    service.generate_subtasks.return_value = ["Outline", "Draft"]
    return service


@pytest.fixture
def todo_list(client, auth_headers):
    resp = client.post("/api/lists", json={"name": "Groceries"}, headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()


def _add_task(client, headers, list_id, title="Buy milk", **extra):
    resp = client.post(f"/api/lists/{list_id}/tasks", json={"title": title, **extra}, headers=headers)
    assert resp.status_code == 201
    return resp.json()


class TestListRoutes:
    def test_create_and_list(self, client, auth_headers, todo_list):
        assert todo_list["tasks"] == []
        listed = client.get("/api/lists", headers=auth_headers).json()
        assert [lst["name"] for lst in listed] == ["Groceries"]

    def test_rename(self, client, auth_headers, todo_list):
        resp = client.put(f"/api/lists/{todo_list['id']}", json={"name": "Food"}, headers=auth_headers)
        assert resp.status_code == 200
        assert client.get("/api/lists", headers=auth_headers).json()[0]["name"] == "Food"

    def test_rename_missing(self, client, auth_headers):
        resp = client.put("/api/lists/nope", json={"name": "Food"}, headers=auth_headers)
        assert resp.status_code == 404

    def test_delete_removes_tasks(self, client, auth_headers, todo_list):
        _add_task(client, auth_headers, todo_list["id"])
        assert client.delete(f"/api/lists/{todo_list['id']}", headers=auth_headers).status_code == 200
        assert client.get("/api/lists", headers=auth_headers).json() == []


class TestTaskRoutes:
    def test_add_defaults(self, client, auth_headers, todo_list):
        task = _add_task(client, auth_headers, todo_list["id"])
        assert task["status"] == "todo"
        assert task["priority"] == "medium"
        assert task["tags"] == []

    def test_add_to_missing_list(self, client, auth_headers):
        resp = client.post("/api/lists/nope/tasks", json={"title": "x"}, headers=auth_headers)
        assert resp.status_code == 404

    def test_update(self, client, auth_headers, todo_list):
        task = _add_task(client, auth_headers, todo_list["id"])
        resp = client.put(
            f"/api/lists/{todo_list['id']}/tasks/{task['id']}",
            json={"priority": "high", "status": "in-progress"},
            headers=auth_headers,
        )
        assert resp.json()["priority"] == "high"
        assert resp.json()["status"] == "in-progress"

    def test_toggle(self, client, auth_headers, todo_list):
        task = _add_task(client, auth_headers, todo_list["id"])
        url = f"/api/lists/{todo_list['id']}/tasks/{task['id']}/toggle"
        assert client.post(url, headers=auth_headers).json()["status"] == "done"
        assert client.post(url, headers=auth_headers).json()["status"] == "todo"

    def test_delete(self, client, auth_headers, todo_list):
        task = _add_task(client, auth_headers, todo_list["id"])
        url = f"/api/lists/{todo_list['id']}/tasks/{task['id']}"
        assert client.delete(url, headers=auth_headers).status_code == 200
        assert client.delete(url, headers=auth_headers).status_code == 404


class TestTaskGeneration:
    def test_generate_from_prompt(self, client, auth_headers, todo_list, enrichment):
        resp = client.post(
            f"/api/lists/{todo_list['id']}/tasks/generate",
            json={"prompt": "breakfast"},
            headers=auth_headers,
        )
        assert resp.status_code == 201
        assert [t["title"] for t in resp.json()] == ["Milk", "Eggs"]
        enrichment.tasks_from_prompt.assert_called_once_with("breakfast")

    def test_generate_for_missing_list(self, client, auth_headers, enrichment):
        enrichment.tasks_from_prompt.return_value = []
        resp = client.post(
            "/api/lists/nope/tasks/generate", json={"prompt": "breakfast"}, headers=auth_headers
        )
        assert resp.status_code == 404
        enrichment.tasks_from_prompt.assert_not_called()

    def test_subtasks_not_saved(self, client, auth_headers, todo_list, enrichment):
        task = _add_task(client, auth_headers, todo_list["id"], title="Write blog post")
        resp = client.post(
            f"/api/lists/{todo_list['id']}/tasks/{task['id']}/subtasks", headers=auth_headers
        )
        assert resp.json() == {"task_id": task["id"], "subtasks": ["Outline", "Draft"]}
        enrichment.generate_subtasks.assert_called_once_with("Write blog post")
        assert len(client.get("/api/lists", headers=auth_headers).json()[0]["tasks"]) == 1
