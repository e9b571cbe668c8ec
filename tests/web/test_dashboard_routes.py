"""Tests for the dashboard overview route."""

from unittest.mock import MagicMock

import pytest

from enrichment.service import NO_PROVIDER_TIP


class TestDashboardRoute:
    def test_empty_dashboard(self, client, auth_headers):
        body = client.get("/api/dashboard", headers=auth_headers).json()
        assert body["tasks"] == {"completed": 0, "pending": 0, "total": 0}
        assert body["stash"] == {}
        assert body["goals"] == []
        assert body["recent_entries"] == []
        assert body["focus_minutes"] == 0
        assert body["tip"] == NO_PROVIDER_TIP

    def test_overview(self, client, auth_headers):
        lst = client.post("/api/lists", json={"name": "Work"}, headers=auth_headers).json()
        for title in ("a", "b"):
            client.post(f"/api/lists/{lst['id']}/tasks", json={"title": title}, headers=auth_headers)
        task_id = client.get("/api/lists", headers=auth_headers).json()[0]["tasks"][0]["id"]
        client.post(f"/api/lists/{lst['id']}/tasks/{task_id}/toggle", headers=auth_headers)

        goal = client.post("/api/goals", json={"title": "G", "target_date": 0}, headers=auth_headers).json()
        client.post(f"/api/goals/{goal['id']}/milestones", json={"title": "m"}, headers=auth_headers)

        for day in ("2025-01-01", "2025-01-02", "2025-01-03", "2025-01-04"):
            client.put(f"/api/journal/{day}", json={"content": day}, headers=auth_headers)

        body = client.get("/api/dashboard", params={"include_tip": False}, headers=auth_headers).json()
        assert body["tasks"] == {"completed": 1, "pending": 1, "total": 2}
        assert body["goals"][0]["title"] == "G"
        assert body["goals"][0]["progress"] == 0
        assert [e["day"] for e in body["recent_entries"]] == ["2025-01-04", "2025-01-03", "2025-01-02"]
        assert body["tip"] is None


class TestDashboardTip:
    @pytest.fixture
    def enrichment(self):
        service = MagicMock()
        service.tip.return_value = "Start with the hardest task."
        return service

    def test_tip_from_enrichment(self, client, auth_headers, enrichment):
        assert client.get("/api/dashboard", headers=auth_headers).json()["tip"] == "Start with the hardest task."
        enrichment.tip.assert_called_once()
