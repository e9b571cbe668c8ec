"""Tests for stash routes."""

from unittest.mock import MagicMock

import pytest

from enrichment import StashAnalysis


@pytest.fixture
def enrichment():
    service = MagicMock()
    service.analyze.side_effect = lambda content: StashAnalysis(
        title=f"About {content[:10]}", tags=["rust"] if "rust" in content else ["misc"], summary="s"
    )
    return service


def _create(client, headers, content):
    resp = client.post("/api/stash", json={"content": content}, headers=headers)
    assert resp.status_code == 201
    return resp.json()


class TestStashRoutes:
    def test_create_link(self, client, auth_headers, enrichment):
        item = _create(client, auth_headers, "https://rust-lang.org")
        assert item["type"] == "link"
        assert item["tags"] == ["rust"]
        assert item["ai_summary"] == "s"
        enrichment.analyze.assert_called_once_with("https://rust-lang.org")

    def test_create_blank(self, client, auth_headers, enrichment):
        resp = client.post("/api/stash", json={"content": "   "}, headers=auth_headers)
        assert resp.status_code == 400
        enrichment.analyze.assert_not_called()

    def test_filter_by_tags(self, client, auth_headers):
        _create(client, auth_headers, "learning rust")
        _create(client, auth_headers, "cooking notes")
        everything = client.get("/api/stash", headers=auth_headers).json()
        assert len(everything) == 2
        rust = client.get("/api/stash", params={"tags": ["rust"]}, headers=auth_headers).json()
        assert [i["content"] for i in rust] == ["learning rust"]

    def test_tag_counts(self, client, auth_headers):
        _create(client, auth_headers, "learning rust")
        _create(client, auth_headers, "more rust")
        _create(client, auth_headers, "cooking notes")
        assert client.get("/api/stash/tags", headers=auth_headers).json() == {"misc": 1, "rust": 2}
        assert client.get("/api/stash/tags?q=RU", headers=auth_headers).json() == {"rust": 2}

    def test_delete(self, client, auth_headers):
        item = _create(client, auth_headers, "note")
        assert client.delete(f"/api/stash/{item['id']}", headers=auth_headers).status_code == 200
        assert client.delete(f"/api/stash/{item['id']}", headers=auth_headers).status_code == 404


class TestStashWithoutProvider:
    @pytest.fixture
    def enrichment(self):
        from enrichment import EnrichmentService

        return EnrichmentService()

    def test_untitled_fallback(self, client, auth_headers):
        item = _create(client, auth_headers, "a plain note")
        assert item["title"] == "Untitled"
        assert item["type"] == "note"
