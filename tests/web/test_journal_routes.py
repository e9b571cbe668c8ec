"""Tests for journal routes."""


class TestJournalRoutes:
    def test_save_and_get(self, client, auth_headers):
        resp = client.put(
            "/api/journal/2025-01-05",
            json={"content": "Shipped the release", "mood": "great", "wins": ["release", " "]},
            headers=auth_headers,
        )
        assert resp.status_code == 200
        entry = resp.json()
        assert entry["day"] == "2025-01-05"
        assert entry["display_date"] == "Jan 5, 2025"
        assert entry["wins"] == ["release"]

        fetched = client.get("/api/journal/2025-01-05", headers=auth_headers).json()
        assert fetched["id"] == entry["id"]
        assert fetched["mood"] == "great"

    def test_overwrite_keeps_id(self, client, auth_headers):
        first = client.put("/api/journal/2025-01-05", json={"content": "a"}, headers=auth_headers).json()
        second = client.put("/api/journal/2025-01-05", json={"content": "b"}, headers=auth_headers).json()
        assert second["id"] == first["id"]
        assert second["content"] == "b"
        assert len(client.get("/api/journal", headers=auth_headers).json()) == 1

    def test_list_newest_first(self, client, auth_headers):
        for day in ("2025-01-03", "2025-01-07", "2025-01-05"):
            client.put(f"/api/journal/{day}", json={"content": day}, headers=auth_headers)
        days = [e["day"] for e in client.get("/api/journal", headers=auth_headers).json()]
        assert days == ["2025-01-07", "2025-01-05", "2025-01-03"]

    def test_missing_day(self, client, auth_headers):
        assert client.get("/api/journal/2025-01-05", headers=auth_headers).status_code == 404

    def test_invalid_day(self, client, auth_headers):
        resp = client.get("/api/journal/yesterday", headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "INVALID_DAY"

    def test_blank_content(self, client, auth_headers):
        resp = client.put("/api/journal/2025-01-05", json={"content": "  "}, headers=auth_headers)
        assert resp.status_code == 400

    def test_unknown_mood(self, client, auth_headers):
        resp = client.put(
            "/api/journal/2025-01-05", json={"content": "x", "mood": "ecstatic"}, headers=auth_headers
        )
        assert resp.status_code == 422

    def test_delete(self, client, auth_headers):
        entry = client.put("/api/journal/2025-01-05", json={"content": "x"}, headers=auth_headers).json()
        url = f"/api/journal/entries/{entry['id']}"
        assert client.delete(url, headers=auth_headers).status_code == 200
        assert client.delete(url, headers=auth_headers).status_code == 404
