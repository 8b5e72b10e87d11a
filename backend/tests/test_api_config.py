"""
Astro Backend — Config, Health and Manage Endpoint Tests
=========================================================

What:  End-to-end tests through the FastAPI app against a SQLite database
       seeded with the sample dashboard.
"""

import pytest


class TestConfigEndpoint:
    @pytest.mark.asyncio
    async def test_get_config_returns_full_dashboard(self, test_client):
        response = await test_client.get("/api/config")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "astro"
        assert body["title"] == "Astro"
        assert [c["name"] for c in body["categories"]] == ["Home Lab"]
        assert body["categories"][0]["services"][0]["name"] == "Router"
        assert body["notes"][0]["title"] == "Welcome"
        assert body["links"][0]["label"] == "GitHub"
        assert sorted(t["id"] for t in body["themes"]) == ["dark", "light"]

    @pytest.mark.asyncio
    async def test_get_config_is_never_cached(self, test_client):
        response = await test_client.get("/api/config")
        assert response.headers["cache-control"] == "no-store"

    @pytest.mark.asyncio
    async def test_patch_config_updates_title_and_columns(self, test_client):
        response = await test_client.patch("/api/config", json={"title": "  Home  ", "columns": 6})

        assert response.status_code == 200
        assert response.json()["title"] == "Home"
        assert response.json()["columns"] == 6

        again = await test_client.get("/api/config")
        assert again.json()["columns"] == 6

    @pytest.mark.asyncio
    async def test_patch_config_rejects_out_of_range_columns(self, test_client):
        response = await test_client.patch("/api/config", json={"columns": 13})
        assert response.status_code == 422

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, body",
        [
            ("/api/config", {"title": None}),
            ("/api/config", {"columns": None}),
            ("/api/category/1", {"name": None}),
            ("/api/category/1", {"position": None}),
            ("/api/note/1", {"title": None}),
            ("/api/note/1", {"content": None}),
            ("/api/link/1", {"label": None}),
            ("/api/link/1", {"target": None}),
            ("/api/service/1", {"target": None}),
        ],
    )
    async def test_patch_cannot_clear_required_fields(self, test_client, path, body):
        response = await test_client.patch(path, json=body)
        assert response.status_code == 422

        config = await test_client.get("/api/config")
        assert config.json()["title"] == "Astro"

    @pytest.mark.asyncio
    async def test_missing_config_is_404(self, test_client):
        from astro.config import get_config_id
        from astro.main import app

        app.dependency_overrides[get_config_id] = lambda: "nobody"
        try:
            response = await test_client.get("/api/config")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestRequestId:
    @pytest.mark.asyncio
    async def test_generated_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/config")
        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_is_reused_in_errors(self, test_client):
        response = await test_client.get("/api/service/999", headers={"X-Request-ID": "abc123"})

        assert response.status_code == 404
        assert response.headers["x-request-id"] == "abc123"
        assert response.json()["request_id"] == "abc123"


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_healthz_reports_database(self, test_client):
        response = await test_client.get("/api/healthz")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["uptime_seconds"] >= 0


class TestManageEndpoint:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "entity, first_field, first_value",
        [
            ("service", "name", "Router"),
            ("category", "name", "Home Lab"),
            ("note", "title", "Welcome"),
        ],
    )
    async def test_manage_lists_each_entity(self, test_client, entity, first_field, first_value):
        response = await test_client.get(f"/api/manage/{entity}")

        assert response.status_code == 200
        body = response.json()
        assert body["entity"] == entity
        assert body["total"] == 1
        assert body["items"][0][first_field] == first_value

    @pytest.mark.asyncio
    async def test_manage_unknown_entity_is_404(self, test_client):
        response = await test_client.get("/api/manage/widget")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
