"""
Astro Backend — Note, Link, Theme and Logo Endpoint Tests
==========================================================
"""

import pytest

PALETTE = {
    "background": {"primary": "#000000", "secondary": "#111111"},
    "text": {"primary": "#FFFFFF"},
    "border": {"primary": "#222222"},
    "accent": {"primary": "#FF8800", "secondary": "#FFAA44"},
}


class TestNotes:
    @pytest.mark.asyncio
    async def test_note_lifecycle(self, test_client):
        created = await test_client.post("/api/note", json={"title": " Todo ", "content": "Patch the NAS"})
        assert created.status_code == 201
        note = created.json()
        assert note["title"] == "Todo"
        assert note["created_at"]

        listed = await test_client.get("/api/note")
        assert [n["title"] for n in listed.json()] == ["Welcome", "Todo"]

        updated = await test_client.patch(f"/api/note/{note['id']}", json={"content": "Done"})
        assert updated.json()["content"] == "Done"

        deleted = await test_client.delete(f"/api/note/{note['id']}")
        assert deleted.status_code == 204

    @pytest.mark.asyncio
    async def test_note_needs_title(self, test_client):
        response = await test_client.post("/api/note", json={"title": ""})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_missing_note_is_404(self, test_client):
        response = await test_client.patch("/api/note/999", json={"content": "x"})
        assert response.status_code == 404


class TestLinks:
    @pytest.mark.asyncio
    async def test_create_link(self, test_client):
        response = await test_client.post(
            "/api/link",
            json={"label": "Docs", "url": "https://docs.python.org", "position": 2},
        )

        assert response.status_code == 201
        assert response.json()["target"] == "_blank"

        listed = await test_client.get("/api/link")
        assert [link["label"] for link in listed.json()] == ["GitHub", "Docs"]

    @pytest.mark.asyncio
    async def test_link_url_must_be_absolute(self, test_client):
        response = await test_client.post("/api/link", json={"label": "Bad", "url": "docs"})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "url"

    @pytest.mark.asyncio
    async def test_update_and_delete_link(self, test_client):
        updated = await test_client.patch("/api/link/1", json={"label": "Code"})
        assert updated.json()["label"] == "Code"

        deleted = await test_client.delete("/api/link/1")
        assert deleted.status_code == 204
        assert (await test_client.get("/api/link")).json() == []


class TestThemes:
    @pytest.mark.asyncio
    async def test_builtin_themes_are_seeded(self, test_client):
        response = await test_client.get("/api/theme")

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == ["dark", "light"]

    @pytest.mark.asyncio
    async def test_create_get_replace_delete_theme(self, test_client):
        created = await test_client.post("/api/theme", json={"id": "sunset", **PALETTE})
        assert created.status_code == 201
        assert created.json()["accent"]["primary"] == "#FF8800"
        assert created.json()["text"]["secondary"] is None

        replaced_palette = dict(PALETTE, accent={"primary": "#00FF00"})
        replaced = await test_client.put("/api/theme/sunset", json=replaced_palette)
        assert replaced.status_code == 200
        assert replaced.json()["accent"] == {"primary": "#00FF00", "secondary": None}

        fetched = await test_client.get("/api/theme/sunset")
        assert fetched.json()["accent"]["primary"] == "#00FF00"

        deleted = await test_client.delete("/api/theme/sunset")
        assert deleted.status_code == 204
        assert (await test_client.get("/api/theme/sunset")).status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate_theme_id_is_conflict(self, test_client):
        response = await test_client.post("/api/theme", json={"id": "dark", **PALETTE})

        assert response.status_code == 409
        assert response.json()["details"]["theme_id"] == "dark"

    @pytest.mark.asyncio
    async def test_theme_id_format_enforced(self, test_client):
        response = await test_client.post("/api/theme", json={"id": "Not Valid", **PALETTE})
        assert response.status_code == 422


class TestLogos:
    @pytest.mark.asyncio
    async def test_upload_and_serve_logo(self, test_client, png_bytes):
        uploaded = await test_client.post(
            "/api/logo", files={"file": ("plex.png", png_bytes, "image/png")}
        )

        assert uploaded.status_code == 201
        body = uploaded.json()
        assert body["url"] == f"/api/logos/{body['path']}"
        assert body["path"].endswith(".png")

        served = await test_client.get(body["url"])
        assert served.status_code == 200
        assert served.headers["content-type"] == "image/png"
        assert served.content == png_bytes

    @pytest.mark.asyncio
    async def test_upload_rejects_unsupported_extension(self, test_client, png_bytes):
        response = await test_client.post(
            "/api/logo", files={"file": ("anim.gif", png_bytes, "image/gif")}
        )

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "logo"

    @pytest.mark.asyncio
    async def test_upload_rejects_empty_file(self, test_client):
        response = await test_client.post("/api/logo", files={"file": ("empty.png", b"", "image/png")})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_logo_is_404(self, test_client):
        response = await test_client.get("/api/logos/2024/01/01/missing.png")
        assert response.status_code == 404
