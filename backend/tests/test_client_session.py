"""
Astro Client — Dashboard Session and New-Service Form Tests
============================================================

What:  The client layer driving the real FastAPI app in-process.
How:   `api_client` is an ApiClient over ASGITransport against a freshly
       seeded SQLite database. Tests that need a failing backend use
       httpx.MockTransport instead.
"""

import json

import httpx
import pytest

from astro.client.fetcher import ApiClient
from astro.client.forms import BASE_FORM_STATE, NEW_SERVICE_MODAL_ID, NewServiceForm, build_service_payload
from astro.client.modals import ModalState
from astro.client.session import MENU_ITEMS, DashboardSession
from astro.client.stores import ConfigStore, UIStore
from astro.exceptions import NotFoundError
from astro.validation import SERVICE_MESSAGES


@pytest.fixture
def session(api_client, tmp_path):
    return DashboardSession(api_client, preferences_path=tmp_path / "prefs.json")


class TestDashboardSession:
    @pytest.mark.asyncio
    async def test_start_loads_config_and_themes(self, session):
        assert not session.ready

        await session.start()

        assert session.ready
        assert session.config.data["title"] == "Astro"
        assert [t["id"] for t in session.themes.data] == ["dark", "light"]
        assert session.ctx_theme["id"] == "dark"

    @pytest.mark.asyncio
    async def test_toggle_theme_switches_palette(self, session):
        await session.start()

        assert await session.toggle_theme() == "light"
        assert session.ctx_theme["id"] == "light"


class TestManageNavigation:
    def test_menu_items(self):
        assert [item.id for item in MENU_ITEMS] == ["service", "category", "note"]

    @pytest.mark.asyncio
    async def test_manage_defaults_to_services(self, session):
        assert session.manage_route() == "/manage/service"

    @pytest.mark.asyncio
    async def test_selected_item_is_remembered(self, session):
        assert session.select_menu_item("Note") == "/manage/note"
        assert session.ui.state.activeSidebarMenuItem == "note"
        assert session.manage_route() == "/manage/note"

    @pytest.mark.asyncio
    async def test_unknown_item_rejected(self, session):
        with pytest.raises(NotFoundError):
            session.select_menu_item("widget")
        assert session.ui.state.activeSidebarMenuItem is None

    @pytest.mark.asyncio
    async def test_load_manage_scene(self, session):
        session.select_menu_item("category")

        scene = await session.load_manage_scene()

        assert scene["entity"] == "category"
        assert scene["items"][0]["name"] == "Home Lab"


class TestNewServiceForm:
    @pytest.mark.asyncio
    async def test_open_starts_from_base_state(self, session):
        form = session.new_service_form()

        modal = form.open()

        assert modal.id == NEW_SERVICE_MODAL_ID
        assert modal.collapsable
        assert form.values == BASE_FORM_STATE

    @pytest.mark.asyncio
    async def test_tucked_form_keeps_values(self, session):
        form = session.new_service_form()
        form.open()
        form.change("name", "Plex")

        session.ui.toggle_tucked(NEW_SERVICE_MODAL_ID)
        form.open()

        assert session.ui.modal_state(NEW_SERVICE_MODAL_ID) is ModalState.EXPANDED
        assert form.values["name"] == "Plex"

    @pytest.mark.asyncio
    async def test_empty_submit_reports_every_field(self, session):
        await session.start()
        form = session.new_service_form()
        form.open()

        assert await form.submit() is None

        assert form.errors == {
            "name": SERVICE_MESSAGES["name"],
            "url": SERVICE_MESSAGES["url"],
            "category": SERVICE_MESSAGES["category"],
        }
        assert session.ui.modal_state(NEW_SERVICE_MODAL_ID) is ModalState.EXPANDED

    @pytest.mark.asyncio
    async def test_unknown_category_caught_before_request(self, session):
        await session.start()
        form = session.new_service_form()
        form.open()
        form.change("name", "Plex")
        form.change("url", "http://plex.local")
        form.change("category", "99")

        assert await form.submit() is None
        assert form.errors == {"category": SERVICE_MESSAGES["category_missing"]}

    @pytest.mark.asyncio
    async def test_non_numeric_category_before_config_loads(self, session):
        form = session.new_service_form()
        form.open()
        form.change("name", "Plex")
        form.change("url", "http://plex.local")
        form.change("category", "abc")

        assert await form.submit() is None
        assert form.errors == {"category": SERVICE_MESSAGES["category_invalid"]}
        assert session.ui.modal_state(NEW_SERVICE_MODAL_ID) is ModalState.EXPANDED

    @pytest.mark.asyncio
    async def test_submit_creates_service_and_closes(self, session):
        await session.start()
        form = session.new_service_form()
        form.open()
        form.change("name", "Plex")
        form.change("url", "http://plex.local:32400")
        form.change("category", "1")
        form.change("target", False)

        created = await form.submit()

        assert created["name"] == "Plex"
        assert created["target"] == ""
        assert form.errors == {}
        assert session.ui.modal_state(NEW_SERVICE_MODAL_ID) is ModalState.HIDDEN
        names = [s["name"] for s in session.config.data["categories"][0]["services"]]
        assert names == ["Router", "Plex"]

    @pytest.mark.asyncio
    async def test_submit_uploads_picked_logo(self, session, png_bytes):
        await session.start()
        form = session.new_service_form()
        form.open()
        form.change("name", "Plex")
        form.change("url", "http://plex.local:32400")
        form.change("category", 1)
        form.pick_logo("plex.png", png_bytes)

        created = await form.submit()

        assert created["logo"].startswith("/api/logos/")
        assert created["logo"].endswith(".png")

    @pytest.mark.asyncio
    async def test_submit_closes_when_resync_fails(self):
        config = {"id": "astro", "title": "Astro", "categories": [{"id": 1, "name": "Lab", "services": []}]}
        posts = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST":
                posts.append(json.loads(request.content))
                return httpx.Response(201, json={"id": 7, "name": "Plex"})
            if posts:
                return httpx.Response(503, json={"error": "unavailable", "message": "down"})
            return httpx.Response(200, json=config)

        client = ApiClient(
            base_url="http://astro.test",
            transport=httpx.MockTransport(handler),
            max_attempts=1,
            min_wait=0,
            max_wait=0,
        )
        async with client:
            store = ConfigStore(client)
            await store.sync()
            ui = UIStore()
            form = NewServiceForm(client, store, ui)
            form.open()
            form.change("name", "Plex")
            form.change("url", "http://plex.local")
            form.change("category", "1")

            created = await form.submit()

        assert created == {"id": 7, "name": "Plex"}
        assert len(posts) == 1
        assert ui.modal_state(NEW_SERVICE_MODAL_ID) is ModalState.HIDDEN

    @pytest.mark.asyncio
    async def test_change_unknown_field_rejected(self, session):
        form = session.new_service_form()
        form.open()
        with pytest.raises(KeyError):
            form.change("colour", "red")


class TestServicePayload:
    def test_target_checkbox_maps_to_anchor_target(self):
        values = dict(BASE_FORM_STATE, name=" Plex ", url=" http://plex.local ", category="2")

        assert build_service_payload(values, "logo.png") == {
            "name": "Plex",
            "description": None,
            "url": "http://plex.local",
            "target": "_blank",
            "logo": "logo.png",
            "category": 2,
        }
        assert build_service_payload(dict(values, target=False), "logo.png")["target"] == ""
