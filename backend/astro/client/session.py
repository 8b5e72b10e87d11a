"""
Astro — Dashboard Session
==========================

What:  Wires the fetcher and the stores together for one dashboard view.
How:   `start()` loads local preferences, then syncs config and themes
       concurrently. The page renders once `ready` (config loaded).

Management navigation:
    sidebar item "service" → /manage/service
    "Manage" action        → last selected item, else /manage/service
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from astro.client.fetcher import ApiClient
from astro.client.forms import NewServiceForm
from astro.client.stores import ConfigStore, LocalPreferencesStore, ThemeStore, UIStore
from astro.client.themes import resolve_active_theme
from astro.exceptions import NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: str
    icon: str


MENU_ITEMS = (
    MenuItem(id="service", label="Services", icon="CubeIcon"),
    MenuItem(id="category", label="Categories", icon="IdCardIcon"),
    MenuItem(id="note", label="Notes", icon="ChatBubbleIcon"),
)

DEFAULT_MENU_ITEM = MENU_ITEMS[0].id


def manage_path(item_id: str) -> str:
    return f"/manage/{item_id}"


class DashboardSession:
    def __init__(self, client: ApiClient, preferences_path: Optional[Path] = None):
        self.client = client
        self.config = ConfigStore(client)
        self.themes = ThemeStore(client)
        self.preferences = LocalPreferencesStore(preferences_path)
        self.ui = UIStore()

    async def start(self) -> None:
        await self.preferences.load()
        await asyncio.gather(self.config.sync(), self.themes.sync())
        logger.info("Dashboard session ready (%s theme)", self.preferences.active_theme)

    async def aclose(self) -> None:
        await self.client.aclose()

    @property
    def ready(self) -> bool:
        return self.config.data is not None

    @property
    def ctx_theme(self) -> Dict[str, Any]:
        """The palette the page should render with right now."""
        return resolve_active_theme(self.themes.data, self.preferences.active_theme)

    async def toggle_theme(self) -> str:
        return await self.preferences.toggle_theme()

    def new_service_form(self) -> NewServiceForm:
        return NewServiceForm(self.client, self.config, self.ui)

    # ── Management navigation ─────────────────────────────────────────────

    def select_menu_item(self, item_id: str) -> str:
        """Record the sidebar selection and return the route to navigate to."""
        item_id = item_id.lower()
        if item_id not in {item.id for item in MENU_ITEMS}:
            raise NotFoundError(resource="menu item", resource_id=item_id)
        self.ui.select_sidebar_item(item_id)
        return manage_path(item_id)

    def manage_route(self) -> str:
        return manage_path(self.ui.state.activeSidebarMenuItem or DEFAULT_MENU_ITEM)

    async def load_manage_scene(self, item_id: Optional[str] = None) -> Dict[str, Any]:
        """Fetch the listing behind a management screen."""
        entity = item_id or self.ui.state.activeSidebarMenuItem or DEFAULT_MENU_ITEM
        return await self.client.get(f"/api/manage/{entity}")
