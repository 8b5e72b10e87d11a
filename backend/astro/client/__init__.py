"""
Astro — Client State Layer
===========================

What:  The dashboard's view of the API: an HTTP fetcher, observable stores
       that mirror server data, the modal stack and the new-service form.
How:   Stores are updated through draft mutators applied to a copy of their
       state; server-backed stores resync after every write.

    DashboardSession
      ├── ConfigStore       ← GET /api/config
      ├── ThemeStore        ← GET /api/theme
      ├── LocalPreferencesStore (JSON file on this device)
      └── UIStore           ← modal stack, sidebar selection
"""

from astro.client.fetcher import ApiClient
from astro.client.forms import NewServiceForm
from astro.client.modals import DragBounds, ModalIdentity, ModalState, Size
from astro.client.session import MENU_ITEMS, DashboardSession, MenuItem
from astro.client.stores import (
    ConfigStore,
    LocalPreferencesStore,
    Store,
    ThemeStore,
    UIStore,
)
from astro.client.themes import resolve_active_theme

__all__ = [
    "ApiClient",
    "ConfigStore",
    "DashboardSession",
    "DragBounds",
    "LocalPreferencesStore",
    "MENU_ITEMS",
    "MenuItem",
    "ModalIdentity",
    "ModalState",
    "NewServiceForm",
    "Size",
    "Store",
    "ThemeStore",
    "UIStore",
    "resolve_active_theme",
]
