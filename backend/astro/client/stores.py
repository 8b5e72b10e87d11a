"""
Astro — Client Stores
======================

What:  Observable state containers for the dashboard.
How:   `Store.set(recipe)` deep-copies the current state, lets the recipe
       edit (or replace) the draft, then swaps it in and notifies
       subscribers. A recipe that raises leaves the state untouched.

Stores:
    ConfigStore            server config, optimistic writes with rollback
    ThemeStore             server themes
    LocalPreferencesStore  per-device preferences in a JSON file
    UIStore                modal stack and sidebar selection
"""

import copy
import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar

import aiofiles
import httpx

from astro.client.fetcher import ApiClient
from astro.client.modals import ModalIdentity, ModalState, Size, drag_bounds
from astro.exceptions import ApiError, ModalTransitionError
from astro.sample_data import DEFAULT_THEME_ID

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")

Listener = Callable[[Any], None]


class Store(Generic[S]):
    """Holds one state value and notifies subscribers when it changes."""

    def __init__(self, initial: S):
        self._state = initial
        self._listeners: List[Listener] = []

    @property
    def state(self) -> S:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener(state)`; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set(self, recipe: Callable[[S], Optional[S]]) -> S:
        """Apply `recipe` to a draft copy; a returned value replaces the draft."""
        draft = copy.deepcopy(self._state)
        result = recipe(draft)
        self._state = draft if result is None else result
        for listener in list(self._listeners):
            listener(self._state)
        return self._state


# ══════════════════════════════════════════════════════════════════════════
# Server-backed stores
# ══════════════════════════════════════════════════════════════════════════

@dataclass
class RemoteState:
    data: Any = None
    error: Optional[ApiError] = None
    is_syncing: bool = False


class RemoteStore(Store[RemoteState]):
    """A store mirroring one GET endpoint."""

    path: str = ""

    def __init__(self, client: ApiClient):
        super().__init__(RemoteState())
        self.client = client
        self._generation = 0

    @property
    def data(self) -> Any:
        return self.state.data

    @property
    def error(self) -> Optional[ApiError]:
        return self.state.error

    async def sync(self) -> Any:
        """
        Refetch from the server.

        When syncs overlap only the most recent one writes its result, so a
        slow stale response cannot overwrite a newer one.
        """
        self._generation += 1
        generation = self._generation
        self.set(lambda draft: setattr(draft, "is_syncing", True))

        try:
            data = await self.client.get(self.path)
        except ApiError as e:
            if generation == self._generation:
                self.set(lambda draft: _finish(draft, draft.data, e))
            raise
        else:
            if generation == self._generation:
                self.set(lambda draft: _finish(draft, data, None))
            else:
                logger.debug("Dropping stale %s response", self.path)
            return data
        finally:
            # Transport failures and malformed bodies end the sync too
            if generation == self._generation and self.state.is_syncing:
                self.set(lambda draft: setattr(draft, "is_syncing", False))


def _finish(draft: RemoteState, data: Any, error: Optional[ApiError]) -> None:
    draft.data = data
    draft.error = error
    draft.is_syncing = False


class ConfigStore(RemoteStore):
    path = "/api/config"

    def category_ids(self) -> Optional[List[int]]:
        """Ids of the loaded categories, or None before the first sync."""
        if self.data is None:
            return None
        return [category["id"] for category in self.data.get("categories", [])]

    async def mutate(
        self,
        optimistic: Optional[Callable[[Dict[str, Any]], None]],
        request: Callable[[], Awaitable[T]],
    ) -> T:
        """
        Run a write against the API with an optimistic local change.

        `optimistic(config)` edits a draft of the loaded config before the
        request is sent. If the request fails the previous config is
        restored. Either way the config is refetched afterwards.
        """
        snapshot = self.state.data
        if optimistic is not None and snapshot is not None:
            self.set(lambda draft: optimistic(draft.data))

        try:
            result = await request()
        except Exception:
            self.set(lambda draft: setattr(draft, "data", copy.deepcopy(snapshot)))
            await self._resync_quietly()
            raise

        await self._resync_quietly()
        return result

    async def _resync_quietly(self) -> None:
        """Refetch the config; a failure is logged, never raised over the write's outcome."""
        try:
            await self.sync()
        except (ApiError, httpx.HTTPError) as e:
            logger.warning("Config resync failed: %s", e)


class ThemeStore(RemoteStore):
    path = "/api/theme"


# ══════════════════════════════════════════════════════════════════════════
# Local preferences
# ══════════════════════════════════════════════════════════════════════════

@dataclass
class Preferences:
    activeTheme: str = DEFAULT_THEME_ID


DEFAULT_PREFERENCES_PATH = Path.home() / ".config" / "astro" / "preferences.json"


class LocalPreferencesStore(Store[Preferences]):
    """Device-local preferences, persisted as JSON."""

    def __init__(self, path: Optional[Path] = None):
        super().__init__(Preferences())
        self.path = Path(path) if path else DEFAULT_PREFERENCES_PATH

    @property
    def active_theme(self) -> str:
        return self.state.activeTheme

    async def load(self) -> Preferences:
        """Read the preferences file; a missing or unreadable file keeps the defaults."""
        if not self.path.is_file():
            return self.state
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = json.loads(await f.read())
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return self.state

        theme = raw.get("activeTheme") if isinstance(raw, dict) else None
        if isinstance(theme, str) and theme:
            self.set(lambda draft: setattr(draft, "activeTheme", theme))
        return self.state

    async def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
            await f.write(json.dumps({"activeTheme": self.state.activeTheme}))

    async def update(self, recipe: Callable[[Preferences], Optional[Preferences]]) -> Preferences:
        state = self.set(recipe)
        await self.save()
        return state

    async def toggle_theme(self) -> str:
        """Flip between the dark and light themes and persist the choice."""
        nxt = "light" if self.state.activeTheme == "dark" else "dark"
        await self.update(lambda draft: setattr(draft, "activeTheme", nxt))
        return nxt


# ══════════════════════════════════════════════════════════════════════════
# UI state
# ══════════════════════════════════════════════════════════════════════════

@dataclass
class UIState:
    activeModals: List[ModalIdentity] = field(default_factory=list)
    activeSidebarMenuItem: Optional[str] = None


def _find(draft: UIState, modal_id: str) -> Optional[ModalIdentity]:
    for modal in draft.activeModals:
        if modal.id == modal_id:
            return modal
    return None


class UIStore(Store[UIState]):
    """Modal stack and sidebar selection."""

    def __init__(self):
        super().__init__(UIState())

    def get_modal(self, modal_id: str) -> Optional[ModalIdentity]:
        return _find(self.state, modal_id)

    def modal_state(self, modal_id: str) -> ModalState:
        modal = self.get_modal(modal_id)
        return modal.state if modal else ModalState.HIDDEN

    def open_modal(
        self,
        modal_id: str,
        data: Optional[Dict[str, Any]] = None,
        collapsable: bool = False,
    ) -> ModalIdentity:
        """Push a modal as expanded; an already open modal is re-expanded."""

        def recipe(draft: UIState) -> None:
            modal = _find(draft, modal_id)
            if modal is None:
                draft.activeModals.append(
                    ModalIdentity(id=modal_id, data=dict(data or {}), collapsable=collapsable)
                )
                return
            modal.state = ModalState.EXPANDED
            modal.changed_at = time.monotonic()
            if data is not None:
                modal.data = dict(data)

        self.set(recipe)
        return self.get_modal(modal_id)

    def toggle_tucked(self, modal_id: str) -> ModalState:
        """Switch a collapsable modal between expanded and tucked."""
        modal = self.get_modal(modal_id)
        if modal is None:
            raise ModalTransitionError(modal_id, message=f"Modal '{modal_id}' is not open")
        if not modal.collapsable:
            raise ModalTransitionError(modal_id, message=f"Modal '{modal_id}' cannot be tucked")

        nxt = ModalState.EXPANDED if modal.is_tucked else ModalState.TUCKED
        stamp = time.monotonic()

        def recipe(draft: UIState) -> None:
            target = _find(draft, modal_id)
            target.state = nxt
            target.changed_at = stamp

        self.set(recipe)
        return nxt

    def close_modal(self, modal_id: str) -> None:
        """Remove a modal from the stack; closing a hidden modal is a no-op."""
        self.set(
            lambda draft: setattr(
                draft, "activeModals", [m for m in draft.activeModals if m.id != modal_id]
            )
        )

    def update_modal_data(self, modal_id: str, **changes: Any) -> Dict[str, Any]:
        if self.get_modal(modal_id) is None:
            raise ModalTransitionError(modal_id, message=f"Modal '{modal_id}' is not open")
        self.set(lambda draft: _find(draft, modal_id).data.update(changes))
        return self.get_modal(modal_id).data

    def drag_modal(self, modal_id: str, offset, window: Size, modal_size: Size):
        """
        Move a modal to `offset` (x, y), clamped to the window.

        Tucked modals are not draggable; their offset is returned unchanged.
        """
        modal = self.get_modal(modal_id)
        if modal is None:
            raise ModalTransitionError(modal_id, message=f"Modal '{modal_id}' is not open")
        if not modal.drag_enabled:
            return modal.offset

        clamped = drag_bounds(window, modal_size).clamp(offset)
        self.set(lambda draft: setattr(_find(draft, modal_id), "offset", clamped))
        return clamped

    def select_sidebar_item(self, item_id: Optional[str]) -> None:
        self.set(lambda draft: setattr(draft, "activeSidebarMenuItem", item_id))
