"""
Astro Client — Modal Lifecycle and Theme Resolution Tests
==========================================================
"""

import pytest

from astro.client.modals import (
    TUCK_TRANSITION_SECONDS,
    DragBounds,
    ModalIdentity,
    ModalState,
    Size,
    clamp_offset,
    drag_bounds,
)
from astro.client.stores import UIStore
from astro.client.themes import resolve_active_theme
from astro.exceptions import ModalTransitionError
from astro.sample_data import SAMPLE_THEMES

WINDOW = Size(width=1280, height=800)
MODAL = Size(width=480, height=400)


class TestModalLifecycle:
    def setup_method(self):
        self.ui = UIStore()

    def test_unknown_modal_is_hidden(self):
        assert self.ui.modal_state("new-service") is ModalState.HIDDEN

    def test_open_pushes_expanded(self):
        modal = self.ui.open_modal("new-service", data={"name": ""}, collapsable=True)

        assert modal.state is ModalState.EXPANDED
        assert modal.is_visible and modal.drag_enabled and modal.accepts_pointer
        assert [m.id for m in self.ui.state.activeModals] == ["new-service"]

    def test_toggle_tucks_and_expands(self):
        self.ui.open_modal("new-service", collapsable=True)

        assert self.ui.toggle_tucked("new-service") is ModalState.TUCKED
        tucked = self.ui.get_modal("new-service")
        assert tucked.is_visible
        assert not tucked.drag_enabled
        assert not tucked.accepts_pointer

        assert self.ui.toggle_tucked("new-service") is ModalState.EXPANDED

    def test_non_collapsable_cannot_tuck(self):
        self.ui.open_modal("confirm")

        with pytest.raises(ModalTransitionError, match="cannot be tucked"):
            self.ui.toggle_tucked("confirm")
        assert self.ui.modal_state("confirm") is ModalState.EXPANDED

    def test_toggle_closed_modal_rejected(self):
        with pytest.raises(ModalTransitionError, match="not open"):
            self.ui.toggle_tucked("ghost")

    def test_close_removes_modal(self):
        self.ui.open_modal("a")
        self.ui.open_modal("b")

        self.ui.close_modal("a")
        self.ui.close_modal("never-opened")

        assert self.ui.modal_state("a") is ModalState.HIDDEN
        assert [m.id for m in self.ui.state.activeModals] == ["b"]

    def test_reopen_reexpands_without_duplicating(self):
        self.ui.open_modal("new-service", data={"name": "Plex"}, collapsable=True)
        self.ui.toggle_tucked("new-service")

        modal = self.ui.open_modal("new-service")

        assert modal.state is ModalState.EXPANDED
        assert modal.data == {"name": "Plex"}
        assert len(self.ui.state.activeModals) == 1

    def test_update_modal_data(self):
        self.ui.open_modal("new-service", data={"name": "", "url": ""})

        data = self.ui.update_modal_data("new-service", name="Plex")

        assert data == {"name": "Plex", "url": ""}

    def test_content_hidden_after_tuck_transition(self):
        self.ui.open_modal("new-service", collapsable=True)
        self.ui.toggle_tucked("new-service")
        modal = self.ui.get_modal("new-service")

        assert not modal.content_hidden(now=modal.changed_at + TUCK_TRANSITION_SECONDS / 2)
        assert modal.content_hidden(now=modal.changed_at + TUCK_TRANSITION_SECONDS)

    def test_expanded_content_never_hidden(self):
        modal = ModalIdentity(id="x")
        assert not modal.content_hidden(now=modal.changed_at + 10)


class TestDragBounds:
    def test_bounds_formula(self):
        assert drag_bounds(WINDOW, MODAL) == DragBounds(left=-800, right=800, top=-200, bottom=842)

    def test_clamp_offset(self):
        assert clamp_offset((-5000, 5000), WINDOW, MODAL) == (-800, 842)
        assert clamp_offset((10, -10), WINDOW, MODAL) == (10, -10)

    def test_drag_clamps_expanded_modal(self):
        ui = UIStore()
        ui.open_modal("m", collapsable=True)

        assert ui.drag_modal("m", (900, -300), WINDOW, MODAL) == (800, -200)
        assert ui.get_modal("m").offset == (800, -200)

    def test_tucked_modal_does_not_move(self):
        ui = UIStore()
        ui.open_modal("m", collapsable=True)
        ui.drag_modal("m", (50, 50), WINDOW, MODAL)
        ui.toggle_tucked("m")

        assert ui.drag_modal("m", (0, 0), WINDOW, MODAL) == (50, 50)


class TestThemeResolution:
    SERVER_THEMES = [
        {"id": "dark", "accent": {"primary": "#server-dark"}},
        {"id": "sunset", "accent": {"primary": "#ff8800"}},
    ]

    def test_server_theme_wins(self):
        theme = resolve_active_theme(self.SERVER_THEMES, "sunset")
        assert theme["accent"]["primary"] == "#ff8800"

    def test_server_copy_of_builtin_preferred(self):
        theme = resolve_active_theme(self.SERVER_THEMES, "dark")
        assert theme["accent"]["primary"] == "#server-dark"

    def test_before_themes_load_uses_builtin(self):
        theme = resolve_active_theme(None, "light")
        assert theme == {"id": "light", **SAMPLE_THEMES["light"]}

    def test_unknown_preference_falls_back_to_dark(self):
        theme = resolve_active_theme(self.SERVER_THEMES, "neon")
        assert theme == {"id": "dark", **SAMPLE_THEMES["dark"]}

    def test_no_preference_falls_back_to_dark(self):
        assert resolve_active_theme([], None)["id"] == "dark"
