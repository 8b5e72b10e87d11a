"""
Modal model: identity, visibility rules and drag bounds.

A modal is `hidden` (not on the stack), `expanded` or `tucked`. Tucking
collapses a collapsable modal to its header at the bottom of the screen:
it stops taking pointer input and cannot be dragged, and its content is
hidden once the tuck transition has finished.
"""

import enum
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# Duration of the expand/tuck transition, in seconds
TUCK_TRANSITION_SECONDS = 0.42

# Height of a tucked modal's header strip; the bottom bound leaves room for it
TUCKED_HEADER_HEIGHT = 42


class ModalState(str, enum.Enum):
    HIDDEN = "hidden"
    EXPANDED = "expanded"
    TUCKED = "tucked"


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class DragBounds:
    left: float
    right: float
    top: float
    bottom: float

    def clamp(self, offset: Tuple[float, float]) -> Tuple[float, float]:
        x, y = offset
        return (
            min(max(x, self.left), self.right),
            min(max(y, self.top), self.bottom),
        )


def drag_bounds(window: Size, modal: Size) -> DragBounds:
    """How far a centred modal may be dragged inside the window."""
    spare_x = window.width - modal.width
    spare_y = window.height - modal.height
    return DragBounds(
        left=-spare_x,
        right=spare_x,
        top=-spare_y / 2,
        bottom=2 * spare_y + TUCKED_HEADER_HEIGHT,
    )


def clamp_offset(offset: Tuple[float, float], window: Size, modal: Size) -> Tuple[float, float]:
    return drag_bounds(window, modal).clamp(offset)


@dataclass
class ModalIdentity:
    """One entry of the UI store's modal stack."""

    id: str
    state: ModalState = ModalState.EXPANDED
    data: Dict[str, Any] = field(default_factory=dict)
    collapsable: bool = False
    offset: Tuple[float, float] = (0.0, 0.0)
    changed_at: float = field(default_factory=time.monotonic)

    @property
    def is_visible(self) -> bool:
        return self.state in (ModalState.EXPANDED, ModalState.TUCKED)

    @property
    def is_tucked(self) -> bool:
        return self.state is ModalState.TUCKED

    @property
    def drag_enabled(self) -> bool:
        return self.is_visible and not self.is_tucked

    @property
    def accepts_pointer(self) -> bool:
        return self.state is ModalState.EXPANDED

    def content_hidden(self, now: Optional[float] = None) -> bool:
        """Tucked content disappears once the transition has run its course."""
        if not self.is_tucked:
            return False
        now = time.monotonic() if now is None else now
        return now - self.changed_at >= TUCK_TRANSITION_SECONDS
