"""Anchored drag state machine that reveals a row action such as delete.

A row rests at one of two anchors: ``CENTER`` (offset 0, action hidden) or
``START`` (offset ``-action_width``, action revealed). While the pointer is
down the offset follows it, clamped between the anchors. On release the
controller picks an anchor and settles there; the host animates the settle and
reports progress, but the logical outcome is decided at release time.

Releasing never deletes anything. The revealed action does that.
"""

from dataclasses import dataclass
from enum import Enum

DEFAULT_ACTION_WIDTH = 80.0
DEFAULT_POSITIONAL_THRESHOLD = 0.5
DEFAULT_VELOCITY_THRESHOLD = 100.0


class DragAnchor(Enum):
    """Rest positions of a draggable row."""

    CENTER = "center"
    START = "start"


@dataclass(frozen=True)
class Settled:
    """Row at rest on an anchor."""

    anchor: DragAnchor


@dataclass(frozen=True)
class Dragging:
    """Pointer down; ``offset`` is transient."""

    origin: DragAnchor
    offset: float


@dataclass(frozen=True)
class Settling:
    """Released and animating towards ``target``."""

    origin: DragAnchor
    target: DragAnchor
    start_offset: float
    offset: float


SwipeState = Settled | Dragging | Settling


class SwipeRevealController:
    """Per-row controller for a horizontal drag-to-reveal gesture.

    Velocities are in offset units per second; negative values move towards
    ``START``. A release velocity at or above ``velocity_threshold`` picks the
    anchor in its direction. Otherwise the row moves to the other anchor only
    when it was dragged further than ``positional_threshold`` of the distance
    between the anchors.
    """

    def __init__(
        self,
        action_width: float = DEFAULT_ACTION_WIDTH,
        positional_threshold: float = DEFAULT_POSITIONAL_THRESHOLD,
        velocity_threshold: float = DEFAULT_VELOCITY_THRESHOLD,
        initial_anchor: DragAnchor = DragAnchor.CENTER,
    ) -> None:
        if not action_width > 0:
            raise ValueError("action_width must be positive")
        if not 0 < positional_threshold <= 1:
            raise ValueError("positional_threshold must be in (0, 1]")
        if not velocity_threshold > 0:
            raise ValueError("velocity_threshold must be positive")
        self.action_width = float(action_width)
        self.positional_threshold = positional_threshold
        self.velocity_threshold = velocity_threshold
        self._state: SwipeState = Settled(initial_anchor)

    @property
    def state(self) -> SwipeState:
        """Return the current state."""
        return self._state

    @property
    def offset(self) -> float:
        """Return the live horizontal offset for rendering."""
        state = self._state
        if isinstance(state, Settled):
            return self.anchor_offset(state.anchor)
        return state.offset

    @property
    def is_settled(self) -> bool:
        """Return True when the row rests on an anchor."""
        return isinstance(self._state, Settled)

    @property
    def is_dragging(self) -> bool:
        """Return True while the pointer is down."""
        return isinstance(self._state, Dragging)

    def current_anchor(self) -> DragAnchor:
        """Return the last anchor the row settled on."""
        state = self._state
        if isinstance(state, Settled):
            return state.anchor
        return state.origin

    def anchor_offset(self, anchor: DragAnchor) -> float:
        """Return the resting offset of an anchor."""
        if anchor is DragAnchor.START:
            return -self.action_width
        return 0.0

    def start_drag(self) -> None:
        """Begin a drag, interrupting any settle in flight."""
        state = self._state
        if isinstance(state, Dragging):
            return
        self._state = Dragging(origin=self.current_anchor(), offset=self.offset)

    def drag_by(self, delta: float) -> float:
        """Move the row by a pointer delta and return the clamped offset."""
        if not isinstance(self._state, Dragging):
            self.start_drag()
        state = self._state
        offset = min(0.0, max(-self.action_width, state.offset + delta))
        self._state = Dragging(origin=state.origin, offset=offset)
        return offset

    def release(self, velocity: float = 0.0) -> DragAnchor:
        """End the drag and return the anchor the row will settle on."""
        state = self._state
        if not isinstance(state, Dragging):
            raise RuntimeError("release() called without an active drag")
        target = self._target_for(state.origin, state.offset, velocity)
        self._settle_towards(state.origin, target, state.offset)
        return target

    def cancel(self) -> DragAnchor:
        """Abandon the gesture; settles with the same rule as a still release."""
        state = self._state
        if isinstance(state, Dragging):
            return self.release(0.0)
        if isinstance(state, Settling):
            return state.target
        return state.anchor

    def hide(self) -> None:
        """Settle back to ``CENTER`` from wherever the row is."""
        state = self._state
        if isinstance(state, Settled) and state.anchor is DragAnchor.CENTER:
            return
        self._settle_towards(self.current_anchor(), DragAnchor.CENTER, self.offset)

    def animate_settle(self, progress: float) -> float:
        """Advance the settle animation and return the offset to draw."""
        state = self._state
        if not isinstance(state, Settling):
            return self.offset
        progress = min(1.0, max(0.0, progress))
        if progress >= 1.0:
            self.finish_settle()
            return self.offset
        end = self.anchor_offset(state.target)
        offset = state.start_offset + (end - state.start_offset) * progress
        self._state = Settling(
            origin=state.origin,
            target=state.target,
            start_offset=state.start_offset,
            offset=offset,
        )
        return offset

    def finish_settle(self) -> DragAnchor:
        """Complete the settle and return the anchor the row now rests on."""
        state = self._state
        if isinstance(state, Dragging):
            raise RuntimeError("Cannot settle while a drag is active")
        if isinstance(state, Settling):
            self._state = Settled(state.target)
        return self.current_anchor()

    def _target_for(
        self, origin: DragAnchor, offset: float, velocity: float
    ) -> DragAnchor:
        if abs(velocity) >= self.velocity_threshold:
            return DragAnchor.START if velocity < 0 else DragAnchor.CENTER
        other = DragAnchor.START if origin is DragAnchor.CENTER else DragAnchor.CENTER
        travelled = abs(offset - self.anchor_offset(origin))
        if travelled > self.action_width * self.positional_threshold:
            return other
        return origin

    def _settle_towards(
        self, origin: DragAnchor, target: DragAnchor, offset: float
    ) -> None:
        if offset == self.anchor_offset(target):
            self._state = Settled(target)
            return
        self._state = Settling(
            origin=origin, target=target, start_offset=offset, offset=offset
        )
