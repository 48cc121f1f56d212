"""Pure logic for classifying a drag gesture as a fast swipe or a slow release."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import QPointF


class GestureState(Enum):
    IDLE = 'idle'
    DRAGGING = 'dragging'


@dataclass
class DragSession:
    """Lives from drag start to drag end of a single gesture."""

    start_offset: QPointF
    elapsed_ticks: int = 0
    timing_window_open: bool = True


class GestureClassifier:
    """Tracks one drag session and decides how the carousel should settle.

    Speed is measured in ticks rather than wall-clock time so the decision
    runs on the same cadence as the snap animation.
    """

    def __init__(
        self,
        *,
        use_fast_swipe: bool = True,
        fast_swipe_threshold: float = 100,
        fast_swipe_ticks: int = 30,
    ):
        self.use_fast_swipe = bool(use_fast_swipe)
        self.fast_swipe_threshold = float(fast_swipe_threshold)
        self.fast_swipe_ticks = int(fast_swipe_ticks)
        self._state = GestureState.IDLE
        self._session: DragSession | None = None

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def dragging(self) -> bool:
        return self._state is GestureState.DRAGGING

    @property
    def session(self) -> DragSession | None:
        return self._session

    def begin_drag(self, start_offset: QPointF) -> bool:
        """Open a session; returns False when one is already running."""
        if self._state is GestureState.DRAGGING:
            return False
        self._session = DragSession(start_offset=QPointF(start_offset))
        self._state = GestureState.DRAGGING
        return True

    def tick(self):
        if self._session is not None and self._session.timing_window_open:
            self._session.elapsed_ticks += 1

    def cancel(self):
        self._state = GestureState.IDLE
        self._session = None

    def end_drag(self, end_offset: QPointF, *, horizontal_enabled: bool = True) -> dict:
        session = self._session
        self.cancel()
        if session is None:
            return {"kind": "none", "direction": 0, "elapsed_ticks": 0, "distance": 0.0}

        session.timing_window_open = False
        delta = session.start_offset.x() - end_offset.x()
        result = {
            "kind": "snap",
            "direction": 0,
            "elapsed_ticks": session.elapsed_ticks,
            "distance": delta,
        }
        if not horizontal_enabled:
            result["kind"] = "none"
            return result

        fast = (
            self.use_fast_swipe
            and session.elapsed_ticks <= self.fast_swipe_ticks
            and abs(delta) > self.fast_swipe_threshold
        )
        if fast:
            result["kind"] = "fast_swipe"
            # Content moved left: the user swiped toward the next page.
            result["direction"] = 1 if delta > 0 else -1
        return result
