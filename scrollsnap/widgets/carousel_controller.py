"""
Paged scroll-snap controller.

Design:
  1. PageLayout places the pages; PositionTable records where the scroll
     content rests for each of them.
  2. Navigation (buttons, goto, drag release) picks a table entry and starts
     a SnapTransition toward it.
  3. The host calls tick(dt) once per frame; the transition moves the content
     and reports when it settles.
  4. Structural edits (add/remove page) re-layout, rebuild the table and jump
     to the current page without animating.

Everything runs on the GUI thread; there is no locking.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, QPointF, Signal

from scrollsnap.utils.flow_log import log_flow
from scrollsnap.utils.settings import ScrollSnapConfig
from scrollsnap.widgets import position_table
from scrollsnap.widgets.gesture_classifier import GestureClassifier
from scrollsnap.widgets.host_capabilities import PaginationIndicator, ScrollContainer
from scrollsnap.widgets.page_layout import PageLayout
from scrollsnap.widgets.snap_transition import SnapTransition


def _connect_trigger(trigger, callback):
    if hasattr(trigger, 'clicked'):
        trigger.clicked.connect(lambda *_args: callback())
    elif hasattr(trigger, 'connect'):
        trigger.connect(callback)
    else:
        raise TypeError(f'Cannot connect navigation trigger of type {type(trigger).__name__}')


class CarouselController(QObject):
    """Owns the current page, the position table and the in-flight snap."""

    selection_change_started = Signal(name='selectionChangeStarted')
    selection_change_ended = Signal(name='selectionChangeEnded')

    def __init__(
        self,
        container: ScrollContainer,
        pages=None,
        *,
        config: ScrollSnapConfig | None = None,
        indicator: PaginationIndicator | None = None,
        next_trigger=None,
        previous_trigger=None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._container = container
        self._pages = list(pages or [])
        self._requested_config = config if config is not None else ScrollSnapConfig.from_settings()
        self._config = self._requested_config.validated(len(self._pages))
        self._indicator = indicator
        self._next_trigger = next_trigger
        self._previous_trigger = previous_trigger

        self._layout = PageLayout()
        self._positions: list[QPointF] = []
        self._current_page = 0
        self._transition = SnapTransition(self._config.transition_speed)
        self._gesture = GestureClassifier(
            use_fast_swipe=self._config.use_fast_swipe,
            fast_swipe_threshold=self._config.fast_swipe_threshold,
            fast_swipe_ticks=self._config.fast_swipe_ticks,
        )
        self._is_setup = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def config(self) -> ScrollSnapConfig:
        return self._config

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def pages(self) -> list:
        return list(self._pages)

    @property
    def positions(self) -> list[QPointF]:
        return list(self._positions)

    @property
    def transition(self) -> SnapTransition:
        return self._transition

    @property
    def gesture(self) -> GestureClassifier:
        return self._gesture

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def setup(self):
        """Lay out pages, place the starting page and wire the optional triggers."""
        if self._container.has_scrollbars():
            log_flow(
                "CAROUSEL",
                "Scrollbars on a scroll-snap container give unpredictable results",
                level="WARNING",
            )

        self._relayout()
        self._current_page = self._config.starting_page
        self._snap_to_current()
        self._sync_indicator(self._current_page)

        if not self._is_setup:
            if self._next_trigger is not None:
                _connect_trigger(self._next_trigger, self.next_page)
            if self._previous_trigger is not None:
                _connect_trigger(self._previous_trigger, self.previous_page)
        self._is_setup = True
        log_flow("CAROUSEL", f"Setup: pages={self.page_count}, current={self._current_page}")

    def _relayout(self):
        self._config = self._requested_config.validated(len(self._pages))
        self._transition.speed = self._config.transition_speed
        self._gesture.use_fast_swipe = self._config.use_fast_swipe
        self._gesture.fast_swipe_threshold = float(self._config.fast_swipe_threshold)
        self._gesture.fast_swipe_ticks = self._config.fast_swipe_ticks

        self._layout.apply(self._pages, self._container, self._config.page_step)
        # Swap in the complete table in one assignment.
        self._positions = position_table.build(len(self._pages), self._container)

    def _snap_to_current(self):
        self._transition.cancel()
        if not self._positions:
            self._container.set_normalized_position(0.0)
            return
        self._container.set_local_position(QPointF(self._positions[self._current_page]))

    def _sync_indicator(self, index: int):
        if self._indicator is None:
            return
        self._indicator.set_selected(self.page_count, index)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _move_to(self, index: int, *, notify: bool):
        if notify:
            self.selection_change_started.emit()
        self._current_page = index
        self._transition.start(self._positions[index])
        self._sync_indicator(index)

    def next_page(self):
        if self._current_page < self.page_count - 1:
            self._move_to(self._current_page + 1, notify=True)

    def previous_page(self):
        if self._current_page > 0 and self.page_count > 0:
            self._move_to(self._current_page - 1, notify=True)

    def go_to_page(self, index: int):
        if 0 <= index <= self.page_count - 1:
            self._move_to(int(index), notify=True)

    def current_page_index(self) -> int:
        """Page the content is visually closest to right now."""
        if not self._positions:
            return 0
        return position_table.nearest(self._container.local_position(), self._positions)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------
    def add_page(self, page):
        self._pages.append(page)
        self._after_structure_change()

    def remove_page(self, index: int):
        if not 0 <= index < len(self._pages):
            return None
        page = self._pages.pop(index)
        self._after_structure_change()
        return page

    def set_config(self, config: ScrollSnapConfig):
        """Swap in new tunables and re-distribute pages, keeping the current page."""
        self._requested_config = config
        self._after_structure_change()

    def relayout(self):
        """Re-distribute pages after the viewport changed size."""
        self._after_structure_change()

    def _after_structure_change(self):
        self._relayout()
        last_page = max(0, self.page_count - 1)
        self._current_page = max(0, min(last_page, self._current_page))
        self._snap_to_current()
        self._sync_indicator(self._current_page)
        log_flow("CAROUSEL", f"Re-layout: pages={self.page_count}, current={self._current_page}")

    # ------------------------------------------------------------------
    # Frame tick
    # ------------------------------------------------------------------
    def tick(self, dt: float):
        """Advance one frame; ``dt`` is the frame time in seconds."""
        self._gesture.tick()
        if not self._transition.active:
            return

        step = self._transition.advance(self._container.local_position(), dt)
        self._container.set_local_position(step.position)
        if step.indicator_ready:
            visible_page = self.current_page_index()
            log_flow(
                "CAROUSEL",
                f"Indicator -> page {visible_page}",
                throttle_key="indicator_sync",
                every_s=0.25,
            )
            self._sync_indicator(visible_page)
        if step.finished:
            log_flow("CAROUSEL", f"Settled on page {self._current_page}")
            self.selection_change_ended.emit()

    # ------------------------------------------------------------------
    # Drag delegation
    # ------------------------------------------------------------------
    def on_begin_drag(self):
        if not self._positions:
            return
        if self._gesture.begin_drag(self._container.local_position()):
            self.selection_change_started.emit()
            self._current_page = self.current_page_index()

    def on_drag(self):
        # Manual dragging always wins over an in-flight snap.
        self._transition.cancel()
        if not self._gesture.dragging:
            self.on_begin_drag()

    def on_end_drag(self):
        position = self._container.local_position()
        decision = self._gesture.end_drag(
            position, horizontal_enabled=self._container.horizontal_enabled()
        )
        log_flow(
            "GESTURE",
            f"Release: kind={decision['kind']}, ticks={decision['elapsed_ticks']}, "
            f"dx={decision['distance']:.1f}",
        )
        if decision["kind"] == "fast_swipe":
            target = self._current_page + decision["direction"]
            if not 0 <= target < self.page_count:
                # Nowhere to jump; settle back onto the page we left.
                target = self._current_page
            self._move_to(target, notify=False)
        elif decision["kind"] == "snap" and self._positions:
            self._move_to(position_table.nearest(position, self._positions), notify=False)
