"""Qt widget implementations of the carousel host capabilities."""

from __future__ import annotations

from PySide6.QtCore import QPointF, Qt
from PySide6.QtWidgets import QAbstractButton, QScrollArea, QWidget


class QtScrollContainer:
    """Scroll container backed by a QScrollArea's horizontal scrollbar.

    Local x is the negated scrollbar value, so content moving left reads as a
    negative offset. The exact float position is kept between calls because
    the scrollbar only stores integers and the snap animation needs sub-pixel
    steps to converge.
    """

    def __init__(self, scroll_area: QScrollArea):
        self._area = scroll_area
        self._extent = 0.0
        self._x = 0.0
        self.horizontal = True

    def _bar(self):
        return self._area.horizontalScrollBar()

    def local_position(self) -> QPointF:
        value = self._bar().value()
        if value != round(-self._x):
            # Moved by someone else (wheel, keyboard); trust the scrollbar.
            self._x = -float(value)
        return QPointF(self._x, 0.0)

    def set_local_position(self, position: QPointF):
        self._x = max(-self._extent, min(0.0, float(position.x())))
        self._bar().setValue(round(-self._x))

    def set_normalized_position(self, fraction: float):
        fraction = max(0.0, min(1.0, float(fraction)))
        self.set_local_position(QPointF(-fraction * self._extent, 0.0))

    def horizontal_enabled(self) -> bool:
        return self.horizontal and self._area.isEnabled()

    def set_content_extent(self, extent: float):
        self._extent = max(0.0, float(extent))
        width, height = self.viewport_size()
        content = self._area.widget()
        if content is not None:
            content.setFixedSize(int(width + self._extent), int(height))
        self._bar().setRange(0, int(self._extent))

    def viewport_size(self) -> tuple[float, float]:
        viewport = self._area.viewport()
        return float(viewport.width()), float(viewport.height())

    def has_scrollbars(self) -> bool:
        off = Qt.ScrollBarPolicy.ScrollBarAlwaysOff
        return (
            self._area.horizontalScrollBarPolicy() != off
            or self._area.verticalScrollBarPolicy() != off
        )


class QtPageTarget:
    """Layout handle for one page widget placed inside the scroll content."""

    def __init__(self, widget: QWidget):
        self.widget = widget
        self._pivot = (0.0, 0.0)

    def set_page_size(self, width: float, height: float):
        self.widget.setFixedSize(int(width), int(height))

    def set_pivot(self, x: float, y: float):
        self._pivot = (float(x), float(y))

    def set_anchored_offset(self, x: float, y: float):
        # Qt positions by the top-left corner; shift by the pivot fraction.
        pivot_x = self._pivot[0] * self.widget.width()
        pivot_y = self._pivot[1] * self.widget.height()
        self.widget.move(int(x - pivot_x), int(y - pivot_y))


class ToggleIndicator:
    """Pagination dots made of checkable buttons, exactly one checked."""

    def __init__(self, buttons: list[QAbstractButton] | None = None):
        self.buttons: list[QAbstractButton] = list(buttons or [])
        for button in self.buttons:
            button.setCheckable(True)

    def set_selected(self, page_count: int, index: int):
        for i, button in enumerate(self.buttons):
            button.setChecked(i == index and index < page_count)
