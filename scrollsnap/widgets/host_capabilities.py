"""Capabilities the carousel core needs from its host UI.

The core never touches concrete widgets. Anything implementing these
methods can be driven: the Qt adapters in ``qt_host`` for real widgets,
plain fakes in tests.
"""

from __future__ import annotations

from typing import Protocol

from PySide6.QtCore import QPointF


class ScrollContainer(Protocol):
    """Horizontally scrollable content holding the pages."""

    def local_position(self) -> QPointF: ...

    def set_local_position(self, position: QPointF) -> None: ...

    def set_normalized_position(self, fraction: float) -> None:
        """Map ``fraction`` in [0, 1] onto the scroll range."""

    def horizontal_enabled(self) -> bool: ...

    def set_content_extent(self, extent: float) -> None:
        """Set how far the content may scroll (the last page's offset)."""

    def viewport_size(self) -> tuple[float, float]: ...

    def has_scrollbars(self) -> bool: ...


class PageTarget(Protocol):
    """Rectangular layout handle of one page."""

    def set_page_size(self, width: float, height: float) -> None: ...

    def set_anchored_offset(self, x: float, y: float) -> None: ...

    def set_pivot(self, x: float, y: float) -> None: ...


class PaginationIndicator(Protocol):
    def set_selected(self, page_count: int, index: int) -> None:
        """Turn exactly one indicator on and the rest off."""
