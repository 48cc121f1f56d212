"""Page layout calculator for the scroll-snap carousel."""

from dataclasses import dataclass

from PySide6.QtCore import QRectF

from scrollsnap.utils.settings import PAGE_STEP_ZERO_FALLBACK
from scrollsnap.widgets.host_capabilities import PageTarget, ScrollContainer


@dataclass(frozen=True)
class PageRect:
    """Resting rect of one page inside the scroll content."""
    index: int
    rect: QRectF

    @property
    def offset(self) -> float:
        return self.rect.x()


class PageLayout:
    """Distributes pages left to right at a fixed step along the scroll axis."""

    def layout(
        self,
        container_width: float,
        container_height: float,
        page_count: int,
        step_factor: float,
    ) -> list[PageRect]:
        """
        Compute every page rect from scratch.

        Args:
            container_width: Width of the visible viewport; each page gets it
            container_height: Height of the visible viewport
            page_count: Number of pages to place
            step_factor: Distance between page origins in page widths (0 means 3)

        Returns:
            One PageRect per page, ordered by index
        """
        step = PAGE_STEP_ZERO_FALLBACK if step_factor == 0 else float(step_factor)
        step_value = int(container_width) * step

        rects = []
        for i in range(max(0, int(page_count))):
            x = int(i * step_value)
            rects.append(PageRect(i, QRectF(x, 0.0, container_width, container_height)))
        return rects

    @staticmethod
    def content_extent(rects: list[PageRect]) -> float:
        """Scroll extent that ends exactly at the last page."""
        if not rects:
            return 0.0
        return rects[-1].offset

    def apply(self, pages: list[PageTarget], container: ScrollContainer, step_factor: float) -> list[PageRect]:
        """Lay out ``pages`` inside ``container`` and update its scroll extent."""
        width, height = container.viewport_size()
        rects = self.layout(width, height, len(pages), step_factor)
        for page, page_rect in zip(pages, rects):
            page.set_page_size(page_rect.rect.width(), page_rect.rect.height())
            # Anchor and pivot at the leading edge so offsets compose linearly.
            page.set_pivot(0.0, 0.0)
            page.set_anchored_offset(page_rect.offset, 0.0)
        container.set_content_extent(self.content_extent(rects))
        return rects
