"""Resting container positions per page and nearest-page lookup."""

from __future__ import annotations

import math

from PySide6.QtCore import QPointF


def distance(a: QPointF, b: QPointF) -> float:
    return math.hypot(a.x() - b.x(), a.y() - b.y())


def build(page_count: int, container) -> list[QPointF]:
    """Record the container position for every page's normalized scroll fraction.

    Going through the normalized setter instead of raw offsets keeps the
    table correct for whatever mapping the host applies to its scroll range.
    Leaves the container at the last page; callers restore it.
    """
    positions: list[QPointF] = []
    page_count = int(page_count)
    if page_count <= 0:
        return positions

    denominator = max(page_count - 1, 1)
    for i in range(page_count):
        container.set_normalized_position(i / denominator)
        position = container.local_position()
        positions.append(QPointF(position.x(), position.y()))
    return positions


def nearest(point: QPointF, table: list[QPointF]) -> int:
    """Index of the entry closest to ``point``; first one wins a tie, 0 if empty."""
    best_index = 0
    best_distance = math.inf
    for index, position in enumerate(table):
        d = distance(point, position)
        if d < best_distance:
            best_distance = d
            best_index = index
    return best_index
