"""Per-tick interpolation of the scroll content toward a page's resting position."""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QPointF

from scrollsnap.widgets.position_table import distance

# Motion is considered settled below this distance.
SETTLE_EPSILON = 0.1

# Pagination dots switch once the content is this close, before it settles.
INDICATOR_EPSILON = 10.0


@dataclass(frozen=True)
class TransitionStep:
    position: QPointF
    indicator_ready: bool = False
    finished: bool = False


class SnapTransition:
    """One in-flight snap; a new start() overwrites the previous target."""

    def __init__(self, speed: float = 7.5):
        self.speed = float(speed)
        self.active = False
        self.target = QPointF()

    def start(self, target: QPointF):
        self.target = QPointF(target)
        self.active = True

    def cancel(self):
        self.active = False

    def advance(self, current: QPointF, dt: float) -> TransitionStep:
        """Move ``current`` a ``speed * dt`` fraction of the remaining way to the target."""
        if not self.active:
            return TransitionStep(QPointF(current))

        t = max(0.0, min(1.0, self.speed * float(dt)))
        position = current + (self.target - current) * t
        remaining = distance(position, self.target)

        indicator_ready = remaining < INDICATOR_EPSILON
        finished = remaining < SETTLE_EPSILON
        if finished:
            self.active = False
        return TransitionStep(position, indicator_ready=indicator_ready, finished=finished)
