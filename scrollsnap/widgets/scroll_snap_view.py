import time

from PySide6.QtCore import QPointF, Qt, QTimer
from PySide6.QtGui import QMouseEvent, QResizeEvent, QShowEvent
from PySide6.QtWidgets import QScrollArea, QWidget

from scrollsnap.utils.settings import ScrollSnapConfig, settings
from scrollsnap.widgets.carousel_controller import CarouselController
from scrollsnap.widgets.qt_host import QtPageTarget, QtScrollContainer


class ScrollSnapView(QScrollArea):
    """Horizontally paged scroll area that snaps to pages after a drag."""

    def __init__(self, parent: QWidget | None = None, *, config: ScrollSnapConfig | None = None,
                 indicator=None, next_trigger=None, previous_trigger=None):
        super().__init__(parent)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setWidgetResizable(False)
        self.setFrameShape(QScrollArea.Shape.NoFrame)

        self.content = QWidget()
        self.setWidget(self.content)

        self.container = QtScrollContainer(self)
        self.controller = CarouselController(
            self.container,
            config=config,
            indicator=indicator,
            next_trigger=next_trigger,
            previous_trigger=previous_trigger,
            parent=self,
        )

        self._press_x: float | None = None
        self._press_offset = QPointF()
        self._last_tick = None
        self._set_up = False

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(self.controller.config.tick_interval_ms)
        self._tick_timer.timeout.connect(self._on_tick)

        # Without an explicit config the view tracks the shared settings.
        if config is None:
            settings.change.connect(self._on_setting_changed)

    def add_page_widget(self, widget: QWidget):
        widget.setParent(self.content)
        widget.show()
        self.controller.add_page(QtPageTarget(widget))

    def remove_page_widget(self, index: int) -> QWidget | None:
        target = self.controller.remove_page(index)
        if target is None:
            return None
        target.widget.hide()
        target.widget.setParent(None)
        return target.widget

    def _on_setting_changed(self, key: str, _value):
        if not key.startswith("scroll_snap_"):
            return
        config = ScrollSnapConfig.from_settings()
        self.controller.set_config(config)
        self._tick_timer.setInterval(self.controller.config.tick_interval_ms)

    def _on_tick(self):
        now = time.monotonic()
        dt = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now
        self.controller.tick(dt)

    def showEvent(self, event: QShowEvent):
        super().showEvent(event)
        if self._set_up:
            self.controller.relayout()
        else:
            self.controller.setup()
            self._set_up = True
        self._last_tick = None
        self._tick_timer.start()

    def hideEvent(self, event):
        self._tick_timer.stop()
        super().hideEvent(event)

    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        if self.isVisible():
            self.controller.relayout()

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_x = event.position().x()
            self._press_offset = self.container.local_position()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        if self._press_x is None:
            super().mouseMoveEvent(event)
            return
        if not self.container.horizontal_enabled():
            event.accept()
            return
        first_move = not self.controller.gesture.dragging
        self.controller.on_drag()
        if first_move:
            # A snap may have kept moving the content since the press.
            self._press_x = event.position().x()
            self._press_offset = self.container.local_position()
        dx = event.position().x() - self._press_x
        self.container.set_local_position(
            QPointF(self._press_offset.x() + dx, self._press_offset.y())
        )
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if self._press_x is None or event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._press_x = None
        if self.controller.gesture.dragging:
            self.controller.on_end_drag()
        event.accept()
