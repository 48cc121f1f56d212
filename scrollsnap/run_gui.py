import logging
import os
import sys
import threading
import traceback
import warnings
from datetime import datetime

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (QApplication, QHBoxLayout, QLabel, QMessageBox,
                               QPushButton, QVBoxLayout, QWidget)

from scrollsnap.utils.flow_log import log_flow
from scrollsnap.widgets.qt_host import ToggleIndicator
from scrollsnap.widgets.scroll_snap_view import ScrollSnapView

CRASH_LOG_PATH = os.path.abspath('scrollsnap_crash.log')

DEMO_PAGE_COLORS = ('#c0392b', '#d35400', '#27ae60', '#2980b9', '#8e44ad')


def _append_crash_log(title: str, exc_info=None):
    """Append a timestamped crash entry to the crash log."""
    ts = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    try:
        with open(CRASH_LOG_PATH, 'a', encoding='utf-8') as f:
            f.write("\n" + "=" * 80 + "\n")
            f.write(f"{ts} | {title}\n")
            f.write("=" * 80 + "\n")
            if exc_info is None:
                f.write(traceback.format_exc())
            else:
                f.writelines(traceback.format_exception(*exc_info))
            f.write("\n")
    except OSError as log_error:
        print(f"[CRASH] Failed to write crash log: {log_error}")
    print(f"[CRASH] Details written to: {CRASH_LOG_PATH}")


def install_crash_handlers():
    """Log unhandled exceptions from the main and worker threads."""
    def _unhandled_exception(exc_type, exc_value, exc_traceback):
        _append_crash_log("UNHANDLED EXCEPTION", (exc_type, exc_value, exc_traceback))
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    def _thread_exception(args):
        thread_name = getattr(args.thread, 'name', 'unknown')
        _append_crash_log(
            f"THREAD EXCEPTION ({thread_name})",
            (args.exc_type, args.exc_value, args.exc_traceback),
        )

    sys.excepthook = _unhandled_exception
    threading.excepthook = _thread_exception


def suppress_warnings():
    """Suppress all warnings when not in a development environment."""
    environment = os.getenv('SCROLLSNAP_ENVIRONMENT')
    if environment == 'development':
        print('Running in development environment.')
        return
    logging.basicConfig(level=logging.ERROR)
    warnings.simplefilter('ignore')


def build_demo_window(page_count: int = len(DEMO_PAGE_COLORS)) -> QWidget:
    window = QWidget()
    window.setWindowTitle('ScrollSnap')
    window.resize(480, 360)

    dots = [QPushButton() for _ in range(page_count)]
    for dot in dots:
        dot.setFixedSize(14, 14)
    indicator = ToggleIndicator(dots)
    previous_button = QPushButton('<')
    next_button = QPushButton('>')

    view = ScrollSnapView(
        indicator=indicator,
        next_trigger=next_button,
        previous_trigger=previous_button,
    )
    for i in range(page_count):
        page = QLabel(f'Page {i + 1}')
        page.setStyleSheet(
            f'background: {DEMO_PAGE_COLORS[i % len(DEMO_PAGE_COLORS)]};'
            ' color: white; font-size: 32px;'
        )
        page.setAlignment(Qt.AlignmentFlag.AlignCenter)
        view.add_page_widget(page)

    for index, dot in enumerate(dots):
        dot.clicked.connect(lambda _checked=False, i=index: view.controller.go_to_page(i))
    view.controller.selection_change_started.connect(
        lambda: log_flow("DEMO", "Selection change started"))
    view.controller.selection_change_ended.connect(
        lambda: log_flow("DEMO", f"Selection change ended on page {view.controller.current_page}"))

    controls = QHBoxLayout()
    controls.addWidget(previous_button)
    controls.addStretch()
    for dot in dots:
        controls.addWidget(dot)
    controls.addStretch()
    controls.addWidget(next_button)

    layout = QVBoxLayout(window)
    layout.addWidget(view, stretch=1)
    layout.addLayout(controls)
    window.scroll_snap_view = view
    return window


def run_gui():
    app = QApplication([])
    # The application name is shown in the taskbar.
    app.setApplicationName('ScrollSnap')
    app.setApplicationDisplayName('ScrollSnap')
    app.setStyle('Fusion')

    main_window = build_demo_window()
    main_window.show()
    return int(app.exec())


if __name__ == '__main__':
    # Suppress all warnings when not in a development environment.
    suppress_warnings()
    install_crash_handlers()
    try:
        sys.exit(run_gui())
    except Exception as exception:
        _append_crash_log("TOP-LEVEL EXCEPTION", sys.exc_info())
        error_message_box = QMessageBox()
        error_message_box.setWindowTitle('Error')
        error_message_box.setIcon(QMessageBox.Icon.Critical)
        error_message_box.setText(str(exception))
        error_message_box.setDetailedText(traceback.format_exc())
        error_message_box.exec()
        sys.exit(1)
