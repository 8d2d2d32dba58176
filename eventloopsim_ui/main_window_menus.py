from __future__ import annotations

import platform
from collections.abc import Callable

import PySide6
from PySide6.QtWidgets import QMainWindow, QMessageBox, QWidget

from eventloopsim.version import __version__


def build_menus(
    window: QMainWindow,
    *,
    on_save_log: Callable[[], None],
    on_exit: Callable[[], None],
) -> None:
    file_menu = window.menuBar().addMenu("File")
    save_action = file_menu.addAction("Save log…")
    save_action.triggered.connect(on_save_log)
    file_menu.addSeparator()
    exit_action = file_menu.addAction("Exit")
    exit_action.triggered.connect(on_exit)

    help_menu = window.menuBar().addMenu("Help")
    about_action = help_menu.addAction("About…")
    about_action.triggered.connect(lambda: show_about_dialog(window))


def show_about_dialog(parent: QWidget) -> None:
    # Non-modal: `exec()` spins a nested event loop, which is fragile under tests.
    box = QMessageBox(parent)
    box.setWindowTitle("About")
    box.setIcon(QMessageBox.Icon.Information)
    box.setText("EventLoopSim")
    box.setInformativeText(about_text())

    # Keep a reference so the box isn't garbage-collected after open().
    setattr(parent, "_about_box", box)
    box.open()


def about_text() -> str:
    py_ver = platform.python_version()
    pyside_ver = getattr(PySide6, "__version__", "(unknown)")
    return "\n".join(
        [
            f"Version: {__version__}",
            "",
            "Steps through a single-threaded event loop: call stack,",
            "microtask queue and timer callback queue.",
            "",
            f"Python: {py_ver}",
            f"PySide6 (Qt for Python): {pyside_ver}",
        ]
    )
