from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QWidget

from eventloopsim_ui.theme import Theme
from eventloopsim_ui.theme_toggle import ThemeToggle


def build_top_bar(
    parent: QWidget,
    *,
    on_save_log_clicked: Callable[[], None],
    on_theme_changed: Callable[[Theme], None],
) -> tuple[QWidget, QPushButton, QLabel, ThemeToggle]:
    top_bar = QWidget(parent)
    layout = QHBoxLayout(top_bar)
    layout.setContentsMargins(10, 0, 10, 0)
    layout.setSpacing(8)
    layout.setAlignment(Qt.AlignmentFlag.AlignTop)

    save_log_btn = QPushButton("💾")
    save_log_btn.setToolTip("Save log…")
    save_log_btn.clicked.connect(on_save_log_clicked)
    layout.addWidget(save_log_btn, 0, Qt.AlignmentFlag.AlignTop)

    # Shows the clock feed state: ⏱️ counting down, ⏸️ paused.
    clock = QLabel("⏱️")
    clock.setObjectName("top_clock_emoji")
    clock.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignHCenter)
    clock.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    clock.setMinimumSize(36, 36)
    clock.setStyleSheet("font-size: 36px; padding: 0px; margin-top: -4px;")

    layout.addStretch(1)
    layout.addWidget(clock, 0, Qt.AlignmentFlag.AlignTop)
    layout.addStretch(1)

    theme_toggle = ThemeToggle(default=Theme.DARK, parent=parent)
    theme_toggle.theme_changed.connect(on_theme_changed)
    layout.addWidget(theme_toggle, 0, Qt.AlignmentFlag.AlignTop)

    return top_bar, save_log_btn, clock, theme_toggle
