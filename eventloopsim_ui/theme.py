from __future__ import annotations

import os
from enum import Enum

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication, QStyleFactory

from eventloopsim_ui.theme_stylesheet import _DARK_STYLESHEET, _LIGHT_STYLESHEET

_ACCENT_TEAL = QColor(38, 166, 154)


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def _dark_palette() -> QPalette:
    pal = QPalette()

    window = QColor(30, 30, 30)
    base = QColor(24, 24, 24)
    text = QColor(228, 228, 228)
    disabled_text = QColor(150, 150, 150)

    pal.setColor(QPalette.ColorRole.Window, window)
    pal.setColor(QPalette.ColorRole.WindowText, text)
    pal.setColor(QPalette.ColorRole.Base, base)
    pal.setColor(QPalette.ColorRole.AlternateBase, QColor(36, 36, 36))
    pal.setColor(QPalette.ColorRole.ToolTipBase, window)
    pal.setColor(QPalette.ColorRole.ToolTipText, text)
    pal.setColor(QPalette.ColorRole.Text, text)
    pal.setColor(QPalette.ColorRole.Button, QColor(40, 40, 40))
    pal.setColor(QPalette.ColorRole.ButtonText, text)
    pal.setColor(QPalette.ColorRole.Highlight, _ACCENT_TEAL)
    pal.setColor(QPalette.ColorRole.HighlightedText, QColor(15, 15, 15))

    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText, disabled_text)
    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, disabled_text)
    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, disabled_text)
    return pal


def _light_palette(app: QApplication) -> QPalette:
    pal = app.style().standardPalette()

    text = QColor(32, 32, 32)
    disabled_text = QColor(130, 130, 130)

    pal.setColor(QPalette.ColorRole.Window, QColor(238, 242, 247))
    pal.setColor(QPalette.ColorRole.WindowText, text)
    pal.setColor(QPalette.ColorRole.Base, QColor(255, 255, 255))
    pal.setColor(QPalette.ColorRole.AlternateBase, QColor(242, 242, 242))
    pal.setColor(QPalette.ColorRole.Button, QColor(245, 245, 245))
    pal.setColor(QPalette.ColorRole.ButtonText, text)
    pal.setColor(QPalette.ColorRole.Text, text)
    pal.setColor(QPalette.ColorRole.Highlight, _ACCENT_TEAL)
    pal.setColor(QPalette.ColorRole.HighlightedText, QColor(15, 15, 15))

    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText, disabled_text)
    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, disabled_text)
    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, disabled_text)
    return pal


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip() not in ("", "0", "false")


def apply_theme(app: QApplication, theme: Theme) -> None:
    """Apply an application-global palette and stylesheet."""

    if not _env_flag("EVENTLOOPSIM_UI_THEME_DISABLE_FUSION"):
        fusion = QStyleFactory.create("Fusion")
        if fusion is not None:
            app.setStyle(fusion)
        else:
            app.setStyle("Fusion")

    if theme == Theme.DARK:
        palette = _dark_palette()
        stylesheet = _DARK_STYLESHEET
    else:
        palette = _light_palette(app)
        stylesheet = _LIGHT_STYLESHEET

    if not _env_flag("EVENTLOOPSIM_UI_THEME_DISABLE_PALETTE"):
        app.setPalette(palette)
    if not _env_flag("EVENTLOOPSIM_UI_THEME_DISABLE_STYLESHEET"):
        app.setStyleSheet(stylesheet)
