from __future__ import annotations

"""Application stylesheets.

Lane colors follow the classic event-loop diagram: pink call stack, purple
microtasks, amber callbacks, grey executed.
"""

from PySide6.QtGui import QColor

_PRIMARY_PURPLE = QColor(126, 87, 194)
_ACCENT_TEAL = QColor(38, 166, 154)

STACK_COLOR = "#ff6fae"
MICROTASK_COLOR = "#6c5ce7"
MACROTASK_COLOR = "#fdcb6e"
EXECUTED_COLOR = "#b2bec3"
CURRENT_LINE_COLOR = "#ffeaa7"

_COMMON = f"""
QWidget {{
  font-size: 13px;
}}

QGroupBox {{
  font-weight: 600;
  border: 1px solid palette(mid);
  border-radius: 6px;
  margin-top: 10px;
  padding: 6px;
}}

QGroupBox::title {{
  subcontrol-origin: margin;
  left: 10px;
  padding: 0 4px;
}}

QPushButton {{
  background-color: {_PRIMARY_PURPLE.name()};
  color: rgba(250, 250, 250, 0.98);
  border: 2px solid rgba(0, 0, 0, 0.10);
  border-radius: 10px;
  padding: 6px 10px;
}}

QPushButton:hover {{
  background-color: {_ACCENT_TEAL.name()};
}}

QPlainTextEdit#console_output {{
  background-color: #0b0f14;
  color: #00ff9c;
  font-family: monospace;
  font-size: 18px;
  border-radius: 8px;
  padding: 8px;
}}

QListWidget#lane_stack::item {{
  background-color: {STACK_COLOR};
  color: #1e1e1e;
  font-weight: 600;
  border-radius: 10px;
  margin: 4px;
  padding: 10px;
}}

QListWidget#lane_microtasks::item {{
  background-color: {MICROTASK_COLOR};
  color: white;
  border-radius: 10px;
  margin: 4px;
  padding: 10px;
}}

QListWidget#lane_macrotasks::item {{
  background-color: {MACROTASK_COLOR};
  color: #1e1e1e;
  border-radius: 10px;
  margin: 4px;
  padding: 10px;
}}

QListWidget#lane_executed::item {{
  background-color: {EXECUTED_COLOR};
  color: #1e1e1e;
  border-radius: 8px;
  margin: 3px;
  padding: 6px;
}}
"""

_LIGHT_STYLESHEET = (
    _COMMON
    + """
QPushButton:disabled {
  background-color: rgba(0, 0, 0, 0.06);
  color: rgba(0, 0, 0, 0.45);
}

QListWidget#code_lines {
  background-color: #f7f7f7;
  font-family: monospace;
}
"""
)

_DARK_STYLESHEET = (
    _COMMON
    + """
QPushButton:disabled {
  background-color: rgba(255, 255, 255, 0.06);
  color: rgba(255, 255, 255, 0.40);
}

QListWidget#code_lines {
  background-color: #242424;
  font-family: monospace;
}
"""
)
