from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QListWidget,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from eventloopsim_ui.state_view import NO_OUTPUT_TEXT, StateView


def _lane(title: str, object_name: str) -> tuple[QGroupBox, QListWidget]:
    box = QGroupBox(title)
    box.setAlignment(Qt.AlignmentFlag.AlignHCenter)
    layout = QVBoxLayout(box)
    lane = QListWidget()
    lane.setObjectName(object_name)
    lane.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
    lane.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    lane.setWordWrap(True)
    layout.addWidget(lane)
    return box, lane


def build_top_panel(window) -> QWidget:
    root = QWidget()
    layout = QHBoxLayout(root)
    layout.setContentsMargins(10, 10, 10, 0)
    layout.setSpacing(20)

    console_box = QGroupBox("Console Output")
    console_layout = QVBoxLayout(console_box)
    window._console_text = QPlainTextEdit()
    window._console_text.setObjectName("console_output")
    window._console_text.setReadOnly(True)
    window._console_text.setMinimumHeight(160)
    window._console_text.setPlainText(NO_OUTPUT_TEXT)
    console_layout.addWidget(window._console_text)

    code_box = QGroupBox("Code (Execution Pointer)")
    code_layout = QVBoxLayout(code_box)
    window._code_list = QListWidget()
    window._code_list.setObjectName("code_lines")
    window._code_list.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
    window._code_list.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    code_layout.addWidget(window._code_list)

    layout.addWidget(console_box, 1)
    layout.addWidget(code_box, 1)
    return root


def build_controls(window) -> QWidget:
    root = QWidget()
    layout = QHBoxLayout(root)
    layout.setContentsMargins(20, 6, 20, 6)

    window._step_btn = QPushButton("▶ Next Step")
    window._step_btn.clicked.connect(window._on_step_clicked)
    layout.addWidget(window._step_btn)

    window._run_idle_btn = QPushButton("Run to idle")
    window._run_idle_btn.setToolTip("Step until nothing is ready to run")
    window._run_idle_btn.clicked.connect(window._on_run_until_idle_clicked)
    layout.addWidget(window._run_idle_btn)

    window._reset_btn = QPushButton("Reset")
    window._reset_btn.clicked.connect(window._on_reset_clicked)
    layout.addWidget(window._reset_btn)

    window._clock_btn = QPushButton("Pause clock")
    window._clock_btn.setToolTip("Pause or resume the timer countdown")
    window._clock_btn.clicked.connect(window._on_clock_toggle_clicked)
    layout.addWidget(window._clock_btn)

    layout.addStretch(1)
    return root


def build_stage(window) -> QWidget:
    root = QWidget()
    grid = QGridLayout(root)
    grid.setContentsMargins(20, 10, 20, 20)
    grid.setHorizontalSpacing(20)

    stack_box, window._stack_lane = _lane("Call Stack", "lane_stack")
    micro_box, window._microtask_lane = _lane("Microtask Queue", "lane_microtasks")
    macro_box, window._macrotask_lane = _lane("Callback Queue", "lane_macrotasks")
    executed_box, window._executed_lane = _lane("Executed", "lane_executed")

    for col, box in enumerate((stack_box, micro_box, macro_box, executed_box)):
        grid.addWidget(box, 0, col)
        grid.setColumnStretch(col, 1)

    window._state_view = StateView(
        console=window._console_text,
        code_lines=window._code_list,
        stack_lane=window._stack_lane,
        microtask_lane=window._microtask_lane,
        macrotask_lane=window._macrotask_lane,
        executed_lane=window._executed_lane,
    )
    return root
