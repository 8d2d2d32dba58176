from __future__ import annotations

from collections.abc import Sequence

from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import QListWidget, QListWidgetItem, QPlainTextEdit

from eventloopsim.metrics import format_latency
from eventloopsim.scheduler import (
    AdvanceProgram,
    DispatchMacrotask,
    DrainMicrotask,
    DrainStack,
    Idle,
    Transition,
)
from eventloopsim.types import SchedulerState, Task
from eventloopsim_ui.theme_stylesheet import CURRENT_LINE_COLOR

NO_OUTPUT_TEXT = "(no output yet)"


class StateView:
    """Binds a scheduler snapshot to the console, code and lane widgets."""

    def __init__(
        self,
        *,
        console: QPlainTextEdit,
        code_lines: QListWidget,
        stack_lane: QListWidget,
        microtask_lane: QListWidget,
        macrotask_lane: QListWidget,
        executed_lane: QListWidget,
    ) -> None:
        self._console = console
        self._code_lines = code_lines
        self._stack_lane = stack_lane
        self._microtask_lane = microtask_lane
        self._macrotask_lane = macrotask_lane
        self._executed_lane = executed_lane

    def render(self, state: SchedulerState) -> None:
        self._console.setPlainText(format_console(state.output_log))
        self._render_code(state)
        _fill(self._stack_lane, [t.label for t in state.call_stack], state.call_stack)
        _fill(self._microtask_lane, [t.label for t in state.microtasks], state.microtasks)
        _fill(
            self._macrotask_lane,
            [format_macro_item(t) for t in state.macrotasks],
            state.macrotasks,
        )
        _fill(
            self._executed_lane,
            [format_executed_item(t) for t in state.history],
            state.history,
        )

    def _render_code(self, state: SchedulerState) -> None:
        self._code_lines.clear()
        highlight = QBrush(QColor(CURRENT_LINE_COLOR))
        for i, line in enumerate(state.program):
            item = QListWidgetItem(format_code_line(i, line.text))
            if i == state.program_counter:
                item.setBackground(highlight)
                item.setForeground(QBrush(QColor(30, 30, 30)))
            self._code_lines.addItem(item)


def _fill(lane: QListWidget, texts: Sequence[str], tasks: Sequence[Task]) -> None:
    lane.clear()
    for text, task in zip(texts, tasks):
        item = QListWidgetItem(text)
        item.setToolTip(task.task_id)
        lane.addItem(item)


def clamp_delay_for_display(delay_ms: int | None) -> int:
    if delay_ms is None:
        return 0
    return max(delay_ms, 0)


def format_console(lines: Sequence[str]) -> str:
    if not lines:
        return NO_OUTPUT_TEXT
    return "\n".join(f"▶ {line}" for line in lines)


def format_code_line(index: int, text: str) -> str:
    return f"{index + 1}. {text}"


def format_macro_item(task: Task) -> str:
    return f"{task.label}\n⏱ {clamp_delay_for_display(task.remaining_delay_ms)} ms"


def format_executed_item(task: Task) -> str:
    return f"{task.label}\n{format_latency(task)}"


def describe_transition(transition: Transition) -> str:
    if isinstance(transition, DrainStack):
        return f"Finished {transition.task_id}"
    if isinstance(transition, AdvanceProgram):
        return f"Ran line {transition.line_index + 1}"
    if isinstance(transition, DrainMicrotask):
        return f"Microtask {transition.task_id} moved to the call stack"
    if isinstance(transition, DispatchMacrotask):
        return f"Callback {transition.task_id} moved to the call stack"
    if isinstance(transition, Idle):
        return "Idle (nothing ready to run)"
    raise AssertionError(f"Unhandled transition: {transition!r}")
