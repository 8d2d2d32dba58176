from __future__ import annotations

import logging
from collections import deque
from dataclasses import replace

from eventloopsim.types import ProgramLine, SchedulerState, Task, TaskKind

logger = logging.getLogger(__name__)


def first_ready_macro(macrotasks) -> Task | None:
    """First task in insertion order whose delay has run down to zero or below."""

    for t in macrotasks:
        if t.remaining_delay_ms is not None and t.remaining_delay_ms <= 0:
            return t
    return None


class InvalidTransition(RuntimeError):
    """An internal scheduler invariant was violated. Not recoverable."""


class QueueStore:
    """Call stack, microtask/macrotask queues, history and output log.

    Owned by exactly one Scheduler. Every mutator completes its update before
    returning; readers use `snapshot()` between calls.
    """

    def __init__(self, program: tuple[ProgramLine, ...] = ()) -> None:
        self.program = tuple(program)
        self.program_counter = 0
        self._stack: list[Task] = []
        self._micro: deque[Task] = deque()
        self._macro: list[Task] = []
        self._history: list[Task] = []
        self._output: list[str] = []

    # Call stack (0 or 1 task).

    def push_stack(self, task: Task) -> None:
        if self._stack:
            raise InvalidTransition(
                f"cannot push '{task.task_id}': call stack already holds "
                f"'{self._stack[0].task_id}'"
            )
        self._stack.append(task)

    def pop_stack(self) -> Task | None:
        if not self._stack:
            return None
        return self._stack.pop()

    def peek_stack(self) -> Task | None:
        return self._stack[0] if self._stack else None

    # Microtasks (FIFO).

    def enqueue_micro(self, task: Task) -> None:
        if task.kind is not TaskKind.MICRO:
            raise InvalidTransition(f"'{task.task_id}' is not a microtask")
        self._micro.append(task)

    def dequeue_micro(self) -> Task | None:
        if not self._micro:
            return None
        return self._micro.popleft()

    # Macrotasks (insertion order, readiness by remaining delay).

    def enqueue_macro(self, task: Task) -> None:
        if task.kind is not TaskKind.MACRO:
            raise InvalidTransition(f"'{task.task_id}' is not a macrotask")
        self._macro.append(task)

    def remove_macro_by_id(self, task_id: str) -> Task | None:
        for i, t in enumerate(self._macro):
            if t.task_id == task_id:
                return self._macro.pop(i)
        logger.debug("remove_macro_by_id: unknown task id %r", task_id)
        return None

    def find_ready_macro(self) -> Task | None:
        return first_ready_macro(self._macro)

    def decay_macro_delays(self, decrement_ms: int) -> None:
        if decrement_ms < 0:
            raise ValueError(f"decrement must be >= 0 (got {decrement_ms})")
        self._macro = [
            replace(t, remaining_delay_ms=t.remaining_delay_ms - decrement_ms)
            if t.remaining_delay_ms is not None
            else t
            for t in self._macro
        ]

    # Append-only logs.

    def append_history(self, task: Task) -> None:
        self._history.append(task)

    def append_output(self, text: str) -> None:
        self._output.append(text)

    def advance_program(self) -> ProgramLine:
        if self.program_counter >= len(self.program):
            raise InvalidTransition("program counter is already at the end")
        line = self.program[self.program_counter]
        self.program_counter += 1
        return line

    def snapshot(self) -> SchedulerState:
        return SchedulerState(
            program=self.program,
            program_counter=self.program_counter,
            call_stack=tuple(self._stack),
            microtasks=tuple(self._micro),
            macrotasks=tuple(self._macro),
            history=tuple(self._history),
            output_log=tuple(self._output),
        )
