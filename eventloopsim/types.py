from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TaskKind(str, Enum):
    SYNC = "sync"
    MICRO = "micro"
    MACRO = "macro"


@dataclass(frozen=True)
class Task:
    task_id: str
    label: str
    kind: TaskKind
    created_at_ms: float
    remaining_delay_ms: int | None = None  # macro only; may go negative
    output: str | None = None  # appended to the output log on completion
    started_at_ms: float | None = None
    ended_at_ms: float | None = None


@dataclass(frozen=True)
class ProgramLine:
    text: str
    is_print_statement: bool = False
    output: str | None = None


@dataclass(frozen=True)
class SeedTask:
    """A callback queued before the program starts."""

    task_id: str
    label: str
    output: str | None = None
    delay_ms: int | None = None


@dataclass(frozen=True)
class SchedulerState:
    program: tuple[ProgramLine, ...]
    program_counter: int
    call_stack: tuple[Task, ...]
    microtasks: tuple[Task, ...]
    macrotasks: tuple[Task, ...]
    history: tuple[Task, ...]
    output_log: tuple[str, ...]

    @property
    def program_done(self) -> bool:
        return self.program_counter >= len(self.program)
