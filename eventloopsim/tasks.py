from __future__ import annotations

from dataclasses import replace

from eventloopsim.clock import TimeSource
from eventloopsim.queues import InvalidTransition
from eventloopsim.types import Task, TaskKind


class DuplicateTaskId(ValueError):
    pass


def create_task(
    task_id: str,
    label: str,
    kind: TaskKind,
    delay: int | None = None,
    output: str | None = None,
    *,
    clock: TimeSource,
) -> Task:
    if kind is TaskKind.MACRO and delay is None:
        raise ValueError(f"macro task '{task_id}' requires a delay")
    if kind is not TaskKind.MACRO and delay is not None:
        raise ValueError(f"{kind.value} task '{task_id}' cannot carry a delay")
    return Task(
        task_id=task_id,
        label=label,
        kind=kind,
        created_at_ms=clock.now_ms(),
        remaining_delay_ms=int(delay) if delay is not None else None,
        output=output,
    )


class TaskFactory:
    """Creates tasks for one simulation run and refuses to reuse an id."""

    def __init__(self, *, clock: TimeSource) -> None:
        self._clock = clock
        self._issued: set[str] = set()

    def create(
        self,
        task_id: str,
        label: str,
        kind: TaskKind,
        delay: int | None = None,
        output: str | None = None,
    ) -> Task:
        if task_id in self._issued:
            raise DuplicateTaskId(f"task id '{task_id}' was already issued")
        task = create_task(task_id, label, kind, delay, output, clock=self._clock)
        self._issued.add(task_id)
        return task

    def issued_ids(self) -> frozenset[str]:
        return frozenset(self._issued)


def mark_started(task: Task, *, now_ms: float) -> Task:
    if task.started_at_ms is not None:
        raise InvalidTransition(f"task '{task.task_id}' already started")
    return replace(task, started_at_ms=float(now_ms))


def mark_ended(task: Task, *, now_ms: float) -> Task:
    if task.started_at_ms is None:
        raise InvalidTransition(f"task '{task.task_id}' ended before it started")
    if task.ended_at_ms is not None:
        raise InvalidTransition(f"task '{task.task_id}' already ended")
    return replace(task, ended_at_ms=float(now_ms))
