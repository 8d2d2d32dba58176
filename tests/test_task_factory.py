from __future__ import annotations

import pytest

from eventloopsim.clock import ManualClock, SystemClock
from eventloopsim.queues import InvalidTransition
from eventloopsim.tasks import (
    DuplicateTaskId,
    TaskFactory,
    create_task,
    mark_ended,
    mark_started,
)
from eventloopsim.types import TaskKind


def test_create_task_stamps_created_at_from_clock() -> None:
    clock = ManualClock(start_ms=42.0)
    t = create_task("macro-1", "Timer Callback", TaskKind.MACRO, 2000, "B", clock=clock)

    assert t.task_id == "macro-1"
    assert t.kind is TaskKind.MACRO
    assert t.remaining_delay_ms == 2000
    assert t.output == "B"
    assert t.created_at_ms == 42.0
    assert t.started_at_ms is None
    assert t.ended_at_ms is None


def test_create_task_delay_rules() -> None:
    clock = ManualClock()
    with pytest.raises(ValueError, match="requires a delay"):
        create_task("m", "x", TaskKind.MACRO, clock=clock)
    with pytest.raises(ValueError, match="cannot carry a delay"):
        create_task("u", "x", TaskKind.MICRO, 10, clock=clock)


def test_factory_refuses_reused_ids() -> None:
    factory = TaskFactory(clock=ManualClock())
    factory.create("sync-0", "Print", TaskKind.SYNC, output="A")

    with pytest.raises(DuplicateTaskId, match="sync-0"):
        factory.create("sync-0", "Print", TaskKind.SYNC, output="A")

    # A failed creation does not burn the id.
    with pytest.raises(ValueError):
        factory.create("macro-1", "Timer", TaskKind.MACRO)
    factory.create("macro-1", "Timer", TaskKind.MACRO, delay=5)

    assert factory.issued_ids() == frozenset({"sync-0", "macro-1"})


def test_mark_started_and_ended_are_set_once() -> None:
    clock = ManualClock(start_ms=0.0)
    t = create_task("micro-1", "Promise Callback", TaskKind.MICRO, clock=clock)

    with pytest.raises(InvalidTransition, match="before it started"):
        mark_ended(t, now_ms=1.0)

    started = mark_started(t, now_ms=5.0)
    assert started.started_at_ms == 5.0
    assert t.started_at_ms is None  # original untouched

    with pytest.raises(InvalidTransition, match="already started"):
        mark_started(started, now_ms=6.0)

    ended = mark_ended(started, now_ms=9.0)
    assert ended.ended_at_ms == 9.0
    with pytest.raises(InvalidTransition, match="already ended"):
        mark_ended(ended, now_ms=10.0)


def test_manual_clock_only_moves_forward() -> None:
    clock = ManualClock(start_ms=10.0)
    clock.advance(5)
    assert clock.now_ms() == 15.0
    with pytest.raises(ValueError, match="backwards"):
        clock.advance(-1)


def test_system_clock_is_monotonic() -> None:
    clock = SystemClock()
    a = clock.now_ms()
    b = clock.now_ms()
    assert b >= a
