from __future__ import annotations

# Step engine for the event-loop model.
#
# `decide()` is a pure function of a state snapshot and picks exactly one
# transition by fixed priority: drain stack > advance program > one microtask
# > one ready macrotask > idle. `Scheduler` applies it to its own QueueStore.

import logging
from dataclasses import dataclass
from typing import Union

from eventloopsim.clock import SystemClock, TimeSource
from eventloopsim.config import SimulationConfig
from eventloopsim.program import Program
from eventloopsim.queues import InvalidTransition, QueueStore, first_ready_macro
from eventloopsim.tasks import TaskFactory, mark_ended, mark_started
from eventloopsim.types import SchedulerState, TaskKind
from eventloopsim.validate import validate_program

logger = logging.getLogger(__name__)

SYNC_TASK_LABEL = "Print"


@dataclass(frozen=True)
class DrainStack:
    task_id: str


@dataclass(frozen=True)
class AdvanceProgram:
    line_index: int


@dataclass(frozen=True)
class DrainMicrotask:
    task_id: str


@dataclass(frozen=True)
class DispatchMacrotask:
    task_id: str


@dataclass(frozen=True)
class Idle:
    pass


Transition = Union[DrainStack, AdvanceProgram, DrainMicrotask, DispatchMacrotask, Idle]


def decide(state: SchedulerState) -> Transition:
    if len(state.call_stack) > 1:
        raise InvalidTransition(
            f"call stack holds {len(state.call_stack)} tasks (expected at most 1)"
        )
    if state.call_stack:
        return DrainStack(task_id=state.call_stack[0].task_id)
    if not state.program_done:
        return AdvanceProgram(line_index=state.program_counter)
    if state.microtasks:
        return DrainMicrotask(task_id=state.microtasks[0].task_id)
    ready = first_ready_macro(state.macrotasks)
    if ready is not None:
        return DispatchMacrotask(task_id=ready.task_id)
    return Idle()


class Scheduler:
    """Owns one simulation: its program, queues and time source."""

    def __init__(
        self,
        program: Program,
        *,
        clock: TimeSource | None = None,
        config: SimulationConfig | None = None,
    ) -> None:
        validate_program(program)
        self._program = program
        self._clock: TimeSource = clock if clock is not None else SystemClock()
        self._config = config if config is not None else SimulationConfig()
        self._store = QueueStore()
        self._factory = TaskFactory(clock=self._clock)
        self.reset()

    @property
    def program(self) -> Program:
        return self._program

    @property
    def config(self) -> SimulationConfig:
        return self._config

    def reset(self) -> None:
        """Restart from line 0 with the program's seeded queues."""

        self._store = QueueStore(self._program.lines)
        self._factory = TaskFactory(clock=self._clock)
        for seed in self._program.microtasks:
            self._store.enqueue_micro(
                self._factory.create(
                    seed.task_id, seed.label, TaskKind.MICRO, output=seed.output
                )
            )
        for seed in self._program.macrotasks:
            self._store.enqueue_macro(
                self._factory.create(
                    seed.task_id,
                    seed.label,
                    TaskKind.MACRO,
                    delay=seed.delay_ms,
                    output=seed.output,
                )
            )
        logger.debug(
            "scheduler reset: %d lines, %d microtasks, %d macrotasks",
            len(self._program.lines),
            len(self._program.microtasks),
            len(self._program.macrotasks),
        )

    def state(self) -> SchedulerState:
        return self._store.snapshot()

    def step(self) -> Transition:
        transition = decide(self._store.snapshot())
        self._apply(transition)
        logger.debug("step: %s", transition)
        return transition

    def tick(self, decrement_ms: int | None = None) -> None:
        amount = self._config.tick_decrement_ms if decrement_ms is None else decrement_ms
        self._store.decay_macro_delays(amount)
        logger.debug("tick: -%d ms", amount)

    def run_until_idle(self, max_steps: int = 10_000) -> int:
        applied = 0
        while applied < max_steps:
            if isinstance(self.step(), Idle):
                break
            applied += 1
        return applied

    def _apply(self, transition: Transition) -> None:
        store = self._store

        if isinstance(transition, DrainStack):
            task = store.pop_stack()
            if task is None or task.task_id != transition.task_id:
                raise InvalidTransition(
                    f"expected '{transition.task_id}' on the call stack"
                )
            finished = mark_ended(task, now_ms=self._clock.now_ms())
            store.append_history(finished)
            if finished.output is not None:
                store.append_output(finished.output)
            return

        if isinstance(transition, AdvanceProgram):
            if store.program_counter != transition.line_index:
                raise InvalidTransition(
                    f"program counter is {store.program_counter}, "
                    f"expected {transition.line_index}"
                )
            line = store.advance_program()
            if line.is_print_statement:
                task = self._factory.create(
                    f"sync-{transition.line_index}",
                    SYNC_TASK_LABEL,
                    TaskKind.SYNC,
                    output=line.output,
                )
                # Synchronous work starts the moment it is scheduled.
                store.push_stack(mark_started(task, now_ms=self._clock.now_ms()))
            return

        if isinstance(transition, DrainMicrotask):
            task = store.dequeue_micro()
            if task is None or task.task_id != transition.task_id:
                raise InvalidTransition(
                    f"expected '{transition.task_id}' at the microtask queue head"
                )
            store.push_stack(mark_started(task, now_ms=self._clock.now_ms()))
            return

        if isinstance(transition, DispatchMacrotask):
            ready = store.find_ready_macro()
            if ready is None or ready.task_id != transition.task_id:
                raise InvalidTransition(
                    f"macrotask '{transition.task_id}' is not the first ready one"
                )
            task = store.remove_macro_by_id(transition.task_id)
            store.push_stack(mark_started(task, now_ms=self._clock.now_ms()))
            return

        if isinstance(transition, Idle):
            return

        raise AssertionError(f"Unhandled transition: {transition!r}")
