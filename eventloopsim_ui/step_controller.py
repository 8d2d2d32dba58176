from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from eventloopsim.clock import TimeSource
from eventloopsim.config import SimulationConfig
from eventloopsim.metrics import summarize_history
from eventloopsim.program import Program, demo_program
from eventloopsim.scheduler import Scheduler, Transition
from eventloopsim.types import SchedulerState

logger = logging.getLogger(__name__)


class StepController(QObject):
    """Owns the scheduler and the wall-clock feed for the UI.

    Step and tick both run on the GUI thread (button click / QTimer timeout),
    so they never interleave.
    """

    state_changed = Signal(object)  # SchedulerState
    stepped = Signal(object)  # Transition
    clock_running_changed = Signal(bool)

    def __init__(
        self,
        *,
        program: Program | None = None,
        config: SimulationConfig | None = None,
        clock: TimeSource | None = None,
    ) -> None:
        super().__init__()
        self._config = config if config is not None else SimulationConfig()
        self._scheduler = Scheduler(
            program if program is not None else demo_program(),
            clock=clock,
            config=self._config,
        )

        self._timer = QTimer(self)
        self._timer.setInterval(self._config.tick_interval_ms)
        self._timer.timeout.connect(self.tick)

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def state(self) -> SchedulerState:
        return self._scheduler.state()

    def summary(self) -> dict[str, Any]:
        s = self._scheduler.state()
        return summarize_history(s.history, s.output_log)

    def is_clock_running(self) -> bool:
        return self._timer.isActive()

    def start_clock(self) -> None:
        if self._timer.isActive():
            return
        self._timer.start()
        self.clock_running_changed.emit(True)

    def stop_clock(self) -> None:
        if not self._timer.isActive():
            return
        self._timer.stop()
        self.clock_running_changed.emit(False)

    def toggle_clock(self) -> None:
        if self._timer.isActive():
            self.stop_clock()
        else:
            self.start_clock()

    @Slot()
    def step(self) -> Transition:
        transition = self._scheduler.step()
        self.stepped.emit(transition)
        self.state_changed.emit(self._scheduler.state())
        return transition

    @Slot()
    def tick(self) -> None:
        self._scheduler.tick()
        self.state_changed.emit(self._scheduler.state())

    @Slot()
    def run_until_idle(self) -> int:
        applied = self._scheduler.run_until_idle()
        logger.info("run until idle: %d transitions applied", applied)
        self.state_changed.emit(self._scheduler.state())
        return applied

    @Slot()
    def reset(self) -> None:
        self._scheduler.reset()
        logger.info("simulation reset")
        self.state_changed.emit(self._scheduler.state())

    @Slot()
    def shutdown(self) -> None:
        self._timer.stop()
