from __future__ import annotations

from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from eventloopsim.scheduler import Transition
from eventloopsim.types import SchedulerState

from eventloopsim_ui.main_window_file_io import on_save_log_clicked as _on_save_log_clicked
from eventloopsim_ui.main_window_menus import build_menus
from eventloopsim_ui.main_window_panels import build_controls, build_stage, build_top_panel
from eventloopsim_ui.main_window_top_bar import build_top_bar
from eventloopsim_ui.state_view import describe_transition
from eventloopsim_ui.step_controller import StepController
from eventloopsim_ui.theme import Theme, apply_theme


class MainWindow(QMainWindow):
    def __init__(self, *, step_controller: StepController) -> None:
        super().__init__()
        self._controller = step_controller
        self._step_count = 0

        build_menus(self, on_save_log=self._on_save_log_clicked, on_exit=self.close)
        self._build_ui()
        self._wire_controller()

        self.setWindowTitle("EventLoopSim")
        self._render(self._controller.state())
        self._set_clock_running(self._controller.is_clock_running())

    def _build_ui(self) -> None:
        root = QWidget()
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)
        self.setCentralWidget(root)

        (
            top_bar,
            self._save_log_btn,
            self._top_clock,
            self._theme_toggle,
        ) = build_top_bar(
            self,
            on_save_log_clicked=self._on_save_log_clicked,
            on_theme_changed=self._on_theme_changed,
        )
        root_layout.addWidget(top_bar)
        root_layout.addWidget(build_top_panel(self))
        root_layout.addWidget(build_controls(self))
        root_layout.addWidget(build_stage(self), 1)

        status = QStatusBar()
        self.setStatusBar(status)
        self._status_label = QLabel("Ready")
        status.addWidget(self._status_label, 1)
        self._step_count_label = QLabel("Steps: 0")
        status.addPermanentWidget(self._step_count_label)

    def _wire_controller(self) -> None:
        self._controller.state_changed.connect(self._on_state_changed)
        self._controller.stepped.connect(self._on_stepped)
        self._controller.clock_running_changed.connect(self._set_clock_running)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._controller.shutdown()
        super().closeEvent(event)

    def _on_theme_changed(self, theme: Theme) -> None:
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, theme)

    def _on_save_log_clicked(self) -> None:
        _on_save_log_clicked(self)

    def _on_step_clicked(self) -> None:
        self._controller.step()

    def _on_run_until_idle_clicked(self) -> None:
        applied = self._controller.run_until_idle()
        self._step_count += applied
        self._step_count_label.setText(f"Steps: {self._step_count}")
        self._status_label.setText(f"Ran {applied} steps until idle")

    def _on_reset_clicked(self) -> None:
        self._controller.reset()
        self._step_count = 0
        self._step_count_label.setText("Steps: 0")
        self._status_label.setText("Reset")

    def _on_clock_toggle_clicked(self) -> None:
        self._controller.toggle_clock()

    def _on_stepped(self, transition: Transition) -> None:
        self._step_count += 1
        self._step_count_label.setText(f"Steps: {self._step_count}")
        self._status_label.setText(describe_transition(transition))

    def _on_state_changed(self, state: SchedulerState) -> None:
        self._render(state)

    def _render(self, state: SchedulerState) -> None:
        self._state_view.render(state)
        self._save_log_btn.setEnabled(bool(state.history or state.output_log))

    def _set_clock_running(self, running: bool) -> None:
        self._clock_btn.setText("Pause clock" if running else "Resume clock")
        self._top_clock.setText("⏱️" if running else "⏸️")
