from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from eventloopsim.config import ConfigError, SimulationConfig
from eventloopsim.logging_setup import setup_logging

from eventloopsim_ui.main_window import MainWindow
from eventloopsim_ui.step_controller import StepController
from eventloopsim_ui.theme import Theme, apply_theme

logger = logging.getLogger(__name__)


def run_app(argv: list[str] | None = None) -> int:
    try:
        config = SimulationConfig.from_env()
    except ConfigError as e:
        sys.stderr.write(f"Invalid configuration: {e}\n")
        return 2

    setup_logging(level=config.log_level)

    app = QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName("EventLoopSim")
    app.setOrganizationName("EventLoopSim")
    apply_theme(app, Theme.DARK)

    controller = StepController(config=config)
    app.aboutToQuit.connect(controller.shutdown)
    window = MainWindow(step_controller=controller)
    window.resize(1200, 800)
    window.show()
    controller.start_clock()

    logger.info(
        "EventLoopSim started (tick every %d ms, -%d ms per tick)",
        config.tick_interval_ms,
        config.tick_decrement_ms,
    )
    return app.exec()
