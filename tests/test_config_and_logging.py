from __future__ import annotations

import logging
from pathlib import Path

import pytest

from eventloopsim.config import ConfigError, SimulationConfig
from eventloopsim.logging_setup import setup_logging


def test_config_defaults(monkeypatch) -> None:
    for k in ("TICK_INTERVAL_MS", "TICK_DECREMENT_MS", "LOG_LEVEL"):
        monkeypatch.delenv(f"EVENTLOOPSIM_{k}", raising=False)

    assert SimulationConfig.from_env() == SimulationConfig(
        tick_interval_ms=500, tick_decrement_ms=500, log_level="INFO"
    )


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("EVENTLOOPSIM_TICK_INTERVAL_MS", " 250 ")
    monkeypatch.setenv("EVENTLOOPSIM_TICK_DECREMENT_MS", "0")
    monkeypatch.setenv("EVENTLOOPSIM_LOG_LEVEL", "debug")

    cfg = SimulationConfig.from_env()
    assert cfg.tick_interval_ms == 250
    assert cfg.tick_decrement_ms == 0
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value", "match"),
    [
        ("EVENTLOOPSIM_TICK_INTERVAL_MS", "fast", "must be an integer"),
        ("EVENTLOOPSIM_TICK_INTERVAL_MS", "0", "must be >= 1"),
        ("EVENTLOOPSIM_TICK_DECREMENT_MS", "-5", "must be >= 0"),
        ("EVENTLOOPSIM_LOG_LEVEL", "chatty", "not a logging level"),
    ],
)
def test_config_rejects_bad_values(monkeypatch, name: str, value: str, match: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match=match):
        SimulationConfig.from_env()


@pytest.fixture
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_console_and_file(tmp_path: Path, _restore_root_logging) -> None:
    log_file = tmp_path / "logs" / "eventloopsim.log"
    setup_logging(level="WARNING", log_file=log_file)
    setup_logging(level="WARNING", log_file=log_file)  # idempotent: no duplicate handlers

    root = logging.getLogger()
    assert len(root.handlers) == 2

    logging.getLogger("eventloopsim.scheduler").debug("step: Idle()")
    for h in root.handlers:
        h.flush()

    text = log_file.read_text(encoding="utf-8")
    assert text.count("DEBUG eventloopsim.scheduler: step: Idle()") == 1
