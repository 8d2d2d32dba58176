from __future__ import annotations

import csv
import json
import math
from pathlib import Path

from eventloopsim.clock import ManualClock
from eventloopsim.io import (
    HISTORY_COLUMNS,
    output_log_text,
    summary_json_text,
    write_history_csv,
    write_output_log,
    write_summary_json,
)
from eventloopsim.metrics import (
    format_latency,
    format_summary_text,
    ran_ms,
    summarize_history,
    waited_ms,
)
from eventloopsim.program import demo_program
from eventloopsim.scheduler import Scheduler
from eventloopsim.types import Task, TaskKind


def _finished_demo() -> Scheduler:
    clock = ManualClock(start_ms=0.0)
    sched = Scheduler(demo_program(), clock=clock)
    for _ in range(8):
        clock.advance(100)
        sched.step()
    sched.tick(2000)
    for _ in range(2):
        clock.advance(100)
        sched.step()
    return sched


def test_waited_and_ran() -> None:
    t = Task("x", "X", TaskKind.MICRO, created_at_ms=10.0)
    assert waited_ms(t) is None and ran_ms(t) is None
    assert format_latency(t) == "waited: -, ran: -"

    t2 = Task("x", "X", TaskKind.MICRO, created_at_ms=10.0, started_at_ms=250.0, ended_at_ms=300.4)
    assert waited_ms(t2) == 240.0
    assert math.isclose(ran_ms(t2), 50.4)
    assert format_latency(t2) == "waited: 240 ms, ran: 50 ms"


def test_summarize_demo_history() -> None:
    s = _finished_demo().state()
    summary = summarize_history(s.history, s.output_log)

    assert summary["tasks_executed"] == 4
    assert summary["tasks_by_kind"] == {"sync": 2, "micro": 1, "macro": 1}
    assert summary["completion_order"] == ["sync-0", "sync-3", "micro-1", "macro-1"]
    assert summary["output"] == ["A", "D", "C", "B"]

    # Sync tasks start when scheduled; every task runs for one 100 ms step.
    assert summary["latency_ms"]["sync"]["waited"]["p50"] == 0.0
    assert summary["latency_ms"]["sync"]["ran"]["p99"] == 100.0
    # Microtask seeded at t=0, picked up on step 7 (t=700).
    assert summary["latency_ms"]["micro"]["waited"]["p50"] == 700.0
    assert summary["latency_ms"]["macro"]["waited"]["p50"] == 900.0

    text = format_summary_text(summary)
    assert "Tasks executed: 4" in text
    assert "Output: A D C B" in text
    assert "sync-0 > sync-3 > micro-1 > macro-1" in text


def test_summarize_empty_history() -> None:
    summary = summarize_history([])
    assert summary["tasks_executed"] == 0
    assert math.isnan(summary["latency_ms"]["macro"]["waited"]["p50"])
    assert "Output: (none)" in format_summary_text(summary)


def test_writers_round_trip(tmp_path: Path) -> None:
    s = _finished_demo().state()

    csv_path = tmp_path / "out" / "history.csv"
    write_history_csv(csv_path, s.history)
    with csv_path.open(encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == HISTORY_COLUMNS
    assert [r[0] for r in rows[1:]] == ["sync-0", "sync-3", "micro-1", "macro-1"]
    assert rows[4][2] == "macro" and rows[4][3] == "B"

    json_path = tmp_path / "out" / "summary.json"
    write_summary_json(json_path, summarize_history(s.history, s.output_log))
    assert json.loads(json_path.read_text(encoding="utf-8"))["output"] == ["A", "D", "C", "B"]

    log_path = tmp_path / "out" / "output.txt"
    write_output_log(log_path, s.output_log)
    assert log_path.read_text(encoding="utf-8") == "A\nD\nC\nB\n"


def test_text_helpers_match_written_files(tmp_path: Path) -> None:
    s = _finished_demo().state()
    summary = summarize_history(s.history, s.output_log)

    assert output_log_text(s.output_log) == "A\nD\nC\nB\n"
    assert output_log_text(()) == ""

    json_path = tmp_path / "summary.json"
    write_summary_json(json_path, summary)
    assert json_path.read_text(encoding="utf-8") == summary_json_text(summary)
    assert json.loads(summary_json_text(summary))["tasks_executed"] == 4
