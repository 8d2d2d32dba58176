from __future__ import annotations

import csv
import json
from io import StringIO
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from eventloopsim.metrics import ran_ms, waited_ms
from eventloopsim.types import Task

HISTORY_COLUMNS = [
    "task_id",
    "label",
    "kind",
    "output",
    "created_at_ms",
    "started_at_ms",
    "ended_at_ms",
    "waited_ms",
    "ran_ms",
]


def history_rows(history: Sequence[Task]) -> list[list[Any]]:
    return [
        [
            t.task_id,
            t.label,
            t.kind.value,
            t.output or "",
            t.created_at_ms,
            t.started_at_ms,
            t.ended_at_ms,
            waited_ms(t),
            ran_ms(t),
        ]
        for t in history
    ]


def history_csv_text(history: Sequence[Task]) -> str:
    buf = StringIO()
    w = csv.writer(buf)
    w.writerow(HISTORY_COLUMNS)
    w.writerows(history_rows(history))
    return buf.getvalue()


def write_history_csv(path: Path, history: Sequence[Task]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        f.write(history_csv_text(history))


def summary_json_text(summary: dict[str, Any]) -> str:
    return json.dumps(summary, indent=2, sort_keys=True)


def write_summary_json(path: Path, summary: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(summary_json_text(summary), encoding="utf-8")


def output_log_text(lines: Sequence[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def write_output_log(path: Path, lines: Sequence[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(output_log_text(lines), encoding="utf-8")
