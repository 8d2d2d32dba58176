from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from typing import Any

from eventloopsim.types import Task, TaskKind


def waited_ms(task: Task) -> float | None:
    if task.started_at_ms is None:
        return None
    return task.started_at_ms - task.created_at_ms


def ran_ms(task: Task) -> float | None:
    if task.started_at_ms is None or task.ended_at_ms is None:
        return None
    return task.ended_at_ms - task.started_at_ms


def _fmt_ms(value: float | None) -> str:
    if value is None:
        return "-"
    return f"{int(round(value))} ms"


def format_latency(task: Task) -> str:
    return f"waited: {_fmt_ms(waited_ms(task))}, ran: {_fmt_ms(ran_ms(task))}"


def _percentile_sorted(values_sorted: list[float], p: int) -> float:
    if not values_sorted:
        return math.nan
    if p <= 0:
        return float(values_sorted[0])
    if p >= 100:
        return float(values_sorted[-1])

    n = len(values_sorted)
    pos = (p / 100.0) * (n - 1)
    lo = int(math.floor(pos))
    hi = int(math.ceil(pos))
    if lo == hi:
        return float(values_sorted[lo])
    frac = pos - lo
    return float(values_sorted[lo] * (1.0 - frac) + values_sorted[hi] * frac)


def _percentiles(values: list[float], ps: list[int]) -> dict[str, float]:
    if not values:
        return {f"p{p}": math.nan for p in ps}
    values_sorted = sorted(float(x) for x in values)
    return {f"p{p}": _percentile_sorted(values_sorted, p) for p in ps}


def summarize_history(
    history: Sequence[Task], output_log: Sequence[str] = ()
) -> dict[str, Any]:
    counts = Counter(t.kind.value for t in history)

    latency: dict[str, Any] = {}
    for kind in TaskKind:
        of_kind = [t for t in history if t.kind is kind]
        waited = [w for w in (waited_ms(t) for t in of_kind) if w is not None]
        ran = [r for r in (ran_ms(t) for t in of_kind) if r is not None]
        latency[kind.value] = {
            "waited": _percentiles(waited, [50, 90, 99]),
            "ran": _percentiles(ran, [50, 90, 99]),
        }

    return {
        "tasks_executed": len(history),
        "tasks_by_kind": {k.value: int(counts.get(k.value, 0)) for k in TaskKind},
        "completion_order": [t.task_id for t in history],
        "output": list(output_log),
        "latency_ms": latency,
    }


def format_summary_text(summary: dict[str, Any]) -> str:
    """Plain-text rendering of `summarize_history()` output."""

    by_kind = summary.get("tasks_by_kind", {})
    lines: list[str] = [
        f"Tasks executed: {summary.get('tasks_executed')}",
        "By kind: "
        + ", ".join(f"{k}={by_kind.get(k)}" for k in ("sync", "micro", "macro")),
        f"Output: {' '.join(summary.get('output', [])) or '(none)'}",
        f"Completion order: {' > '.join(summary.get('completion_order', [])) or '(none)'}",
        "",
    ]
    lat = summary.get("latency_ms", {})
    for kind in ("sync", "micro", "macro"):
        k = lat.get(kind, {})
        w = k.get("waited", {})
        r = k.get("ran", {})
        lines.append(
            f"{kind}: waited p50={w.get('p50')}, p90={w.get('p90')}, p99={w.get('p99')}; "
            f"ran p50={r.get('p50')}, p90={r.get('p90')}, p99={r.get('p99')}"
        )
    return "\n".join(lines)
