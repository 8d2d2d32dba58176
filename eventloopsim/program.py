from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from eventloopsim.types import ProgramLine, SeedTask

_QUOTED_LITERAL = re.compile(r"([\"'`])(.*?)\1")


def print_output_for(text: str) -> str:
    """Text a print line writes: its first quoted literal, else the whole line."""

    m = _QUOTED_LITERAL.search(text)
    if m is not None and m.group(2):
        return m.group(2)
    return text.strip()


@dataclass(frozen=True)
class Program:
    lines: tuple[ProgramLine, ...]
    microtasks: tuple[SeedTask, ...] = ()
    macrotasks: tuple[SeedTask, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    @staticmethod
    def from_json(obj: dict[str, Any]) -> "Program":
        lines: list[ProgramLine] = []
        for item in obj.get("lines", []):
            if isinstance(item, str):
                lines.append(ProgramLine(text=item))
            elif isinstance(item, dict):
                text = str(item["text"])
                is_print = item.get("isPrintStatement", False)
                if not isinstance(is_print, bool):
                    raise TypeError("isPrintStatement must be a boolean")
                output = item.get("output")
                if output is None and is_print:
                    output = print_output_for(text)
                lines.append(
                    ProgramLine(
                        text=text,
                        is_print_statement=is_print,
                        output=str(output) if output is not None else None,
                    )
                )
            else:
                raise TypeError("program lines must be strings or objects")

        def _parse_seed(seed: Any) -> SeedTask:
            if not isinstance(seed, dict):
                raise TypeError("seeded tasks must be objects")
            output = seed.get("output")
            delay = seed.get("delay_ms")
            return SeedTask(
                task_id=str(seed["id"]),
                label=str(seed.get("label", seed["id"])),
                output=str(output) if output is not None else None,
                delay_ms=int(delay) if delay is not None else None,
            )

        return Program(
            lines=tuple(lines),
            microtasks=tuple(_parse_seed(s) for s in obj.get("microtasks", [])),
            macrotasks=tuple(_parse_seed(s) for s in obj.get("macrotasks", [])),
        )


def demo_program() -> Program:
    """The fixed four-line teaching script.

    Output order is A, D, C, B: synchronous prints first, then the promise
    callback, then the timer callback once its delay has run down.
    """

    return Program(
        lines=(
            ProgramLine('console.log("A")', is_print_statement=True, output="A"),
            ProgramLine('setTimeout(() => console.log("B"), 2000)'),
            ProgramLine('Promise.resolve().then(() => console.log("C"))'),
            ProgramLine('console.log("D")', is_print_statement=True, output="D"),
        ),
        microtasks=(SeedTask("micro-1", "Promise Callback", output="C"),),
        macrotasks=(
            SeedTask("macro-1", "Timer Callback", output="B", delay_ms=2000),
        ),
    )
