from __future__ import annotations

from eventloopsim.program import Program


class ProgramValidationError(ValueError):
    pass


def validate_program(program: Program) -> None:
    for idx, line in enumerate(program.lines):
        if not line.text.strip():
            raise ProgramValidationError(f"line {idx} has empty text")
        if line.is_print_statement and not line.output:
            raise ProgramValidationError(
                f"line {idx} is a print statement but has no output text"
            )
        if not line.is_print_statement and line.output is not None:
            raise ProgramValidationError(
                f"line {idx} has output text but is not a print statement"
            )

    seen: set[str] = set()
    # Sync tasks take the id "sync-<line index>"; seeds must not shadow them.
    for idx, line in enumerate(program.lines):
        if line.is_print_statement:
            seen.add(f"sync-{idx}")

    for seed in program.microtasks:
        if seed.task_id in seen:
            raise ProgramValidationError(f"duplicate task id '{seed.task_id}'")
        seen.add(seed.task_id)
        if seed.delay_ms is not None:
            raise ProgramValidationError(
                f"microtask '{seed.task_id}' must not have a delay"
            )

    for seed in program.macrotasks:
        if seed.task_id in seen:
            raise ProgramValidationError(f"duplicate task id '{seed.task_id}'")
        seen.add(seed.task_id)
        if seed.delay_ms is None:
            raise ProgramValidationError(
                f"macrotask '{seed.task_id}' requires delay_ms"
            )
        if seed.delay_ms < 0:
            raise ProgramValidationError(
                f"macrotask '{seed.task_id}' delay_ms must be >= 0 (got {seed.delay_ms})"
            )
