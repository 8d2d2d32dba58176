from __future__ import annotations

"""Repo-root convenience shim for launching the EventLoopSim UI.

    python runner.py

It delegates to the canonical UI entry point:

    python -m eventloopsim_ui
"""

import sys


def main() -> int:
    """Launch the EventLoopSim UI.

    Arguments are forwarded exactly as in `python -m eventloopsim_ui`.
    """

    from eventloopsim_ui.__main__ import main as ui_main

    # Make argv look like the canonical entry point (`python -m eventloopsim_ui`),
    # while preserving any user-provided arguments.
    sys.argv = ["eventloopsim_ui", *sys.argv[1:]]

    return ui_main()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
