"""PySide6 desktop client for the EventLoopSim step engine.

This package is a *client* of the headless core:

- Core stays UI-agnostic (no Qt imports under `eventloopsim/`).
- The UI owns the wall-clock feed (a QTimer) and the Next Step trigger.

Run from source:

    python -m eventloopsim_ui
"""

from __future__ import annotations

from eventloopsim.version import __version__

__all__ = ["__version__"]
