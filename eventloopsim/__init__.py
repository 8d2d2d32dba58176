"""Headless step engine for the single-threaded event-loop model.

Stdlib only and UI-agnostic; the desktop client is a separate package.
"""

from __future__ import annotations

from eventloopsim.version import __version__

__all__ = ["__version__"]
