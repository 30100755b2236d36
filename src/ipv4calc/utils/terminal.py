"""Terminal colour helpers for CLI output.

Colour is on for interactive terminals unless NO_COLOR is set, and can
be forced either way with the ``--color`` option.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

GREEN = "32"
RED = "91"

COLOR_MODES = ("auto", "always", "never")


def use_color(stream: TextIO = sys.stdout, mode: str = "auto") -> bool:
    """Decide whether to emit colour on ``stream`` for the given mode."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, code: str, enabled: bool) -> str:
    """Wrap text in an ANSI colour escape if enabled."""
    if not enabled:
        return text
    return f"\033[{code}m{text}\033[0m"
