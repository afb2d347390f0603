"""Pure ANSI color utilities for CLI diagnostics and help output."""

import os
import sys
from typing import TextIO


def supports_color(stream: TextIO | None = None) -> bool:
    """Check if *stream* (default: stdout) supports color output.

    Follows the NO_COLOR (https://no-color.org/) and FORCE_COLOR conventions.
    NO_COLOR always wins. FORCE_COLOR (when set and not ``"0"``) forces color
    on even when the stream is not a TTY. Otherwise falls back to ``isatty()``.
    """
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    stream = stream or sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def color(text: str, code: str, enabled: bool) -> str:
    """Wrap *text* in ANSI escape codes when *enabled* is True."""
    if not enabled:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def red(text: str, enabled: bool) -> str:
    """Return *text* in red (ANSI 31) when *enabled*."""
    return color(text, "31", enabled)


def bold(text: str, enabled: bool) -> str:
    """Return *text* in bold (ANSI 1) when *enabled*."""
    return color(text, "1", enabled)


def gray(text: str, enabled: bool) -> str:
    """Return *text* in gray (ANSI 90) when *enabled*."""
    return color(text, "90", enabled)
