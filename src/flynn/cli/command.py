# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Command descriptor shared by the registry, the dispatcher and ``help``."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..lib.core.errors import FlynnError

if TYPE_CHECKING:
    from ..lib.context import RuntimeContext

Handler = Callable[["RuntimeContext", argparse.Namespace, list[str]], None]

EXTRA_SUFFIX = " (extra)"


class Visibility(enum.Enum):
    """How ``flynn help`` lists a command."""

    LISTED = "listed"
    EXTRA = "extra"
    HIDDEN = "hidden"


class FlagError(FlynnError):
    """Command-line flags did not parse."""


class _CommandParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise FlagError(message)


@dataclass(frozen=True)
class Command:
    """One ``flynn`` subcommand."""

    usage: str
    """Usage line; the first word is the command name."""

    short: str = ""
    """One-line summary for ``flynn help``; ends in `` (extra)`` for the secondary list."""

    long: str = ""
    """Full description for ``flynn help <command>``."""

    run: Handler | None = None
    """Called as ``run(ctx, opts, args)``; ``None`` makes the command a help-only topic."""

    configure: Callable[[argparse.ArgumentParser], None] | None = None
    """Declares the command's own flags."""

    @property
    def name(self) -> str:
        return self.usage.split(" ", 1)[0]

    @property
    def runnable(self) -> bool:
        return self.run is not None

    @property
    def visibility(self) -> Visibility:
        if not self.short:
            return Visibility.HIDDEN
        if self.short.endswith(EXTRA_SUFFIX):
            return Visibility.EXTRA
        return Visibility.LISTED

    @property
    def short_extra(self) -> str:
        """``short`` without the `` (extra)`` marker."""
        return self.short.removesuffix(EXTRA_SUFFIX)

    def parser(self) -> argparse.ArgumentParser:
        """Build a fresh parser holding only this command's flags."""
        parser = _CommandParser(prog=f"flynn {self.name}", add_help=False)
        if self.configure is not None:
            self.configure(parser)
        parser.add_argument("arguments", nargs=argparse.REMAINDER)
        return parser

    def parse(self, argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
        """Split *argv* into parsed flags and leftover positional arguments.

        Flags must come before the first positional argument; everything from
        there on is passed through untouched.  A ``--`` ending the flags is
        dropped.  Raises ``FlagError``.
        """
        opts = self.parser().parse_args(argv)
        args = opts.arguments
        del opts.arguments
        if args[:1] == ["--"]:
            args = args[1:]
        return opts, args

    def format_help(self) -> str:
        lines = []
        if self.runnable:
            lines.append(f"Usage: flynn {self.usage}")
            lines.append("")
        lines.append(self.long.strip("\n"))
        return "\n".join(lines)
