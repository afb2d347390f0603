"""``flynn help``: command listing and per-command help."""

import argparse
import sys
from collections.abc import Mapping
from typing import TextIO

from ...lib._util.ansi import bold as _bold, gray as _gray, supports_color as _supports_color
from ...lib.context import RuntimeContext
from ...lib.core.errors import FlynnError
from ..command import Command, Visibility


def print_usage(commands: Mapping[str, Command], stream: TextIO | None = None) -> None:
    """Print the top-level usage with every listed command."""
    stream = stream or sys.stdout
    color_enabled = _supports_color(stream)
    width = max((len(c.name) for c in commands.values()), default=0)

    print("Usage: flynn [-a app] <command> [options] [arguments]", file=stream)
    print(file=stream)
    print(_bold("Commands:", color_enabled), file=stream)
    for cmd in commands.values():
        if cmd.visibility is Visibility.LISTED:
            print(f"    {cmd.name:<{width}}  {cmd.short}", file=stream)

    extra = [c for c in commands.values() if c.visibility is Visibility.EXTRA]
    if extra:
        print(file=stream)
        print(_bold("Additional commands:", color_enabled), file=stream)
        for cmd in extra:
            print(f"    {cmd.name:<{width}}  {cmd.short_extra}", file=stream)

    print(file=stream)
    print(_gray("Run 'flynn help <command>' for details.", color_enabled), file=stream)


def run_help(ctx: RuntimeContext, opts: argparse.Namespace, args: list[str]) -> None:
    from ..registry import COMMANDS

    if not args:
        print_usage(COMMANDS)
        return

    topic = args[0]
    cmd = COMMANDS.get(topic)
    if cmd is None:
        raise FlynnError(f"unknown help topic: {topic}. Run 'flynn help'.")
    print(cmd.format_help())


CMD_HELP = Command(
    usage="help [<command>]",
    short="show help",
    long="Without an argument, lists the available commands. "
    "With a command name, shows that command's usage and description.",
    run=run_help,
)
