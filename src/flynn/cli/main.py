#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""``flynn [-a APP] <command> [options] [arguments]``

Startup order: load the config file, build the runtime context (consumes
``-a`` and resolves the API URL), then dispatch to the command.
"""

import sys
from collections.abc import Mapping, Sequence

from ..lib._util.ansi import red as _red, supports_color as _supports_color
from ..lib.context import RuntimeContext, build_context
from ..lib.core.config import load_config
from ..lib.core.errors import ConfigError, FlynnError
from .command import Command, FlagError
from .commands.help import print_usage
from .registry import COMMANDS

EXIT_FATAL = 1
EXIT_USAGE = 2


def _report(message: str) -> None:
    print(_red(f"flynn: {message}", _supports_color(sys.stderr)), file=sys.stderr)


def dispatch(
    args: Sequence[str],
    ctx: RuntimeContext,
    commands: Mapping[str, Command] | None = None,
) -> int:
    """Run the command named by ``args[0]`` and return the exit status.

    This is the single place where handler errors become an exit status.
    """
    commands = COMMANDS if commands is None else commands
    if not args:
        print_usage(commands, sys.stderr)
        return EXIT_USAGE

    name = args[0]
    for cmd in commands.values():
        if cmd.name != name or not cmd.runnable:
            continue
        try:
            opts, rest = cmd.parse(list(args[1:]))
        except FlagError as e:
            print(f"flynn {name}: {e}", file=sys.stderr)
            print(cmd.format_help(), file=sys.stderr)
            return EXIT_USAGE
        try:
            cmd.run(ctx, opts, rest)
        except FlynnError as e:
            _report(str(e))
            return EXIT_FATAL
        return 0

    print(f"Unknown command: {name}", file=sys.stderr)
    print_usage(commands, sys.stderr)
    return EXIT_USAGE


def main(argv: Sequence[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = load_config()
    except ConfigError as e:
        _report(f"failed to load config file: {e}")
        raise SystemExit(EXIT_USAGE)

    ctx, args = build_context(argv, config)
    status = dispatch(args, ctx)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
