# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""The fixed set of ``flynn`` subcommands, in ``flynn help`` order."""

from .command import Command
from .commands.api import CMD_DOMAIN, CMD_LOGS, CMD_PS, CMD_RUN, CMD_SCALE
from .commands.create import CMD_CREATE
from .commands.help import CMD_HELP
from .commands.login import CMD_LOGIN

_ALL_COMMANDS: list[Command] = [
    CMD_HELP,
    CMD_LOGIN,
    CMD_CREATE,
    CMD_RUN,
    CMD_PS,
    CMD_LOGS,
    CMD_SCALE,
    CMD_DOMAIN,
]


def build_registry(commands: list[Command]) -> dict[str, Command]:
    """Key *commands* by name, keeping order.  Duplicate names are an error."""
    registry: dict[str, Command] = {}
    for cmd in commands:
        if cmd.name in registry:
            raise RuntimeError(f"Duplicate command name: {cmd.name!r}")
        registry[cmd.name] = cmd
    return registry


COMMANDS: dict[str, Command] = build_registry(_ALL_COMMANDS)
"""All known commands, keyed by name."""
