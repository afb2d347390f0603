# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by the flynn service layer.

Library code raises these and never exits the process.  The CLI entry point
(``flynn.cli.main``) is the only place that turns them into ``SystemExit``.
"""

from pathlib import Path


class FlynnError(Exception):
    """Base class for every error the CLI reports to the user."""


class GitError(FlynnError):
    """Running ``git`` failed for a reason other than a missing key."""


class RemoteNotFoundError(GitError):
    """The named git remote is not configured in the working directory."""

    def __init__(self, remote: str, directory: str) -> None:
        super().__init__(f"could not find git remote {remote} in {directory}")
        self.remote = remote
        self.directory = directory


class AppNotFoundError(FlynnError):
    """A remote URL does not carry a recognisable app name."""

    def __init__(self, url: str) -> None:
        super().__init__(f"could not find app name in {url} git remote")
        self.url = url


class NoAppContextError(FlynnError):
    """No app could be resolved from the flag, the environment or git."""


class ConfigError(FlynnError):
    """The configuration file could not be read, parsed or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


class FatalError(FlynnError):
    """A command cannot continue; the CLI exits with status 1."""
