# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Read and write git remotes of the current working tree."""

import os
import subprocess
from pathlib import Path

from ..core.errors import GitError, RemoteNotFoundError
from ..util.logging_utils import _log_debug

DEFAULT_REMOTE = "flynn"

# `git config <key>` exits with 1 when the key is not set.
_GIT_CONFIG_KEY_MISSING = 1


def _display_dir(cwd: Path | None) -> str:
    """Directory git runs in, for messages.  "." if the cwd is gone."""
    if cwd is not None:
        return str(cwd)
    try:
        return os.getcwd()
    except OSError:
        return "."


def _run_git(args: list[str], cwd: Path | None) -> subprocess.CompletedProcess:
    cmd = ["git", *args]
    _log_debug(f"git: {' '.join(cmd)} (cwd={_display_dir(cwd)})")
    try:
        return subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
    except OSError as e:
        raise GitError(f"failed to run git: {e}") from e


def url_from_remote(remote: str, *, cwd: Path | None = None) -> str:
    """Return the configured URL of *remote*, exactly as git prints it.

    The value keeps git's trailing newline; trim it before matching.

    Raises ``RemoteNotFoundError`` when the remote does not exist and
    ``GitError`` for any other git failure.
    """
    result = _run_git(["config", f"remote.{remote}.url"], cwd)
    if result.returncode == _GIT_CONFIG_KEY_MISSING:
        raise RemoteNotFoundError(remote, _display_dir(cwd))
    if result.returncode != 0:
        detail = (result.stderr or "").strip() or f"exit status {result.returncode}"
        raise GitError(f"git config remote.{remote}.url failed: {detail}")
    return result.stdout


def add_remote(remote: str, url: str, *, cwd: Path | None = None) -> None:
    """Add a remote named *remote* pointing at *url*."""
    result = _run_git(["remote", "add", remote, url], cwd)
    if result.returncode != 0:
        detail = (result.stderr or "").strip() or f"exit status {result.returncode}"
        raise GitError(f"git remote add {remote} failed: {detail}")


class GitRemotes:
    """Remote accessor bound to one working directory (``None`` = process cwd)."""

    def __init__(self, cwd: Path | None = None) -> None:
        self.cwd = cwd

    def url_from_remote(self, remote: str) -> str:
        return url_from_remote(remote, cwd=self.cwd)

    def add_remote(self, remote: str, url: str) -> None:
        add_remote(remote, url, cwd=self.cwd)
