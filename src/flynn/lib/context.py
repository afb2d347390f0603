# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Resolve which app and which API endpoint an invocation targets.

``build_context`` runs once per process, before dispatch:

1. strip a leading ``-a APP`` from argv (APP may name a git remote, in which
   case the app is read from that remote's URL);
2. pick the API base URL: ``FLYNN_API_URL`` if set, otherwise the ``ApiUrl``
   of the configured server whose ``GitHost`` matches the host of the
   ``flynn`` git remote, otherwise ``DEFAULT_API_URL``.

The app itself is resolved lazily by handlers through
``RuntimeContext.resolve_app()`` / ``must_app()``:

    -a flag  >  FLYNN_APP  >  app name in the ``flynn`` remote URL
"""

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from .core.config import Config
from .core.errors import FatalError, FlynnError, NoAppContextError
from .git.app_url import app_from_remote_url, git_host_from_remote_url
from .git.remote import DEFAULT_REMOTE, GitRemotes
from .util.logging_utils import _log_debug

DEFAULT_API_URL = "http://localhost:1200"

API_URL_ENV = "FLYNN_API_URL"
APP_ENV = "FLYNN_APP"


class RemoteAccessor(Protocol):
    def url_from_remote(self, remote: str) -> str: ...

    def add_remote(self, remote: str, url: str) -> None: ...


@dataclass(frozen=True)
class RuntimeContext:
    """Everything a command handler needs to know about this invocation."""

    config: Config
    api_url: str = DEFAULT_API_URL
    flag_app: str = ""
    env: Mapping[str, str] = field(default_factory=dict)
    git: RemoteAccessor = field(default_factory=GitRemotes)

    def resolve_app(self) -> str:
        """Return the app name; raise ``NoAppContextError`` if none resolves."""
        if self.flag_app:
            _log_debug(f"app: {self.flag_app!r} from -a")
            return self.flag_app

        app = self.env.get(APP_ENV, "")
        if app:
            _log_debug(f"app: {app!r} from {APP_ENV}")
            return app

        try:
            app = app_from_remote_url(self.git.url_from_remote(DEFAULT_REMOTE))
        except FlynnError as e:
            raise NoAppContextError(
                "no app found: pass -a APP, set FLYNN_APP, "
                f'or add a "{DEFAULT_REMOTE}" git remote ({e})'
            ) from e
        _log_debug(f"app: {app!r} from git remote {DEFAULT_REMOTE}")
        return app

    def must_app(self) -> str:
        """Like ``resolve_app`` but a failure ends the command."""
        try:
            return self.resolve_app()
        except NoAppContextError as e:
            raise FatalError(str(e)) from e


def split_app_flag(argv: Sequence[str]) -> tuple[str, list[str]]:
    """Split a leading ``-a VALUE`` off *argv*."""
    if len(argv) >= 2 and argv[0] == "-a":
        return argv[1], list(argv[2:])
    return "", list(argv)


def resolve_flag_app(value: str, git: RemoteAccessor) -> str:
    """Treat *value* as a remote name first, falling back to the literal app."""
    try:
        app = app_from_remote_url(git.url_from_remote(value))
    except FlynnError:
        return value
    _log_debug(f"-a {value}: remote resolved to app {app!r}")
    return app


def resolve_api_url(config: Config, env: Mapping[str, str], git: RemoteAccessor) -> str:
    """Return the API base URL for this invocation.  Never raises."""
    override = env.get(API_URL_ENV, "")
    if override:
        _log_debug(f"api url: {API_URL_ENV} override")
        return override.rstrip("/")

    try:
        host = git_host_from_remote_url(git.url_from_remote(DEFAULT_REMOTE))
    except FlynnError as e:
        _log_debug(f"api url: default ({e})")
        return DEFAULT_API_URL

    api_url = DEFAULT_API_URL
    # Every match overwrites the previous one: the last matching server wins.
    for server in config.servers:
        if server.git_host == host:
            api_url = server.api_url
    _log_debug(f"api url: {api_url} (git host {host})")
    return api_url


def build_context(
    argv: Sequence[str],
    config: Config,
    env: Mapping[str, str] | None = None,
    git: RemoteAccessor | None = None,
) -> tuple[RuntimeContext, list[str]]:
    """Consume the ``-a`` prefix and resolve the API URL.

    Returns the context and the arguments left for the dispatcher.
    """
    env = dict(os.environ if env is None else env)
    git = git or GitRemotes()

    flag_app, rest = split_app_flag(argv)
    if flag_app:
        flag_app = resolve_flag_app(flag_app, git)

    ctx = RuntimeContext(
        config=config,
        api_url=resolve_api_url(config, env, git),
        flag_app=flag_app,
        env=env,
        git=git,
    )
    return ctx, rest
