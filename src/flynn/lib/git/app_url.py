# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Extract the app name (and git host) from a flynn git remote URL.

Recognised shapes, all matched by one pattern:

- ``[ssh://]user@localhost[:port]/app``
- ``[ssh://]user@1.2.3.4[:port]/app``
- ``[ssh://]user@host:app`` (SCP style)

The pattern is deliberately loose: the last ``:`` or ``/`` delimited tail
wins, and the address dots are not escaped.  Existing remotes depend on
that, so keep it as is.
"""

import re

from ..core.errors import AppNotFoundError

_APP_FROM_REMOTE_URL_RE = re.compile(
    r"(?:ssh://)?(?:\w+)@"
    r"(?:localhost(?::\d+)?/|\d{1,3}.\d{1,3}.\d{1,3}.\d{1,3}(?::\d+)?/|.+:)"
    r"(.+)",
    re.ASCII,
)


def _match(url: str) -> tuple[str, re.Match]:
    url = url.strip("\r\n ")
    match = _APP_FROM_REMOTE_URL_RE.search(url)
    if match is None:
        raise AppNotFoundError(url)
    return url, match


def app_from_remote_url(url: str) -> str:
    """Return the app name carried by *url*; raise ``AppNotFoundError`` if none."""
    _url, match = _match(url)
    return match.group(1)


def git_host_from_remote_url(url: str) -> str:
    """Return the ``host[:port]`` part that precedes the app name in *url*.

    ``git@git.example.com:demoapp`` -> ``git.example.com``
    ``ssh://git@localhost:2222/demoapp`` -> ``localhost:2222``
    """
    url, match = _match(url)
    prefix = url[match.start() : match.start(1)]
    prefix = prefix.removeprefix("ssh://")
    host = prefix.split("@", 1)[1]
    return host[:-1]


def remote_url_for_app(git_host: str, app: str) -> str:
    """Build the SCP-style remote URL ``flynn create`` registers."""
    return f"git@{git_host}:{app}"
