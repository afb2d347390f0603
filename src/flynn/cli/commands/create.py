"""``flynn create``: point a ``flynn`` git remote at a new app."""

import argparse

from ...lib.context import RuntimeContext
from ...lib.core.errors import FlynnError
from ...lib.git.app_url import remote_url_for_app
from ...lib.git.remote import DEFAULT_REMOTE
from ..command import Command


def run_create(ctx: RuntimeContext, opts: argparse.Namespace, args: list[str]) -> None:
    if len(args) != 1:
        raise FlynnError(f"usage: flynn {CMD_CREATE.usage}")
    if not ctx.config.servers:
        raise FlynnError("no servers configured; run 'flynn login' first")

    url = remote_url_for_app(ctx.config.servers[0].git_host, args[0])
    ctx.git.add_remote(DEFAULT_REMOTE, url)
    print(f"Created git remote {DEFAULT_REMOTE}: {url}")


CMD_CREATE = Command(
    usage="create <app>",
    short="create a Flynn app",
    long="Creates a Flynn remote in your current git repository to push an app to.",
    run=run_create,
)
