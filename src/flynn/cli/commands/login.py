"""``flynn login``: add a server to the config file."""

import argparse

from ...lib.context import RuntimeContext
from ...lib.core.config import Server, save_config
from ...lib.core.errors import FlynnError
from ..command import Command


def _prompt(message: str) -> str:
    """Read the first whitespace-delimited word typed after *message*."""
    try:
        line = input(message)
    except EOFError:
        raise FlynnError("couldn't retrieve user input: unexpected end of input") from None
    words = line.split()
    if not words:
        raise FlynnError("couldn't retrieve user input: unexpected newline")
    return words[0]


def run_login(ctx: RuntimeContext, opts: argparse.Namespace, args: list[str]) -> None:
    server = Server(
        git_host=_prompt("Git Host: "),
        api_url=_prompt("Api Url: "),
        api_key=_prompt("Api Key: "),
        api_tls_pin=_prompt("Api TLS Pin: "),
    )
    ctx.config.add_server(server)
    save_config(ctx.config)
    print(f"Saved server {server.git_host} ({server.api_url})")


CMD_LOGIN = Command(
    usage="login",
    short="login to a Flynn instance",
    long="Login to a Flynn instance by providing some required information: "
    "the git host, the API URL, the API key and the API TLS pin.",
    run=run_login,
)
