"""Commands that act on an app through the flynn API.

They are registered so that ``flynn help`` documents them and so that app and
API URL resolution runs for them, but this client does not speak the API
protocol: once the target is known they stop with an error naming it.
"""

import argparse

from ...lib.context import RuntimeContext
from ...lib.core.errors import FlynnError
from ...lib.util.logging_utils import _log_debug
from ..command import Command


def _run_remote(name: str):
    def run(ctx: RuntimeContext, opts: argparse.Namespace, args: list[str]) -> None:
        app = ctx.must_app()
        _log_debug(f"{name}: app={app} api={ctx.api_url} opts={vars(opts)} args={args}")
        raise FlynnError(
            f"{name}: remote API calls are not supported by this client "
            f"(app {app}, api {ctx.api_url})"
        )

    return run


def _configure_run(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-d", dest="detached", action="store_true", help="run in the background")


def _configure_logs(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-s", dest="split", action="store_true", help="split stderr from stdout")


CMD_RUN = Command(
    usage="run [-d] <command> [<argument>...]",
    short="run a job",
    long="Run a job inside the app's release. With -d, the job is started "
    "in the background and its id is printed.",
    run=_run_remote("run"),
    configure=_configure_run,
)

CMD_PS = Command(
    usage="ps",
    short="list jobs",
    long="Lists the jobs running for the app.",
    run=_run_remote("ps"),
)

CMD_LOGS = Command(
    usage="logs [-s] <job>",
    short="get job logs",
    long="Streams the log output of a job. With -s, stderr is kept separate.",
    run=_run_remote("logs"),
    configure=_configure_logs,
)

CMD_SCALE = Command(
    usage="scale <type>=<qty>...",
    short="change formation",
    long="Scales the app's process types, e.g. 'flynn scale web=2 worker=1'.",
    run=_run_remote("scale"),
)

CMD_DOMAIN = Command(
    usage="domain <domain>",
    short="add a domain (extra)",
    long="Routes an additional domain to the app.",
    run=_run_remote("domain"),
)
