import os
import subprocess
import tempfile
import types
import unittest.mock
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from flynn.lib.core.config import Config, Server
from flynn.lib.core.errors import RemoteNotFoundError


class FakeRemotes:
    """In-memory stand-in for ``GitRemotes``; URLs keep git's trailing newline."""

    def __init__(self, remotes: dict[str, str] | None = None, cwd: str = "/work/repo") -> None:
        self.remotes = dict(remotes or {})
        self.cwd = cwd
        self.added: list[tuple[str, str]] = []

    def url_from_remote(self, remote: str) -> str:
        if remote not in self.remotes:
            raise RemoteNotFoundError(remote, self.cwd)
        return self.remotes[remote] + "\n"

    def add_remote(self, remote: str, url: str) -> None:
        self.added.append((remote, url))
        self.remotes[remote] = url


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["git"], returncode=returncode, stdout=stdout, stderr=stderr)


def make_config(*servers: tuple[str, str]) -> Config:
    """Build a Config from ``(git_host, api_url)`` pairs."""
    return Config(servers=[Server(git_host=h, api_url=u) for h, u in servers])


@contextmanager
def config_env(
    toml_text: str | None = "",
    *,
    extra_env: dict[str, str] | None = None,
    clear_env: bool = False,
) -> Iterator[types.SimpleNamespace]:
    """Create a temp config file (``None`` = no file) and point FLYNN_CONFIG_FILE at it.

    Yields a namespace with: base, config_file, state_dir.
    """
    with tempfile.TemporaryDirectory() as td:
        base = Path(td)
        config_file = base / "flynnrc"
        state_dir = base / "state"
        if toml_text is not None:
            config_file.write_text(toml_text, encoding="utf-8")

        env_vars = {
            "FLYNN_CONFIG_FILE": str(config_file),
            "FLYNN_STATE_DIR": str(state_dir),
        }
        if extra_env:
            env_vars.update(extra_env)

        with unittest.mock.patch.dict(os.environ, env_vars, clear=clear_env):
            yield types.SimpleNamespace(base=base, config_file=config_file, state_dir=state_dir)
