# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Configured servers, loaded from and saved to the flynn config file.

The file is TOML with one ``[[Servers]]`` table per server::

    [[Servers]]
    GitHost = "git.example.com"
    ApiUrl = "https://api.example.com"
    ApiKey = "..."
    ApiTlsPin = "..."

It is read once at startup and rewritten in full after a change.  There is
no locking; concurrent invocations race and the last writer wins.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from .errors import ConfigError
from .paths import config_file_path

# Persisted key for each Server attribute, in file order.
_FIELDS: list[tuple[str, str]] = [
    ("git_host", "GitHost"),
    ("api_url", "ApiUrl"),
    ("api_key", "ApiKey"),
    ("api_tls_pin", "ApiTlsPin"),
]


@dataclass
class Server:
    """One configured flynn instance."""

    git_host: str = ""
    api_url: str = ""
    api_key: str = ""
    api_tls_pin: str = ""

    @classmethod
    def from_table(cls, table: dict[str, Any]) -> "Server":
        values = {}
        for attr, key in _FIELDS:
            value = table.get(key, "")
            if not isinstance(value, str):
                raise TypeError(f"{key} must be a string, got {type(value).__name__}")
            values[attr] = value
        return cls(**values)

    def to_table(self) -> dict[str, str]:
        return {key: getattr(self, attr) for attr, key in _FIELDS}


@dataclass
class Config:
    """Ordered list of servers plus the file they belong to."""

    servers: list[Server] = field(default_factory=list)
    path: Path | None = None

    def add_server(self, server: Server) -> None:
        self.servers.append(server)


def load_config(path: Path | None = None) -> Config:
    """Read the server list from *path* (default: ``config_file_path()``).

    A missing or malformed file raises ``ConfigError``; the caller decides
    whether that is fatal.
    """
    path = path or config_file_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigError(path, "config file not found (an empty file is a valid config)") from None
    except OSError as e:
        raise ConfigError(path, f"cannot read config file ({e.strerror or e})") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, f"invalid config file ({e})") from e

    tables = data.get("Servers", [])
    if not isinstance(tables, list) or not all(isinstance(t, dict) for t in tables):
        raise ConfigError(path, "Servers must be an array of tables")
    try:
        servers = [Server.from_table(t) for t in tables]
    except TypeError as e:
        raise ConfigError(path, f"invalid server entry ({e})") from e
    return Config(servers=servers, path=path)


def save_config(config: Config, path: Path | None = None) -> None:
    """Rewrite the whole config file with the servers in *config*."""
    path = path or config.path or config_file_path()
    payload = {"Servers": [s.to_table() for s in config.servers]}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            tomli_w.dump(payload, f)
    except OSError as e:
        raise ConfigError(path, f"cannot write config file ({e.strerror or e})") from e
    config.path = path
