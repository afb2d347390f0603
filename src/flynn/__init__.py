"""flynn package.

Modules:
- flynn.cli: CLI entry point package (flynn): dispatcher, registry, commands
- flynn.lib.core: configuration file, paths, errors
- flynn.lib.git: git remote access and remote URL parsing
- flynn.lib.context: app / API URL resolution for one invocation
- flynn.lib._util, flynn.lib.util: internal helpers (ansi, logging)
"""

__all__ = ["cli", "lib"]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("flynn-cli")
except Exception:
    __version__ = "unknown"
