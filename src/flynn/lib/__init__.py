"""Service layer shared by the CLI commands.

- ``core``: config file, paths, errors
- ``git``: git remotes and remote URL parsing
- ``context``: app and API URL resolution
"""
