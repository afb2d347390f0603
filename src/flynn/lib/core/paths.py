# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Path resolution for the config file and the writable state directory."""

import os
from pathlib import Path

from platformdirs import user_data_dir as _user_data_dir

APP_NAME = "flynn"


def config_file_path() -> Path:
    """
    Location of the server list.

    Priority:
      1. FLYNN_CONFIG_FILE
      2. ~/.flynnrc
    """
    env = os.getenv("FLYNN_CONFIG_FILE")
    if env:
        return Path(env).expanduser()
    return Path.home() / ".flynnrc"


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. FLYNN_STATE_DIR
      2. platform user data dir (~/.local/share/flynn on Linux)
    """
    env = os.getenv("FLYNN_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return Path(_user_data_dir(APP_NAME))
