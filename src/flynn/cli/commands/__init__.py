# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""CLI command modules.

Each module defines one or more ``CMD_*`` ``Command`` objects whose handler is
called as ``run(ctx, opts, args)``.  ``flynn.cli.registry`` collects them.
"""
