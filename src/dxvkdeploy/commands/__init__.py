#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the dxvkdeploy CLI."""

from __future__ import annotations

from dxvkdeploy.commands.inspect import inspect_command
from dxvkdeploy.commands.install import install_command
from dxvkdeploy.commands.packages import packages_command
from dxvkdeploy.commands.remove import remove_command

__all__ = [
    "inspect_command",
    "install_command",
    "packages_command",
    "remove_command",
]

# 🌶️📦🔚
