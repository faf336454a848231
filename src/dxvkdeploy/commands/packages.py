#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Packages command for the dxvkdeploy CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from dxvkdeploy.console import get_command_logger
from dxvkdeploy.exceptions import DeployError, PackageNotFoundError
from dxvkdeploy.packages import find_package_directories, missing_package_files

# Get structured logger for this command
log = get_command_logger("packages")


@click.command("packages")
@click.argument(
    "root",
    type=click.Path(resolve_path=True),
    required=True,
)
@click.pass_context
def packages_command(ctx: click.Context, root: str) -> None:
    """List DXVK packages under ROOT in selection order."""
    root_path = Path(root)

    try:
        packages = find_package_directories(root_path)
        if not packages:
            raise PackageNotFoundError(root_path)
    except DeployError as e:
        log.error("Package lookup failed", error=str(e), root=str(root_path))
        perr(f"❌ {e}")
        ctx.exit(e.exit_code)

    selected = packages[-1]
    pout(f"📦 DXVK packages in {root_path}:")
    for package in reversed(packages):
        marker = "*" if package == selected else " "
        pout(f" {marker} {package.name}")
        for missing in missing_package_files(package):
            pout(f"      missing: {missing.as_posix()}")


# 🌶️📦🔚
