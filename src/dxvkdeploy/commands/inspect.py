#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Inspect command for the dxvkdeploy CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from dxvkdeploy.console import get_command_logger
from dxvkdeploy.deploy import profile_executable
from dxvkdeploy.exceptions import DeployError, UnsupportedVersionError

# Get structured logger for this command
log = get_command_logger("inspect")


@click.command("inspect")
@click.argument(
    "exe",
    type=click.Path(resolve_path=True),
    required=True,
)
@click.pass_context
def inspect_command(ctx: click.Context, exe: str) -> None:
    """Show the architecture and Direct3D version of an executable."""
    exe_path = Path(exe)
    log.debug("Inspecting executable", exe=str(exe_path))

    try:
        profile = profile_executable(exe_path)
    except DeployError as e:
        log.error("Inspection failed", error=str(e), code=e.code, exe=str(exe_path))
        perr(f"❌ {e}")
        ctx.exit(e.exit_code)

    pout(f"🔍 {profile.path}")
    pout(f"Architecture: {profile.architecture.value}-bit ({profile.architecture.package_dir})")
    pout(f"Graphics API: {profile.api.label}")

    if not profile.api.supported:
        error = UnsupportedVersionError(profile.api, path=profile.path)
        perr(f"❌ {error}")
        ctx.exit(error.exit_code)


# 🌶️📦🔚
