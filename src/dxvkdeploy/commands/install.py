#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Install command for the dxvkdeploy CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from dxvkdeploy.config import DeployRuntimeConfig
from dxvkdeploy.console import get_command_logger, show_report
from dxvkdeploy.deploy import plan_for_executable
from dxvkdeploy.exceptions import DeployError
from dxvkdeploy.installer import install

# Get structured logger for this command
log = get_command_logger("install")


@click.command("install")
@click.argument(
    "exe",
    type=click.Path(resolve_path=True),
    required=True,
)
@click.pass_context
def install_command(ctx: click.Context, exe: str) -> None:
    """Install DXVK next to an executable.

    Packages are looked up in DXVKDEPLOY_PACKAGE_ROOT, or the current
    directory when it is unset.
    """
    exe_path = Path(exe)
    config = _get_config(ctx)
    package_root = config.resolved_package_root()
    log.debug("Install command started", exe=str(exe_path), package_root=str(package_root))

    try:
        plan = plan_for_executable(exe_path, package_root)
    except DeployError as e:
        log.error("Install aborted", error=str(e), code=e.code, exe=str(exe_path))
        perr(f"❌ {e}")
        ctx.exit(e.exit_code)

    pout(
        f"📦 Installing {plan.package_dir.name} for {plan.api.label} "
        f"({plan.architecture.value}-bit) into {plan.destination_dir}"
    )
    report = install(plan)
    show_report(report)

    if not report.succeeded:
        log.warning("Install incomplete", failures=len(report.failures), exe=str(exe_path))
        perr(f"⚠️  {len(report.failures)} of {len(report.results)} files failed")
    ctx.exit(report.exit_code)


def _get_config(ctx: click.Context) -> DeployRuntimeConfig:
    obj = ctx.find_object(dict)
    if obj and isinstance(obj.get("config"), DeployRuntimeConfig):
        return obj["config"]
    return DeployRuntimeConfig.from_env()


# 🌶️📦🔚
