#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Remove command for the dxvkdeploy CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from dxvkdeploy.console import get_command_logger, show_report
from dxvkdeploy.deploy import remove_for_executable
from dxvkdeploy.exceptions import DeployError
from dxvkdeploy.models import FileOutcome

# Get structured logger for this command
log = get_command_logger("remove")


@click.command("remove")
@click.argument(
    "target",
    type=click.Path(resolve_path=True),
    required=True,
)
@click.pass_context
def remove_command(ctx: click.Context, target: str) -> None:
    """Remove DXVK DLLs from an executable's directory.

    TARGET may be the executable or the directory itself.
    """
    target_path = Path(target)
    log.debug("Remove command started", target=str(target_path))

    try:
        report = remove_for_executable(target_path)
    except DeployError as e:
        log.error("Remove aborted", error=str(e), code=e.code, target=str(target_path))
        perr(f"❌ {e}")
        ctx.exit(e.exit_code)

    pout(f"🧹 Removing DXVK from {report.directory}")
    show_report(report)
    pout(f"Deleted {report.count(FileOutcome.DELETED)}, already absent {report.count(FileOutcome.ALREADY_ABSENT)}")
    ctx.exit(report.exit_code)


# 🌶️📦🔚
