#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""dxvkdeploy command-line interface entrypoint."""

from __future__ import annotations

import os
import sys

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from dxvkdeploy.commands import (
    inspect_command,
    install_command,
    packages_command,
    remove_command,
)
from dxvkdeploy.config import DeployRuntimeConfig

# Set up Windows Unicode support early
if sys.platform == "win32":
    if not os.environ.get("PYTHONIOENCODING"):
        os.environ["PYTHONIOENCODING"] = "utf-8"
    if not os.environ.get("PYTHONUTF8"):
        os.environ["PYTHONUTF8"] = "1"

__version__ = get_version("dxvkdeploy", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="dxvkdeploy",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Install or remove DXVK next to Windows game executables.

    Exit status: 0 success, 3 not found, 4 invalid or truncated executable,
    5 unknown PE magic, 6 no Direct3D dependency, 7 unsupported Direct3D
    version, 8 no DXVK package, 9 package file missing, 10 copy error,
    11 delete error.

    Configure via environment variables:
    - DXVKDEPLOY_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - DXVKDEPLOY_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - DXVKDEPLOY_PACKAGE_ROOT: Directory holding dxvk-<version> packages
    """
    ctx.ensure_object(dict)

    deploy_config = DeployRuntimeConfig.from_env()

    cli_ctx = CLIContext.from_env()

    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="dxvkdeploy",
        logging=evolve(
            base_telemetry.logging,
            default_level=deploy_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["config"] = deploy_config
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(inspect_command, name="inspect")
cli.add_command(install_command, name="install")
cli.add_command(remove_command, name="remove")
cli.add_command(packages_command, name="packages")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
