#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""dxvkdeploy runtime configuration for CLI startup."""

from __future__ import annotations

from pathlib import Path

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from dxvkdeploy.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PACKAGE_ROOT,
    DEFAULT_SETUP_LOG_LEVEL,
)

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


@define
class DeployRuntimeConfig(RuntimeConfig):
    """dxvkdeploy runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="DXVKDEPLOY_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for dxvkdeploy operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default=DEFAULT_SETUP_LOG_LEVEL,
        env_var="DXVKDEPLOY_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    package_root: str = field(
        default=DEFAULT_PACKAGE_ROOT,
        env_var="DXVKDEPLOY_PACKAGE_ROOT",
        metadata={"help": "Directory holding dxvk-<version> packages (defaults to the working directory)"},
    )

    def resolved_package_root(self) -> Path:
        """Return the package root as an absolute path."""
        if not self.package_root:
            return Path.cwd()
        return Path(self.package_root).expanduser().resolve()
