#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""dxvkdeploy core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from dxvkdeploy.deploy import (
    deploy_for_executable,
    plan_for_executable,
    profile_executable,
    remove_for_executable,
)
from dxvkdeploy.detection import detect_api_version
from dxvkdeploy.exceptions import (
    DeployError,
    ExecutableNotFoundError,
    InvalidFormatError,
    NoApiDependencyError,
    PackageNotFoundError,
    TruncatedFileError,
    UnknownFormatError,
    UnsupportedVersionError,
)
from dxvkdeploy.installer import install, remove
from dxvkdeploy.models import (
    Architecture,
    ExecutableProfile,
    FileOutcome,
    FileResult,
    GraphicsApi,
    OperationReport,
)
from dxvkdeploy.packages import resolve_package_directory
from dxvkdeploy.pe_utils import inspect_architecture
from dxvkdeploy.plan import InstallPlan, PlannedFile, build_install_plan

__version__ = get_version("dxvkdeploy", caller_file=__file__)

__all__ = [
    "Architecture",
    "DeployError",
    "ExecutableNotFoundError",
    "ExecutableProfile",
    "FileOutcome",
    "FileResult",
    "GraphicsApi",
    "InstallPlan",
    "InvalidFormatError",
    "NoApiDependencyError",
    "OperationReport",
    "PackageNotFoundError",
    "PlannedFile",
    "TruncatedFileError",
    "UnknownFormatError",
    "UnsupportedVersionError",
    "__version__",
    "build_install_plan",
    "deploy_for_executable",
    "detect_api_version",
    "inspect_architecture",
    "install",
    "plan_for_executable",
    "profile_executable",
    "remove",
    "remove_for_executable",
    "resolve_package_directory",
]

# 🌶️📦🔚
