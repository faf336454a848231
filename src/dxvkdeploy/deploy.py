#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public API for deploying DXVK next to a single executable."""

from __future__ import annotations

import os
from pathlib import Path

from provide.foundation import logger

from dxvkdeploy.detection import detect_api_version
from dxvkdeploy.exceptions import ExecutableNotFoundError, UnsupportedVersionError
from dxvkdeploy.installer import install, remove
from dxvkdeploy.models import ExecutableProfile, OperationReport
from dxvkdeploy.packages import resolve_package_directory
from dxvkdeploy.pe_utils import inspect_architecture
from dxvkdeploy.plan import InstallPlan, build_install_plan


def profile_executable(exe_path: Path | str | os.PathLike[str]) -> ExecutableProfile:
    """Inspect an executable's architecture and Direct3D dependency.

    Raises:
        ExecutableNotFoundError, InvalidFormatError, UnknownFormatError,
        NoApiDependencyError
    """
    exe = Path(exe_path).absolute()
    architecture = inspect_architecture(exe)
    api = detect_api_version(exe)
    return ExecutableProfile(path=exe, architecture=architecture, api=api)


def plan_for_executable(
    exe_path: Path | str | os.PathLike[str],
    package_root: Path | str | os.PathLike[str],
) -> InstallPlan:
    """Build the install plan for an executable without touching the filesystem.

    The executable is inspected before the package root is searched, so a bad
    executable is reported even when no package is available.

    Raises:
        Any inspection or detection error, UnsupportedVersionError,
        PackageNotFoundError
    """
    profile = profile_executable(exe_path)
    if not profile.api.supported:
        raise UnsupportedVersionError(profile.api, path=profile.path)

    package_dir = resolve_package_directory(package_root)
    return build_install_plan(profile.architecture, profile.api, package_dir, profile.directory)


def deploy_for_executable(
    exe_path: Path | str | os.PathLike[str],
    package_root: Path | str | os.PathLike[str],
) -> OperationReport:
    """Install the matching DXVK DLLs next to an executable.

    This is the main entry point for deploying DXVK programmatically. Errors
    that concern the executable or the package as a whole are raised before
    anything is written; per-file problems are returned in the report.

    Args:
        exe_path: Path to the game executable
        package_root: Directory holding dxvk-<version> packages

    Returns:
        OperationReport for the install

    Example:
        ```python
        from pathlib import Path
        from dxvkdeploy import deploy_for_executable

        report = deploy_for_executable(Path("Game/game.exe"), Path("downloads"))
        for result in report.results:
            print(result.name, result.outcome.value)
        ```
    """
    plan = plan_for_executable(exe_path, package_root)
    logger.info(
        "Deploying DXVK",
        exe=str(exe_path),
        package=plan.package_dir.name,
        api=plan.api.label,
        architecture=plan.architecture.value,
    )
    return install(plan)


def remove_for_executable(target: Path | str | os.PathLike[str]) -> OperationReport:
    """Remove DXVK DLLs from an executable's directory.

    ``target`` may be the executable itself or its directory. The executable
    is not inspected; removal works even for binaries that fail inspection.
    """
    path = Path(target).absolute()
    if not path.exists():
        raise ExecutableNotFoundError(path)
    directory = path if path.is_dir() else path.parent
    return remove(directory)


# 🌶️📦🔚
