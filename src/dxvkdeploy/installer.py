#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Copy and delete replacement DLLs.

Both operations keep going after a per-file failure and return an
OperationReport listing every file's outcome. Concurrent calls on the same
destination directory must be serialized by the caller.
"""

from __future__ import annotations

import os
from pathlib import Path

from provide.foundation import logger
from provide.foundation.file import safe_copy

from dxvkdeploy.config.defaults import REMOVABLE_DLLS
from dxvkdeploy.exceptions import UnsupportedVersionError
from dxvkdeploy.models import FileOutcome, FileResult, GraphicsApi, OperationReport
from dxvkdeploy.plan import InstallPlan, PlannedFile


def install(plan: InstallPlan) -> OperationReport:
    """
    Copy every planned file, overwriting existing destination files.

    Args:
        plan: Plan produced by build_install_plan()

    Returns:
        OperationReport with one COPIED, SOURCE_MISSING or COPY_ERROR per file

    Raises:
        UnsupportedVersionError: The plan targets D3D12 or an unmapped version;
            nothing is written
    """
    _check_supported(plan)
    logger.debug(
        "Installing DXVK",
        api=plan.api.label,
        architecture=plan.architecture.value,
        package=str(plan.package_dir),
        destination=str(plan.destination_dir),
        files=len(plan.files),
    )
    results = [_copy_one(planned) for planned in plan.files]
    report = OperationReport(operation="install", directory=plan.destination_dir, results=results)
    logger.info(
        "Install finished",
        destination=str(plan.destination_dir),
        copied=report.count(FileOutcome.COPIED),
        failed=len(report.failures),
    )
    return report


def _check_supported(plan: InstallPlan) -> None:
    try:
        api = GraphicsApi(plan.api)
    except ValueError:
        api = None
    if api is None or not api.supported:
        raise UnsupportedVersionError(plan.api, path=plan.destination_dir)


def _copy_one(planned: PlannedFile) -> FileResult:
    if not planned.source.is_file():
        logger.warning("Package file missing", source=str(planned.source))
        return FileResult(
            destination=planned.destination,
            outcome=FileOutcome.SOURCE_MISSING,
            source=planned.source,
            reason=f"{planned.source} does not exist",
        )

    if planned.destination.exists() and not planned.destination.is_file():
        logger.warning("Destination is not a file", destination=str(planned.destination))
        return FileResult(
            destination=planned.destination,
            outcome=FileOutcome.COPY_ERROR,
            source=planned.source,
            reason="destination is a directory",
        )

    try:
        safe_copy(planned.source, planned.destination, overwrite=True, preserve_mode=True)
    except OSError as e:
        logger.warning("Copy failed", source=str(planned.source), destination=str(planned.destination), error=str(e))
        return FileResult(
            destination=planned.destination,
            outcome=FileOutcome.COPY_ERROR,
            source=planned.source,
            reason=e.strerror or str(e),
        )

    logger.debug("Copied", source=str(planned.source), destination=str(planned.destination))
    return FileResult(destination=planned.destination, outcome=FileOutcome.COPIED, source=planned.source)


def remove(destination_dir: Path | str | os.PathLike[str]) -> OperationReport:
    """
    Delete every known DXVK DLL from ``destination_dir``.

    The full set is attempted regardless of what was installed. Absent files
    are reported as ALREADY_ABSENT; unrelated files are never touched.

    Args:
        destination_dir: Directory containing the executable

    Returns:
        OperationReport with one DELETED, ALREADY_ABSENT or DELETE_ERROR per name
    """
    directory = Path(destination_dir)
    results = [_delete_one(directory / name) for name in REMOVABLE_DLLS]
    report = OperationReport(operation="remove", directory=directory, results=results)
    logger.info(
        "Remove finished",
        directory=str(directory),
        deleted=report.count(FileOutcome.DELETED),
        failed=len(report.failures),
    )
    return report


def _delete_one(target: Path) -> FileResult:
    try:
        target.unlink()
    except FileNotFoundError:
        logger.trace("Already absent", path=str(target))
        return FileResult(destination=target, outcome=FileOutcome.ALREADY_ABSENT)
    except OSError as e:
        logger.warning("Delete failed", path=str(target), error=str(e))
        return FileResult(destination=target, outcome=FileOutcome.DELETE_ERROR, reason=e.strerror or str(e))

    logger.debug("Deleted", path=str(target))
    return FileResult(destination=target, outcome=FileOutcome.DELETED)


# 🌶️📦🔚
