#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""DXVK package directory lookup.

A package is an immediate subdirectory of the search root named
``dxvk-<version>``, where the version is one or more dot-separated integers.
When several packages are present the highest version is selected; equal
versions (``dxvk-2`` and ``dxvk-02``) fall back to the greater directory name.
The result never depends on directory enumeration order.
"""

from __future__ import annotations

import os
from pathlib import Path
import re

from provide.foundation import logger

from dxvkdeploy.config.defaults import ARCH_DIR_32, ARCH_DIR_64, PACKAGE_DLLS, PACKAGE_NAME_PATTERN
from dxvkdeploy.exceptions import PackageNotFoundError

_PACKAGE_NAME_RE = re.compile(PACKAGE_NAME_PATTERN)


def parse_package_version(name: str) -> tuple[int, ...] | None:
    """Parse ``dxvk-2.5.3`` into ``(2, 5, 3)``; None if the name does not match."""
    match = _PACKAGE_NAME_RE.fullmatch(name)
    if match is None:
        return None
    return tuple(int(part) for part in match.group(1).split("."))


def _selection_key(path: Path) -> tuple[tuple[int, ...], str]:
    return parse_package_version(path.name) or (), path.name


def find_package_directories(search_root: Path | str | os.PathLike[str]) -> list[Path]:
    """
    List valid package directories under ``search_root``.

    Args:
        search_root: Directory to search (not recursive)

    Returns:
        Package directories ordered from least to most preferred

    Raises:
        PackageNotFoundError: The search root is missing or unreadable
    """
    root = Path(search_root)
    try:
        entries = list(root.iterdir())
    except FileNotFoundError as e:
        raise PackageNotFoundError(root, reason="search root does not exist") from e
    except NotADirectoryError as e:
        raise PackageNotFoundError(root, reason="search root is not a directory") from e
    except OSError as e:
        raise PackageNotFoundError(root, reason=e.strerror or str(e)) from e

    packages = [entry for entry in entries if entry.is_dir() and parse_package_version(entry.name) is not None]
    packages.sort(key=_selection_key)
    logger.trace("Found DXVK packages", root=str(root), packages=[p.name for p in packages])
    return packages


def resolve_package_directory(search_root: Path | str | os.PathLike[str]) -> Path:
    """
    Select the DXVK package to install from.

    Args:
        search_root: Directory holding dxvk-<version> directories

    Returns:
        Path to the selected package directory

    Raises:
        PackageNotFoundError: No valid package directory exists
    """
    packages = find_package_directories(search_root)
    if not packages:
        raise PackageNotFoundError(search_root)

    selected = packages[-1]
    logger.debug(
        "Selected DXVK package",
        package=selected.name,
        candidates=len(packages),
        root=str(search_root),
    )
    return selected


def missing_package_files(package_dir: Path | str | os.PathLike[str]) -> list[Path]:
    """Return layout files absent from a package, relative to the package directory."""
    package = Path(package_dir)
    return [
        Path(arch_dir) / dll
        for arch_dir in (ARCH_DIR_32, ARCH_DIR_64)
        for dll in PACKAGE_DLLS
        if not (package / arch_dir / dll).is_file()
    ]


# 🌶️📦🔚
