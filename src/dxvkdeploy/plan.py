#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Install plans: which package files go where."""

from __future__ import annotations

from collections.abc import Iterator
import os
from pathlib import Path

from attrs import define, field

from dxvkdeploy.config.defaults import D3D11_DLLS
from dxvkdeploy.exceptions import UnsupportedVersionError
from dxvkdeploy.models import Architecture, GraphicsApi


@define(frozen=True)
class PlannedFile:
    """One source to destination copy."""

    source: Path
    destination: Path


@define(frozen=True)
class InstallPlan:
    """Files to copy for one executable."""

    architecture: Architecture
    api: GraphicsApi
    package_dir: Path
    destination_dir: Path
    files: tuple[PlannedFile, ...] = field(factory=tuple, converter=tuple)

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[PlannedFile]:
        return iter(self.files)


def dll_names_for(api: GraphicsApi | int) -> tuple[str, ...]:
    """Return the DLL names DXVK replaces for a Direct3D version.

    Raises:
        UnsupportedVersionError: For D3D12 or any value without a mapping
    """
    try:
        api = GraphicsApi(api)
    except ValueError as e:
        raise UnsupportedVersionError(api) from e

    if api is GraphicsApi.D3D11:
        return D3D11_DLLS
    if api in (GraphicsApi.D3D8, GraphicsApi.D3D9, GraphicsApi.D3D10):
        return (api.dll_name,)
    raise UnsupportedVersionError(api)


def build_install_plan(
    architecture: Architecture | int,
    api: GraphicsApi | int,
    package_dir: Path | str | os.PathLike[str],
    destination_dir: Path | str | os.PathLike[str],
) -> InstallPlan:
    """
    Map an architecture and Direct3D version to concrete file copies.

    Args:
        architecture: Executable width (32 or 64)
        api: Detected Direct3D version
        package_dir: Selected dxvk-<version> directory
        destination_dir: Directory containing the executable

    Returns:
        InstallPlan with one entry per DLL

    Raises:
        UnsupportedVersionError: The version has no DXVK replacement
    """
    names = dll_names_for(api)
    width = Architecture.X64 if int(architecture) == Architecture.X64 else Architecture.X32
    package = Path(package_dir)
    destination = Path(destination_dir)
    source_dir = package / width.package_dir

    return InstallPlan(
        architecture=width,
        api=GraphicsApi(api),
        package_dir=package,
        destination_dir=destination,
        files=tuple(PlannedFile(source=source_dir / name, destination=destination / name) for name in names),
    )


# 🌶️📦🔚
