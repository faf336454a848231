#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Direct3D dependency detection.

The binary is searched as raw bytes for the import names of the Direct3D
runtime DLLs. Matching is ASCII case-insensitive and never decodes the buffer,
so arbitrary binary content cannot raise.
"""

from __future__ import annotations

import os
from pathlib import Path

from provide.foundation import logger

from dxvkdeploy.exceptions import ExecutableNotFoundError, NoApiDependencyError
from dxvkdeploy.models import GraphicsApi

# Priority order: the first name present wins, regardless of position or count
DETECTION_ORDER = (
    GraphicsApi.D3D11,
    GraphicsApi.D3D10,
    GraphicsApi.D3D9,
    GraphicsApi.D3D8,
)


def detect_api_version_in_bytes(data: bytes) -> GraphicsApi | None:
    """Return the highest-priority Direct3D version referenced in ``data``.

    d3d12.dll is only consulted when none of the supported names occur, so a
    DX12-only binary is reported as D3D12 rather than as having no dependency.
    """
    haystack = data.lower()
    for api in DETECTION_ORDER:
        if api.dll_name.encode("ascii") in haystack:
            return api
    if GraphicsApi.D3D12.dll_name.encode("ascii") in haystack:
        return GraphicsApi.D3D12
    return None


def detect_api_version(path: Path | str | os.PathLike[str]) -> GraphicsApi:
    """
    Detect which Direct3D version an executable depends on.

    Args:
        path: Path to the executable

    Returns:
        The detected GraphicsApi

    Raises:
        ExecutableNotFoundError: The file cannot be read
        NoApiDependencyError: No Direct3D DLL name occurs in the file
    """
    exe = Path(path)
    try:
        data = exe.read_bytes()
    except FileNotFoundError as e:
        raise ExecutableNotFoundError(exe) from e
    except OSError as e:
        raise ExecutableNotFoundError(exe, reason=e.strerror or str(e)) from e

    api = detect_api_version_in_bytes(data)
    if api is None:
        logger.info("No Direct3D dependency found", path=str(exe), size=len(data))
        raise NoApiDependencyError(exe)

    logger.debug("Detected graphics API", path=str(exe), api=api.label)
    return api


# 🌶️📦🔚
