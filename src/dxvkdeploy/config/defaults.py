#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values and fixed names for dxvkdeploy."""

from __future__ import annotations

# =================================
# Package layout
# =================================
PACKAGE_PREFIX = "dxvk-"
PACKAGE_NAME_PATTERN = r"dxvk-([0-9]+(?:\.[0-9]+)*)"
ARCH_DIR_32 = "x32"
ARCH_DIR_64 = "x64"

# Files every package must carry in each architecture folder
PACKAGE_DLLS = (
    "d3d8.dll",
    "d3d9.dll",
    "d3d10core.dll",
    "d3d11.dll",
    "dxgi.dll",
)

# =================================
# Install sets per Direct3D version
# =================================
D3D11_DLLS = ("d3d10core.dll", "d3d11.dll", "dxgi.dll")

# Removal ignores what was installed and always sweeps the full set
REMOVABLE_DLLS = (
    "d3d8.dll",
    "d3d9.dll",
    "d3d10.dll",
    "d3d10core.dll",
    "d3d11.dll",
    "d3d12.dll",
    "dxgi.dll",
)

# =================================
# Runtime defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SETUP_LOG_LEVEL = "WARNING"
DEFAULT_PACKAGE_ROOT = ""  # empty means the current working directory

# =================================
# CLI exit statuses for per-file report outcomes
# =================================
EXIT_OK = 0
EXIT_SOURCE_MISSING = 9
EXIT_COPY_ERROR = 10
EXIT_DELETE_ERROR = 11

# 🌶️📦🔚
