#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""dxvkdeploy configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from dxvkdeploy.config.runtime import DeployRuntimeConfig, parse_log_level

__all__ = [
    "DeployRuntimeConfig",
    "parse_log_level",
]

# 🌶️📦🔚
