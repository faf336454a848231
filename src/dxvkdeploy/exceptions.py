#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for dxvkdeploy.

Structural failures are raised. Per-file failures during install and removal
are never raised; they are recorded as outcomes in an OperationReport.
"""

from __future__ import annotations

from pathlib import Path

from provide.foundation.errors import FoundationError


class DeployError(FoundationError):
    """Base exception for all dxvkdeploy errors."""

    exit_code = 1

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        code: str | None = None,
        **context: object,
    ) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            context.setdefault("path", str(self.path))
        super().__init__(message, code=code, **context)


class ExecutableNotFoundError(DeployError):
    """Raised when the executable does not exist or cannot be opened."""

    exit_code = 3

    def __init__(self, path: Path | str, reason: str = "file does not exist") -> None:
        self.reason = reason
        super().__init__(f"Executable not found: {path} ({reason})", path=path, code="NOT_FOUND", reason=reason)


class InvalidFormatError(DeployError):
    """Raised when a header signature does not match."""

    exit_code = 4

    def __init__(self, path: Path | str, reason: str, *, code: str = "INVALID_FORMAT") -> None:
        self.reason = reason
        super().__init__(f"Not a Windows PE executable: {path} ({reason})", path=path, code=code, reason=reason)


class TruncatedFileError(InvalidFormatError):
    """Raised when the file ends before the required header fields."""

    def __init__(self, path: Path | str, offset: int, wanted: int, got: int) -> None:
        self.offset = offset
        self.wanted = wanted
        self.got = got
        super().__init__(
            path,
            f"truncated at offset 0x{offset:x}: wanted {wanted} bytes, got {got}",
            code="TRUNCATED_FILE",
        )


class UnknownFormatError(DeployError):
    """Raised when the optional-header magic is neither PE32 nor PE32+."""

    exit_code = 5

    def __init__(self, path: Path | str, magic: int) -> None:
        self.magic = magic
        super().__init__(
            f"Unknown optional header magic 0x{magic:x} in {path}",
            path=path,
            code="UNKNOWN_FORMAT",
            magic=f"0x{magic:x}",
        )


class NoApiDependencyError(DeployError):
    """Raised when no known Direct3D library name occurs in the binary.

    Common for games that reach the graphics API through an engine or
    middleware layer instead of importing it by name.
    """

    exit_code = 6

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            f"No Direct3D dependency found in {path}",
            path=path,
            code="NO_API_DEPENDENCY",
        )


class UnsupportedVersionError(DeployError):
    """Raised when the detected API version has no DXVK replacement."""

    exit_code = 7

    def __init__(self, version: object, path: Path | str | None = None) -> None:
        self.version = version
        label = getattr(version, "label", None) or f"API version {version}"
        super().__init__(
            f"{label} is not supported by DXVK",
            path=path,
            code="UNSUPPORTED_VERSION",
            version=str(getattr(version, "value", version)),
        )


class PackageNotFoundError(DeployError):
    """Raised when no dxvk-<version> directory exists under the search root."""

    exit_code = 8

    def __init__(self, search_root: Path | str, reason: str = "no dxvk-<version> directory") -> None:
        self.search_root = Path(search_root)
        self.reason = reason
        super().__init__(
            f"No DXVK package found in {search_root} ({reason})",
            path=search_root,
            code="PACKAGE_NOT_FOUND",
            reason=reason,
        )


# 🌶️📦🔚
