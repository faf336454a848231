#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Value types shared by the inspector, resolver and installer."""

from __future__ import annotations

from enum import Enum, IntEnum
from pathlib import Path

from attrs import define, field

from dxvkdeploy.config.defaults import (
    ARCH_DIR_32,
    ARCH_DIR_64,
    EXIT_COPY_ERROR,
    EXIT_DELETE_ERROR,
    EXIT_OK,
    EXIT_SOURCE_MISSING,
)


class Architecture(IntEnum):
    """Executable width as read from the PE optional header."""

    X32 = 32
    X64 = 64

    @property
    def package_dir(self) -> str:
        """Name of the matching architecture folder inside a DXVK package."""
        return ARCH_DIR_64 if self is Architecture.X64 else ARCH_DIR_32


class GraphicsApi(IntEnum):
    """Direct3D version a binary links against.

    D3D12 is detected so it can be rejected explicitly; DXVK ships no
    replacement for it.
    """

    D3D8 = 8
    D3D9 = 9
    D3D10 = 10
    D3D11 = 11
    D3D12 = 12

    @property
    def dll_name(self) -> str:
        return f"d3d{self.value}.dll"

    @property
    def label(self) -> str:
        return f"Direct3D {self.value}"

    @property
    def supported(self) -> bool:
        return self is not GraphicsApi.D3D12


class FileOutcome(str, Enum):
    """Result of a single copy or delete."""

    COPIED = "copied"
    SOURCE_MISSING = "source-missing"
    COPY_ERROR = "copy-error"
    DELETED = "deleted"
    ALREADY_ABSENT = "already-absent"
    DELETE_ERROR = "delete-error"

    @property
    def is_failure(self) -> bool:
        return self in _FAILURE_EXIT_CODES

    @property
    def exit_code(self) -> int:
        return _FAILURE_EXIT_CODES.get(self, EXIT_OK)


_FAILURE_EXIT_CODES = {
    FileOutcome.SOURCE_MISSING: EXIT_SOURCE_MISSING,
    FileOutcome.COPY_ERROR: EXIT_COPY_ERROR,
    FileOutcome.DELETE_ERROR: EXIT_DELETE_ERROR,
}


@define(frozen=True)
class ExecutableProfile:
    """Everything known about one executable after inspection and detection."""

    path: Path
    architecture: Architecture
    api: GraphicsApi

    @property
    def directory(self) -> Path:
        return self.path.parent

    def __str__(self) -> str:
        return f"{self.path.name}: {self.architecture.value}-bit, {self.api.label}"


@define(frozen=True)
class FileResult:
    """Outcome for one file of an install or removal."""

    destination: Path
    outcome: FileOutcome
    source: Path | None = None
    reason: str | None = None

    @property
    def name(self) -> str:
        return self.destination.name

    @property
    def ok(self) -> bool:
        return not self.outcome.is_failure


@define(frozen=True)
class OperationReport:
    """Per-file report returned by install() and remove().

    Never collapses to a single flag: a DX11 install copies three files and
    any subset of them may fail.
    """

    operation: str
    directory: Path
    results: tuple[FileResult, ...] = field(factory=tuple, converter=tuple)

    @property
    def succeeded(self) -> bool:
        return all(result.ok for result in self.results)

    @property
    def failures(self) -> list[FileResult]:
        return [result for result in self.results if not result.ok]

    def count(self, outcome: FileOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    def by_outcome(self, outcome: FileOutcome) -> list[FileResult]:
        return [result for result in self.results if result.outcome is outcome]

    @property
    def exit_code(self) -> int:
        """Highest exit status among the per-file outcomes."""
        return max((result.outcome.exit_code for result in self.results), default=EXIT_OK)


# 🌶️📦🔚
