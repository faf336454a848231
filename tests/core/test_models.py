#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for report and enum helpers."""

from __future__ import annotations

from pathlib import Path

import attrs
import pytest

from dxvkdeploy.models import Architecture, FileOutcome, FileResult, GraphicsApi, OperationReport


def result(name: str, outcome: FileOutcome) -> FileResult:
    return FileResult(destination=Path("/game") / name, outcome=outcome)


class TestEnums:
    def test_architecture_folders(self) -> None:
        assert Architecture.X32.package_dir == "x32"
        assert Architecture.X64.package_dir == "x64"

    def test_graphics_api(self) -> None:
        assert GraphicsApi.D3D9.dll_name == "d3d9.dll"
        assert GraphicsApi.D3D11.label == "Direct3D 11"
        assert GraphicsApi(8) is GraphicsApi.D3D8
        assert [api.supported for api in GraphicsApi] == [True, True, True, True, False]

    def test_outcome_failures(self) -> None:
        failures = {outcome for outcome in FileOutcome if outcome.is_failure}
        assert failures == {FileOutcome.SOURCE_MISSING, FileOutcome.COPY_ERROR, FileOutcome.DELETE_ERROR}


class TestOperationReport:
    def test_empty_report_succeeds(self) -> None:
        report = OperationReport(operation="remove", directory=Path("/game"))
        assert report.succeeded
        assert report.exit_code == 0
        assert report.results == ()

    def test_mixed_report(self) -> None:
        report = OperationReport(
            operation="remove",
            directory=Path("/game"),
            results=[
                result("dxgi.dll", FileOutcome.DELETED),
                result("d3d9.dll", FileOutcome.ALREADY_ABSENT),
                result("d3d11.dll", FileOutcome.DELETE_ERROR),
            ],
        )
        assert isinstance(report.results, tuple)
        assert not report.succeeded
        assert [r.name for r in report.failures] == ["d3d11.dll"]
        assert report.count(FileOutcome.ALREADY_ABSENT) == 1
        assert report.exit_code == 11

    def test_reports_are_immutable(self) -> None:
        report = OperationReport(operation="install", directory=Path("/game"))
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            report.operation = "remove"  # type: ignore[misc]


# 🌶️📦🔚
