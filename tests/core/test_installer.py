#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for copying and deleting replacement DLLs."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from dxvkdeploy.exceptions import UnsupportedVersionError
from dxvkdeploy.installer import install, remove
from dxvkdeploy.models import Architecture, FileOutcome, GraphicsApi
from dxvkdeploy.plan import InstallPlan, PlannedFile, build_install_plan

REMOVABLE = ("d3d8.dll", "d3d9.dll", "d3d10.dll", "d3d10core.dll", "d3d11.dll", "d3d12.dll", "dxgi.dll")


class TestInstall:
    """Tests for install()."""

    def test_copies_all_files(self, tmp_path: Path, make_package: Callable[..., Path]) -> None:
        package = make_package()
        game = tmp_path / "game"
        game.mkdir()
        plan = build_install_plan(64, 11, package, game)

        report = install(plan)

        assert report.succeeded
        assert report.operation == "install"
        assert report.count(FileOutcome.COPIED) == 3
        assert report.exit_code == 0
        for planned in plan:
            assert planned.destination.read_bytes() == planned.source.read_bytes()

    def test_partial_package(self, tmp_path: Path, make_package: Callable[..., Path]) -> None:
        package = make_package(skip=("x64/dxgi.dll",))
        game = tmp_path / "game"
        game.mkdir()

        report = install(build_install_plan(64, 11, package, game))

        assert report.count(FileOutcome.COPIED) == 2
        assert report.count(FileOutcome.SOURCE_MISSING) == 1
        assert not report.succeeded
        assert report.exit_code == 9
        (missing,) = report.failures
        assert missing.name == "dxgi.dll"
        assert missing.source == package / "x64" / "dxgi.dll"
        assert missing.reason is not None
        assert not (game / "dxgi.dll").exists()
        for name in ("d3d10core.dll", "d3d11.dll"):
            assert (game / name).read_bytes() == (package / "x64" / name).read_bytes()

    def test_overwrites_existing(self, tmp_path: Path, make_package: Callable[..., Path]) -> None:
        package = make_package()
        game = tmp_path / "game"
        game.mkdir()
        (game / "d3d9.dll").write_bytes(b"original system dll")

        report = install(build_install_plan(32, 9, package, game))

        assert report.succeeded
        assert (game / "d3d9.dll").read_bytes() == b"2.5.3:x32:d3d9.dll"

    def test_copy_error_does_not_abort(
        self, tmp_path: Path, make_package: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = make_package()
        game = tmp_path / "game"
        game.mkdir()

        from dxvkdeploy import installer

        real_copy = installer.safe_copy

        def flaky_copy(src: Path, dst: Path, **kwargs: Any) -> None:
            if Path(dst).name == "d3d11.dll":
                raise PermissionError(13, "Permission denied", str(dst))
            real_copy(src, dst, **kwargs)

        monkeypatch.setattr(installer, "safe_copy", flaky_copy)

        report = install(build_install_plan(64, 11, package, game))

        outcomes = {result.name: result.outcome for result in report.results}
        assert outcomes == {
            "d3d10core.dll": FileOutcome.COPIED,
            "d3d11.dll": FileOutcome.COPY_ERROR,
            "dxgi.dll": FileOutcome.COPIED,
        }
        assert report.failures[0].reason == "Permission denied"
        assert report.exit_code == 10

    def test_copy_error_outranks_source_missing(
        self, tmp_path: Path, make_package: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = make_package(skip=("x64/dxgi.dll",))
        game = tmp_path / "game"
        game.mkdir()

        from dxvkdeploy import installer

        def failing_copy(src: Path, dst: Path, **kwargs: Any) -> None:
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(installer, "safe_copy", failing_copy)

        report = install(build_install_plan(64, 11, package, game))
        assert report.count(FileOutcome.COPY_ERROR) == 2
        assert report.count(FileOutcome.SOURCE_MISSING) == 1
        assert report.exit_code == 10

    def test_destination_directory_is_copy_error(self, tmp_path: Path, make_package: Callable[..., Path]) -> None:
        package = make_package()
        game = tmp_path / "game"
        (game / "d3d9.dll").mkdir(parents=True)

        report = install(build_install_plan(32, 9, package, game))

        (result,) = report.results
        assert result.outcome == FileOutcome.COPY_ERROR
        assert result.reason == "destination is a directory"
        assert report.exit_code == 10
        assert (game / "d3d9.dll").is_dir()
        assert list((game / "d3d9.dll").iterdir()) == []

    @pytest.mark.parametrize("api", [GraphicsApi.D3D12, 7])
    def test_rejects_unsupported_api_without_writing(
        self, tmp_path: Path, make_package: Callable[..., Path], api: GraphicsApi | int
    ) -> None:
        package = make_package()
        game = tmp_path / "game"
        game.mkdir()
        plan = InstallPlan(
            architecture=Architecture.X64,
            api=api,
            package_dir=package,
            destination_dir=game,
            files=(PlannedFile(package / "x64" / "d3d11.dll", game / "d3d11.dll"),),
        )

        with pytest.raises(UnsupportedVersionError) as exc_info:
            install(plan)

        assert exc_info.value.exit_code == 7
        assert list(game.iterdir()) == []


class TestRemove:
    """Tests for remove()."""

    def test_removes_present_and_reports_absent(self, tmp_path: Path) -> None:
        game = tmp_path / "game"
        game.mkdir()
        for name in ("dxgi.dll", "d3d9.dll", "game.exe", "steam_api64.dll", "d3dx9_43.dll"):
            (game / name).write_bytes(name.encode())

        report = remove(game)

        assert report.operation == "remove"
        assert report.succeeded
        assert report.exit_code == 0
        assert [result.name for result in report.results] == list(REMOVABLE)
        assert {r.name for r in report.by_outcome(FileOutcome.DELETED)} == {"dxgi.dll", "d3d9.dll"}
        assert report.count(FileOutcome.ALREADY_ABSENT) == 5
        assert sorted(p.name for p in game.iterdir()) == ["d3dx9_43.dll", "game.exe", "steam_api64.dll"]
        assert (game / "game.exe").read_bytes() == b"game.exe"

    def test_empty_directory(self, tmp_path: Path) -> None:
        report = remove(tmp_path)
        assert report.count(FileOutcome.ALREADY_ABSENT) == len(REMOVABLE)
        assert report.succeeded

    def test_delete_error_does_not_abort(self, tmp_path: Path) -> None:
        (tmp_path / "d3d11.dll").mkdir()
        (tmp_path / "d3d11.dll" / "keep").write_text("x")
        (tmp_path / "dxgi.dll").write_bytes(b"dxvk")

        report = remove(tmp_path)

        outcomes = {result.name: result.outcome for result in report.results}
        assert outcomes["d3d11.dll"] is FileOutcome.DELETE_ERROR
        assert outcomes["dxgi.dll"] is FileOutcome.DELETED
        assert report.exit_code == 11
        assert report.failures[0].reason
        assert not (tmp_path / "dxgi.dll").exists()

    def test_install_then_remove(self, tmp_path: Path, make_package: Callable[..., Path]) -> None:
        package = make_package()
        game = tmp_path / "game"
        game.mkdir()
        install(build_install_plan(64, 11, package, game))

        report = remove(game)

        assert {r.name for r in report.by_outcome(FileOutcome.DELETED)} == {"d3d10core.dll", "d3d11.dll", "dxgi.dll"}
        assert list(game.iterdir()) == []


# 🌶️📦🔚
