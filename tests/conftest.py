#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for dxvkdeploy tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
import struct

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

PE32_MAGIC = 0x10B
PE32_PLUS_MAGIC = 0x20B

PACKAGE_DLLS = ("d3d8.dll", "d3d9.dll", "d3d10core.dll", "d3d11.dll", "dxgi.dll")


def create_minimal_pe(magic: int = PE32_PLUS_MAGIC, pe_offset: int = 0x80, body: bytes = b"") -> bytes:
    """Create a minimal PE executable for testing.

    Args:
        magic: Optional header magic (0x10B for PE32, 0x20B for PE32+)
        pe_offset: Value written to e_lfanew
        body: Extra bytes appended after the headers (import names etc.)

    Returns:
        Executable image as bytes
    """
    data = bytearray(pe_offset + 4 + 20 + 224)

    data[0:2] = b"MZ"
    data[0x3C:0x40] = struct.pack("<I", pe_offset)

    data[pe_offset : pe_offset + 4] = b"PE\x00\x00"

    coff_offset = pe_offset + 4
    machine = 0x8664 if magic == PE32_PLUS_MAGIC else 0x014C
    data[coff_offset : coff_offset + 2] = struct.pack("<H", machine)
    data[coff_offset + 16 : coff_offset + 18] = struct.pack("<H", 224)

    opt_hdr_offset = coff_offset + 20
    data[opt_hdr_offset : opt_hdr_offset + 2] = struct.pack("<H", magic)

    return bytes(data) + body


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def make_exe(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a synthetic game executable into its own directory."""

    def _make(
        name: str = "game.exe",
        magic: int = PE32_PLUS_MAGIC,
        imports: tuple[str, ...] = ("d3d11.dll",),
        directory: str = "game",
    ) -> Path:
        game_dir = tmp_path / directory
        game_dir.mkdir(parents=True, exist_ok=True)
        body = b"\x00".join(name.encode("ascii") for name in imports) + b"\x00"
        exe = game_dir / name
        exe.write_bytes(create_minimal_pe(magic=magic, body=body))
        return exe

    return _make


@pytest.fixture
def make_package(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a dxvk-<version> package with distinguishable DLL contents."""

    def _make(
        version: str = "2.5.3",
        root: str = "packages",
        skip: tuple[str, ...] = (),
    ) -> Path:
        package = tmp_path / root / f"dxvk-{version}"
        for arch in ("x32", "x64"):
            arch_dir = package / arch
            arch_dir.mkdir(parents=True, exist_ok=True)
            for dll in PACKAGE_DLLS:
                if f"{arch}/{dll}" in skip:
                    continue
                (arch_dir / dll).write_bytes(f"{version}:{arch}:{dll}".encode())
        return package

    return _make


# 🌶️📦🔚
