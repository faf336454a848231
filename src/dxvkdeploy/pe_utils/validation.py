#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""PE executable validation and architecture inspection.

Reads the DOS stub signature, follows e_lfanew to the PE signature, skips the
file header and reads the optional-header magic. Nothing else is parsed.
"""

from __future__ import annotations

import os
from pathlib import Path

from provide.foundation import logger

from dxvkdeploy.exceptions import (
    ExecutableNotFoundError,
    InvalidFormatError,
    UnknownFormatError,
)
from dxvkdeploy.models import Architecture
from dxvkdeploy.pe_utils.headers import (
    DOS_SIGNATURE,
    E_LFANEW_OFFSET,
    FILE_HEADER_SIZE,
    OPTIONAL_HEADER_MAGIC_PE32,
    OPTIONAL_HEADER_MAGIC_PE32_PLUS,
    PE_SIGNATURE,
    read_exact,
    read_u16,
    read_u32,
)

_MAGIC_TO_ARCHITECTURE = {
    OPTIONAL_HEADER_MAGIC_PE32: Architecture.X32,
    OPTIONAL_HEADER_MAGIC_PE32_PLUS: Architecture.X64,
}


def is_pe_executable(data: bytes) -> bool:
    """
    Check if data starts with the DOS stub signature.

    Args:
        data: Binary data to check

    Returns:
        True if data starts with "MZ"
    """
    return len(data) >= 2 and data[0:2] == DOS_SIGNATURE


def inspect_architecture(path: Path | str | os.PathLike[str]) -> Architecture:
    """
    Determine whether a Windows executable is 32-bit or 64-bit.

    Args:
        path: Path to the executable

    Returns:
        Architecture.X32 for PE32, Architecture.X64 for PE32+

    Raises:
        ExecutableNotFoundError: The file does not exist or cannot be opened
        InvalidFormatError: A signature does not match
        TruncatedFileError: The file ends before the optional-header magic
        UnknownFormatError: The optional-header magic is not PE32 or PE32+
    """
    exe = Path(path)
    try:
        handle = exe.open("rb")
    except FileNotFoundError as e:
        raise ExecutableNotFoundError(exe) from e
    except IsADirectoryError as e:
        raise ExecutableNotFoundError(exe, reason="path is a directory") from e
    except OSError as e:
        raise ExecutableNotFoundError(exe, reason=e.strerror or str(e)) from e

    with handle:
        if not is_pe_executable(read_exact(handle, len(DOS_SIGNATURE), exe)):
            raise InvalidFormatError(exe, "missing MZ signature")

        handle.seek(E_LFANEW_OFFSET)
        pe_offset = read_u32(handle, exe)
        handle.seek(pe_offset)

        signature = read_exact(handle, len(PE_SIGNATURE), exe)
        if signature != PE_SIGNATURE:
            logger.debug(
                "Invalid PE signature",
                path=str(exe),
                actual=signature.hex(),
                offset=f"0x{pe_offset:x}",
            )
            raise InvalidFormatError(exe, f"missing PE signature at offset 0x{pe_offset:x}")

        handle.seek(FILE_HEADER_SIZE, os.SEEK_CUR)
        magic = read_u16(handle, exe)

    architecture = _MAGIC_TO_ARCHITECTURE.get(magic)
    if architecture is None:
        raise UnknownFormatError(exe, magic)

    logger.debug(
        "Detected architecture",
        path=str(exe),
        pe_offset=f"0x{pe_offset:x}",
        magic=f"0x{magic:x}",
        width=architecture.value,
    )
    return architecture


# 🌶️📦🔚
