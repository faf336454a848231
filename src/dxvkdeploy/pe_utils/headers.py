#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""PE header constants and bounded reads.

Only the fields needed to tell PE32 from PE32+ are described here.
"""

from __future__ import annotations

from pathlib import Path
import struct
from typing import BinaryIO

from dxvkdeploy.exceptions import TruncatedFileError

DOS_SIGNATURE = b"MZ"
PE_SIGNATURE = b"PE\x00\x00"

# e_lfanew: u32 offset of the PE signature
E_LFANEW_OFFSET = 0x3C

# IMAGE_FILE_HEADER sits between the signature and the optional header
FILE_HEADER_SIZE = 20

OPTIONAL_HEADER_MAGIC_PE32 = 0x10B
OPTIONAL_HEADER_MAGIC_PE32_PLUS = 0x20B

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


def read_exact(handle: BinaryIO, size: int, path: Path) -> bytes:
    """Read exactly ``size`` bytes or raise TruncatedFileError."""
    offset = handle.tell()
    data = handle.read(size)
    if len(data) != size:
        raise TruncatedFileError(path, offset=offset, wanted=size, got=len(data))
    return data


def read_u16(handle: BinaryIO, path: Path) -> int:
    """Read a little-endian unsigned 16-bit integer."""
    value: int = _U16.unpack(read_exact(handle, _U16.size, path))[0]
    return value


def read_u32(handle: BinaryIO, path: Path) -> int:
    """Read a little-endian unsigned 32-bit integer."""
    value: int = _U32.unpack(read_exact(handle, _U32.size, path))[0]
    return value


# 🌶️📦🔚
