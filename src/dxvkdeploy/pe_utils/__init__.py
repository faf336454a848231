"""Windows PE executable utilities.

Only the DOS and PE signatures and the optional-header magic are read; this is
enough to choose between the x32 and x64 halves of a DXVK package.
"""

from dxvkdeploy.pe_utils.validation import inspect_architecture, is_pe_executable

__all__ = [
    "inspect_architecture",
    "is_pe_executable",
]
