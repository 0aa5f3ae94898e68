"""Instance copying: create-and-copy and copy-into-existing.

Architecture Note:
    copier/ orchestrates the pure building blocks in core/ (member
    enumeration, matching, and access) into the public copy operations.
    It holds no state between calls.
"""

from fieldcopy.copier.copier import copy_create, copy_fields, try_copy_create, try_copy_fields
from fieldcopy.copier.result import CopyResult, CopyStatus, CopyWarning

__all__ = [
    "copy_create",
    "copy_fields",
    "try_copy_create",
    "try_copy_fields",
    "CopyResult",
    "CopyStatus",
    "CopyWarning",
]
