"""fieldcopy: copy members between objects that agree on name and declared type.

Usage:
    from fieldcopy import copy_create, copy_fields, interface_type_arguments

    @dataclass
    class Point:
        x: int = 0
        y: int = 0

    @dataclass
    class Point3D(Point):
        z: int = 0

    copy_create(Point3D(1, 2, 3), Point)  # Point(x=1, y=2)

    class UserRepo(Repo[User]): ...

    interface_type_arguments(UserRepo(), Repo)  # (User,)
"""

__version__ = "0.1.0"

# Configuration
from fieldcopy.config import CopySettings

# Copying
from fieldcopy.copier import (
    CopyResult,
    CopyStatus,
    CopyWarning,
    copy_create,
    copy_fields,
    try_copy_create,
    try_copy_fields,
)

# Core primitives
from fieldcopy.core import (
    Copyable,
    GenericBase,
    MemberAccessError,
    MemberDescriptor,
    MemberScope,
    TypeArgumentError,
    TypeDescriptor,
    describe_type,
    enumerate_members,
    find_match,
    generic_bases,
    interface_type_arguments,
    resolve_type_handle,
    same_member,
    superclass_type_arguments,
    type_name,
)

__all__ = [
    # Version
    "__version__",
    # Members
    "MemberDescriptor",
    "MemberScope",
    "Copyable",
    "MemberAccessError",
    "enumerate_members",
    "find_match",
    "same_member",
    # Copying
    "copy_create",
    "copy_fields",
    "try_copy_create",
    "try_copy_fields",
    "CopyResult",
    "CopyStatus",
    "CopyWarning",
    # Generics
    "GenericBase",
    "TypeArgumentError",
    "generic_bases",
    "interface_type_arguments",
    "superclass_type_arguments",
    "resolve_type_handle",
    "type_name",
    # Description
    "TypeDescriptor",
    "describe_type",
    # Configuration
    "CopySettings",
]
