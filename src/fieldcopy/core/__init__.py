"""Core functionalities: stateless reflective building blocks.

Architecture Note:
    core/ contains pure functions over class metadata. Every call re-reads
    the classes it is given; nothing is cached. The copy operations built on
    top of these live in copier/.
"""

from fieldcopy.core.describe import TypeDescriptor, describe_type
from fieldcopy.core.generics import (
    GenericBase,
    TypeArgumentError,
    generic_bases,
    interface_type_arguments,
    resolve_type_handle,
    superclass_type_arguments,
    type_name,
)
from fieldcopy.core.members import (
    Copyable,
    MemberAccessError,
    MemberDescriptor,
    MemberScope,
    enumerate_members,
    find_match,
    read_member,
    same_member,
    write_member,
)

__all__ = [
    # Description
    "TypeDescriptor",
    "describe_type",
    # Members
    "MemberDescriptor",
    "MemberScope",
    "Copyable",
    "MemberAccessError",
    "enumerate_members",
    "find_match",
    "same_member",
    "read_member",
    "write_member",
    # Generics
    "GenericBase",
    "TypeArgumentError",
    "generic_bases",
    "interface_type_arguments",
    "superclass_type_arguments",
    "resolve_type_handle",
    "type_name",
]
