"""Member functionality: descriptors, enumeration, matching, and access."""

from fieldcopy.core.members.models import (
    Copyable,
    MemberAccessError,
    MemberDescriptor,
    MemberScope,
)
from fieldcopy.core.members.operations import (
    enumerate_members,
    find_match,
    read_member,
    same_member,
    write_member,
)

__all__ = [
    # Models
    "MemberDescriptor",
    "MemberScope",
    "Copyable",
    "MemberAccessError",
    # Operations
    "enumerate_members",
    "find_match",
    "same_member",
    "read_member",
    "write_member",
]
