"""Snapshot of the reflective metadata of one class."""

from __future__ import annotations

from dataclasses import dataclass

from fieldcopy.core.generics import GenericBase, generic_bases
from fieldcopy.core.members import MemberDescriptor, enumerate_members


@dataclass(slots=True, frozen=True)
class TypeDescriptor:
    """Identity, members, ancestry, and generic parameterization of a class."""

    name: str
    qualified_name: str
    members: tuple[MemberDescriptor, ...]
    ancestor: type | None
    generic_bases: tuple[GenericBase, ...]


def describe_type(cls: type) -> TypeDescriptor:
    """Build a TypeDescriptor for cls.

    The ancestor is the next class in the MRO (None for ``object``).
    Nothing is cached; every call re-reads the class.

    Raises:
        TypeError: If cls is not a class.
    """
    members = enumerate_members(cls)
    mro = cls.__mro__
    return TypeDescriptor(
        name=cls.__name__,
        qualified_name=f"{cls.__module__}.{cls.__qualname__}",
        members=tuple(members),
        ancestor=mro[1] if len(mro) > 1 else None,
        generic_bases=tuple(generic_bases(cls)),
    )
