"""Member models: descriptors, scopes, and the opt-in access protocol.

A member is one data attribute a class declares, either through an annotation
or through an unannotated ``__slots__`` entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class MemberScope(Enum):
    """Where a member's value lives."""

    INSTANCE = auto()  # Per-instance attribute
    CLASS = auto()  # Shared class attribute (ClassVar, class-level Final)


@dataclass(slots=True, frozen=True)
class MemberDescriptor:
    """Metadata for one declared member, independent of any instance."""

    name: str
    declared_type: Any
    declaring_type: type
    scope: MemberScope = MemberScope.INSTANCE
    final: bool = False

    @property
    def is_constant(self) -> bool:
        """Class-scoped and immutable. Constants are never copied."""
        return self.scope is MemberScope.CLASS and self.final

    def __repr__(self) -> str:
        return (
            f"MemberDescriptor({self.declaring_type.__qualname__}.{self.name}: "
            f"{self.declared_type!r}, scope={self.scope.name}, final={self.final})"
        )


@runtime_checkable
class Copyable(Protocol):
    """Explicit member access, used instead of reflective getattr/setattr.

    Types implementing this are read and written only through these two
    methods, so they decide for themselves which writes are allowed.

    ``__get_member__`` raises AttributeError for a member that holds no value
    (a KeyError from a backing dict is treated the same way), and such members
    are skipped when copying. ``__set_member__`` raises AttributeError,
    TypeError or ValueError to refuse a write.
    """

    def __get_member__(self, name: str) -> Any: ...
    def __set_member__(self, name: str, value: Any) -> None: ...


class MemberAccessError(Exception):
    """Raised when a member write is rejected despite the access override."""

    def __init__(self, member: MemberDescriptor, cause: BaseException | None = None) -> None:
        self.member = member
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Cannot write {member.declaring_type.__name__}.{member.name}{detail}"
        )
