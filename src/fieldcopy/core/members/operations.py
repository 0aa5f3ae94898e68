"""Pure functions for enumerating, matching, reading, and writing members.

Usage:
    @dataclass
    class Point:
        x: int = 0
        y: int = 0

    @dataclass
    class Point3D(Point):
        z: int = 0

    members = enumerate_members(Point3D)  # z, then x and y
    match = find_match(enumerate_members(Point), members[1])  # Point.x
    write_member(target, match, read_member(source, members[1]))
"""

from __future__ import annotations

import inspect
import re
import sys
from collections.abc import Iterable
from dataclasses import InitVar, fields, is_dataclass
from typing import Any, ClassVar, Final, get_args, get_origin, get_type_hints

from fieldcopy.core.members.models import (
    Copyable,
    MemberAccessError,
    MemberDescriptor,
    MemberScope,
)

# Declared type of a bare ``Final``, resolved from the class-level value
_INFER = object()

_WRAPPER = re.compile(r"^\s*(?:typing\.|t\.)?(ClassVar|Final)\s*(?:\[(.*)\])?\s*$", re.DOTALL)
_INIT_VAR = re.compile(r"^\s*(?:dataclasses\.)?InitVar\b")
_NOT_SLOTS = frozenset({"__dict__", "__weakref__"})
_FRAMEWORK_PACKAGES = frozenset({"pydantic", "pydantic_settings", "pydantic_core"})


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _mangle(cls: type, name: str) -> str:
    """Apply private name mangling the way the compiler does for slots."""
    if not name.startswith("__") or name.endswith("__"):
        return name
    owner = cls.__name__.lstrip("_")
    return f"_{owner}{name}" if owner else name


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _is_framework_base(cls: type) -> bool:
    """BaseModel, BaseSettings and friends declare pydantic's own machinery, not data."""
    return cls.__module__.partition(".")[0] in _FRAMEWORK_PACKAGES


def _instance_field_names(cls: type) -> frozenset[str]:
    """Names a dataclass or pydantic model stores per instance."""
    if is_dataclass(cls):
        return frozenset(f.name for f in fields(cls))
    if _is_pydantic(cls):
        return frozenset(getattr(cls, "model_fields", {}))
    return frozenset()


def _resolve_one(cls: type, name: str, annotation: Any) -> Any:
    """Resolve a single string annotation of cls, or return it unchanged.

    Module names win over class attributes, as in get_type_hints, so a field
    named like its type (``date: date = date(2020, 1, 1)``) resolves to the type.
    """
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(cls.__module__)
    globalns = vars(module) if module is not None else {}
    localns = {key: value for key, value in vars(cls).items() if key not in globalns}
    for param in getattr(cls, "__type_params__", ()):
        localns[param.__name__] = param

    namespace = {"__annotations__": {name: annotation}, "__module__": cls.__module__}
    holder = type(cls.__name__, (), namespace)
    try:
        return get_type_hints(holder, localns=localns, include_extras=True)[name]
    except (NameError, SyntaxError, TypeError, AttributeError):
        return annotation  # Kept as text; still matches identical text


def _own_annotations(cls: type) -> dict[str, Any]:
    """Annotations declared on cls itself, string annotations resolved where possible.

    When one forward reference cannot be resolved, the others are still
    resolved one at a time.
    """
    raw = inspect.get_annotations(cls)
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, SyntaxError, TypeError, AttributeError):
        return {name: _resolve_one(cls, name, annotation) for name, annotation in raw.items()}
    return {name: hints.get(name, annotation) for name, annotation in raw.items()}


def _own_slots(cls: type) -> list[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return [_mangle(cls, slot) for slot in slots if slot not in _NOT_SLOTS]


def _is_init_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return _INIT_VAR.match(annotation) is not None
    return annotation is InitVar or isinstance(annotation, InitVar)


def _unwrap_text(text: str) -> tuple[Any, bool, bool]:
    class_var = final = False
    match = _WRAPPER.match(text)
    if match and match.group(1) == "ClassVar":
        class_var = True
        if match.group(2) is None:
            return Any, True, False
        text = match.group(2).strip()
        match = _WRAPPER.match(text)
    if match and match.group(1) == "Final":
        final = True
        if match.group(2) is None:
            return _INFER, class_var, True
        text = match.group(2).strip()
    return text, class_var, final


def _unwrap(annotation: Any) -> tuple[Any, bool, bool]:
    """Strip ClassVar/Final wrappers.

    Returns:
        Tuple of (declared_type, is_class_var, is_final).
    """
    if isinstance(annotation, str):
        return _unwrap_text(annotation)

    class_var = final = False
    if annotation is ClassVar:
        return Any, True, False
    if get_origin(annotation) is ClassVar:
        class_var = True
        annotation = get_args(annotation)[0]
    if annotation is Final:
        return _INFER, class_var, True
    if get_origin(annotation) is Final:
        final = True
        annotation = get_args(annotation)[0]
    return annotation, class_var, final


def _declared_members(cls: type) -> list[MemberDescriptor]:
    """Members declared directly on cls, in declaration order."""
    if _is_framework_base(cls):
        return []
    namespace = cls.__dict__
    annotations = _own_annotations(cls)
    instance_fields = _instance_field_names(cls)

    members: list[MemberDescriptor] = []
    for name, annotation in annotations.items():
        if _is_dunder(name) or _is_init_var(annotation):
            continue
        declared, class_var, final = _unwrap(annotation)
        if declared is _INFER:
            declared = type(namespace[name]) if name in namespace else Any
        # A Final with a class-level value is a class constant unless the
        # dataclass/pydantic machinery turned it into an instance field.
        class_scoped = class_var or (
            final and name in namespace and name not in instance_fields
        )
        members.append(
            MemberDescriptor(
                name=name,
                declared_type=declared,
                declaring_type=cls,
                scope=MemberScope.CLASS if class_scoped else MemberScope.INSTANCE,
                final=final,
            )
        )

    for slot in _own_slots(cls):
        if slot in annotations or _is_dunder(slot):
            continue
        members.append(MemberDescriptor(name=slot, declared_type=Any, declaring_type=cls))
    return members


def enumerate_members(cls: type) -> list[MemberDescriptor]:
    """Collect every member declared by cls and all of its ancestors.

    Walks the MRO subtype first. Shadowed members are not de-duplicated:
    a redeclared member appears once for the subclass and once for each
    ancestor that declares it.

    Args:
        cls: Class to inspect.

    Returns:
        Member descriptors, most-derived class first. Empty if nothing is declared.

    Raises:
        TypeError: If cls is not a class.
    """
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")
    members: list[MemberDescriptor] = []
    for klass in cls.__mro__:
        members.extend(_declared_members(klass))
    return members


def same_member(a: MemberDescriptor, b: MemberDescriptor) -> bool:
    """Two members are the same field iff name and declared type are equal."""
    return a.name == b.name and bool(a.declared_type == b.declared_type)


def find_match(
    candidates: Iterable[MemberDescriptor], member: MemberDescriptor
) -> MemberDescriptor | None:
    """Find the first candidate that is the same field as member.

    Constants (class-scoped and final) never match, whatever the candidates.

    Args:
        candidates: Members to search, in enumeration order.
        member: Member to find a counterpart for.

    Returns:
        The first matching candidate, or None.
    """
    if member.is_constant:
        return None
    for candidate in candidates:
        if same_member(candidate, member):
            return candidate
    return None


def read_member(instance: Any, member: MemberDescriptor) -> Any:
    """Read a member's value from instance.

    Class-scoped members are read from their declaring class. Instances
    implementing Copyable are read through ``__get_member__``; a LookupError
    from there means the member holds no value.

    Raises:
        AttributeError: If the member holds no value.
    """
    if member.scope is MemberScope.CLASS:
        return getattr(member.declaring_type, member.name)
    if isinstance(instance, Copyable):
        try:
            return instance.__get_member__(member.name)
        except LookupError as e:
            raise AttributeError(member.name) from e
    return getattr(instance, member.name)


def write_member(
    instance: Any, member: MemberDescriptor, value: Any, *, force: bool = True
) -> None:
    """Write value into a member of instance.

    A rejected ordinary assignment (frozen dataclass, frozen pydantic model,
    custom ``__setattr__``) is retried with ``object.__setattr__`` when force
    is set. Copyable instances are never forced.

    Args:
        instance: Object to write into.
        member: Member to write.
        value: Value to store (aliased, not copied).
        force: Retry rejected writes, bypassing ``__setattr__``.

    Raises:
        MemberAccessError: If the write is rejected.
    """
    if member.scope is MemberScope.CLASS:
        try:
            setattr(member.declaring_type, member.name, value)
        except (AttributeError, TypeError) as e:
            raise MemberAccessError(member, e) from e
        return

    if isinstance(instance, Copyable):
        try:
            instance.__set_member__(member.name, value)
        except (AttributeError, TypeError, ValueError) as e:
            raise MemberAccessError(member, e) from e
        return

    try:
        setattr(instance, member.name, value)
        return
    except (AttributeError, TypeError, ValueError) as e:
        if not force:
            raise MemberAccessError(member, e) from e
        rejected = e

    try:
        object.__setattr__(instance, member.name, value)
    except (AttributeError, TypeError) as e:
        raise MemberAccessError(member, e) from rejected
