"""Recover type arguments bound at generic bases and load types from descriptors.

Usage:
    class Repo[T](Protocol):
        def get(self, key: str) -> T: ...

    class UserRepo(Repo[User]):
        ...

    interface_type_arguments(UserRepo(), Repo)  # (User,)
    interface_type_arguments(UserRepo(), "app.repos.Repo")  # (User,)
    resolve_type_handle("<class 'app.models.User'>")  # User
    resolve_type_handle("app.models.Missing")  # None
"""

from __future__ import annotations

import importlib
import re
from typing import Any, ForwardRef, Generic, Protocol, get_args, get_origin

from fieldcopy.core.generics.models import GenericBase, TypeArgumentError

# Bases that only declare type parameters, not real ancestry
_MARKERS: tuple[Any, ...] = (Generic, Protocol)

_CLASS_REPR = re.compile(r"^<(?:class|enum) '([^']+)'>$")
_QUALIFIED = re.compile(r"^[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*$")


def _qualified_name(cls: Any) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _direct_bases(cls: type) -> tuple[Any, ...]:
    # Own __dict__ only: __orig_bases__ is otherwise inherited from ancestors.
    return cls.__dict__.get("__orig_bases__", cls.__bases__)


def _is_marker(base: Any) -> bool:
    return base in _MARKERS or get_origin(base) in _MARKERS


def _parameterization(base: Any) -> GenericBase | None:
    origin = get_origin(base)
    if origin is not None:
        return GenericBase(origin=origin, args=get_args(base))

    # Parameterized pydantic generic models are real classes, not aliases
    namespace = getattr(base, "__dict__", {})
    metadata = namespace.get("__pydantic_generic_metadata__")
    if metadata and metadata.get("origin") is not None:
        return GenericBase(origin=metadata["origin"], args=tuple(metadata["args"]))
    return None


def generic_bases(cls: type) -> list[GenericBase]:
    """List the parameterized direct bases of cls.

    ``Generic[T]`` and ``Protocol[T]`` markers are left out.

    Args:
        cls: Class to inspect.

    Returns:
        Parameterized bases in declaration order.
    """
    bases: list[GenericBase] = []
    for base in _direct_bases(cls):
        if _is_marker(base):
            continue
        parameterized = _parameterization(base)
        if parameterized is not None:
            bases.append(parameterized)
    return bases


def interface_type_arguments(instance: Any, interface: type | str) -> tuple[Any, ...] | None:
    """Get the type arguments bound where type(instance) implements interface.

    Only direct bases are considered. The interface is matched by identity,
    or by exact fully-qualified name when given as a string.

    Args:
        instance: Object whose class is inspected.
        interface: Generic class or its fully-qualified name.

    Returns:
        Bound type arguments, or None if no parameterized direct base matches.
    """
    for base in generic_bases(type(instance)):
        if isinstance(interface, str):
            if _qualified_name(base.origin) == interface:
                return base.args
        elif base.origin is interface:
            return base.args
    return None


def superclass_type_arguments(instance: Any) -> tuple[Any, ...]:
    """Get the type arguments bound at the immediate superclass of type(instance).

    The superclass is the first direct base that is not a ``Generic``/``Protocol``
    marker. Only call this when the hierarchy guarantees it is parameterized.

    Args:
        instance: Object whose class is inspected.

    Returns:
        Bound type arguments.

    Raises:
        TypeArgumentError: If the superclass is missing or not parameterized.
    """
    cls = type(instance)
    for base in _direct_bases(cls):
        if _is_marker(base):
            continue
        parameterized = _parameterization(base)
        if parameterized is None:
            raise TypeArgumentError(
                f"Superclass {getattr(base, '__qualname__', base)!s} of "
                f"{cls.__qualname__} is not parameterized"
            )
        return parameterized.args
    raise TypeArgumentError(f"{cls.__qualname__} has no generic superclass")


def type_name(tp: Any) -> str | None:
    """Extract the qualified name a type descriptor refers to.

    Understands classes, ``"<class 'a.B'>"`` reprs, ``"class a.B"`` style
    descriptors, bare dotted names, and ForwardRefs.

    Args:
        tp: Class, string, ForwardRef, or any object with a textual form.

    Returns:
        Dotted name, or None if no name token can be parsed.
    """
    if isinstance(tp, type):
        return _qualified_name(tp)
    if isinstance(tp, ForwardRef):
        text = tp.__forward_arg__
    elif isinstance(tp, str):
        text = tp
    else:
        text = str(tp)

    text = text.strip()
    match = _CLASS_REPR.match(text)
    if match:
        text = match.group(1)
    else:
        tokens = text.split()
        if not tokens:
            return None
        text = tokens[-1]
    return text if _QUALIFIED.match(text) else None


def _load(name: str) -> type | None:
    """Import the longest importable module prefix and walk the remaining attributes."""
    parts = name.split(".")
    if len(parts) == 1:
        parts = ["builtins", *parts]

    for split in range(len(parts) - 1, 0, -1):
        try:
            obj: Any = importlib.import_module(".".join(parts[:split]))
        except ImportError:
            continue
        for attr in parts[split:]:
            obj = getattr(obj, attr, None)
            if obj is None:
                return None
        return obj if isinstance(obj, type) else None
    return None


def resolve_type_handle(tp: Any) -> type | None:
    """Resolve a type descriptor to a loadable class.

    A class is returned unchanged and a parameterized alias resolves to its
    origin class. Anything else is parsed with type_name and imported.

    Args:
        tp: Class, generic alias, descriptor string, or ForwardRef.

    Returns:
        The class, or None if the descriptor cannot be parsed or loaded.
    """
    origin = get_origin(tp)
    if origin is None and isinstance(tp, type):
        return tp
    if isinstance(origin, type):
        return origin

    name = type_name(tp)
    if name is None:
        return None
    return _load(name)
