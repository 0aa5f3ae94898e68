"""Copy member values between objects that share members by name and declared type.

Usage:
    @dataclass
    class Point:
        x: int = 0
        y: int = 0

    @dataclass
    class Point3D(Point):
        z: int = 0

    point = copy_create(Point3D(1, 2, 3), Point)  # Point(x=1, y=2)

    clone = Point3D()
    copy_fields(Point3D(1, 2, 3), clone)  # True, clone == Point3D(1, 2, 3)

    # Explicit outcome instead of None/False
    result = try_copy_create(source, Target)
    result.status, result.copied, result.error
"""

from __future__ import annotations

import warnings
from typing import Any

from fieldcopy.config import CopySettings
from fieldcopy.copier.result import CopyResult, CopyStatus, CopyWarning
from fieldcopy.core.members import (
    MemberAccessError,
    enumerate_members,
    find_match,
    read_member,
    write_member,
)

# Statuses that mean something went wrong, not just "nothing to copy"
_FAILURES = frozenset({CopyStatus.CONSTRUCTION_FAILED, CopyStatus.ACCESS_FAILED})


def try_copy_create[T](
    source: Any, target_type: type[T], *, settings: CopySettings | None = None
) -> CopyResult[T]:
    """Create a target_type instance and copy every matching member from source.

    A target member matches a source member when both name and declared type
    are equal. Unmatched target members keep the values the constructor gave
    them. Source members that hold no value are skipped.

    Args:
        source: Object to copy from.
        target_type: Class to instantiate; must accept no arguments.
        settings: Copy settings. Defaults to CopySettings() from the environment.

    Returns:
        CopyResult carrying the new instance when status is COPIED.

    Raises:
        TypeError: If target_type is not a class.
    """
    if not isinstance(target_type, type):
        raise TypeError(f"Expected a target class, got {type(target_type).__name__}")
    if settings is None:
        settings = CopySettings()

    try:
        instance = target_type()
    except Exception as e:
        return CopyResult(CopyStatus.CONSTRUCTION_FAILED, error=e)

    source_members = enumerate_members(type(source))
    target_members = enumerate_members(target_type)
    if not source_members or not target_members:
        return CopyResult(CopyStatus.NO_MEMBERS)

    copied: list[str] = []
    for member in target_members:
        match = find_match(source_members, member)
        if match is None:
            continue
        try:
            value = read_member(source, match)
        except AttributeError:
            continue
        try:
            write_member(instance, member, value, force=settings.force_access)
        except MemberAccessError as e:
            return CopyResult(CopyStatus.ACCESS_FAILED, copied=copied, error=e)
        copied.append(member.name)

    return CopyResult(CopyStatus.COPIED, instance=instance, copied=copied)


def try_copy_fields[S](
    source: S, target: S, *, settings: CopySettings | None = None
) -> CopyResult[S]:
    """Copy every non-constant member of source's class into target.

    Stops at the first rejected write. Members written before that keep their
    new values; nothing is rolled back.

    Args:
        source: Object to copy from.
        target: Object to copy into; must be an instance of type(source).
        settings: Copy settings. Defaults to CopySettings() from the environment.

    Returns:
        CopyResult with target as instance and the names of members written.

    Raises:
        TypeError: If target is not an instance of type(source).
    """
    if not isinstance(target, type(source)):
        raise TypeError(
            f"Cannot copy {type(source).__name__} members into {type(target).__name__}: "
            f"target must be the same type or a subtype"
        )
    if settings is None:
        settings = CopySettings()

    result = CopyResult[S](CopyStatus.COPIED, instance=target)
    for member in enumerate_members(type(source)):
        if member.is_constant:
            continue
        try:
            value = read_member(source, member)
        except AttributeError:
            continue
        try:
            write_member(target, member, value, force=settings.force_access)
        except MemberAccessError as e:
            result.status = CopyStatus.ACCESS_FAILED
            result.error = e
            return result
        result.copied.append(member.name)
    return result


def copy_create[T](
    source: Any, target_type: type[T], *, settings: CopySettings | None = None
) -> T | None:
    """Create a target_type instance populated from source, or None if the copy failed.

    See try_copy_create for matching rules. Construction and access failures
    are reported as a CopyWarning when settings.warn_on_failure is set.

    Args:
        source: Object to copy from.
        target_type: Class to instantiate; must accept no arguments.
        settings: Copy settings. Defaults to CopySettings() from the environment.

    Returns:
        The new instance, or None if nothing was created.
    """
    if settings is None:
        settings = CopySettings()
    result = try_copy_create(source, target_type, settings=settings)
    if result.status in _FAILURES and settings.warn_on_failure:
        warnings.warn(
            f"copy_create({type(source).__name__} -> {target_type.__name__}) "
            f"{result.describe()}",
            CopyWarning,
            stacklevel=2,
        )
    return result.instance


def copy_fields(source: Any, target: Any, *, settings: CopySettings | None = None) -> bool:
    """Copy all non-constant members of source into target.

    Args:
        source: Object to copy from.
        target: Object to copy into; must be an instance of type(source).
        settings: Copy settings. Defaults to CopySettings() from the environment.

    Returns:
        True on success, False if a write was rejected.

    Raises:
        TypeError: If target is not an instance of type(source).
    """
    if settings is None:
        settings = CopySettings()
    result = try_copy_fields(source, target, settings=settings)
    if not result.ok and settings.warn_on_failure:
        warnings.warn(
            f"copy_fields({type(source).__name__} -> {type(target).__name__}) "
            f"{result.describe()}",
            CopyWarning,
            stacklevel=2,
        )
    return result.ok
