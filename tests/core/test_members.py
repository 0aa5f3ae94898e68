"""Tests for member enumeration, matching, and access.

Critical Invariants:
- Enumeration walks subtype first and never de-duplicates shadowed members
- Constants (class-scoped and final) never match
- Matching is name + declared type only; declaring class is irrelevant
"""

from dataclasses import InitVar, dataclass
from typing import Any, ClassVar, Final, NamedTuple

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from fieldcopy import (
    MemberAccessError,
    MemberDescriptor,
    MemberScope,
    enumerate_members,
    find_match,
    same_member,
)
from fieldcopy.core.members import read_member, write_member


class Base:
    a: int
    b: str


class Child(Base):
    c: float
    a: int


class Empty:
    pass


class WithConstants:
    MAX: Final = 100
    TIMEOUT: Final[float] = 1.5
    counter: ClassVar[int] = 0
    name: str
    limit: Final[int]


@dataclass
class FinalDataclass:
    version: Final[int] = 1


@dataclass
class WithInitVar:
    value: int = 0
    seed: InitVar[int] = 0


class Slotted:
    __slots__ = ("left", "right", "__hidden")
    left: int


class Secretive:
    __token: str


class Forward:
    count: "int"
    other: "Undefined"  # noqa: F821


class UserModel(BaseModel):
    id: int
    name: str = ""
    kind: ClassVar[str] = "user"


@dataclass(frozen=True)
class FrozenPoint:
    x: int = 0


class Pair(NamedTuple):
    left: int
    right: int


class Recorder:
    """Opts in to explicit member access."""

    value: int

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.store: dict[str, Any] = {"value": 7}

    def __get_member__(self, name: str) -> Any:
        self.calls.append(("get", name))
        return self.store[name]

    def __set_member__(self, name: str, value: Any) -> None:
        self.calls.append(("set", name))
        self.store[name] = value


def _names(cls: type) -> list[str]:
    return [m.name for m in enumerate_members(cls)]


# Enumeration


def test_enumeration_is_subtype_first_without_deduplication():
    """Shadowed members appear once per declaring class, subclass first."""
    members = enumerate_members(Child)

    assert [m.name for m in members] == ["c", "a", "a", "b"]
    assert [m.declaring_type for m in members] == [Child, Child, Base, Base]


def test_enumeration_of_empty_class_is_empty():
    assert enumerate_members(Empty) == []
    assert enumerate_members(object) == []


def test_enumeration_rejects_non_class():
    with pytest.raises(TypeError, match="Expected a class"):
        enumerate_members(Child())  # type: ignore[arg-type]


def test_scope_and_finality_from_annotations():
    by_name = {m.name: m for m in enumerate_members(WithConstants)}

    assert by_name["MAX"].scope is MemberScope.CLASS
    assert by_name["MAX"].final
    assert by_name["MAX"].declared_type is int  # inferred from the value
    assert by_name["TIMEOUT"].is_constant
    assert by_name["TIMEOUT"].declared_type is float
    assert by_name["counter"].scope is MemberScope.CLASS
    assert not by_name["counter"].is_constant
    assert by_name["name"].scope is MemberScope.INSTANCE
    assert by_name["limit"].scope is MemberScope.INSTANCE
    assert by_name["limit"].final
    assert not by_name["limit"].is_constant


def test_final_dataclass_field_is_instance_scoped():
    (member,) = enumerate_members(FinalDataclass)

    assert member.scope is MemberScope.INSTANCE
    assert member.final
    assert member.declared_type is int


def test_init_vars_are_not_members():
    assert _names(WithInitVar) == ["value"]


def test_unannotated_slots_are_members_of_any_type():
    members = enumerate_members(Slotted)

    assert [m.name for m in members] == ["left", "right", "_Slotted__hidden"]
    assert [m.declared_type for m in members] == [int, Any, Any]


def test_private_names_are_mangled():
    assert _names(Secretive) == ["_Secretive__token"]


def test_string_annotations_resolve_individually():
    """An unresolvable forward reference does not block the others."""
    by_name = {m.name: m.declared_type for m in enumerate_members(Forward)}

    assert by_name["count"] is int
    assert by_name["other"] == "Undefined"


def test_pydantic_model_members_exclude_framework_internals():
    members = enumerate_members(UserModel)

    assert [m.name for m in members] == ["id", "name", "kind"]
    assert members[2].scope is MemberScope.CLASS


@given(depth=st.integers(min_value=1, max_value=6), width=st.integers(min_value=0, max_value=5))
def test_member_count_is_depth_times_width(depth, width):
    """N ancestors declaring k members each yield exactly N*k descriptors."""
    cls: type = object
    for level in range(depth):
        annotations = {f"m{i}": int for i in range(width)}
        cls = type(f"Level{level}", (cls,), {"__annotations__": annotations})

    assert len(enumerate_members(cls)) == depth * width


# Matching


def test_match_ignores_declaring_type():
    member = MemberDescriptor(name="a", declared_type=int, declaring_type=Empty)

    match = find_match(enumerate_members(Base), member)

    assert match is not None
    assert match.declaring_type is Base


def test_match_requires_identical_declared_type():
    member = MemberDescriptor(name="a", declared_type=float, declaring_type=Empty)

    assert find_match(enumerate_members(Base), member) is None


def test_most_derived_declaration_wins():
    member = MemberDescriptor(name="a", declared_type=int, declaring_type=Empty)

    match = find_match(enumerate_members(Child), member)

    assert match is not None
    assert match.declaring_type is Child


def test_constants_never_match():
    constant = MemberDescriptor(
        name="MAX",
        declared_type=int,
        declaring_type=Empty,
        scope=MemberScope.CLASS,
        final=True,
    )

    assert find_match(enumerate_members(WithConstants), constant) is None


def test_same_member_compares_generic_aliases_by_equality():
    a = MemberDescriptor(name="tags", declared_type=list[str], declaring_type=Base)
    b = MemberDescriptor(name="tags", declared_type=list[str], declaring_type=Child)
    c = MemberDescriptor(name="tags", declared_type=list[int], declaring_type=Child)

    assert same_member(a, b)
    assert not same_member(a, c)


# Access


def test_forced_write_bypasses_frozen_dataclass():
    point = FrozenPoint(1)
    (member,) = enumerate_members(FrozenPoint)

    write_member(point, member, 5)

    assert point.x == 5


def test_unforced_write_to_frozen_dataclass_is_rejected():
    point = FrozenPoint(1)
    (member,) = enumerate_members(FrozenPoint)

    with pytest.raises(MemberAccessError, match="FrozenPoint.x"):
        write_member(point, member, 5, force=False)
    assert point.x == 1


def test_read_only_descriptor_is_rejected_even_when_forced():
    pair = Pair(1, 2)
    left = enumerate_members(Pair)[0]

    with pytest.raises(MemberAccessError):
        write_member(pair, left, 9)


def test_copyable_instances_use_explicit_access():
    recorder = Recorder()
    (member,) = enumerate_members(Recorder)

    assert read_member(recorder, member) == 7
    write_member(recorder, member, 8)

    assert recorder.store["value"] == 8
    assert recorder.calls == [("get", "value"), ("set", "value")]


def test_class_scoped_members_read_from_declaring_class():
    by_name = {m.name: m for m in enumerate_members(WithConstants)}

    assert read_member(WithConstants(), by_name["TIMEOUT"]) == 1.5


def test_reading_unset_member_raises_attribute_error():
    by_name = {m.name: m for m in enumerate_members(WithConstants)}

    with pytest.raises(AttributeError):
        read_member(WithConstants(), by_name["name"])


def test_copyable_lookup_error_reads_as_unset_member():
    recorder = Recorder()
    recorder.store.clear()
    (member,) = enumerate_members(Recorder)

    with pytest.raises(AttributeError, match="value"):
        read_member(recorder, member)
