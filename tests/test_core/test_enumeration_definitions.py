from __future__ import annotations

from typing import Callable

import pytest

from enumerations import (
    Enumeration,
    EnumerationDefinitionError,
    EnumerationRegistry,
    default_registry,
    define_enumeration,
)


class Describable(Enumeration):
    """Members-less base adding behaviour shared by concrete types."""

    def describe(self) -> str:
        return f"{self.get_type()}.{self}={self.value()!r}"


class Direction(Describable):
    NORTH = "N"
    SOUTH = "S"

    @classmethod
    def opposite(cls, member: "Direction") -> "Direction":
        return cls.SOUTH() if member is cls.NORTH() else cls.NORTH()

    @property
    def is_north(self) -> bool:
        return self is type(self).NORTH()


def test_methods_in_class_body_should_not_become_members() -> None:
    assert Direction.all_members() == ["NORTH", "SOUTH"]
    assert Direction.opposite(Direction.NORTH()) is Direction.SOUTH()
    assert Direction.NORTH().is_north is True
    assert Direction.SOUTH().describe() == "Direction.SOUTH='S'"


def test_members_less_intermediate_should_stay_abstract_but_extendable() -> None:
    assert Describable.all_members() == []
    assert Describable.is_defined(Direction.NORTH()) is False


def test_enumeration_with_members_should_be_final() -> None:
    with pytest.raises(EnumerationDefinitionError, match="final"):

        class MoreDirections(Direction):  # noqa: F841
            EAST = "E"


def test_non_scalar_member_should_be_rejected() -> None:
    with pytest.raises(EnumerationDefinitionError, match="list"):

        class Broken(Enumeration):  # noqa: F841
            ITEMS = [1, 2]

    with pytest.raises(EnumerationDefinitionError):

        class Nothing(Enumeration):  # noqa: F841
            MISSING = None


@pytest.mark.parametrize("reserved", ["get_value", "named", "has", "value", "name", "mro"])
def test_member_shadowing_base_attribute_should_be_rejected(reserved: str) -> None:
    with pytest.raises(EnumerationDefinitionError, match="shadows"):
        define_enumeration("Shadowing", {reserved: 1}, registry=EnumerationRegistry())


def test_private_names_should_stay_class_attributes() -> None:
    class WithPrivate(Enumeration):
        _cache_hint = 5
        VISIBLE = 1

    assert WithPrivate.all_members() == ["VISIBLE"]
    assert WithPrivate._cache_hint == 5


def test_define_enumeration_should_keep_order(enumeration_factory: Callable[..., type[Enumeration]]) -> None:
    Level = enumeration_factory("Level", [("LOW", 1), ("HIGH", 3), ("MID", 2)])
    assert Level.all_members() == ["LOW", "HIGH", "MID"]
    assert Level.get_type() == "Level"
    assert Level.get_name(2) == "MID"
    assert Level.HIGH().value() == 3


def test_define_enumeration_should_accept_mappings(enumeration_factory: Callable[..., type[Enumeration]]) -> None:
    Switch = enumeration_factory("Switch", {"ON": True, "OFF": False})
    assert Switch.get_name(False) == "OFF"
    assert issubclass(Switch, Enumeration)


def test_define_enumeration_should_default_module_to_caller() -> None:
    Local = define_enumeration("Local", {"ONLY": 1}, registry=EnumerationRegistry())
    assert Local.__module__ == __name__


@pytest.mark.parametrize(
    "members",
    [
        [("A", 1), ("A", 2)],
        {"_hidden": 1},
        {"not valid": 1},
        {"A": object()},
        {"A": None},
    ],
)
def test_define_enumeration_should_validate_members(members: object) -> None:
    with pytest.raises(EnumerationDefinitionError):
        define_enumeration("Invalid", members, registry=EnumerationRegistry())  # type: ignore[arg-type]


def test_types_should_bind_to_default_registry() -> None:
    assert Direction in default_registry
    assert Describable in default_registry
    assert Enumeration not in default_registry


def test_registry_keyword_should_inject_registry() -> None:
    registry = EnumerationRegistry(name="injected")

    class Injected(Enumeration, registry=registry):
        ONE = 1

    assert Injected in registry
    assert Injected not in default_registry
    assert Injected.get_value("ONE") == 1
    assert registry.is_built(Injected)


def test_subclass_should_inherit_parent_registry() -> None:
    registry = EnumerationRegistry(name="family")

    class Base(Enumeration, registry=registry):
        pass

    class Child(Base):
        ONE = 1

    assert Child in registry
    assert Child not in default_registry
