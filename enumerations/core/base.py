"""The enumeration engine: base type, metaclass and functional definition API.

A concrete enumeration is declared by subclassing :class:`Enumeration` and
binding scalar constants in the class body::

    class Color(Enumeration):
        RED = 1
        GREEN = 2

The metaclass lifts those constants out of the class namespace and declares
them, in body order, on an :class:`~enumerations.core.registry.EnumerationRegistry`.
``Color.RED`` then resolves to a zero-argument accessor from the registry's
member table and ``Color.RED()`` returns the singleton member instance.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic_core import core_schema

from .errors import (
    EnumerationDefinitionError,
    EnumerationError,
    EnumerationInstantiationError,
    UndefinedMemberError,
)
from .registry import EnumerationRegistry, MemberTable, default_registry
from .types import MemberDeclarations, Scalar, is_scalar

logger = logging.getLogger("enumerations.engine")


def _is_class_attribute(value: object) -> bool:
    """Callables and descriptors stay on the class instead of becoming members."""

    return callable(value) or hasattr(type(value), "__get__")


def _reserved_names(bases: Tuple[type, ...]) -> set[str]:
    reserved: set[str] = set()
    for klass in EnumerationMeta.__mro__:
        reserved.update(vars(klass))
    for base in bases:
        for klass in base.__mro__:
            reserved.update(vars(klass))
    return reserved


class EnumerationMeta(type):
    """Metaclass that captures member declarations and serves member lookups."""

    def __new__(
        mcs,
        cls_name: str,
        bases: Tuple[type, ...],
        namespace: Dict[str, Any],
        *,
        registry: Optional[EnumerationRegistry] = None,
        **kwargs: Any,
    ) -> "EnumerationMeta":
        enum_bases = [base for base in bases if isinstance(base, EnumerationMeta)]
        is_root = not enum_bases
        for base in enum_bases:
            if base.__dict__.get("_declared_names"):
                raise EnumerationDefinitionError(
                    f"{cls_name} cannot extend {base.__name__}: enumerations with members are final"
                )

        reserved = _reserved_names(bases)
        body: Dict[str, Any] = {}
        declarations: List[Tuple[str, Scalar]] = []
        for key, value in namespace.items():
            if key.startswith("_"):
                body[key] = value
            elif is_scalar(value):
                if key in reserved:
                    raise EnumerationDefinitionError(
                        f"{cls_name}.{key} shadows an attribute of the enumeration base"
                    )
                declarations.append((key, value))
            elif _is_class_attribute(value):
                body[key] = value
            else:
                raise EnumerationDefinitionError(
                    f"{cls_name}.{key}: members must be bool, int, float or str, "
                    f"got {type(value).__name__}"
                )

        if registry is None:
            registry = enum_bases[0].__dict__.get("_registry", default_registry) if enum_bases else default_registry
        body.setdefault("__slots__", ())
        body["_registry"] = registry
        body["_declared_names"] = tuple(name for name, _ in declarations)
        body["_abstract_root"] = is_root

        cls = super().__new__(mcs, cls_name, bases, body, **kwargs)
        if not is_root:
            registry.declare(cls, declarations, cls._create_member)
        return cls

    def __init__(
        cls,
        cls_name: str,
        bases: Tuple[type, ...],
        namespace: Dict[str, Any],
        *,
        registry: Optional[EnumerationRegistry] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(cls_name, bases, namespace, **kwargs)

    def _member_table(cls) -> MemberTable:
        if cls.__dict__.get("_abstract_root", False):
            raise EnumerationError(f"{cls.__name__} is the abstract enumeration base and declares no members")
        return cls.__dict__["_registry"].table(cls)

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        raise EnumerationInstantiationError(
            f"{cls.__name__} is an enumeration and cannot be instantiated; "
            f"use {cls.__name__}.<MEMBER>() or {cls.__name__}.member(name)"
        )

    def __getattr__(cls, name: str) -> Any:
        if name.startswith("_") or cls.__dict__.get("_abstract_root", False):
            raise AttributeError(f"type object {cls.__name__!r} has no attribute {name!r}")
        return cls._member_table().accessor(name)

    def __setattr__(cls, name: str, value: Any) -> None:
        if name in cls.__dict__.get("_declared_names", ()):
            raise AttributeError(f"Cannot reassign enumeration member {cls.__name__}.{name}")
        super().__setattr__(name, value)

    def __delattr__(cls, name: str) -> None:
        if name in cls.__dict__.get("_declared_names", ()):
            raise AttributeError(f"Cannot delete enumeration member {cls.__name__}.{name}")
        super().__delattr__(name)

    def __dir__(cls) -> List[str]:
        return sorted(set(super().__dir__()) | set(cls.__dict__.get("_declared_names", ())))

    # Container protocol -------------------------------------------------
    def __iter__(cls) -> Iterator[Any]:
        return iter(cls._member_table().instances())

    def __len__(cls) -> int:
        return len(cls._member_table())

    def __bool__(cls) -> bool:
        return True

    def __contains__(cls, member_ref: object) -> bool:
        return cls.is_defined(member_ref)

    def __getitem__(cls, name: str) -> Any:
        return cls.member(name)

    def __repr__(cls) -> str:
        return f"<enumeration {cls.__name__!r}>"


class Enumeration(metaclass=EnumerationMeta):
    """Abstract base of every enumeration type.

    Instances are member singletons produced by the member table; they render
    as their name and expose the declared value through :meth:`value`.
    """

    __slots__ = ("_name", "_value")

    @classmethod
    def _create_member(cls, name: str, value: Scalar) -> "Enumeration":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_name", name)
        object.__setattr__(instance, "_value", value)
        return instance

    # Assertive lookups ------------------------------------------------
    @classmethod
    def get_value(cls, member_ref: Any) -> Scalar:
        """Return the value of a member given its name or its instance.

        Raises:
            UndefinedMemberError: the name is not declared on this type, the
                instance belongs to another enumeration, or ``member_ref`` is
                neither a string nor a member instance.
        """

        table = cls._member_table()
        if isinstance(member_ref, Enumeration):
            if type(member_ref) is not cls:
                raise UndefinedMemberError(
                    cls.__name__,
                    member_ref,
                    f"{member_ref!r} belongs to enumeration {type(member_ref).__name__}, not {cls.__name__}",
                )
            return member_ref._value
        if isinstance(member_ref, str):
            return table.value_of(member_ref)
        raise UndefinedMemberError(cls.__name__, member_ref)

    @classmethod
    def named(cls, name: str) -> Scalar:
        if not isinstance(name, str):
            raise UndefinedMemberError(cls.__name__, name)
        return cls._member_table().value_of(name)

    @classmethod
    def get_name(cls, value: Any) -> str:
        """Return the first declared member name whose value is ``value``.

        Comparison is type-sensitive: ``0`` never matches a ``False`` member.
        """

        return cls._member_table().name_of(value)

    @classmethod
    def with_value(cls, value: Any) -> str:
        return cls.get_name(value)

    @classmethod
    def member(cls, name: str) -> "Enumeration":
        """Return the singleton for ``name``; same as calling ``cls.<name>()``."""

        if not isinstance(name, str):
            raise UndefinedMemberError(cls.__name__, name)
        return cls._member_table().instance(name)

    # Membership queries -----------------------------------------------
    @classmethod
    def is_defined(cls, member_ref: Any) -> bool:
        """Report whether a name or an instance belongs to this type. Never raises."""

        if isinstance(member_ref, Enumeration):
            return type(member_ref) is cls
        return member_ref in cls._member_table()

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls._member_table()

    @classmethod
    def has(cls, name: str) -> bool:
        return name in cls._member_table()

    @classmethod
    def defines(cls, name: str) -> bool:
        return name in cls._member_table()

    # Introspection ----------------------------------------------------
    @classmethod
    def all_members(cls) -> List[str]:
        return list(cls._member_table().names)

    @classmethod
    def members(cls) -> List["Enumeration"]:
        return cls._member_table().instances()

    @classmethod
    def get_type(cls) -> str:
        return cls.__name__

    # Instance behaviour -----------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    def value(self) -> Scalar:
        return self._value

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._name}: {self._value!r}>"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__}.{self._name} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__}.{self._name} is immutable")

    def __reduce__(self) -> Tuple[Any, Tuple[str]]:
        return type(self).member, (self._name,)

    def __copy__(self) -> "Enumeration":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Enumeration":
        return self

    # pydantic integration ---------------------------------------------
    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        """Validate by instance, name or value; serialize as the member name.

        Names win over values when a string is both a member name and a value.
        """

        def validate(raw: Any) -> Enumeration:
            if isinstance(raw, Enumeration):
                if type(raw) is not cls:
                    raise ValueError(f"{raw!r} is not a member of {cls.__name__}")
                return raw
            if isinstance(raw, str) and cls.has(raw):
                return cls.member(raw)
            try:
                return cls.member(cls.get_name(raw))
            except UndefinedMemberError as exc:
                raise ValueError(str(exc)) from exc

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda member: member.name),
        )


def define_enumeration(
    name: str,
    members: MemberDeclarations,
    *,
    module: Optional[str] = None,
    registry: Optional[EnumerationRegistry] = None,
    bases: Tuple[type, ...] = (),
) -> type[Enumeration]:
    """Build a concrete enumeration type from ``(name, value)`` pairs.

    ``members`` may be a mapping or an iterable of pairs; order is kept. The
    new type's ``__module__`` defaults to the caller's module.
    """

    pairs = list(members.items()) if isinstance(members, Mapping) else [tuple(pair) for pair in members]
    namespace: Dict[str, Any] = {}
    for member_name, value in pairs:
        if not isinstance(member_name, str) or not member_name.isidentifier() or member_name.startswith("_"):
            raise EnumerationDefinitionError(f"{name}: {member_name!r} is not a valid member name")
        if member_name in namespace:
            raise EnumerationDefinitionError(f"{name}.{member_name} is declared more than once")
        if not is_scalar(value):
            raise EnumerationDefinitionError(
                f"{name}.{member_name}: members must be bool, int, float or str, got {type(value).__name__}"
            )
        namespace[member_name] = value

    if module is None:
        module = sys._getframe(1).f_globals.get("__name__", "__main__")
    namespace["__module__"] = module
    namespace["__qualname__"] = name

    cls = EnumerationMeta(name, bases or (Enumeration,), namespace, registry=registry)
    logger.debug(
        "Defined enumeration",
        extra={"enumeration": name, "enumeration_module": module, "n_members": len(pairs)},
    )
    return cls


__all__ = ["Enumeration", "EnumerationMeta", "define_enumeration"]
