"""Per-type member tables and the registry that owns them.

An :class:`EnumerationRegistry` receives the declarations captured from each
class body and turns them into a :class:`MemberTable` the first time the type
is used. Tables and member instances are append-only: once built they live for
the rest of the process.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Iterator, List, Sequence, Tuple

from .errors import EnumerationDefinitionError, EnumerationError, UndefinedAccessorError, UndefinedMemberError
from .types import Scalar, TaggedValue

logger = logging.getLogger("enumerations.registry")

MemberFactory = Callable[[str, Scalar], Any]


class MemberTable:
    """Ordered name/value mapping, accessor table and singleton cache of one type.

    Values are kept as :class:`TaggedValue` so the reverse index never mixes up
    ``0`` and ``False``. Duplicate values are allowed; the reverse index keeps
    the first name declared for each value.
    """

    def __init__(
        self,
        enumeration: type,
        declarations: Sequence[Tuple[str, Scalar]],
        factory: MemberFactory,
    ) -> None:
        self.enumeration = enumeration
        self._factory = factory
        self._values: Dict[str, TaggedValue] = {}
        self._names_by_value: Dict[TaggedValue, str] = {}
        for name, raw_value in declarations:
            tagged = TaggedValue.of(raw_value)
            if tagged is None:
                raise EnumerationDefinitionError(
                    f"{self.type_name}.{name}: {type(raw_value).__name__} is not a supported member value"
                )
            if name in self._values:
                raise EnumerationDefinitionError(f"{self.type_name}.{name} is declared more than once")
            self._values[name] = tagged
            self._names_by_value.setdefault(tagged, name)
        self._names: Tuple[str, ...] = tuple(self._values)
        self._accessors: Dict[str, Callable[[], Any]] = {name: self._make_accessor(name) for name in self._names}
        self._instances: Dict[str, Any] = {}
        self._lock = threading.Lock()

    @property
    def type_name(self) -> str:
        return self.enumeration.__name__

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    # Lookups -----------------------------------------------------------
    def value_of(self, name: str) -> Scalar:
        try:
            return self._values[name].value
        except KeyError as exc:
            raise UndefinedMemberError(self.type_name, name) from exc

    def name_of(self, value: object) -> str:
        tagged = TaggedValue.of(value)
        name = self._names_by_value.get(tagged) if tagged is not None else None
        if name is None:
            raise UndefinedMemberError(
                self.type_name,
                value,
                f"No member of enumeration {self.type_name} has value {value!r}",
            )
        return name

    def accessor(self, name: str) -> Callable[[], Any]:
        try:
            return self._accessors[name]
        except KeyError as exc:
            raise UndefinedAccessorError(self.type_name, name) from exc

    # Singletons --------------------------------------------------------
    def instance(self, name: str) -> Any:
        """Return the singleton for ``name``, creating it on first use."""

        existing = self._instances.get(name)
        if existing is not None:
            return existing
        value = self.value_of(name)
        with self._lock:
            existing = self._instances.get(name)
            if existing is None:
                existing = self._factory(name, value)
                self._instances[name] = existing
        return existing

    def instances(self) -> List[Any]:
        return [self.instance(name) for name in self._names]

    def _make_accessor(self, name: str) -> Callable[[], Any]:
        def accessor() -> Any:
            return self.instance(name)

        accessor.__name__ = name
        accessor.__qualname__ = f"{self.enumeration.__qualname__}.{name}"
        accessor.__doc__ = f"Return the {self.type_name}.{name} member."
        return accessor


class EnumerationRegistry:
    """Owner of every member table, keyed by enumeration type identity.

    Declarations are recorded when a class statement executes; the matching
    table is built once, under the registry lock, on first use. Later reads do
    not take the lock.
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self._declarations: Dict[type, Tuple[Tuple[Tuple[str, Scalar], ...], MemberFactory]] = {}
        self._tables: Dict[type, MemberTable] = {}
        self._lock = threading.Lock()

    def declare(
        self,
        enumeration: type,
        declarations: Sequence[Tuple[str, Scalar]],
        factory: MemberFactory,
    ) -> None:
        with self._lock:
            if enumeration in self._declarations:
                raise EnumerationDefinitionError(
                    f"{enumeration.__name__} is already declared in registry {self.name!r}"
                )
            self._declarations[enumeration] = (tuple(declarations), factory)
        logger.debug(
            "Declared enumeration",
            extra={
                "registry": self.name,
                "enumeration": enumeration.__qualname__,
                "n_members": len(declarations),
            },
        )

    def table(self, enumeration: type) -> MemberTable:
        table = self._tables.get(enumeration)
        if table is not None:
            return table
        with self._lock:
            table = self._tables.get(enumeration)
            if table is None:
                try:
                    declarations, factory = self._declarations[enumeration]
                except KeyError as exc:
                    raise EnumerationError(
                        f"{enumeration.__name__} is not declared in registry {self.name!r}"
                    ) from exc
                table = MemberTable(enumeration, declarations, factory)
                self._tables[enumeration] = table
                logger.debug(
                    "Built member table",
                    extra={
                        "registry": self.name,
                        "enumeration": enumeration.__qualname__,
                        "member_names": list(table.names),
                    },
                )
        return table

    def is_declared(self, enumeration: type) -> bool:
        return enumeration in self._declarations

    def is_built(self, enumeration: type) -> bool:
        return enumeration in self._tables

    def declared_types(self) -> List[type]:
        return list(self._declarations)

    def __contains__(self, enumeration: object) -> bool:
        return enumeration in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"<EnumerationRegistry {self.name!r} types={len(self)}>"


default_registry = EnumerationRegistry()


__all__ = ["EnumerationRegistry", "MemberFactory", "MemberTable", "default_registry"]
