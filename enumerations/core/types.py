"""Scalar value kinds and the tagged representation used for lookups.

Python treats ``0 == False == 0.0`` and ``1 == True`` and hashes them alike,
so a plain dict keyed by member values would confuse a boolean member with an
integer one. Every member value is therefore stored as a :class:`TaggedValue`
whose equality also compares the :class:`ScalarKind`.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Mapping, NamedTuple, Tuple, TypeAlias, Union

Scalar: TypeAlias = Union[bool, int, float, str]
MemberDeclarations: TypeAlias = Union[Mapping[str, Scalar], Iterable[Tuple[str, Scalar]]]


class ScalarKind(str, Enum):
    """Kinds of value an enumeration member may carry."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"


class TaggedValue(NamedTuple):
    """A member value paired with its kind; equal only when both match."""

    kind: ScalarKind
    value: Scalar

    @classmethod
    def of(cls, value: object) -> "TaggedValue | None":
        """Tag ``value`` or return None when it is not a supported scalar."""

        # bool first: it is a subclass of int
        if isinstance(value, bool):
            return cls(ScalarKind.BOOLEAN, value)
        if isinstance(value, int):
            return cls(ScalarKind.INTEGER, value)
        if isinstance(value, float):
            return cls(ScalarKind.FLOAT, value)
        if isinstance(value, str):
            return cls(ScalarKind.STRING, value)
        return None


def is_scalar(value: object) -> bool:
    return TaggedValue.of(value) is not None


__all__ = [
    "MemberDeclarations",
    "Scalar",
    "ScalarKind",
    "TaggedValue",
    "is_scalar",
]
