"""Error hierarchy shared by the enumeration engine.

Lookups split into two families: assertive operations (``get_value``,
``get_name``, member accessors) raise :class:`UndefinedMemberError` on a miss
(accessors raise the :class:`UndefinedAccessorError` subclass, which is also an
``AttributeError``), while membership queries (``is_defined``, ``contains``,
...) report a miss as ``False`` and never raise. Definition-time problems surface as
:class:`EnumerationDefinitionError` when the class statement executes.
"""
from __future__ import annotations

from typing import Any


class EnumerationError(Exception):
    """Base class for all custom exceptions in the package."""


class UndefinedMemberError(EnumerationError, LookupError):
    """Raised when a name, value or instance cannot be resolved on a type."""

    def __init__(self, enumeration: str, reference: Any, message: str | None = None) -> None:
        self.enumeration = enumeration
        self.reference = reference
        super().__init__(message or f"{reference!r} is not a member of enumeration {enumeration}")


class UndefinedAccessorError(UndefinedMemberError, AttributeError):
    """Raised when an undeclared member accessor is looked up on a type.

    Also an ``AttributeError`` so ``hasattr`` and ``getattr(..., default)`` report
    a miss instead of propagating.
    """


class EnumerationDefinitionError(EnumerationError, TypeError):
    """Raised when a class body declares members the engine cannot accept."""


class EnumerationInstantiationError(EnumerationError, TypeError):
    """Raised on direct construction of an enumeration type."""


__all__ = [
    "EnumerationDefinitionError",
    "EnumerationError",
    "EnumerationInstantiationError",
    "UndefinedAccessorError",
    "UndefinedMemberError",
]
