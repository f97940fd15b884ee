"""Closed-set, named-constant types.

Subclass :class:`Enumeration`, bind scalar constants in the class body and use
the inherited lookups (``get_value``, ``get_name``, ``is_defined``, ...) and
member accessors (``Color.RED()``). Definitions can also be loaded from YAML
through :mod:`enumerations.config`.
"""

from .core import (
    Enumeration,
    EnumerationDefinitionError,
    EnumerationError,
    EnumerationInstantiationError,
    EnumerationRegistry,
    ScalarKind,
    TaggedValue,
    UndefinedAccessorError,
    UndefinedMemberError,
    default_registry,
    define_enumeration,
)

__version__ = "0.1.0"

__all__ = [
    "Enumeration",
    "EnumerationDefinitionError",
    "EnumerationError",
    "EnumerationInstantiationError",
    "EnumerationRegistry",
    "ScalarKind",
    "TaggedValue",
    "UndefinedAccessorError",
    "UndefinedMemberError",
    "default_registry",
    "define_enumeration",
]
