"""Core primitives of the enumeration engine.

This package aggregates the base type, the member registry, the tagged scalar
types and the error classes. Higher level packages import from here to avoid
circular dependencies.
"""

from . import base, errors, registry, types
from .base import Enumeration, EnumerationMeta, define_enumeration
from .errors import (
    EnumerationDefinitionError,
    EnumerationError,
    EnumerationInstantiationError,
    UndefinedAccessorError,
    UndefinedMemberError,
)
from .registry import EnumerationRegistry, MemberTable, default_registry
from .types import ScalarKind, TaggedValue

__all__ = [
    "Enumeration",
    "EnumerationDefinitionError",
    "EnumerationError",
    "EnumerationInstantiationError",
    "EnumerationMeta",
    "EnumerationRegistry",
    "MemberTable",
    "ScalarKind",
    "TaggedValue",
    "UndefinedAccessorError",
    "UndefinedMemberError",
    "base",
    "default_registry",
    "define_enumeration",
    "errors",
    "registry",
    "types",
]
