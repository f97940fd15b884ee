"""Typed configuration models for declarative enumeration definitions.

YAML files are validated with pydantic before any type is built. Member values
use strict scalar types so that YAML ``false`` stays a boolean and ``0`` stays
an integer; the engine treats those as different values.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

ScalarValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _check_identifier(value: str, what: str) -> str:
    if not value.isidentifier() or value.startswith("_"):
        raise ValueError(f"{what} {value!r} must be a Python identifier without a leading underscore")
    return value


class TelemetryConfig(BaseModel):
    """Logging switches applied by :func:`enumerations.config.load_enumerations`."""

    log_level: str = Field("INFO")
    json_logs: bool = True
    log_dir: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


class EnumerationDefinition(BaseModel):
    """One enumeration type: its name and ordered ``member -> value`` mapping."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    members: Dict[str, ScalarValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _check_identifier(value, "Enumeration name")

    @field_validator("members")
    @classmethod
    def _validate_member_names(cls, value: Dict[str, ScalarValue]) -> Dict[str, ScalarValue]:
        for member_name in value:
            _check_identifier(member_name, "Member name")
        return value


class EnumerationsConfig(BaseModel):
    """Top-level file: telemetry settings plus the list of definitions."""

    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
    enumerations: List[EnumerationDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_names(self) -> "EnumerationsConfig":
        seen: set[str] = set()
        duplicates: List[str] = []
        for definition in self.enumerations:
            if definition.name in seen:
                duplicates.append(definition.name)
            seen.add(definition.name)
        if duplicates:
            raise ValueError(f"Enumeration names must be unique, duplicated: {', '.join(duplicates)}")
        return self

    def definition(self, name: str) -> EnumerationDefinition:
        for candidate in self.enumerations:
            if candidate.name == name:
                return candidate
        raise KeyError(f"Enumeration {name} is not defined")


__all__ = [
    "EnumerationDefinition",
    "EnumerationsConfig",
    "ScalarValue",
    "TelemetryConfig",
]
