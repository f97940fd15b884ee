"""Configuration loading and validation package."""

from .loader import build_enumerations, load_enumerations, load_enumerations_config
from .models import EnumerationDefinition, EnumerationsConfig, TelemetryConfig

__all__ = [
    "EnumerationDefinition",
    "EnumerationsConfig",
    "TelemetryConfig",
    "build_enumerations",
    "load_enumerations",
    "load_enumerations_config",
]
