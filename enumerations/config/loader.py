"""YAML loaders for declarative enumeration definitions.

A definitions file is validated via models.py and then turned into concrete
enumeration types with :func:`enumerations.core.define_enumeration`. Member
order in the YAML mapping becomes declaration order.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from enumerations.core.base import Enumeration, EnumerationMeta, define_enumeration
from enumerations.core.errors import EnumerationDefinitionError
from enumerations.core.registry import EnumerationRegistry
from enumerations.telemetry import configure_logging

from .models import EnumerationsConfig

logger = logging.getLogger("enumerations.config")

_DEFAULT_CONFIG_DIR = Path("config")
_DEFAULT_TARGET_MODULE = "enumerations.config.definitions"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_enumerations_config(path: Path | str = _DEFAULT_CONFIG_DIR / "enumerations.yml") -> EnumerationsConfig:
    """Load and validate an enumerations file (``telemetry`` and ``enumerations`` keys)."""

    data = _read_yaml(Path(path))
    return EnumerationsConfig.model_validate(data)


def build_enumerations(
    config: EnumerationsConfig,
    *,
    registry: Optional[EnumerationRegistry] = None,
    module: Optional[str] = None,
) -> Dict[str, type[Enumeration]]:
    """Build one enumeration type per definition, keyed by name in file order.

    Each type is bound by name on ``module`` (default
    ``enumerations.config.definitions``) so it can be imported and its members
    pickled. A type built earlier under the same name is replaced; any other
    attribute of that name is left alone and the build fails.
    """

    target_module = module or _DEFAULT_TARGET_MODULE
    namespace = importlib.import_module(target_module)
    for definition in config.enumerations:
        existing = getattr(namespace, definition.name, None)
        if existing is not None and not isinstance(existing, EnumerationMeta):
            raise EnumerationDefinitionError(
                f"{target_module}.{definition.name} is already bound to a non-enumeration object"
            )

    built: Dict[str, type[Enumeration]] = {}
    for definition in config.enumerations:
        cls = define_enumeration(
            definition.name,
            definition.members,
            module=target_module,
            registry=registry,
        )
        if definition.description:
            cls.__doc__ = definition.description
        built[definition.name] = cls

    for name, cls in built.items():
        setattr(namespace, name, cls)

    logger.info(
        "Built enumerations",
        extra={
            "target_module": target_module,
            "n_enumerations": len(built),
            "enumeration_names": list(built),
        },
    )
    return built


def load_enumerations(
    path: Path | str = _DEFAULT_CONFIG_DIR / "enumerations.yml",
    *,
    registry: Optional[EnumerationRegistry] = None,
    module: Optional[str] = None,
    apply_telemetry: bool = False,
) -> Dict[str, type[Enumeration]]:
    """Load a definitions file and build its enumeration types.

    With ``apply_telemetry`` the file's ``telemetry`` section is passed to
    :func:`enumerations.telemetry.configure_logging` before anything is built.
    """

    config = load_enumerations_config(path)
    if apply_telemetry:
        configure_logging(
            level=config.telemetry.log_level,
            log_dir=config.telemetry.log_dir,
            json_logs=config.telemetry.json_logs,
        )
    return build_enumerations(config, registry=registry, module=module)


__all__ = ["build_enumerations", "load_enumerations", "load_enumerations_config"]
