from __future__ import annotations

import logging
from pathlib import Path
from textwrap import dedent
from typing import Callable, Iterator

import pytest

from enumerations.core.base import Enumeration, define_enumeration
from enumerations.core.registry import EnumerationRegistry
from enumerations.core.types import MemberDeclarations


@pytest.fixture
def isolated_registry() -> EnumerationRegistry:
    return EnumerationRegistry(name="test")


@pytest.fixture
def enumeration_factory(isolated_registry: EnumerationRegistry) -> Callable[..., type[Enumeration]]:
    """Build throwaway enumeration types bound to a per-test registry."""

    def _factory(name: str, members: MemberDeclarations) -> type[Enumeration]:
        return define_enumeration(name, members, registry=isolated_registry)

    return _factory


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """configure_logging mutates the shared package logger; put it back after each test."""

    logger = logging.getLogger("enumerations")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
