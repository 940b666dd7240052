"""Shared test fixtures for DialectBridge."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from dialectbridge.compiler.pipeline import PushdownPipeline
from dialectbridge.dialect import DialectRegistry
from dialectbridge.dialect.generic import GenericDialect
from dialectbridge.dialect.h2 import H2Dialect
from dialectbridge.settings import Settings, get_settings


@pytest.fixture
def h2() -> H2Dialect:
    return H2Dialect()


@pytest.fixture
def generic() -> GenericDialect:
    return GenericDialect()


@pytest.fixture
def pipeline() -> PushdownPipeline:
    """Pipeline with SQL validation enabled regardless of the environment."""
    return PushdownPipeline(settings=Settings(_env_file=None, validate_sql=True))


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop the cached settings so env changes made in a test take effect."""
    for var in ("DIALECTBRIDGE_DEFAULT_DIALECT", "DIALECTBRIDGE_VALIDATE_SQL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def isolated_registry() -> Iterator[type[DialectRegistry]]:
    """Let a test register throwaway dialects without leaking them."""
    saved = dict(DialectRegistry._dialects)
    yield DialectRegistry
    DialectRegistry.reset()
    DialectRegistry._dialects.update(saved)
