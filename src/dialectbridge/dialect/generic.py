"""Generic dialect — engine defaults only, used when no backend claims a URL."""

from __future__ import annotations

from dialectbridge.dialect.base import Dialect
from dialectbridge.dialect.registry import DialectRegistry


@DialectRegistry.register
class GenericDialect(Dialect):
    """Claims no URL; every translation goes through the default path."""

    @property
    def name(self) -> str:
        return "generic"

    def can_handle(self, url: str) -> bool:
        return False
