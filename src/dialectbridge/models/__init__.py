"""Pydantic domain models for DialectBridge."""

from dialectbridge.models.types import AbstractType, TypeKind

__all__ = [
    "AbstractType",
    "TypeKind",
]
