"""Engine abstract column types — the portable side of type mapping."""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_DECIMAL_PRECISION = 38


class TypeKind(StrEnum):
    STRING = "string"
    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATE = "date"
    TIMESTAMP = "timestamp"
    TIMESTAMP_NTZ = "timestamp_ntz"
    BINARY = "binary"
    CHAR = "char"
    VARCHAR = "varchar"
    ARRAY = "array"
    MAP = "map"
    STRUCT = "struct"


class AbstractType(BaseModel):
    """An engine column type. Decimal carries precision/scale, char/varchar a length."""

    model_config = ConfigDict(frozen=True)

    kind: TypeKind
    precision: int | None = Field(None, ge=1, le=MAX_DECIMAL_PRECISION)
    scale: int | None = Field(None, ge=0)
    length: int | None = Field(None, ge=1)

    @model_validator(mode="after")
    def _check_parameters(self) -> Self:
        if self.kind == TypeKind.DECIMAL:
            if self.precision is None or self.scale is None:
                raise ValueError("decimal requires precision and scale")
            if self.scale > self.precision:
                raise ValueError(
                    f"decimal scale {self.scale} exceeds precision {self.precision}"
                )
        elif self.precision is not None or self.scale is not None:
            raise ValueError(f"{self.kind} does not take precision/scale")

        if self.kind in (TypeKind.CHAR, TypeKind.VARCHAR):
            if self.length is None:
                raise ValueError(f"{self.kind} requires a length")
        elif self.length is not None:
            raise ValueError(f"{self.kind} does not take a length")
        return self

    @classmethod
    def of(cls, kind: TypeKind) -> AbstractType:
        return cls(kind=kind)

    @classmethod
    def string(cls) -> AbstractType:
        return cls(kind=TypeKind.STRING)

    @classmethod
    def boolean(cls) -> AbstractType:
        return cls(kind=TypeKind.BOOLEAN)

    @classmethod
    def decimal(cls, precision: int = 10, scale: int = 0) -> AbstractType:
        return cls(kind=TypeKind.DECIMAL, precision=precision, scale=scale)

    @classmethod
    def char(cls, length: int) -> AbstractType:
        return cls(kind=TypeKind.CHAR, length=length)

    @classmethod
    def varchar(cls, length: int) -> AbstractType:
        return cls(kind=TypeKind.VARCHAR, length=length)

    @property
    def simple_string(self) -> str:
        """Engine-facing type name, e.g. ``decimal(10,2)`` or ``varchar(32)``."""
        if self.kind == TypeKind.DECIMAL:
            return f"decimal({self.precision},{self.scale})"
        if self.length is not None:
            return f"{self.kind.value}({self.length})"
        return self.kind.value

    def __str__(self) -> str:
        return self.simple_string
