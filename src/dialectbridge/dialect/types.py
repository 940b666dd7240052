"""Native type descriptors and the dialect-agnostic default type mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from dialectbridge.models.types import AbstractType, TypeKind


class NativeTypeCode(IntEnum):
    """Standard SQL type codes, numbered as in ``java.sql.Types``."""

    BIT = -7
    TINYINT = -6
    BIGINT = -5
    CHAR = 1
    NUMERIC = 2
    DECIMAL = 3
    INTEGER = 4
    SMALLINT = 5
    REAL = 7
    DOUBLE = 8
    VARCHAR = 12
    BOOLEAN = 16
    DATE = 91
    TIMESTAMP = 93
    BLOB = 2004
    CLOB = 2005


@dataclass(frozen=True)
class NativeType:
    """How a backend physically stores a column: type definition plus type code."""

    definition: str
    type_code: NativeTypeCode


def common_native_type(dt: AbstractType) -> NativeType | None:
    """Default mapping shared by all dialects. ``None`` means no mapping."""
    match dt:
        case AbstractType(kind=TypeKind.INTEGER):
            return NativeType("INTEGER", NativeTypeCode.INTEGER)
        case AbstractType(kind=TypeKind.LONG):
            return NativeType("BIGINT", NativeTypeCode.BIGINT)
        case AbstractType(kind=TypeKind.DOUBLE):
            return NativeType("DOUBLE PRECISION", NativeTypeCode.DOUBLE)
        case AbstractType(kind=TypeKind.FLOAT):
            return NativeType("REAL", NativeTypeCode.REAL)
        case AbstractType(kind=TypeKind.SHORT):
            return NativeType("INTEGER", NativeTypeCode.SMALLINT)
        case AbstractType(kind=TypeKind.BYTE):
            return NativeType("BYTE", NativeTypeCode.TINYINT)
        case AbstractType(kind=TypeKind.BOOLEAN):
            return NativeType("BIT(1)", NativeTypeCode.BIT)
        case AbstractType(kind=TypeKind.STRING):
            return NativeType("TEXT", NativeTypeCode.CLOB)
        case AbstractType(kind=TypeKind.BINARY):
            return NativeType("BLOB", NativeTypeCode.BLOB)
        case AbstractType(kind=TypeKind.CHAR, length=n):
            return NativeType(f"CHAR({n})", NativeTypeCode.CHAR)
        case AbstractType(kind=TypeKind.VARCHAR, length=n):
            return NativeType(f"VARCHAR({n})", NativeTypeCode.VARCHAR)
        case AbstractType(kind=TypeKind.TIMESTAMP | TypeKind.TIMESTAMP_NTZ):
            return NativeType("TIMESTAMP", NativeTypeCode.TIMESTAMP)
        case AbstractType(kind=TypeKind.DATE):
            return NativeType("DATE", NativeTypeCode.DATE)
        case AbstractType(kind=TypeKind.DECIMAL, precision=p, scale=s):
            return NativeType(f"DECIMAL({p},{s})", NativeTypeCode.DECIMAL)
        case _:
            return None
