"""H2 dialect implementation."""

from __future__ import annotations

from enum import IntEnum

from dialectbridge.ast.nodes import AggregateCall
from dialectbridge.dialect.base import Dialect
from dialectbridge.dialect.registry import DialectRegistry
from dialectbridge.dialect.sql_builder import SQLBuilder
from dialectbridge.dialect.types import NativeType, NativeTypeCode
from dialectbridge.exceptions import (
    AggregateArityError,
    AnalysisError,
    BackendError,
    NoSuchNamespaceError,
    NoSuchTableError,
    TableAlreadyExistsError,
)
from dialectbridge.models.types import AbstractType, TypeKind


class H2ErrorCode(IntEnum):
    """Vendor codes from H2's ``org.h2.api.ErrorCode``."""

    TABLE_OR_VIEW_ALREADY_EXISTS_1 = 42101
    TABLE_OR_VIEW_NOT_FOUND_1 = 42102
    SCHEMA_NOT_FOUND_1 = 90079


# Statistical aggregates H2 supports beyond the standard set, by arity.
_STATISTICAL_AGGREGATES: dict[str, int] = {
    "VAR_POP": 1,
    "VAR_SAMP": 1,
    "STDDEV_POP": 1,
    "STDDEV_SAMP": 1,
    "COVAR_POP": 2,
    "COVAR_SAMP": 2,
    "CORR": 2,
}


class H2SQLBuilder(SQLBuilder):
    def visit_sql_function(self, func_name: str, inputs: list[str]) -> str:
        match func_name:
            case "WIDTH_BUCKET":
                return self.render_unsupported(func_name, inputs)
            case _:
                return super().visit_sql_function(func_name, inputs)


@DialectRegistry.register
class H2Dialect(Dialect):
    """H2 dialect — CLOB strings, statistical aggregates, no WIDTH_BUCKET."""

    unsupported_functions = frozenset({"WIDTH_BUCKET"})

    @property
    def name(self) -> str:
        return "h2"

    def can_handle(self, url: str) -> bool:
        return url.lower().startswith("jdbc:h2")

    def sql_builder(self) -> SQLBuilder:
        return H2SQLBuilder(self)

    def compile_aggregate(self, agg: AggregateCall) -> str | None:
        sql = super().compile_aggregate(agg)
        if sql is not None:
            return sql

        name = agg.name.upper()
        arity = _STATISTICAL_AGGREGATES.get(name)
        if arity is None:
            return None
        if len(agg.args) != arity:
            raise AggregateArityError(name, expected=arity, actual=len(agg.args))
        distinct = "DISTINCT " if agg.distinct else ""
        return f"{name}({distinct}{', '.join(agg.args)})"

    def get_native_type(self, dt: AbstractType) -> NativeType | None:
        match dt:
            case AbstractType(kind=TypeKind.STRING):
                return NativeType("CLOB", NativeTypeCode.CLOB)
            case AbstractType(kind=TypeKind.BOOLEAN):
                return NativeType("BOOLEAN", NativeTypeCode.BOOLEAN)
            case AbstractType(kind=TypeKind.SHORT | TypeKind.BYTE):
                return NativeType("SMALLINT", NativeTypeCode.SMALLINT)
            case AbstractType(kind=TypeKind.DECIMAL, precision=p, scale=s):
                return NativeType(f"NUMERIC({p},{s})", NativeTypeCode.NUMERIC)
            case _:
                return super().get_native_type(dt)

    def classify_exception(self, message: str, error: BaseException) -> AnalysisError:
        if isinstance(error, BackendError):
            match error.error_code:
                case H2ErrorCode.TABLE_OR_VIEW_ALREADY_EXISTS_1:
                    return TableAlreadyExistsError(message, cause=error)
                case H2ErrorCode.TABLE_OR_VIEW_NOT_FOUND_1:
                    return NoSuchTableError(message, cause=error)
                case H2ErrorCode.SCHEMA_NOT_FOUND_1:
                    return NoSuchNamespaceError(message, cause=error)
        return super().classify_exception(message, error)
