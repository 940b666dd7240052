"""Abstract base dialect with the engine's default translation behaviour."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from dialectbridge.ast.nodes import AggregateCall, Expr
from dialectbridge.ast.visitor import referenced_functions
from dialectbridge.dialect.sql_builder import SQLBuilder
from dialectbridge.dialect.types import NativeType, common_native_type
from dialectbridge.exceptions import AnalysisError, UnclassifiedError
from dialectbridge.models.types import AbstractType

logger = logging.getLogger("dialectbridge.dialect")


class Dialect(ABC):
    """Abstract base for all SQL dialects.

    Provides the generic translation path; dialects override specific
    methods. Every public method is a pure function of its arguments.
    """

    # Scalar functions the backend lacks, even though generic syntax exists.
    unsupported_functions: frozenset[str] = frozenset()

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def can_handle(self, url: str) -> bool:
        """Return True if the connection URL designates this backend."""

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace('"', '""')
        return f'"{escaped}"'

    def sql_builder(self) -> SQLBuilder:
        return SQLBuilder(self)

    def compile_expression(self, expr: Expr) -> str | None:
        """Render an expression to SQL, or ``None`` if it cannot be pushed down.

        Never raises: the engine evaluates declined expressions itself.
        """
        try:
            rejected = referenced_functions(expr) & self.unsupported_functions
            if rejected:
                logger.warning(
                    "Function(s) %s not supported by dialect '%s'; not compiling %s",
                    ", ".join(sorted(rejected)),
                    self.name,
                    type(expr).__name__,
                )
                return None
            return self.sql_builder().build(expr)
        except Exception:
            logger.warning(
                "Error occurs while compiling expression %s for dialect '%s'",
                type(expr).__name__,
                self.name,
                exc_info=True,
            )
            return None

    def compile_aggregate(self, agg: AggregateCall) -> str | None:
        """Compile the standard aggregates; ``None`` for anything else."""
        name = agg.name.upper()
        distinct = "DISTINCT " if agg.distinct else ""
        match name, len(agg.args):
            case "COUNT", 0 if not agg.distinct:
                return "COUNT(*)"
            case ("MIN" | "MAX"), 1:
                return f"{name}({agg.args[0]})"
            case ("COUNT" | "SUM" | "AVG"), 1:
                return f"{name}({distinct}{agg.args[0]})"
            case _:
                return None

    def get_native_type(self, dt: AbstractType) -> NativeType | None:
        """Map an engine type to the backend's native type, or ``None``."""
        return common_native_type(dt)

    def classify_exception(self, message: str, error: BaseException) -> AnalysisError:
        """Turn a backend error into a semantic category. Always returns one."""
        return UnclassifiedError(message, cause=error)
