"""Generic expression → SQL renderer. Dialects subclass and override visit_* hooks."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from dialectbridge.ast.nodes import (
    Between,
    BinaryOp,
    CaseExpr,
    Cast,
    ColumnRef,
    Expr,
    FunctionCall,
    InList,
    IsNull,
    Literal,
    LiteralValue,
    UnaryOp,
)
from dialectbridge.exceptions import UnsupportedFunctionError
from dialectbridge.models.types import AbstractType

if TYPE_CHECKING:
    from dialectbridge.dialect.base import Dialect


class SQLBuilder:
    """Renders an expression tree to SQL text for one dialect.

    Identifier quoting and CAST target types come from the owning dialect.
    Raises on anything it cannot render; callers that need best-effort
    behaviour go through :meth:`Dialect.compile_expression`.
    """

    def __init__(self, dialect: Dialect) -> None:
        self._dialect = dialect

    def build(self, expr: Expr) -> str:
        match expr:
            case Literal(value=value):
                return self.visit_literal(value)
            case ColumnRef(name=name, table=None):
                return self._dialect.quote_identifier(name)
            case ColumnRef(name=name, table=table):
                quote = self._dialect.quote_identifier
                return f"{quote(table)}.{quote(name)}"
            case FunctionCall(name=fname, args=args):
                return self.visit_sql_function(fname.upper(), [self.build(a) for a in args])
            case BinaryOp(left=left, op=op, right=right):
                return f"({self.build(left)} {op} {self.build(right)})"
            case UnaryOp(op=op, operand=operand):
                return f"({op} {self.build(operand)})"
            case IsNull(expr=inner, negated=False):
                return f"({self.build(inner)} IS NULL)"
            case IsNull(expr=inner, negated=True):
                return f"({self.build(inner)} IS NOT NULL)"
            case InList(expr=inner, values=values, negated=negated):
                if not values:
                    raise ValueError("IN list must have at least one value")
                vals = ", ".join(self.build(v) for v in values)
                op = "NOT IN" if negated else "IN"
                return f"({self.build(inner)} {op} ({vals}))"
            case CaseExpr(when_clauses=whens, else_clause=else_):
                parts = ["CASE"]
                for when_cond, then_val in whens:
                    parts.append(f"WHEN {self.build(when_cond)} THEN {self.build(then_val)}")
                if else_ is not None:
                    parts.append(f"ELSE {self.build(else_)}")
                parts.append("END")
                return " ".join(parts)
            case Cast(expr=inner, target=target):
                return self.visit_cast(self.build(inner), target)
            case Between(expr=inner, low=low, high=high, negated=negated):
                op = "NOT BETWEEN" if negated else "BETWEEN"
                return f"({self.build(inner)} {op} {self.build(low)} AND {self.build(high)})"
            case _:
                raise ValueError(f"Unknown AST node type: {type(expr).__name__}")

    def visit_literal(self, value: LiteralValue) -> str:
        match value:
            case None:
                return "NULL"
            case True:
                return "TRUE"
            case False:
                return "FALSE"
            case str():
                escaped = value.replace("'", "''")
                return f"'{escaped}'"
            # datetime is a date subclass, so it must be checked first
            case datetime():
                return f"TIMESTAMP '{value.isoformat(sep=' ')}'"
            case date():
                return f"DATE '{value.isoformat()}'"
            case _:
                return str(value)

    def visit_cast(self, inner_sql: str, target: AbstractType) -> str:
        native = self._dialect.get_native_type(target)
        if native is None:
            raise ValueError(
                f"Cannot cast to {target}: no native type in dialect '{self._dialect.name}'"
            )
        return f"CAST({inner_sql} AS {native.definition})"

    def visit_sql_function(self, func_name: str, inputs: list[str]) -> str:
        """Render a scalar function call. Override per function name in dialects."""
        return f"{func_name}({', '.join(inputs)})"

    def render_unsupported(self, func_name: str, inputs: list[str]) -> str:
        """Refuse a function, attaching what the generic rendering would have been."""
        rendered = SQLBuilder.visit_sql_function(self, func_name, inputs)
        raise UnsupportedFunctionError(self._dialect.name, func_name, rendered)
