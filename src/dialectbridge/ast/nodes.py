"""Immutable engine expression nodes. The dialect layer reads these, never mutates them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from dialectbridge.models.types import AbstractType

LiteralValue = str | int | float | bool | Decimal | date | datetime | None


@dataclass(frozen=True)
class Literal:
    """A literal value: number, string, boolean, date/timestamp, or NULL."""

    value: LiteralValue

    @classmethod
    def string(cls, v: str) -> Literal:
        return cls(value=v)

    @classmethod
    def number(cls, v: int | float | Decimal) -> Literal:
        return cls(value=v)

    @classmethod
    def null(cls) -> Literal:
        return cls(value=None)

    @classmethod
    def boolean(cls, v: bool) -> Literal:
        return cls(value=v)


@dataclass(frozen=True)
class ColumnRef:
    """Reference to a column, optionally qualified by table/alias."""

    name: str
    table: str | None = None


@dataclass(frozen=True)
class FunctionCall:
    """Scalar function call, e.g. ABS(col), WIDTH_BUCKET(col, 0, 100, 10)."""

    name: str
    args: list[Expr] = field(default_factory=list)


@dataclass(frozen=True)
class BinaryOp:
    """Binary operation: left op right."""

    left: Expr
    op: str  # +, -, *, /, %, =, <>, <, <=, >, >=, AND, OR, LIKE, ||
    right: Expr


@dataclass(frozen=True)
class UnaryOp:
    """Unary operation: NOT expr, - expr."""

    op: str
    operand: Expr


@dataclass(frozen=True)
class IsNull:
    """IS NULL / IS NOT NULL check."""

    expr: Expr
    negated: bool = False  # True = IS NOT NULL


@dataclass(frozen=True)
class InList:
    """expr IN (v1, v2, ...) or NOT IN."""

    expr: Expr
    values: list[Expr] = field(default_factory=list)
    negated: bool = False


@dataclass(frozen=True)
class CaseExpr:
    """CASE WHEN ... THEN ... ELSE ... END."""

    when_clauses: list[tuple[Expr, Expr]] = field(default_factory=list)
    else_clause: Expr | None = None


@dataclass(frozen=True)
class Cast:
    """CAST(expr AS type). The target is an engine type; dialects pick the native name."""

    expr: Expr
    target: AbstractType


@dataclass(frozen=True)
class Between:
    """expr BETWEEN low AND high."""

    expr: Expr
    low: Expr
    high: Expr
    negated: bool = False


# The union of all expression types.
Expr = (
    Literal
    | ColumnRef
    | FunctionCall
    | BinaryOp
    | UnaryOp
    | IsNull
    | InList
    | CaseExpr
    | Cast
    | Between
)


@dataclass(frozen=True)
class AggregateCall:
    """An aggregate invocation whose arguments are already rendered SQL.

    ``COUNT`` with no arguments stands for ``COUNT(*)``.
    """

    name: str
    args: list[str] = field(default_factory=list)
    distinct: bool = False
