"""Convenience constructors for engine expression trees and aggregate calls."""

from __future__ import annotations

from dialectbridge.ast.nodes import (
    AggregateCall,
    BinaryOp,
    Cast,
    ColumnRef,
    Expr,
    FunctionCall,
    Literal,
    LiteralValue,
)
from dialectbridge.models.types import AbstractType


def col(name: str, table: str | None = None) -> ColumnRef:
    """Create a column reference."""
    return ColumnRef(name=name, table=table)


def func(name: str, *args: Expr) -> FunctionCall:
    """Create a scalar function call."""
    return FunctionCall(name=name, args=list(args))


def lit(value: LiteralValue) -> Literal:
    """Create a literal value."""
    return Literal(value=value)


def cast(expr: Expr, target: AbstractType) -> Cast:
    """Create a CAST to an engine type."""
    return Cast(expr=expr, target=target)


def eq(left: Expr, right: Expr) -> BinaryOp:
    """Create an equality comparison."""
    return BinaryOp(left=left, op="=", right=right)


def and_(*conditions: Expr) -> Expr:
    """Chain conditions with AND."""
    result: Expr | None = None
    for cond in conditions:
        result = cond if result is None else BinaryOp(left=result, op="AND", right=cond)
    if result is None:
        return Literal(value=True)
    return result


def agg(name: str, *args: str, distinct: bool = False) -> AggregateCall:
    """Create an aggregate call over already-rendered argument SQL."""
    return AggregateCall(name=name, args=list(args), distinct=distinct)
