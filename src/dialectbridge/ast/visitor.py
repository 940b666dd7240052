"""Visitor pattern for expression tree traversal and transformation."""

from __future__ import annotations

from typing import Any

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
    UnaryOp,
)


class ASTVisitor:
    """Base visitor for expression traversal.

    Override specific visit_* methods to customize behavior.
    The default implementations recursively visit child nodes and rebuild
    the tree, so an unmodified visitor returns an equal copy.
    """

    def visit(self, node: Any) -> Any:
        """Dispatch to the appropriate visit_* method."""
        method_name = f"visit_{type(node).__name__.lower()}"
        method = getattr(self, method_name, self.generic_visit)
        return method(node)

    def generic_visit(self, node: Any) -> Any:
        return node

    def visit_literal(self, node: Literal) -> Any:
        return node

    def visit_columnref(self, node: ColumnRef) -> Any:
        return node

    def visit_functioncall(self, node: FunctionCall) -> Any:
        args = [self.visit(a) for a in node.args]
        return FunctionCall(name=node.name, args=args)

    def visit_binaryop(self, node: BinaryOp) -> Any:
        return BinaryOp(left=self.visit(node.left), op=node.op, right=self.visit(node.right))

    def visit_unaryop(self, node: UnaryOp) -> Any:
        return UnaryOp(op=node.op, operand=self.visit(node.operand))

    def visit_isnull(self, node: IsNull) -> Any:
        return IsNull(expr=self.visit(node.expr), negated=node.negated)

    def visit_inlist(self, node: InList) -> Any:
        return InList(
            expr=self.visit(node.expr),
            values=[self.visit(v) for v in node.values],
            negated=node.negated,
        )

    def visit_caseexpr(self, node: CaseExpr) -> Any:
        whens = [(self.visit(w), self.visit(t)) for w, t in node.when_clauses]
        else_ = self.visit(node.else_clause) if node.else_clause is not None else None
        return CaseExpr(when_clauses=whens, else_clause=else_)

    def visit_cast(self, node: Cast) -> Any:
        return Cast(expr=self.visit(node.expr), target=node.target)

    def visit_between(self, node: Between) -> Any:
        return Between(
            expr=self.visit(node.expr),
            low=self.visit(node.low),
            high=self.visit(node.high),
            negated=node.negated,
        )


def _children(node: Any) -> list[Any]:
    match node:
        case FunctionCall(args=args):
            return list(args)
        case BinaryOp(left=left, right=right):
            return [left, right]
        case UnaryOp(operand=operand):
            return [operand]
        case IsNull(expr=inner):
            return [inner]
        case InList(expr=inner, values=values):
            return [inner, *values]
        case CaseExpr(when_clauses=whens, else_clause=else_):
            children = [part for clause in whens for part in clause]
            if else_ is not None:
                children.append(else_)
            return children
        case Cast(expr=inner):
            return [inner]
        case Between(expr=inner, low=low, high=high):
            return [inner, low, high]
        case _:
            return []


def referenced_functions(expr: Expr) -> set[str]:
    """Return the upper-cased names of all scalar functions used in ``expr``.

    Walks the tree with an explicit stack, so arbitrarily deep trees do not
    hit the interpreter's recursion limit and no nodes are rebuilt.
    """
    names: set[str] = set()
    stack: list[Any] = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, FunctionCall):
            names.add(node.name.upper())
        stack.extend(_children(node))
    return names
