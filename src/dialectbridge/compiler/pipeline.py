"""Orchestrates scan pushdown: filters → aggregates → scan SQL → validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from dialectbridge.ast.nodes import AggregateCall, Expr
from dialectbridge.compiler.validator import validate_sql
from dialectbridge.dialect.base import Dialect
from dialectbridge.dialect.registry import DialectRegistry
from dialectbridge.settings import Settings, get_settings

logger = logging.getLogger("dialectbridge.compiler")


@dataclass(frozen=True)
class PushdownRequest:
    """What the engine would like the backend to evaluate for one table scan."""

    table: str
    columns: list[str] = field(default_factory=list)
    filters: list[Expr] = field(default_factory=list)
    aggregates: list[AggregateCall] = field(default_factory=list)
    group_by: list[str] = field(default_factory=list)


@dataclass
class PushdownResult:
    """The scan query plus whatever the engine must still evaluate itself."""

    sql: str
    dialect: str
    pushed_filters: list[Expr] = field(default_factory=list)
    post_scan_filters: list[Expr] = field(default_factory=list)
    aggregates_pushed: bool = False
    warnings: list[str] = field(default_factory=list)
    sql_valid: bool = True


class PushdownPipeline:
    """Orchestrates: dialect selection → filters → aggregates → SQL → validation."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def compile(self, request: PushdownRequest, url: str) -> PushdownResult:
        """Compile a scan request against the dialect that handles ``url``."""
        dialect = DialectRegistry.for_url(url)
        warnings: list[str] = []

        # Phase 1: filters, each pushed independently
        where_parts: list[str] = []
        pushed: list[Expr] = []
        post_scan: list[Expr] = []
        for position, condition in enumerate(request.filters):
            sql = dialect.compile_expression(condition)
            if sql is None:
                post_scan.append(condition)
                warnings.append(
                    f"Filter {position} not pushed to {dialect.name}: {type(condition).__name__}"
                )
            else:
                where_parts.append(sql)
                pushed.append(condition)

        # Phase 2: aggregates, all or nothing
        agg_sql = self._compile_aggregates(dialect, request, post_scan, warnings)

        # Phase 3: scan SQL
        sql = self._render(dialect, request, where_parts, agg_sql)

        # Phase 4: SQL validation (non-blocking)
        sql_valid = True
        if self._settings.validate_sql:
            validation_errors = validate_sql(sql, dialect.name)
            sql_valid = len(validation_errors) == 0
            warnings = warnings + [f"SQL validation: {e}" for e in validation_errors]

        logger.debug("Pushdown SQL for %s (%s):\n%s", request.table, dialect.name, sql)
        return PushdownResult(
            sql=sql,
            dialect=dialect.name,
            pushed_filters=pushed,
            post_scan_filters=post_scan,
            aggregates_pushed=agg_sql is not None,
            warnings=warnings,
            sql_valid=sql_valid,
        )

    def _compile_aggregates(
        self,
        dialect: Dialect,
        request: PushdownRequest,
        post_scan: list[Expr],
        warnings: list[str],
    ) -> list[str] | None:
        if not request.aggregates:
            return None
        # Rows must be fully filtered before the backend may aggregate them
        if post_scan:
            warnings.append("Aggregates not pushed: some filters are evaluated after the scan")
            return None

        compiled: list[str] = []
        for aggregate in request.aggregates:
            sql = dialect.compile_aggregate(aggregate)
            if sql is None:
                warnings.append(f"Aggregate not pushed to {dialect.name}: {aggregate.name}")
                return None
            compiled.append(sql)
        return compiled

    def _render(
        self,
        dialect: Dialect,
        request: PushdownRequest,
        where_parts: list[str],
        agg_sql: list[str] | None,
    ) -> str:
        group_cols = [dialect.quote_identifier(c) for c in request.group_by]
        if agg_sql is not None:
            select_list = group_cols + agg_sql
        else:
            select_list = [dialect.quote_identifier(c) for c in request.columns]

        parts = [f"SELECT {', '.join(select_list) if select_list else '*'}"]
        parts.append(f"FROM {request.table}")
        if where_parts:
            parts.append(f"WHERE {' AND '.join(where_parts)}")
        if agg_sql is not None and group_cols:
            parts.append(f"GROUP BY {', '.join(group_cols)}")
        return "\n".join(parts)
