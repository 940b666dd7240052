"""Pushdown compilation: engine expressions → dialect SQL for a scan."""

from dialectbridge.compiler.pipeline import PushdownPipeline, PushdownRequest, PushdownResult

__all__ = [
    "PushdownPipeline",
    "PushdownRequest",
    "PushdownResult",
]
