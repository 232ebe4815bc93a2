"""Application layer - query orchestration and reporting."""

from shop_query.application.query_service import (
    QueryService,
    UnknownQueryError,
    render,
    result_size,
)

__all__ = [
    "QueryService",
    "UnknownQueryError",
    "render",
    "result_size",
]
