"""Core Result type, constructors, predicates and elimination."""

from .result import (
    Result,
    ResultStatus,
    error,
    is_error,
    is_result,
    is_success,
    match,
    success,
    unwrap,
    unwrap_or,
)

__all__ = [
    "Result", "ResultStatus",
    "success", "error",
    "is_success", "is_error", "is_result",
    "match", "unwrap", "unwrap_or",
]
