"""Synchronous transformations: map, chain, map_error, tap family, pipe, error boundary."""

from .combinators import chain, create_error_boundary, map, map_error, pipe, tap, tap_error, tap_success

__all__ = [
    "map", "chain", "map_error",
    "tap", "tap_error", "tap_success",
    "pipe", "create_error_boundary",
]
