"""Async layer: error boundaries and async combinators."""

from .boundary import create_async_error_boundary, from_async, from_awaitable, with_finally
from .combinators import async_all, async_chain, async_map, async_map_error, async_pipe, async_tap

__all__ = [
    # Boundaries
    "from_awaitable", "from_async", "create_async_error_boundary", "with_finally",
    # Combinators
    "async_map", "async_map_error", "async_chain", "async_pipe", "async_tap", "async_all",
]
