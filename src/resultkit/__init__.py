"""resultkit - Result-typed error handling for synchronous and asyncio code.

A Result is either a success carrying a value or a failure carrying an error.
Combinators transform and compose Results without try/except; boundary
constructors turn raising or async code into Results.

Quick Start:
    >>> from resultkit import success, error, chain, map, match
    >>>
    >>> def parse_int(s: str):
    ...     return success(int(s)) if s.isdigit() else error(f"not a number: {s}")
    >>>
    >>> result = map(chain(success("21"), parse_int), lambda n: n * 2)
    >>> match(result, success=lambda v: f"got {v}", error=lambda e: f"failed: {e}")
    'got 42'

Method Chaining:
    >>> success("21").chain(parse_int).map(lambda n: n * 2).unwrap()
    42

Async Boundaries:
    >>> import asyncio
    >>> from resultkit import Rejection, from_async, async_all
    >>>
    >>> @from_async
    ... async def lookup(key: str) -> str:
    ...     await asyncio.sleep(0.01)
    ...     if not key:
    ...         raise Rejection("empty key")
    ...     return key.upper()
    >>>
    >>> found = await async_all([lookup(k) for k in ("a", "", "c")])  # first failure by index

Configuration (environment):
    RESULTKIT_LOG_LEVEL=DEBUG           # show captured failures
    RESULTKIT_LOG_FORMAT=json           # console | json | none
    RESULTKIT_BOUNDARY_LOG_CAPTURES=false
"""

from __future__ import annotations

__version__ = "0.2.2"

# Core
from .core import Result, ResultStatus, error, is_error, is_result, is_success, match, success, unwrap, unwrap_or

# Errors
from .foundation.errors import NormalizedError, Rejection, UnwrapError, normalize_error

# Configuration
from .foundation.config import ResultkitSettings, clear_settings_cache, get_settings

# Envelope adapter
from .io import from_envelope, to_envelope

# Logging
from .observability import configure_logging, get_logger

# Async
from .runtime import (
    async_all,
    async_chain,
    async_map,
    async_map_error,
    async_pipe,
    async_tap,
    create_async_error_boundary,
    from_async,
    from_awaitable,
    with_finally,
)

# Transformers
from .transformers import chain, create_error_boundary, map, map_error, pipe, tap, tap_error, tap_success

__all__ = [
    "__version__",
    # Core
    "Result", "ResultStatus", "success", "error",
    "is_success", "is_error", "is_result",
    "match", "unwrap", "unwrap_or",
    # Transformers
    "map", "chain", "map_error", "tap", "tap_error", "tap_success",
    "pipe", "create_error_boundary",
    # Async
    "from_awaitable", "from_async", "create_async_error_boundary", "with_finally",
    "async_map", "async_map_error", "async_chain", "async_pipe", "async_tap", "async_all",
    # Errors
    "NormalizedError", "Rejection", "UnwrapError", "normalize_error",
    # Envelope
    "to_envelope", "from_envelope",
    # Configuration & logging
    "ResultkitSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
