"""Error boundaries bridging async code into Result.

Provides:
    - from_awaitable: await one operation, capture its outcome
    - from_async: decorate an async function so calls return Result
    - create_async_error_boundary: reusable boundary with a bound normalizer
    - with_finally: cleanup after an awaited Result, whatever happened

Only `Exception` subclasses are captured. Cancellation, KeyboardInterrupt and
SystemExit always propagate.

Example:
    >>> @from_async
    ... async def fetch_user(user_id: int) -> dict:
    ...     return await api.get(f"/users/{user_id}")
    >>>
    >>> result = await fetch_user(7)
    >>> result.match(success=render, error=report)
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from functools import wraps
from typing import Callable, ParamSpec, TypeVar, overload

from resultkit.core.result import Result, error, success
from resultkit.foundation.errors import capture

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")


async def from_awaitable(
    aw: Awaitable[T],
    normalizer: Callable[[object], E] | None = None,
) -> Result[T, E]:
    """Await `aw` and capture the outcome.

    Args:
        aw: Coroutine, Task or Future to await
        normalizer: Maps the raw captured value to the failure payload.
            Defaults to normalize_error.

    Example:
        >>> async def boom() -> int:
        ...     raise Rejection("boom")
        >>> (await from_awaitable(boom())).unwrap_err().message
        'boom'
    """
    try:
        return success(await aw)
    except Exception as exc:
        return error(capture(exc, normalizer, site="from_awaitable"))  # type: ignore[arg-type]


@overload
def from_async(fn: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Result[T, Exception]]]: ...
@overload
def from_async(
    fn: None = None, *, normalizer: Callable[[object], E]
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, E]]]]: ...


def from_async(
    fn: Callable[P, Awaitable[T]] | None = None,
    *,
    normalizer: Callable[[object], E] | None = None,
) -> object:
    """Wrap an async function so every call returns a Result instead of raising.

    Works bare (`@from_async`) or with a normalizer
    (`@from_async(normalizer=to_api_error)`). Calls are independent.
    """
    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Result[T, E]]]:
        # partials and callable objects carry no __name__
        site = f"from_async:{getattr(func, '__qualname__', type(func).__name__)}"

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            try:
                return success(await func(*args, **kwargs))
            except Exception as exc:
                return error(capture(exc, normalizer, site=site))  # type: ignore[arg-type]

        return wrapper

    return decorator(fn) if fn is not None else decorator


def create_async_error_boundary(
    normalizer: Callable[[object], E],
) -> Callable[[Callable[[], Awaitable[T]]], Awaitable[Result[T, E]]]:
    """Bind a normalizer once and reuse the boundary for many thunks.

    Example:
        >>> boundary = create_async_error_boundary(lambda e: ApiError(str(e)))
        >>> user = await boundary(lambda: client.get_user(7))
        >>> posts = await boundary(lambda: client.get_posts(7))
    """
    async def boundary(thunk: Callable[[], Awaitable[T]]) -> Result[T, E]:
        try:
            return success(await thunk())
        except Exception as exc:
            return error(capture(exc, normalizer, site="async_error_boundary"))

    return boundary


async def with_finally(
    aw: Awaitable[Result[T, E]],
    finally_fn: Callable[[], object],
) -> Result[T, E]:
    """Await a Result, then run cleanup regardless of outcome.

    If `aw` raises, cleanup still runs and the original exception propagates.
    If cleanup raises, its exception replaces whatever `aw` produced.
    `finally_fn` may be sync or async.

    Example:
        >>> conn = await pool.acquire()
        >>> result = await with_finally(from_awaitable(conn.fetch(query)), conn.release)
    """
    try:
        return await aw
    finally:
        if inspect.isawaitable(out := finally_fn()):
            await out
