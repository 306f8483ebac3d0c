"""Async combinators over Result.

Unlike their synchronous counterparts, these capture exceptions raised by the
callback and turn them into (normalized) failures:
    - async_map: await a transformation of the success value
    - async_map_error: await a transformation of the failure payload
    - async_chain: await a Result-returning step
    - async_pipe: async pipeline with Result unwrapping
    - async_tap: observe a Result with a possibly-async callback
    - async_all: wait for many Results, first failure by index wins
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Iterable
from typing import Any, Callable, TypeVar

from resultkit.core.result import Result, error, success
from resultkit.foundation.errors import capture
from resultkit.observability.logging import get_logger

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_log = get_logger("resultkit.runtime")


async def async_map(result: Result[T, E], fn: Callable[[T], Awaitable[U]]) -> Result[U, E | Exception]:
    """Success → success(await fn(value)). A raising fn becomes a failure."""
    if not result._is_ok:
        return result  # type: ignore[return-value]
    try:
        return success(await fn(result._value))  # type: ignore[arg-type]
    except Exception as exc:
        return error(capture(exc, site="async_map"))


async def async_map_error(result: Result[T, E], fn: Callable[[E], Awaitable[F]]) -> Result[T, F | Exception]:
    """Failure → error(await fn(err)). A raising fn yields its own normalized failure."""
    if result._is_ok:
        return result  # type: ignore[return-value]
    try:
        return error(await fn(result._value))  # type: ignore[arg-type]
    except Exception as exc:
        return error(capture(exc, site="async_map_error"))


async def async_chain(
    result: Result[T, E],
    fn: Callable[[T], Awaitable[Result[U, F]]],
) -> Result[U, E | F | Exception]:
    """Await a Result-returning step on success. Failures pass through untouched.

    Raises:
        TypeError: If fn resolves to something other than a Result
    """
    if not result._is_ok:
        return result  # type: ignore[return-value]
    try:
        out = await fn(result._value)  # type: ignore[arg-type]
    except Exception as exc:
        return error(capture(exc, site="async_chain"))
    if not isinstance(out, Result):
        raise TypeError(f"async_chain step must return a Result, got {type(out).__name__}")
    return out


async def async_pipe(initial: Any, *fns: Callable[[Any], Any]) -> Result[Any, Any]:
    """Async `pipe`: initial value and step outputs may be awaitables.

    Example:
        >>> await async_pipe(user_id, fetch_user, validate, lambda u: u.name)
        Success('ada')
    """
    try:
        current = await initial if inspect.isawaitable(initial) else initial
    except Exception as exc:
        return error(capture(exc, site="async_pipe"))
    if isinstance(current, Result):
        if not fns or not current._is_ok:
            return current
        current = current._value
    elif not fns:
        return success(current)

    for fn in fns:
        try:
            out = fn(current)
            if inspect.isawaitable(out):
                out = await out
        except Exception as exc:
            return error(capture(exc, site="async_pipe"))
        if isinstance(out, Result):
            if not out._is_ok:
                return out
            current = out._value
        else:
            current = out
    return success(current)


async def async_tap(result: Result[T, E], fn: Callable[[Result[T, E]], object]) -> Result[T, E]:
    """Like tap, awaiting fn when it returns an awaitable. Returns the same object."""
    if inspect.isawaitable(out := fn(result)):
        await out
    return result


async def async_all(aws: Iterable[Awaitable[Result[T, E]]]) -> Result[list[T], E | Exception]:
    """Wait for every awaitable, then collect values or report the first failure.

    All inputs run concurrently and are always awaited to completion; an early
    failure does not cancel its siblings. The reported failure is the one with
    the lowest input index, whether it is a failure Result or an exception
    raised by the awaitable (normalized), regardless of completion order.

    Raises:
        TypeError: If an input resolves to something other than a Result
    """
    settled = await asyncio.gather(*aws, return_exceptions=True)
    # cancellation and interrupts outrank any failure, whatever their index
    for item in settled:
        if isinstance(item, BaseException) and not isinstance(item, Exception):
            raise item
    values: list[T] = []
    for index, item in enumerate(settled):
        if isinstance(item, BaseException):
            _log.debug("async_all failed", index=index, total=len(settled))
            return error(capture(item, site="async_all"))
        if not isinstance(item, Result):
            raise TypeError(f"async_all input {index} resolved to {type(item).__name__}, expected Result")
        if not item._is_ok:
            _log.debug("async_all failed", index=index, total=len(settled))
            return item  # type: ignore[return-value]
        values.append(item._value)  # type: ignore[arg-type]
    return success(values)
