"""Synchronous combinators over Result.

Function forms of the Result methods, for call sites that read better as
`map(result, f)` than `result.map(f)`, plus `pipe` and the synchronous error
boundary.

None of map/chain/map_error/tap* catch exceptions raised by the callback:
only `pipe` and `create_error_boundary` capture.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from resultkit.core.result import Result, error, success
from resultkit.foundation.errors import capture

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def map(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Transform the success value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
    return result.map(fn)


def chain(result: Result[T, E], fn: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
    """Sequence a fallible step. A failure short-circuits and fn is never called.

    Example:
        >>> chain(success("42"), parse_int)
        Success(42)
    """
    return result.chain(fn)


def map_error(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Transform the failure payload. Signature: Result[T,E] → (E→F) → Result[T,F]"""
    return result.map_error(fn)


def tap(result: Result[T, E], fn: Callable[[Result[T, E]], object]) -> Result[T, E]:
    """Observe the whole Result, return it unchanged (same object)."""
    return result.tap(fn)


def tap_success(result: Result[T, E], fn: Callable[[T], object]) -> Result[T, E]:
    return result.tap_success(fn)


def tap_error(result: Result[T, E], fn: Callable[[E], object]) -> Result[T, E]:
    return result.tap_error(fn)


def pipe(initial: Any, *fns: Callable[[Any], Any]) -> Result[Any, Any]:
    """Thread a value through fns, stopping at the first failure.

    Each fn receives a plain value. A returned Result is unwrapped for the
    next step (a failure ends the pipeline); any other return value is passed
    along as is. An exception raised by a step is captured as a failure.

    Example:
        >>> pipe("42", int, lambda n: success(n) if n > 0 else error("neg"), str)
        Success('42')
    """
    if isinstance(initial, Result):
        if not fns or not initial._is_ok:
            return initial
        current = initial._value
    elif not fns:
        return success(initial)
    else:
        current = initial

    for fn in fns:
        try:
            out = fn(current)
        except Exception as exc:
            return error(capture(exc, site="pipe"))
        if isinstance(out, Result):
            if not out._is_ok:
                return out
            current = out._value
        else:
            current = out
    return success(current)


def create_error_boundary(normalizer: Callable[[object], E]) -> Callable[[Callable[[], T]], Result[T, E]]:
    """Bind a normalizer once, then run thunks through the returned boundary.

    Example:
        >>> boundary = create_error_boundary(lambda e: f"failed: {e}")
        >>> boundary(lambda: 1 // 0)
        Failure('failed: integer division or modulo by zero')
    """
    def boundary(fn: Callable[[], T]) -> Result[T, E]:
        try:
            return success(fn())
        except Exception as exc:
            return error(capture(exc, normalizer, site="error_boundary"))  # type: ignore[arg-type]

    return boundary
