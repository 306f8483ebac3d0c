"""Result type for error handling without try/except control flow.

Implements a discriminated union of success and failure:
- Constructors: success, error
- Predicates: is_success, is_error, is_result (tolerant of foreign data)
- Elimination: match, unwrap, unwrap_or

Performance notes:
- Uses __slots__ for minimal memory footprint
- Direct attribute access (no method calls) in hot paths
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, TypeVar

from resultkit.foundation.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")

_OK = True
_ERR = False


class ResultStatus(StrEnum):
    """Variant tag."""
    SUCCESS = "success"
    ERROR = "error"


class Result(Generic[T, E]):
    """Discriminated union representing success or failure.

    Immutable: every transformation returns a new Result, except the tap
    family which returns the very same object.

    Examples:
        >>> success(42).map(lambda x: x * 2).unwrap()
        84
        >>> error("fail").map(lambda x: x * 2).unwrap_err()
        'fail'
        >>> success(5).chain(lambda x: success(x * 2) if x > 0 else error("neg")).unwrap()
        10

    Structural pattern matching:
        >>> match success(3):
        ...     case Result(ResultStatus.SUCCESS, value): print(value)
        ...     case Result(ResultStatus.ERROR, err): print("failed", err)
        3
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("status", "payload")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_ok", is_ok)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"Result is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Result is immutable, cannot delete {name!r}")

    # ─── Inspection ──────────────────────────────────────────────────────

    @property
    def status(self) -> ResultStatus:
        return ResultStatus.SUCCESS if self._is_ok else ResultStatus.ERROR

    @property
    def payload(self) -> T | E:
        """The value of a success or the error of a failure."""
        return self._value

    def is_success(self) -> bool:
        return self._is_ok

    def is_error(self) -> bool:
        return not self._is_ok

    # ─── Value Extraction ────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the success value.

        Raises:
            The failure payload itself when it is an exception, otherwise
            UnwrapError carrying the payload.
        """
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        if isinstance(self._value, BaseException):
            raise self._value
        raise UnwrapError(f"unwrap() on Failure: {self._value!r}", self._value)

    def unwrap_err(self) -> E:
        """Extract the failure payload. Raises UnwrapError on success."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"unwrap_err() on Success: {self._value!r}", self._value)

    def unwrap_or(self, default: T) -> T:
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    # ─── Functor Operations ──────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to the success value. Failure is returned as is, f not called."""
        return Result(f(self._value), _OK) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to the failure payload. Success is returned as is."""
        return Result(f(self._value), _ERR) if not self._is_ok else self  # type: ignore[arg-type,return-value]

    # ─── Monad Operations ────────────────────────────────────────────────

    def chain(self, f: Callable[[T], Result[U, F]]) -> Result[U, E | F]:
        """Monadic bind. f returns a Result which is passed through unwrapped-once.

        Example:
            >>> success("42").chain(parse_int).chain(validate_positive)
        """
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    # ─── Side Effects ────────────────────────────────────────────────────

    def tap(self, f: Callable[[Result[T, E]], object]) -> Result[T, E]:
        """Call f with the whole Result, return self."""
        f(self)
        return self

    def tap_success(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with the success value, return self."""
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def tap_error(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with the failure payload, return self."""
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    # ─── Pattern Matching ────────────────────────────────────────────────

    def match(self, *, success: Callable[[T], R], error: Callable[[E], R]) -> R:
        """Exhaustive case analysis. Exactly one handler runs."""
        return success(self._value) if self._is_ok else error(self._value)  # type: ignore[arg-type]

    # ─── Conversion ──────────────────────────────────────────────────────

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to (value, error) tuple."""
        return (self._value, None) if self._is_ok else (None, self._value)  # type: ignore[return-value]

    # ─── Dunder Methods ──────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Success' if self._is_ok else 'Failure'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if success, nothing otherwise."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]

    def __copy__(self) -> Result[T, E]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Result[T, E]:
        from copy import deepcopy
        return Result(deepcopy(self._value, memo), self._is_ok)

    def __reduce__(self) -> tuple[type[Result[T, E]], tuple[T | E, bool]]:
        return (Result, (self._value, self._is_ok))


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Result[T, Any]:
    """Construct the success variant. Accepts any value, including None."""
    return Result(value, _OK)


def error(err: E) -> Result[Any, E]:
    """Construct the failure variant. The payload is stored unchanged."""
    return Result(err, _ERR)


# ═══════════════════════════════════════════════════════════════════════════════
# Predicates
# ═══════════════════════════════════════════════════════════════════════════════


def is_success(obj: object) -> bool:
    """True for a success Result or a well-formed success envelope. Never raises."""
    if isinstance(obj, Result):
        return obj._is_ok
    return isinstance(obj, Mapping) and _status(obj) == ResultStatus.SUCCESS and "data" in obj


def is_error(obj: object) -> bool:
    """True for a failure Result or a well-formed error envelope. Never raises."""
    if isinstance(obj, Result):
        return not obj._is_ok
    return isinstance(obj, Mapping) and _status(obj) == ResultStatus.ERROR and obj.get("error") is not None


def is_result(obj: object) -> bool:
    """True for any Result, or a mapping shaped like either envelope variant."""
    return isinstance(obj, Result) or is_success(obj) or is_error(obj)


def _status(data: Mapping[Any, Any]) -> object:
    status = data.get("status")
    return status if isinstance(status, str) else None


# ═══════════════════════════════════════════════════════════════════════════════
# Elimination
# ═══════════════════════════════════════════════════════════════════════════════


def match(result: Result[T, E], *, success: Callable[[T], R], error: Callable[[E], R]) -> R:
    """Run exactly one handler and return its value.

    Async handlers are fine: the coroutine they return is handed back for the
    caller to await.

    Example:
        >>> match(success(2), success=lambda v: v * 10, error=lambda e: -1)
        20
    """
    return result.match(success=success, error=error)


def unwrap(result: Result[T, E]) -> T:
    """Value of a success. Re-raises an exception payload, else UnwrapError."""
    return result.unwrap()


def unwrap_or(result: Result[T, E], default: T) -> T:
    return result.unwrap_or(default)
