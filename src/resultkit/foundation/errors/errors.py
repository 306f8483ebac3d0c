"""Exceptions and the normalization rule applied at capture boundaries.

Every boundary in resultkit funnels caught exceptions through `capture()`,
which unwraps `Rejection`, applies either the caller's normalizer or
`normalize_error`, and logs the capture.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

if TYPE_CHECKING:
    from ..config import ResultkitSettings

E = TypeVar("E")


class NormalizedError(Exception):
    """Exception synthesized from a raised value that was not an exception.

    Attributes:
        message: String form of the original value
        original: The raw value as it was raised or rejected
    """

    __slots__ = ("message", "original")

    def __init__(self, message: str, original: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.original = original

    def __repr__(self) -> str:
        return f"NormalizedError({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalizedError):
            return NotImplemented
        return self.message == other.message and self.original == other.original

    def __hash__(self) -> int:
        return hash(self.message)


class Rejection(Exception):
    """Reject an awaitable with an arbitrary, non-exception reason.

    Python can only raise exceptions, so code that wants to fail with a plain
    string or record raises `Rejection(reason)`. Boundaries unwrap it and hand
    `reason` to the normalizer.

    Example:
        >>> async def load() -> dict:
        ...     raise Rejection({"code": 404})
        >>> result = await from_awaitable(load())
        >>> result.unwrap_err().message
        "{'code': 404}"
    """

    __slots__ = ("reason",)

    def __init__(self, reason: object) -> None:
        super().__init__(reason)
        self.reason = reason


class UnwrapError(RuntimeError):
    """Raised by unwrap()/unwrap_err() on the wrong variant."""

    __slots__ = ("payload",)

    def __init__(self, message: str, payload: object = None) -> None:
        super().__init__(message)
        self.payload = payload


def raw_reason(exc: BaseException) -> object:
    """Raw captured value handed to normalizers. Rejection yields its reason."""
    return exc.reason if isinstance(exc, Rejection) else exc


def normalize_error(raw: object) -> Exception:
    """Convert any captured value into an exception with a defined message.

    - Exceptions pass through unchanged
    - Rejection is unwrapped and its reason normalized
    - str becomes the message verbatim
    - anything else uses str(): `42` -> "42", `{"code": 1}` -> "{'code': 1}"
    """
    if isinstance(raw, Rejection):
        raw = raw.reason
    if isinstance(raw, Exception):
        return raw
    if isinstance(raw, str):
        return NormalizedError(raw, raw)
    return NormalizedError(str(raw), raw)


def capture(
    exc: Exception,
    normalizer: Callable[[object], E] | None = None,
    *,
    site: str,
    settings: ResultkitSettings | None = None,
) -> E | Exception:
    """Turn a caught exception into a failure payload and log the capture."""
    from ..config import get_settings
    from ...observability.logging import get_logger

    raw = raw_reason(exc)
    payload = normalizer(raw) if normalizer is not None else normalize_error(raw)
    if (settings or get_settings()).boundary.log_captures:
        get_logger("resultkit.boundary").debug(
            "failure captured",
            site=site,
            error_type=type(raw).__name__,
            normalized=payload is not raw,
        )
    return payload
