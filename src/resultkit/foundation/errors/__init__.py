"""Error types and normalization for resultkit.

- NormalizedError: exception built from a non-exception raised value
- Rejection: raise to fail an awaitable with a plain reason
- UnwrapError: unwrap on the wrong variant
- normalize_error/capture: the one normalization rule applied at boundaries
"""

from .errors import NormalizedError, Rejection, UnwrapError, capture, normalize_error, raw_reason
from .types import HasMessage, JsonDict, JsonMapping, JsonPrimitive, JsonValue

__all__ = [
    # Exceptions
    "NormalizedError", "Rejection", "UnwrapError",
    # Normalization
    "normalize_error", "capture", "raw_reason",
    # Types
    "HasMessage", "JsonDict", "JsonMapping", "JsonPrimitive", "JsonValue",
]
