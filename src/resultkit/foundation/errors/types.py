"""Type aliases shared across resultkit.

JSON aliases for structured log context and envelope payloads, plus the
minimal error capability used by the default normalization path.
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

# JSON type aliases - using Any for recursive types to avoid resolution issues
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]
JsonMapping = dict[str, JsonValue]


@runtime_checkable
class HasMessage(Protocol):
    """Anything carrying a human-readable message."""

    @property
    def message(self) -> str: ...
