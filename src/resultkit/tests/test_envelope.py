"""Tests for the envelope adapter."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from resultkit import error, from_envelope, is_error, is_success, success, to_envelope


def test_to_envelope() -> None:
    assert to_envelope(success([1, 2])) == {"status": "success", "data": [1, 2]}
    assert to_envelope(success(None)) == {"status": "success", "data": None}
    assert to_envelope(error({"code": 7})) == {"status": "error", "error": {"code": 7}}


def test_to_envelope_renders_exceptions() -> None:
    envelope = to_envelope(error(ValueError("bad input")))
    assert envelope == {"status": "error", "error": {"type": "ValueError", "message": "bad input"}}


def test_envelopes_satisfy_predicates() -> None:
    assert is_success(to_envelope(success(1)))
    assert is_error(to_envelope(error("x")))


def test_from_envelope() -> None:
    assert from_envelope({"status": "success", "data": {"id": 1}}) == success({"id": 1})
    assert from_envelope({"status": "success", "data": None}) == success(None)
    assert from_envelope({"status": "error", "error": "boom"}) == error("boom")


def test_from_envelope_round_trip() -> None:
    for result in (success({"a": [1, 2]}), error({"code": 404})):
        assert from_envelope(to_envelope(result)) == result


@pytest.mark.parametrize("data", [
    {},
    {"status": "success"},
    {"status": "error"},
    {"status": "error", "error": None},
    {"status": "pending", "data": 1},
    {"status": "success", "data": 1, "extra": True},
    {"data": 1},
])
def test_from_envelope_rejects_malformed(data: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        from_envelope(data)
