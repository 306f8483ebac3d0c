"""Tests for the core Result type.

Validates:
- Functor laws
- Monad laws
- Constructors and predicates (including foreign data)
- Elimination: match, unwrap, unwrap_or
- Immutability, equality, pattern matching
"""

from __future__ import annotations

import copy
import pickle
from typing import Callable

import pytest

from resultkit import (
    Result,
    ResultStatus,
    UnwrapError,
    error,
    is_error,
    is_result,
    is_success,
    match,
    success,
    unwrap,
    unwrap_or,
)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = success(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = error("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    result: Result[int, str] = success(5)

    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: success(x * 2)
    assert success(42).chain(f) == f(42)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    m: Result[int, str] = success(42)
    assert m.chain(success) == m


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = success(5)
    f: Callable[[int], Result[int, str]] = lambda x: success(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: success(x * 2)

    assert m.chain(f).chain(g) == m.chain(lambda x: f(x).chain(g))


# ═════════════════════════════════════════════════════════════════════════════
# Constructors & Predicates
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("value", [42, "text", None, 0, False, [], {"k": 1}, ValueError("v")])
def test_success_predicates(value: object) -> None:
    """Any value, including None and falsy ones, builds a success."""
    result = success(value)
    assert is_success(result)
    assert not is_error(result)
    assert result.status is ResultStatus.SUCCESS
    assert result.payload is value


@pytest.mark.parametrize("err", ["fail", ValueError("bad"), 404, None, {"code": 1}])
def test_error_predicates(err: object) -> None:
    """error() stores the payload unchanged, with no normalization."""
    result = error(err)
    assert is_error(result)
    assert not is_success(result)
    assert result.status is ResultStatus.ERROR
    assert result.payload is err


@pytest.mark.parametrize("junk", [
    None,
    42,
    "success",
    [],
    object(),
    {},
    {"status": "success"},                 # missing payload
    {"status": "error"},                   # missing payload
    {"status": "error", "error": None},    # null payload
    {"data": 1},                           # missing tag
    {"status": "pending", "data": 1},      # unknown tag
    {"status": 1, "data": 1},              # non-string tag
])
def test_predicates_tolerate_malformed_input(junk: object) -> None:
    """Predicates never raise and return False for anything that is not a Result."""
    assert is_success(junk) is False
    assert is_error(junk) is False
    assert is_result(junk) is False


def test_predicates_accept_envelope_mappings() -> None:
    assert is_success({"status": "success", "data": None})
    assert not is_error({"status": "success", "data": None})
    assert is_error({"status": "error", "error": "boom"})
    assert not is_success({"status": "error", "error": "boom"})
    assert is_result({"status": "success", "data": 1})
    assert is_result(success(1)) and is_result(error(1))


# ═════════════════════════════════════════════════════════════════════════════
# Elimination
# ═════════════════════════════════════════════════════════════════════════════


def test_match_round_trip() -> None:
    """match(success(x), success=id, error=const None) == x"""
    for x in (1, "a", None, [1, 2]):
        assert match(success(x), success=lambda v: v, error=lambda _: None) == x


def test_match_invokes_exactly_one_handler() -> None:
    calls: list[str] = []

    def on_success(v: int) -> str:
        calls.append("success")
        return f"ok:{v}"

    def on_error(e: str) -> str:
        calls.append("error")
        return f"err:{e}"

    assert match(success(1), success=on_success, error=on_error) == "ok:1"
    assert calls == ["success"]

    calls.clear()
    assert match(error("x"), success=on_success, error=on_error) == "err:x"
    assert calls == ["error"]


def test_match_requires_both_handlers() -> None:
    with pytest.raises(TypeError):
        match(success(1), success=lambda v: v)  # type: ignore[call-arg]


@pytest.mark.asyncio
async def test_match_with_async_handlers() -> None:
    """Async handlers make match return an awaitable."""
    async def on_success(v: int) -> int:
        return v * 2

    async def on_error(e: str) -> int:
        return -1

    assert await match(success(21), success=on_success, error=on_error) == 42
    assert await match(error("x"), success=on_success, error=on_error) == -1


def test_unwrap() -> None:
    assert unwrap(success(5)) == 5
    assert unwrap_or(success(5), 10) == 5
    assert unwrap_or(error("fail"), 10) == 10


def test_unwrap_reraises_exception_payload() -> None:
    exc = KeyError("missing")
    with pytest.raises(KeyError) as info:
        unwrap(error(exc))
    assert info.value is exc


def test_unwrap_non_exception_payload() -> None:
    with pytest.raises(UnwrapError) as info:
        error("fail").unwrap()
    assert info.value.payload == "fail"


def test_unwrap_err() -> None:
    assert error("fail").unwrap_err() == "fail"
    with pytest.raises(UnwrapError):
        success(1).unwrap_err()


def test_unwrap_or_else() -> None:
    assert success(5).unwrap_or_else(lambda _: 10) == 5
    assert error("fail").unwrap_or_else(len) == 4


# ═════════════════════════════════════════════════════════════════════════════
# Value Semantics
# ═════════════════════════════════════════════════════════════════════════════


def test_immutable() -> None:
    result = success(1)
    with pytest.raises(AttributeError):
        result._value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        result.anything = 2  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        del result._is_ok
    assert result.unwrap() == 1


def test_equality_and_hash() -> None:
    assert success(1) == success(1)
    assert success(1) != success(2)
    assert success("x") != error("x")
    assert len({success(1), success(1), error(1)}) == 2
    assert (success(1) == 1) is False


def test_truthiness_iteration_and_tuple() -> None:
    assert success(0)
    assert not error("fail")
    assert list(success(3)) == [3]
    assert list(error("fail")) == []
    assert success(42).to_tuple() == (42, None)
    assert error("fail").to_tuple() == (None, "fail")


def test_repr() -> None:
    assert repr(success(42)) == "Success(42)"
    assert str(error("fail")) == "Failure('fail')"


def test_copy_and_pickle() -> None:
    result = success({"a": [1]})
    assert copy.copy(result) is result
    deep = copy.deepcopy(result)
    assert deep == result and deep.payload is not result.payload
    assert pickle.loads(pickle.dumps(error("fail"))) == error("fail")


def test_structural_pattern_matching() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Result(ResultStatus.SUCCESS, value):
                return f"value {value}"
            case Result(ResultStatus.ERROR, err):
                return f"error {err}"
        return "unreachable"

    assert describe(success(3)) == "value 3"
    assert describe(error("x")) == "error x"
