"""Tests for per-call operation results."""

import asyncio

import pytest

from markermap.core.errors import StorageError
from markermap.services.operation import attempt


async def _value(value, delay: float = 0.0):
    await asyncio.sleep(delay)
    return value


async def _fail(delay: float = 0.0):
    await asyncio.sleep(delay)
    raise StorageError("get_markers", RuntimeError("boom"))


@pytest.mark.asyncio
async def test_attempt_success():
    """Test a successful call carries its value."""
    result = await attempt("add_marker", _value(7))

    assert result.ok
    assert result.value == 7
    assert result.error is None
    assert result.operation == "add_marker"
    assert result.duration_ms >= 0
    assert result.unwrap() == 7


@pytest.mark.asyncio
async def test_attempt_failure():
    """Test a StorageError is captured and re-raised by unwrap."""
    result = await attempt("get_markers", _fail())

    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, StorageError)
    with pytest.raises(StorageError):
        result.unwrap()


@pytest.mark.asyncio
async def test_attempt_does_not_capture_other_errors():
    """Test errors other than StorageError propagate."""

    async def broken():
        raise ValueError("bug")

    with pytest.raises(ValueError):
        await attempt("get_markers", broken())


@pytest.mark.asyncio
async def test_concurrent_attempts_keep_their_own_status():
    """Test overlapping calls do not overwrite each other's outcome."""
    slow_ok, fast_fail = await asyncio.gather(
        attempt("get_markers", _value([1, 2], delay=0.02)),
        attempt("get_markers", _fail(delay=0.0)),
    )

    assert slow_ok.ok
    assert slow_ok.value == [1, 2]
    assert not fast_fail.ok
