"""Per-call outcome of a data access operation."""

import time
from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar

from markermap.core.errors import StorageError

T = TypeVar("T")


@dataclass
class OperationResult(Generic[T]):
    """Success or failure of one call, with how long it took.

    Every call gets its own result, so overlapping calls never overwrite
    each other's status.
    """

    operation: str
    value: T | None = None
    error: StorageError | None = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or re-raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.value


async def attempt(operation: str, call: Awaitable[T]) -> OperationResult[T]:
    """Await ``call`` and capture its StorageError instead of raising it."""
    started = time.perf_counter()
    try:
        value = await call
    except StorageError as e:
        return OperationResult(
            operation=operation,
            error=e,
            duration_ms=(time.perf_counter() - started) * 1000,
        )
    return OperationResult(
        operation=operation,
        value=value,
        duration_ms=(time.perf_counter() - started) * 1000,
    )
