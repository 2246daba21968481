"""Single-flight cache for asynchronously fetched values."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from pywiql._errors import ERR_MSG_FIELD_FETCH_FAILED, FieldFetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _retrieve_exception(task: asyncio.Task) -> None:
    # Awaiters re-raise it; this covers tasks whose awaiters were all
    # cancelled or that invalidate() dropped.
    if not task.cancelled():
        task.exception()


class CachedValue(Generic[T]):
    """Caches the result of an async factory until invalidated.

    Concurrent callers share a single in-flight fetch. A caller that is
    cancelled does not cancel the fetch for the others. A failed fetch is
    not cached, so the next call retries it.
    """

    def __init__(self, factory: Callable[[], Awaitable[T]]) -> None:
        self._factory = factory
        self._value: T | None = None
        self._has_value = False
        self._pending: asyncio.Task[T] | None = None
        self._generation = 0

    @property
    def has_value(self) -> bool:
        return self._has_value

    async def get_value(self) -> T:
        """Return the cached value, fetching it if needed.

        Raises:
            FieldFetchError: If the factory raises.
        """
        if self._has_value:
            return self._value
        if self._pending is None:
            self._pending = asyncio.create_task(self._fetch(self._generation))
            self._pending.add_done_callback(_retrieve_exception)
        return await asyncio.shield(self._pending)

    def invalidate(self) -> None:
        """Drop the cached value; a fetch still in flight is not published."""
        self._generation += 1
        self._value = None
        self._has_value = False
        self._pending = None

    async def _fetch(self, generation: int) -> T:
        logger.debug("fetching value (generation %d)", generation)
        try:
            value = await self._factory()
        except Exception as e:
            if generation == self._generation:
                self._pending = None
            raise FieldFetchError(
                ERR_MSG_FIELD_FETCH_FAILED,
                f"factory raised {type(e).__name__}: {e}",
                wrapped=e,
            ) from e
        if generation == self._generation:
            self._value = value
            self._has_value = True
            self._pending = None
        return value
