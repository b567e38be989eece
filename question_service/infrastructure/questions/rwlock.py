"""
Reader/writer lock for asyncio tasks.

Many readers may hold the lock together; a writer holds it alone.
Built on a single asyncio.Condition, so it must only be used from
one event loop at a time.

Release updates the holder counts before it awaits anything, so a task
cancelled while releasing never leaves the lock held.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class AsyncReadWriteLock:
    """Shared-read / exclusive-write lock.

    Usage:
        lock = AsyncReadWriteLock()

        async with lock.read():
            ...  # concurrent with other readers

        async with lock.write():
            ...  # exclusive
    """

    def __init__(self) -> None:
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writer = False

    @property
    def readers(self) -> int:
        """Number of tasks currently holding read access."""
        return self._readers

    @property
    def writing(self) -> bool:
        """True while a task holds write access."""
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._condition:
            await self._condition.wait_for(lambda: not self._writer)
            self._readers += 1
        try:
            yield
        finally:
            self._readers -= 1
            if self._readers == 0:
                await self._notify_waiters()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._condition:
            await self._condition.wait_for(
                lambda: not self._writer and self._readers == 0
            )
            self._writer = True
        try:
            yield
        finally:
            self._writer = False
            await self._notify_waiters()

    async def _notify_waiters(self) -> None:
        """Wake waiting tasks, even if the releasing task is cancelled."""

        async def notify() -> None:
            async with self._condition:
                self._condition.notify_all()

        await asyncio.shield(notify())
