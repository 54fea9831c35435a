# storefront/services/deferred.py
import asyncio
from typing import Awaitable, Generic, TypeVar

from storefront.domain.results import FetchResult, capture
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Deferred(Generic[T]):
    """
    Handle to below-the-fold data still in flight while the page streams.

    The fetch starts when the handle is created. Failures never escape:
    they are logged by capture() and the handle resolves to ``default``.
    Awaiting the handle more than once returns the same value.
    """

    def __init__(self, awaitable: Awaitable[T], label: str, default=None):
        self.label = label
        self._default = default
        self._task: asyncio.Task = asyncio.create_task(capture(awaitable, label))

    @property
    def done(self) -> bool:
        return self._task.done()

    @property
    def cancelled(self) -> bool:
        return self._task.cancelled()

    def cancel(self) -> None:
        if not self._task.done():
            logger.info(f"Cancelling deferred fetch {self.label}")
            self._task.cancel()

    async def outcome(self) -> FetchResult:
        return await self._task

    async def resolve(self) -> T | None:
        outcome = await self._task
        return outcome.unwrap_or(self._default)

    def __await__(self):
        return self.resolve().__await__()
