# storefront/domain/results.py
"""Outcome of an optional storefront fetch.

Required data is awaited directly and its errors propagate. Optional data
goes through :func:`capture`, which turns any failure into a logged
:class:`Failed` so callers pick their own fallback with ``unwrap_or``.
"""
from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar, Union

from storefront.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap_or(self, default):
        return self.value


@dataclass(frozen=True)
class Failed:
    error: Exception

    @property
    def ok(self) -> bool:
        return False

    def unwrap_or(self, default):
        return default


FetchResult = Union[Ok[T], Failed]


async def capture(awaitable: Awaitable[T], label: str) -> FetchResult:
    try:
        return Ok(await awaitable)
    except Exception as e:
        logger.error(f"Optional fetch '{label}' failed: {e}")
        return Failed(e)
