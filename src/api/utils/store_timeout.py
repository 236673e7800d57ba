import asyncio
from typing import Awaitable, TypeVar

from libs.result import Error
from src.api.error import ServerError

T = TypeVar("T")


async def with_store_timeout(awaitable: Awaitable[T], timeout: float) -> T:
    """
    Await a use case, bounded by the configured store timeout.

    Raises:
        ServerError: STORE_TIMEOUT if the data store does not answer in time
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError:
        raise ServerError(
            Error("STORE_TIMEOUT", f"Data store did not respond within {timeout}s")
        )
