"""
Redis store client.

One StoreClient is built at process start and handed to every service;
services borrow its connection and never open their own.
"""

from functools import wraps
from typing import Optional
import logging

from redis.asyncio import Redis, from_url
from redis.backoff import NoBackoff
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError
from redis.asyncio.retry import Retry

from task_manager.errors import StoreUnavailable

logger = logging.getLogger(__name__)

# Failures that mean the store is unreachable, as opposed to a bad command
UNAVAILABLE_ERRORS = (RedisConnectionError, RedisTimeoutError, OSError)


class StoreClient:
    """Lazily established, shared handle to Redis."""

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        ssl_cert_reqs: str = "none",
        redis_client: Optional[Redis] = None,
    ):
        if url is None and redis_client is None:
            raise ValueError("StoreClient needs a url or a redis_client")
        self.url = url
        self.ssl_cert_reqs = ssl_cert_reqs
        self._client = redis_client
        # An injected handle is reused when reconnecting after close()
        self._injected = redis_client

    @property
    def connected(self) -> bool:
        return self._client is not None

    @property
    def redis(self) -> Redis:
        """The live Redis handle."""
        if self._client is None:
            raise StoreUnavailable("Store is not connected")
        return self._client

    def _build_client(self) -> Redis:
        if self._injected is not None:
            return self._injected
        options = {
            "decode_responses": True,
            # One automatic retry per command, then the error surfaces
            "retry": Retry(NoBackoff(), 1),
            "retry_on_error": [RedisConnectionError, RedisTimeoutError],
        }
        if self.url.startswith("rediss://"):
            options["ssl_cert_reqs"] = self.ssl_cert_reqs
        return from_url(self.url, **options)

    async def connect(self) -> None:
        """Create the handle if needed and check that the store answers."""
        if self._client is None:
            logger.info("Connecting to Redis")
            self._client = self._build_client()
        await self.health_check()

    async def health_check(self) -> None:
        """
        Round-trip a PING.

        Raises:
            StoreUnavailable: If the store does not respond
        """
        try:
            await self.redis.ping()
        except UNAVAILABLE_ERRORS as e:
            logger.error(f"Redis health check failed: {str(e)}")
            raise StoreUnavailable("Store did not respond to ping", {"reason": str(e)}) from e

    async def close(self) -> None:
        """Release the handle; a later connect() opens a new one."""
        if self._client is None:
            return
        client, self._client = self._client, None
        await client.aclose()
        logger.info("Redis connection closed")


def translate_store_errors(func):
    """Re-raise connection-level Redis failures as StoreUnavailable."""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except UNAVAILABLE_ERRORS as e:
            logger.error(f"Redis error in {func.__name__}: {str(e)}")
            raise StoreUnavailable("Store is unavailable", {"reason": str(e)}) from e

    return wrapper
