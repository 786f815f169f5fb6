from typing import Optional

from redis import ConnectionPool, Redis

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class KvrocksClient:
    """
    Kvrocks client with connection pool (Redis protocol).

    Ledger operations run synchronously, so this wraps the blocking
    `redis.Redis` client rather than the asyncio one.

    Usage:
        kvrocks_client.initialize()  # In startup
        client = kvrocks_client.get_client()  # In adapters
    """

    def __init__(self) -> None:
        self._client: Optional[Redis] = None

    def initialize(self) -> Redis:
        """Initialize connection pool (idempotent)"""
        if self._client is not None:
            return self._client

        pool = ConnectionPool.from_url(
            f'redis://{settings.KVROCKS_HOST}:{settings.KVROCKS_PORT}/{settings.KVROCKS_DB}',
            password=settings.KVROCKS_PASSWORD if settings.KVROCKS_PASSWORD else None,
            decode_responses=settings.REDIS_DECODE_RESPONSES,
            max_connections=settings.KVROCKS_POOL_MAX_CONNECTIONS,
            socket_timeout=settings.KVROCKS_POOL_SOCKET_TIMEOUT,
            socket_connect_timeout=settings.KVROCKS_POOL_SOCKET_CONNECT_TIMEOUT,
            socket_keepalive=settings.KVROCKS_POOL_SOCKET_KEEPALIVE,
            health_check_interval=settings.KVROCKS_POOL_HEALTH_CHECK_INTERVAL,
        )
        client = Redis.from_pool(pool)
        client.ping()  # Fail-fast
        Logger.base.info(
            f'✅ Kvrocks connected at {settings.KVROCKS_HOST}:{settings.KVROCKS_PORT}'
        )
        self._client = client
        return client

    def get_client(self) -> Redis:
        if self._client is None:
            raise RuntimeError(
                'Kvrocks client not initialized. '
                'Call kvrocks_client.initialize() during startup.'
            )
        return self._client

    def disconnect(self) -> None:
        """Close connection pool"""
        if self._client is not None:
            self._client.close()
            self._client = None


# Global singleton
kvrocks_client = KvrocksClient()
