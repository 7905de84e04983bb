"""Redis-backed entry meta store.

One Redis hash per entry (entry_meta:<entry_id>); hash fields are meta
keys such as the embed cache key. Values are JSON objects carrying the
stored value and the form_id it was written for. HSET/HDEL are atomic per
field, so no cross-key locking is needed.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis

from embedgate.core.config import get_settings
from embedgate.infrastructure.cache.keys import entry_meta_hash_key

logger = logging.getLogger(__name__)


def _decode(raw: str) -> str | None:
    """Return the stored value from a JSON meta record, or None if unreadable."""
    try:
        record: Any = json.loads(raw)
    except ValueError:
        logger.warning("Discarding unreadable entry meta record")
        return None
    if not isinstance(record, dict):
        return None
    value = record.get("value")
    return value if isinstance(value, str) else None


class RedisEntryMetaStore:
    """Async Redis entry meta store.

    Uses embedgate.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown. Read errors degrade to a miss;
    write and delete errors are logged and reported as False.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize store.

        Args:
            redis_client: Optional Redis client for testing or DI. A client
                passed here is treated as already connected.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is None:
            try:
                self.redis = redis.Redis(
                    host=self.settings.redis_host,
                    port=self.settings.redis_port,
                    db=self.settings.redis_db,
                    password=self.settings.redis_password.get_secret_value() if self.settings.redis_password else None,
                    decode_responses=True,
                    socket_connect_timeout=5,
                    socket_keepalive=True,
                )
                await self.redis.ping()
                self._connected = True
                logger.info(
                    "Redis entry meta store connected: %s:%s",
                    self.settings.redis_host,
                    self.settings.redis_port,
                )
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning(
                    "Redis connection failed: %s. Embed cache disabled.",
                    e,
                )
                self._connected = False
                self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis entry meta store disconnected")

    async def _reconnect(self) -> bool:
        """Attempt to reconnect after a dropped connection. Returns True if reconnected."""
        if self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Ignoring error while closing dropped Redis connection")
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def get(self, entry_id: int, key: str) -> str | None:
        """Return stored value for (entry_id, key), or None if missing/unavailable."""
        if not self.is_available() or self.redis is None:
            return None
        name = entry_meta_hash_key(entry_id)
        try:
            raw = await self.redis.hget(name, key)
        except (redis.ConnectionError, redis.TimeoutError):
            if not await self._reconnect() or self.redis is None:
                logger.warning("Entry meta get unavailable for %s/%s (Redis disconnected)", name, key)
                return None
            try:
                raw = await self.redis.hget(name, key)
            except redis.RedisError:
                logger.exception("Entry meta get error for %s/%s after reconnect", name, key)
                return None
        except redis.RedisError:
            logger.exception("Entry meta get error for %s/%s", name, key)
            return None
        return _decode(raw) if raw is not None else None

    async def set(self, entry_id: int, key: str, value: str, form_id: int) -> bool:
        """Store value under (entry_id, key). Returns True on success."""
        if not self.is_available() or self.redis is None:
            return False
        name = entry_meta_hash_key(entry_id)
        serialized = json.dumps({"value": value, "form_id": form_id})
        try:
            await self.redis.hset(name, key, serialized)
            return True
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect() and self.redis is not None:
                try:
                    await self.redis.hset(name, key, serialized)
                    return True
                except redis.RedisError:
                    logger.exception("Entry meta set error for %s/%s after reconnect", name, key)
                    return False
            logger.warning("Entry meta set unavailable for %s/%s (Redis disconnected)", name, key)
            return False
        except redis.RedisError:
            logger.exception("Entry meta set error for %s/%s", name, key)
            return False

    async def delete(self, entry_id: int, key: str) -> bool:
        """Remove (entry_id, key). Returns True when the command ran (absent keys included)."""
        if not self.is_available() or self.redis is None:
            return False
        name = entry_meta_hash_key(entry_id)
        try:
            await self.redis.hdel(name, key)
            return True
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect() and self.redis is not None:
                try:
                    await self.redis.hdel(name, key)
                    return True
                except redis.RedisError:
                    logger.exception("Entry meta delete error for %s/%s after reconnect", name, key)
                    return False
            logger.error("Entry meta delete unavailable for %s/%s; cached embed may be stale", name, key)
            return False
        except redis.RedisError:
            logger.exception("Entry meta delete error for %s/%s", name, key)
            return False
