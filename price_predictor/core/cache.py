from typing import Any
from cachetools import TTLCache
from .config import settings


class Cache:
    """
    In-process TTL store. Only the rate limiter writes here; predictions are
    randomised per request and are never cached.
    """
    def __init__(self, maxsize: int = 4096, ttl: int = settings.CACHE_TTL_SECONDS):
        self._store = TTLCache(maxsize=maxsize, ttl=ttl)

    def get(self, key: str) -> Any | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def clear(self) -> None:
        self._store.clear()

cache = Cache()
