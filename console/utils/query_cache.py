"""
Query cache for remote API reads.

Entries are keyed by lists such as ["orders", branch_id, page]. Invalidating a
prefix (["orders", branch_id]) marks every key that starts with it stale: each
prefix carries a generation counter and the generations of all prefixes of a
key are folded into its storage key, so bumping one counter orphans the
matching entries until they expire.
"""

import hashlib
import json
from typing import Any, Callable, List, Optional, Sequence

from django.conf import settings
from django.core.cache import caches

from console.utils.api_repository import ApiResponse
from console.utils.logger import ConsoleLogger

logger = ConsoleLogger(__name__)


def _digest(parts: Any) -> str:
    raw = json.dumps(parts, default=str, separators=(',', ':'))
    return hashlib.md5(raw.encode('utf-8')).hexdigest()


class QueryCache:
    def __init__(self, scope: str, timeout: Optional[int] = None, alias: str = 'default') -> None:
        self.scope = scope
        self.timeout = timeout if timeout is not None else settings.CONSOLE_QUERY_CACHE_TIMEOUT
        self.cache = caches[alias]

    def _generation_key(self, prefix: Sequence[Any]) -> str:
        return f"query-gen:{self.scope}:{_digest(list(prefix))}"

    def _storage_key(self, key: Sequence[Any]) -> str:
        generation_keys = [self._generation_key(key[:i]) for i in range(1, len(key) + 1)]
        generations = self.cache.get_many(generation_keys)
        folded = [generations.get(k, 0) for k in generation_keys]
        return f"query:{self.scope}:{_digest([list(key), folded])}"

    def get(self, key: List[Any]):
        """Return (hit, data) for key"""
        entry = self.cache.get(self._storage_key(key))
        if entry is None:
            return False, None
        return True, entry[0]

    def set(self, key: List[Any], data: Any, timeout: Optional[int] = None) -> None:
        # stored in a 1-tuple so cached None is told apart from a miss
        self.cache.set(self._storage_key(key), (data,), timeout if timeout is not None else self.timeout)

    def fetch(self, key: List[Any], loader: Callable[[], ApiResponse], timeout: Optional[int] = None) -> ApiResponse:
        """Cached data for key, or the loader's response (cached only when it succeeded)"""
        hit, data = self.get(key)
        if hit:
            logger.debug(f"Query cache hit for {key}")
            return ApiResponse(status=200, data=data)

        response = loader()
        if response.ok:
            self.set(key, response.data, timeout)
        return response

    def invalidate(self, prefix: List[Any]) -> None:
        """Mark every entry whose key starts with prefix as stale"""
        generation_key = self._generation_key(prefix)
        self.cache.add(generation_key, 0, None)
        try:
            self.cache.incr(generation_key)
        except ValueError:
            # evicted between add and incr
            self.cache.set(generation_key, 1, None)
        logger.debug(f"Query cache invalidated {prefix}")


def get_query_cache(request) -> QueryCache:
    """Cache scoped to the signed-in console user"""
    scope = request.session.get('user_email') or 'anonymous'
    return QueryCache(scope=scope)
