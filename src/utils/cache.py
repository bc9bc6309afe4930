#!/usr/bin/env python3
"""
Cache Module
Thread-safe key/value store with per-entry time-to-live.

Concurrent misses on the same key are collapsed into one fetch through
get_or_fetch(); callers that arrive while a fetch is in flight wait for it
and share its outcome.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

DEFAULT_TTL = 600  # seconds


class _InflightFetch:
    """Outcome of a fetch shared between the leader and its waiters"""

    def __init__(self):
        self.done = threading.Event()
        self.value = None
        self.error = None


class TTLCache:
    """Key/value cache whose entries expire after a time-to-live"""

    def __init__(self, default_ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            default_ttl: Lifetime in seconds used when set() is given no ttl
            clock: Monotonic time source, replaceable in tests
        """
        self.logger = logging.getLogger('procaudit.cache')
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}  # {key: (value, expires_at)}
        self._inflight: Dict[str, _InflightFetch] = {}
        self._lock = threading.Lock()

    def _lookup(self, key):
        # Caller holds self._lock
        entry = self._entries.get(key)
        if entry is None:
            return None, False

        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None, False

        return value, True

    def get(self, key: str) -> Tuple[Any, bool]:
        """Return (value, True) for a live entry, (None, False) otherwise"""
        with self._lock:
            return self._lookup(key)

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Store value under key; the last write wins"""
        if ttl is None:
            ttl = self.default_ttl
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get_or_fetch(self, key: str, fetch: Callable[[], Any], ttl: Optional[float] = None) -> Any:
        """
        Return the cached value for key, calling fetch() on a miss

        Only one fetch per key runs at a time. The cache lock is released
        while fetch() runs.

        Args:
            key: Cache key
            fetch: Zero-argument callable producing the value
            ttl: Lifetime of the fetched value, defaults to default_ttl

        Returns:
            The cached or freshly fetched value

        Raises:
            Whatever fetch() raises, for the leader and every waiter
        """
        with self._lock:
            value, found = self._lookup(key)
            if found:
                return value

            call = self._inflight.get(key)
            leader = call is None
            if leader:
                call = _InflightFetch()
                self._inflight[key] = call

        if not leader:
            self.logger.debug(f"Waiting for in-flight fetch of {key}")
            call.done.wait()
            if call.error is not None:
                raise call.error
            return call.value

        try:
            call.value = fetch()
            self.set(key, call.value, ttl)
        except BaseException as e:
            call.error = e
            raise
        finally:
            with self._lock:
                self._inflight.pop(key, None)
            call.done.set()

        return call.value
