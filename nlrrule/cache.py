"""Bounded in-memory result cache.

Keys are (raw pattern, effective options, calendar day) triples, the day
being there because relative end dates move with it. Values are deep copies
of the processor's result (or None for "not understood"). Entries are
evicted oldest-inserted first once ``max_size`` is exceeded. A single lock guards
each read and each write; two threads computing the same key concurrently
both compute it and the later write wins, which is harmless because results
are a pure function of the key.
"""
import collections
import copy
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from . import config
from .models import RecurrenceOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    result: Optional[RecurrenceOptions]
    created_at: datetime
    fast_path: bool = False


class ResultCache:
    def __init__(self, max_size: int | None = None):
        if max_size is None:
            max_size = config.CACHE_SIZE
        if max_size < 0:
            raise ValueError(f'cache size must be >= 0, got {max_size}')
        self.max_size = max_size
        self._entries: collections.OrderedDict[tuple, CacheEntry] = collections.OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key) -> bool:
        with self._lock:
            return key in self._entries

    def get(self, key) -> CacheEntry | None:
        """Return a copy of the entry stored under ``key``, or None."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        return CacheEntry(result=copy.deepcopy(entry.result), created_at=entry.created_at, fast_path=entry.fast_path)

    def put(self, key, result: Optional[RecurrenceOptions], fast_path: bool = False) -> None:
        if self.max_size == 0:
            return
        entry = CacheEntry(
            result=copy.deepcopy(result),
            created_at=datetime.now(timezone.utc),
            fast_path=fast_path,
        )
        with self._lock:
            # re-inserting keeps the original position: eviction is by insertion
            self._entries[key] = entry
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug('evicted cache entry %r', evicted)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
