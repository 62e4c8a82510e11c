"""
In-memory store holding the last successfully fetched catalog snapshot.
"""

import itertools
import time
from typing import Callable, Iterable, Optional

from movie_catalog.models import EMPTY_SNAPSHOT, Movie, Name, Principal, Snapshot

CACHE_TTL = 5 * 60

# shared by every store, a version identifies one snapshot process-wide
_versions = itertools.count(1)


class CacheStore:
    """
    Holds one `Snapshot` at a time.

    The three collections and their timestamp live in a single immutable
    record, so `replace` is one reference assignment and readers can never
    pair movies from one fetch with principals from another.
    """

    def __init__(self, ttl: float = CACHE_TTL, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.clock = clock
        self._snapshot: Optional[Snapshot] = None

    def is_valid(self) -> bool:
        snapshot = self._snapshot
        if snapshot is None:
            return False
        return self.clock() - snapshot.fetched_at < self.ttl

    def replace(
        self,
        movies: Iterable[Movie],
        principals: Iterable[Principal],
        names: Iterable[Name],
        now: Optional[float] = None,
    ) -> Snapshot:
        snapshot = Snapshot(
            movies=tuple(movies),
            principals=tuple(principals),
            names=tuple(names),
            fetched_at=self.clock() if now is None else now,
            version=next(_versions),
        )
        self._snapshot = snapshot
        return snapshot

    def current(self) -> Snapshot:
        snapshot = self._snapshot
        return EMPTY_SNAPSHOT if snapshot is None else snapshot

    @property
    def is_empty(self) -> bool:
        return self._snapshot is None
