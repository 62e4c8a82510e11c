"""
Fetches the three catalog collections and installs them in the cache store.
"""

import asyncio
from typing import Optional, Protocol

from movie_catalog.cache import CacheStore
from movie_catalog.logger import logger
from movie_catalog.models import Movie, Name, Principal, Snapshot
from movie_catalog.utils import timed

LOAD_ERROR_MESSAGE = "Failed to load movie data. Please try again later."


class DataSource(Protocol):
    async def fetch_movies(self) -> list[Movie]: ...

    async def fetch_names(self) -> list[Name]: ...

    async def fetch_principals(self) -> list[Principal]: ...


class Loader:
    def __init__(self, source: DataSource, store: CacheStore):
        self.source = source
        self.store = store
        self.error: Optional[str] = None
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @timed
    async def _fetch_all(self) -> tuple[list[Movie], list[Principal], list[Name]]:
        movies, names, principals = await asyncio.gather(
            self.source.fetch_movies(),
            self.source.fetch_names(),
            self.source.fetch_principals(),
        )
        return movies, principals, names

    async def load(self) -> Snapshot:
        """
        Return a valid cached snapshot, refreshing it from the source if stale.

        A failed refresh keeps whatever the store held before (possibly
        nothing) and sets `error`; it is only retried by calling `load` again.
        """
        self._in_flight += 1
        self.error = None
        try:
            if self.store.is_valid():
                logger.debug("catalog cache is valid, skipping fetch")
                return self.store.current()

            movies, principals, names = await self._fetch_all()
            snapshot = self.store.replace(movies, principals, names)
            self.error = None
            logger.info(
                f"loaded {len(snapshot.movies)} movies, {len(snapshot.principals)} principals "
                f"and {len(snapshot.names)} names (version {snapshot.version})"
            )
            return snapshot
        except Exception as exc:
            logger.error(f"failed to load movie data: {exc!r}")
            self.error = LOAD_ERROR_MESSAGE
            return self.store.current()
        finally:
            self._in_flight -= 1
