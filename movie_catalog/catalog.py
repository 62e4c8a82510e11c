"""
Read API over the cached catalog, used by the presentation layer.
"""

from typing import Optional

from movie_catalog.cache import CacheStore
from movie_catalog.loader import DataSource, Loader
from movie_catalog.lookup import CatalogIndex
from movie_catalog.models import CreditGroup, Movie, MovieQuery, Principal, QueryResult, Snapshot
from movie_catalog.query import page_window, query_movies, year_bounds
from movie_catalog.recommend import similar_to
from movie_catalog.search.fuzzy_search import get_title_searcher


class MovieCatalog:
    def __init__(self, source: DataSource, store: Optional[CacheStore] = None):
        self.source = source
        self._store = store if store is not None else CacheStore()
        self._loader = Loader(source, self._store)
        self._index = CatalogIndex(self._store)

    async def load(self) -> Snapshot:
        return await self._loader.load()

    @property
    def loading(self) -> bool:
        return self._loader.loading

    @property
    def error(self) -> Optional[str]:
        return self._loader.error

    @property
    def version(self) -> int:
        return self._store.current().version

    @property
    def is_empty(self) -> bool:
        return self._store.is_empty

    @property
    def movies(self) -> tuple[Movie, ...]:
        return self._store.current().movies

    def genres(self) -> list[str]:
        return self._index.genres()

    def principals_for(self, tconst: str) -> list[Principal]:
        return self._index.principals_for(tconst)

    def name_for(self, nconst: str) -> str:
        return self._index.name_for(nconst)

    def movie_by_id(self, tconst: str) -> Optional[Movie]:
        return self._index.movie_by_id(tconst)

    def credits_for(self, tconst: str) -> list[CreditGroup]:
        return self._index.credits_for(tconst)

    def query(self, query: MovieQuery) -> QueryResult:
        return query_movies(self.movies, query)

    def page_window(self, page: int, total_pages: int) -> list[int]:
        return page_window(page, total_pages)

    def year_bounds(self) -> tuple[int, int]:
        return year_bounds(self.movies)

    def similar_to(self, movie: Movie, limit: int = 6) -> list[Movie]:
        return similar_to(self.movies, movie, limit)

    async def search_titles(self, query: str, limit: int = 10) -> list[tuple[str, str]]:
        searcher = await get_title_searcher(self._store.current())
        return searcher(query, limit=limit)

    async def close(self) -> None:
        close = getattr(self.source, "close", None)
        if close is not None:
            await close()
