"""
Lookups and derived collections over the cached catalog snapshot.
"""

from typing import Iterable, NamedTuple, Optional

from movie_catalog.cache import CacheStore
from movie_catalog.models import Credit, CreditGroup, Movie, Name, Principal, Snapshot

UNKNOWN_ACTOR = "Unknown Actor"

CATEGORY_ORDER = (
    "actor",
    "actress",
    "director",
    "writer",
    "producer",
    "cinematographer",
    "composer",
    "editor",
    "production_designer",
    "costume_designer",
    "self",
    "archive_footage",
)
_CATEGORY_RANK = {category: i for i, category in enumerate(CATEGORY_ORDER)}


def split_genres(genre: str) -> list[str]:
    return [token.strip() for token in genre.split(",") if token.strip()]


def distinct_genres(movies: Iterable[Movie]) -> list[str]:
    all_genres = set()
    for movie in movies:
        if not movie.genre:
            continue
        all_genres.update(split_genres(movie.genre))
    return sorted(all_genres)


def _category_sort_key(category: str) -> tuple[int, str]:
    return _CATEGORY_RANK.get(category, len(CATEGORY_ORDER)), category


class _Indexes(NamedTuple):
    genres: list[str]
    movies_by_id: dict[str, Movie]
    names_by_id: dict[str, Name]
    principals_by_movie: dict[str, list[Principal]]


def _build_indexes(snapshot: Snapshot) -> _Indexes:
    movies_by_id: dict[str, Movie] = {}
    for movie in snapshot.movies:
        movies_by_id.setdefault(movie.tconst, movie)
    names_by_id: dict[str, Name] = {}
    for name in snapshot.names:
        names_by_id.setdefault(name.nconst, name)
    principals_by_movie: dict[str, list[Principal]] = {}
    for principal in snapshot.principals:
        principals_by_movie.setdefault(principal.tconst, []).append(principal)
    return _Indexes(
        genres=distinct_genres(snapshot.movies),
        movies_by_id=movies_by_id,
        names_by_id=names_by_id,
        principals_by_movie=principals_by_movie,
    )


class CatalogIndex:
    """
    Foreign-key lookups over the store's current snapshot.

    Indexes are rebuilt lazily the first time they are needed after the
    store installs a new snapshot. Lists handed out are fresh copies.
    """

    def __init__(self, store: CacheStore):
        self.store = store
        self._snapshot: Optional[Snapshot] = None
        self._indexes: Optional[_Indexes] = None

    def _current(self) -> _Indexes:
        snapshot = self.store.current()
        if self._indexes is None or snapshot is not self._snapshot:
            self._indexes = _build_indexes(snapshot)
            self._snapshot = snapshot
        return self._indexes

    def genres(self) -> list[str]:
        return list(self._current().genres)

    def principals_for(self, tconst: str) -> list[Principal]:
        return list(self._current().principals_by_movie.get(tconst, ()))

    def name_for(self, nconst: str) -> str:
        name = self._current().names_by_id.get(nconst)
        return name.name if name is not None else UNKNOWN_ACTOR

    def movie_by_id(self, tconst: str) -> Optional[Movie]:
        return self._current().movies_by_id.get(tconst)

    def credits_for(self, tconst: str) -> list[CreditGroup]:
        """Principals of a movie grouped by category, main cast first."""
        groups: dict[str, CreditGroup] = {}
        for principal in self.principals_for(tconst):
            group = groups.setdefault(principal.category, CreditGroup(principal.category))
            group.credits.append(
                Credit(
                    nconst=principal.nconst,
                    name=self.name_for(principal.nconst),
                    characters=principal.characters,
                )
            )
        return [groups[category] for category in sorted(groups, key=_category_sort_key)]
