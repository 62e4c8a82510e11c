"""
Filtering, sorting and pagination of the movie collection.
"""

import math
from typing import Callable, Iterable, Optional, Sequence

from movie_catalog.models import Movie, MovieQuery, QueryResult, SortDirection, SortKey
from movie_catalog.utils import parse_int_or_zero, title_sort_key

DEFAULT_YEAR_BOUNDS = (1900, 2030)


def _matches(movie: Movie, search_term: str, genre: Optional[str], year_range: tuple[int, int]) -> bool:
    if search_term not in movie.title.lower():
        return False
    if genre and genre.lower() not in movie.genre.lower():
        return False
    year = parse_int_or_zero(movie.year)
    return year_range[0] <= year <= year_range[1]


def filter_movies(
    movies: Iterable[Movie],
    search_term: str = "",
    genre: Optional[str] = None,
    year_range: tuple[int, int] = DEFAULT_YEAR_BOUNDS,
) -> list[Movie]:
    search_term = search_term.lower()
    return [movie for movie in movies if _matches(movie, search_term, genre, year_range)]


_SORT_KEYS: dict[SortKey, Callable[[Movie], object]] = {
    SortKey.title: lambda movie: title_sort_key(movie.title),
    SortKey.year: lambda movie: parse_int_or_zero(movie.year),
    SortKey.runtime: lambda movie: parse_int_or_zero(movie.runtime),
}


def sort_movies(
    movies: Iterable[Movie],
    sort_key: SortKey = SortKey.year,
    sort_direction: SortDirection = SortDirection.desc,
) -> list[Movie]:
    # sorted() is stable in both directions, equal keys keep their input order
    return sorted(
        movies,
        key=_SORT_KEYS[SortKey(sort_key)],
        reverse=SortDirection(sort_direction) is SortDirection.desc,
    )


def paginate(movies: Sequence[Movie], page: int, page_size: int) -> QueryResult:
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    total_count = len(movies)
    start = (page - 1) * page_size
    return QueryResult(
        items=list(movies[start : start + page_size]),
        total_count=total_count,
        total_pages=math.ceil(total_count / page_size),
    )


def query_movies(movies: Iterable[Movie], query: MovieQuery) -> QueryResult:
    filtered = filter_movies(movies, query.search_term, query.genre, query.year_range)
    ordered = sort_movies(filtered, query.sort_key, query.sort_direction)
    return paginate(ordered, query.page, query.page_size)


def page_window(page: int, total_pages: int, width: int = 5) -> list[int]:
    """Page numbers offered as direct links around the current page."""
    if total_pages <= width:
        return list(range(1, total_pages + 1))
    half = width // 2
    if page <= half + 1:
        first = 1
    elif page >= total_pages - half:
        first = total_pages - width + 1
    else:
        first = page - half
    return list(range(first, first + width))


def year_bounds(movies: Iterable[Movie]) -> tuple[int, int]:
    years = [parse_int_or_zero(movie.year) for movie in movies if parse_int_or_zero(movie.year)]
    if not years:
        return DEFAULT_YEAR_BOUNDS
    return min(years), max(years)
