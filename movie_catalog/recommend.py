"""
Genre-overlap recommendations.
"""

from typing import Sequence

import numpy as np

from movie_catalog.logger import logger
from movie_catalog.lookup import split_genres
from movie_catalog.models import Movie
from movie_catalog.utils import parse_int_or_zero


def genre_overlap(genres: list[str], candidate: Movie) -> int:
    """Number of `genres` contained in the candidate's raw genre field."""
    return sum(genre in candidate.genre for genre in genres)


def similar_to(movies: Sequence[Movie], movie: Movie, limit: int = 6) -> list[Movie]:
    """
    Movies sharing at least one genre with `movie`, most shared genres first.

    Ties are broken by release year, newest first, then by catalog order.
    Genre tokens are matched by substring containment against the
    candidate's comma-joined genre string, not by exact token equality.
    """
    if movie is None or not movie.genre or limit <= 0:
        return []
    genres = split_genres(movie.genre)

    candidates = []
    scores = []
    years = []
    for candidate in movies:
        if candidate.tconst == movie.tconst or not candidate.genre:
            continue
        score = genre_overlap(genres, candidate)
        if score == 0:
            continue
        candidates.append(candidate)
        scores.append(score)
        years.append(parse_int_or_zero(candidate.year))

    if not candidates:
        return []

    # lexsort is stable and sorts by the last key first
    top_idx = np.lexsort((-np.array(years), -np.array(scores)))[:limit]
    logger.debug(f"found {len(candidates)} candidates sharing a genre with {movie.tconst}")
    return [candidates[idx] for idx in top_idx]
