from aiocache import cached
from rapidfuzz import distance, process

from movie_catalog.logger import logger
from movie_catalog.models import Snapshot
from movie_catalog.utils import clean_string, timed


def _snapshot_key(func, snapshot: Snapshot, *args, **kwargs) -> str:
    return f"{func.__name__}:{snapshot.version}"


@cached(ttl=600, key_builder=_snapshot_key)
@timed
async def get_title_searcher(snapshot: Snapshot):
    ids_2_titles = {movie.tconst: movie.title for movie in snapshot.movies}
    ids_2_clean_titles = {idx: clean_string(title) for idx, title in ids_2_titles.items()}

    def search(query: str, limit: int = 10) -> list[tuple[str, str]]:
        if len(query) == 0:
            raise ValueError("search query is empty")

        query = clean_string(query)
        # https://maxbachmann.github.io/RapidFuzz/Usage/distance/JaroWinkler.html
        top_matches = process.extract(
            query,
            ids_2_clean_titles,
            limit=limit,
            scorer=distance.JaroWinkler.normalized_distance,
        )
        logger.debug(top_matches)
        return [(movie_id, ids_2_titles[movie_id]) for _, _, movie_id in top_matches]

    return search
