import os
from dataclasses import asdict
from typing import Optional

from fastapi import FastAPI, Query, Request
from starlette import status
from starlette.responses import JSONResponse

from movie_catalog.cache import CACHE_TTL, CacheStore
from movie_catalog.catalog import MovieCatalog
from movie_catalog.logger import logger
from movie_catalog.lookup import split_genres
from movie_catalog.models import CreditGroup, MovieQuery, SortDirection, SortKey
from movie_catalog.sources.rest import DEFAULT_API_URL, RestSource
from movie_catalog.utils import timed

app = FastAPI()


def _credit_group_to_dict(group: CreditGroup) -> dict:
    return {
        "category": group.category,
        "credits": [credit._asdict() for credit in group.credits],
    }


async def create_catalog_from_env() -> MovieCatalog:
    store = CacheStore(ttl=float(os.environ.get("CATALOG_CACHE_TTL") or CACHE_TTL))
    source_kind = os.environ.get("CATALOG_SOURCE") or "rest"
    if source_kind == "postgres":
        from movie_catalog.sources.postgres import PostgresSource

        source = await PostgresSource.connect(os.environ["POSTGRES_URI"])
    elif source_kind == "rest":
        source = RestSource(
            os.environ.get("CATALOG_API_URL") or DEFAULT_API_URL,
            timeout=float(os.environ.get("CATALOG_HTTP_TIMEOUT") or 30),
        )
    else:
        raise ValueError(f"unknown CATALOG_SOURCE {source_kind!r}, expected 'rest' or 'postgres'")
    logger.info(f"using {source_kind} catalog source")
    return MovieCatalog(source, store)


@app.on_event("startup")
@timed
async def startup_event():
    if getattr(app.state, "catalog", None) is None:
        app.state.catalog = await create_catalog_from_env()
    await app.state.catalog.load()


@app.on_event("shutdown")
async def shutdown_event():
    catalog = getattr(app.state, "catalog", None)
    if catalog is not None:
        await catalog.close()


async def _loaded_catalog(request: Request) -> tuple[MovieCatalog, Optional[JSONResponse]]:
    catalog: MovieCatalog = request.app.state.catalog
    await catalog.load()
    if catalog.error is not None and catalog.is_empty:
        return catalog, JSONResponse(
            {"error": catalog.error}, status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )
    return catalog, None


@app.get("/movies")
@timed
async def list_movies(
    request: Request,
    search: str = "",
    genre: Optional[str] = None,
    year_min: int = 1900,
    year_max: int = 2030,
    sort_by: SortKey = SortKey.year,
    order: SortDirection = SortDirection.desc,
    page: int = Query(ge=1, default=1),
    page_size: int = Query(ge=1, le=100, default=20),
) -> JSONResponse:
    catalog, error_response = await _loaded_catalog(request)
    if error_response is not None:
        return error_response

    query = MovieQuery(
        search_term=search,
        genre=genre or None,
        year_range=(year_min, year_max),
        sort_key=sort_by,
        sort_direction=order,
        page=page,
        page_size=page_size,
    )
    result = catalog.query(query)
    return JSONResponse(
        {
            "items": [asdict(movie) for movie in result.items],
            "total_count": result.total_count,
            "total_pages": result.total_pages,
            "page": page,
            "pages": catalog.page_window(page, result.total_pages),
        }
    )


@app.get("/movies/{tconst}")
async def movie_details(request: Request, tconst: str) -> JSONResponse:
    catalog, error_response = await _loaded_catalog(request)
    if error_response is not None:
        return error_response

    movie = catalog.movie_by_id(tconst)
    if movie is None:
        return JSONResponse({"error": f"movie ID {tconst} not found"}, status_code=404)
    return JSONResponse(
        {
            **asdict(movie),
            "genres": split_genres(movie.genre),
            "credits": [_credit_group_to_dict(group) for group in catalog.credits_for(tconst)],
        }
    )


@app.get("/movies/{tconst}/similar")
async def similar_movies(
    request: Request,
    tconst: str,
    k: int = Query(ge=1, le=50, default=6),
) -> JSONResponse:
    catalog, error_response = await _loaded_catalog(request)
    if error_response is not None:
        return error_response

    movie = catalog.movie_by_id(tconst)
    if movie is None:
        return JSONResponse({"error": f"movie ID {tconst} not found"}, status_code=404)
    return JSONResponse([asdict(similar) for similar in catalog.similar_to(movie, limit=k)])


@app.get("/genres")
async def genres(request: Request) -> JSONResponse:
    catalog, error_response = await _loaded_catalog(request)
    if error_response is not None:
        return error_response
    return JSONResponse(catalog.genres())


@app.get("/year_bounds")
async def year_bounds(request: Request) -> JSONResponse:
    catalog, error_response = await _loaded_catalog(request)
    if error_response is not None:
        return error_response
    year_min, year_max = catalog.year_bounds()
    return JSONResponse({"year_min": year_min, "year_max": year_max})


@app.get("/search")
async def search(request: Request, query: str = Query(min_length=1), limit: int = Query(ge=1, le=50, default=5)):
    catalog, error_response = await _loaded_catalog(request)
    if error_response is not None:
        return error_response
    movies = await catalog.search_titles(query, limit=limit)
    return JSONResponse([{"tconst": tconst, "title": title} for tconst, title in movies])


@app.get("/status")
async def catalog_status(request: Request) -> JSONResponse:
    catalog: MovieCatalog = request.app.state.catalog
    return JSONResponse(
        {"loading": catalog.loading, "error": catalog.error, "version": catalog.version}
    )
