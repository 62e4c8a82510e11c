"""
REST data source: each collection is one GET returning a JSON array.
"""

from typing import Any, Callable, Optional

import httpx

from movie_catalog.logger import logger
from movie_catalog.models import Movie, Name, Principal
from movie_catalog.sources.records import to_movie, to_name, to_principal

DEFAULT_API_URL = "http://127.0.0.1:8000/api"


class RestSource:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def _get_collection(self, resource: str, convert: Callable[[Any], Any]) -> list:
        url = f"{self.base_url}/{resource}/"
        response = await self.client.get(url)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError(f"expected a JSON array from {url}, got {type(payload).__name__}")
        logger.debug(f"fetched {len(payload)} {resource} from {url}")
        return [convert(row) for row in payload]

    async def fetch_movies(self) -> list[Movie]:
        return await self._get_collection("movies", to_movie)

    async def fetch_names(self) -> list[Name]:
        return await self._get_collection("names", to_name)

    async def fetch_principals(self) -> list[Principal]:
        return await self._get_collection("principals", to_principal)

    async def close(self) -> None:
        await self.client.aclose()
