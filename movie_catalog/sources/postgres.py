"""
Functions to read the catalog from a PostgreSQL database.
"""

import asyncpg

from movie_catalog.models import Movie, Name, Principal
from movie_catalog.sources.records import to_movie, to_name, to_principal


async def get_all_movies(pool: asyncpg.Pool) -> list[Movie]:
    async with pool.acquire() as connection:
        rows = await connection.fetch(
            """
                SELECT tconst, title, original_title, year, runtime, genre
                FROM movies ORDER BY tconst
            """
        )
    return [to_movie(row) for row in rows]


async def get_all_names(pool: asyncpg.Pool) -> list[Name]:
    async with pool.acquire() as connection:
        rows = await connection.fetch(
            """
                SELECT nconst, name, birth_year, death_year, primary_professions
                FROM names ORDER BY nconst
            """
        )
    return [to_name(row) for row in rows]


async def get_all_principals(pool: asyncpg.Pool) -> list[Principal]:
    async with pool.acquire() as connection:
        rows = await connection.fetch(
            "SELECT id, category, characters, tconst, nconst FROM principals ORDER BY id"
        )
    return [to_principal(row) for row in rows]


class PostgresSource:
    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    @classmethod
    async def connect(cls, dsn: str) -> "PostgresSource":
        return cls(await asyncpg.create_pool(dsn))

    async def fetch_movies(self) -> list[Movie]:
        return await get_all_movies(self.pool)

    async def fetch_names(self) -> list[Name]:
        return await get_all_names(self.pool)

    async def fetch_principals(self) -> list[Principal]:
        return await get_all_principals(self.pool)

    async def close(self) -> None:
        await self.pool.close()
