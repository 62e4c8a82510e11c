"""
Data models and types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class Movie:
    tconst: str
    title: str
    original_title: str = ""
    year: str = ""
    runtime: str = ""
    genre: str = ""


@dataclass(frozen=True)
class Principal:
    id: int
    category: str
    tconst: str
    nconst: str
    characters: tuple[str, ...] = ()


@dataclass(frozen=True)
class Name:
    nconst: str
    name: str
    birth_year: str = ""
    death_year: Optional[str] = None
    primary_professions: str = ""


class Snapshot(NamedTuple):
    """One fetch cycle worth of data, installed and read as a unit."""

    movies: tuple[Movie, ...]
    principals: tuple[Principal, ...]
    names: tuple[Name, ...]
    fetched_at: float
    version: int


EMPTY_SNAPSHOT = Snapshot(movies=(), principals=(), names=(), fetched_at=0.0, version=0)


class SortKey(str, Enum):
    title = "title"
    year = "year"
    runtime = "runtime"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


@dataclass
class MovieQuery:
    search_term: str = ""
    genre: Optional[str] = None
    year_range: tuple[int, int] = (1900, 2030)
    sort_key: SortKey = SortKey.year
    sort_direction: SortDirection = SortDirection.desc
    page: int = 1
    page_size: int = 20


class QueryResult(NamedTuple):
    items: list[Movie]
    total_count: int
    total_pages: int


class Credit(NamedTuple):
    nconst: str
    name: str
    characters: tuple[str, ...]


@dataclass
class CreditGroup:
    category: str
    credits: list[Credit] = field(default_factory=list)
