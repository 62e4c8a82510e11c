"""
Conversion of raw source rows (JSON objects or database records) into entities.

Numeric-looking fields are kept as strings, parsing happens at query time.
"""

from typing import Any, Mapping, Optional

from movie_catalog.models import Movie, Name, Principal


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _characters(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(character) for character in value)


def to_movie(row: Mapping[str, Any]) -> Movie:
    return Movie(
        tconst=str(row["tconst"]),
        title=_text(row.get("title")),
        original_title=_text(row.get("original_title")),
        year=_text(row.get("year")),
        runtime=_text(row.get("runtime")),
        genre=_text(row.get("genre")),
    )


def to_principal(row: Mapping[str, Any]) -> Principal:
    return Principal(
        id=int(row["id"]),
        category=_text(row.get("category")),
        tconst=str(row["tconst"]),
        nconst=str(row["nconst"]),
        characters=_characters(row.get("characters")),
    )


def to_name(row: Mapping[str, Any]) -> Name:
    return Name(
        nconst=str(row["nconst"]),
        name=_text(row.get("name")),
        birth_year=_text(row.get("birth_year")),
        death_year=_optional_text(row.get("death_year")),
        primary_professions=_text(row.get("primary_professions")),
    )
