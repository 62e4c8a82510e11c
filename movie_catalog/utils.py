"""
Miscelaneous utilities.
"""

import re
import time
from functools import wraps
from typing import Callable, Optional

from unidecode import unidecode

from movie_catalog.logger import logger

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def timed(func) -> Callable:
    @wraps(func)
    async def timed_func(*args, **kwargs):
        init = time.perf_counter()
        out = await func(*args, **kwargs)
        end = time.perf_counter() - init
        logger.info(f"{func.__name__} finished in {1000 * end:.2f} ms")
        return out
    return timed_func


def parse_int_or_zero(value: Optional[str]) -> int:
    """
    Lenient integer parse of string-encoded numbers such as `year` and `runtime`.

    Leading whitespace, an optional sign and the leading digits are read,
    anything after them is ignored ("1994 (II)" -> 1994). Values without
    leading digits, empty strings and None all become 0.
    """
    if value is None:
        return 0
    match = _LEADING_INT.match(str(value))
    if match is None:
        return 0
    return int(match.group(1))


def clean_string(string: str) -> str:
    string = unidecode(string).lower()
    return re.sub(r"[^\x00-\x7F]", "", string)


def title_sort_key(title: str) -> tuple[str, str]:
    # accent and case insensitive first, raw title breaks ties
    return clean_string(title), title
