"""
In-memory movie collection.

Records are plain dicts kept in insertion order. The server runs route
functions in a thread pool, so every operation holds the store lock; records
are copied on the way in and out so callers never share state with the store.
"""

import logging
import math
import re
import threading
import uuid
from copy import deepcopy
from typing import Any, Dict, Iterable, List, Optional

from movies_api.database.seed import load_seed

logger = logging.getLogger(__name__)

Movie = Dict[str, Any]


_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"([+-]?)Infinity")
_RADIX = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def coerce_rate(value: Any) -> float:
    """
    Convert a query-string rate to a number the way a browser's ``Number()`` does.

    Surrounding whitespace is ignored and a blank string is 0. Decimal and
    exponent forms, ``Infinity`` and unsigned ``0x``/``0o``/``0b`` literals are
    accepted. Anything else (``inf``, ``1_000``, ``8,5``) becomes NaN, which
    compares false against every rate, so filtering by it matches nothing.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)

    infinity = _INFINITY.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf

    if _RADIX.fullmatch(text):
        return float(int(text[2:], _RADIX_BASES[text[1].lower()]))
    return math.nan


class MovieStore:
    """Ordered, lock-protected collection of movie records."""

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = [deepcopy(m) for m in (movies or [])]
        self._lock = threading.RLock()

    @classmethod
    def from_seed(cls, path: Optional[str] = None) -> "MovieStore":
        """Build a store holding the seed movies."""
        return cls(load_seed(path))

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def _index_of(self, movie_id: str) -> int:
        for i, movie in enumerate(self._movies):
            if movie.get("id") == movie_id:
                return i
        return -1

    def list_all(self) -> List[Movie]:
        """Return every movie in insertion order."""
        with self._lock:
            return [deepcopy(m) for m in self._movies]

    def filter_by_genre(self, genre: str) -> List[Movie]:
        """Return movies tagged with ``genre`` (case-insensitive)."""
        wanted = genre.lower()
        with self._lock:
            return [
                deepcopy(m) for m in self._movies
                if any(g.lower() == wanted for g in m.get("genre", []))
            ]

    def filter_by_rate(self, min_rate: Any) -> List[Movie]:
        """Return movies rated at least ``min_rate``."""
        threshold = coerce_rate(min_rate)
        with self._lock:
            return [deepcopy(m) for m in self._movies if m.get("rate", 0) >= threshold]

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        """
        Get a movie by ID.

        Returns:
            Movie dict or None if not found
        """
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                logger.debug("Movie %s not found", movie_id)
                return None
            return deepcopy(self._movies[index])

    def insert(self, data: Movie) -> Movie:
        """
        Append a new movie with a freshly generated ID.

        Args:
            data: Validated movie fields; any ``id`` key is overwritten

        Returns:
            The stored movie, including its ID
        """
        movie = {"id": str(uuid.uuid4()), **{k: deepcopy(v) for k, v in data.items() if k != "id"}}
        with self._lock:
            self._movies.append(movie)
        logger.info("Created movie %s (%s)", movie["id"], movie.get("title"))
        return deepcopy(movie)

    def replace_by_id(self, movie_id: str, partial: Movie) -> Optional[Movie]:
        """
        Shallow-merge ``partial`` over an existing movie.

        Fields present in ``partial`` replace the stored values wholesale;
        the ID never changes.

        Returns:
            Updated movie dict or None if not found
        """
        changes = {k: deepcopy(v) for k, v in partial.items() if k != "id"}
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return None
            updated = {**self._movies[index], **changes}
            self._movies[index] = updated
        logger.info("Updated movie %s: %s", movie_id, sorted(changes))
        return deepcopy(updated)

    def remove_by_id(self, movie_id: str) -> bool:
        """
        Delete a movie.

        Returns:
            True if the movie was removed, False if it was not found
        """
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return False
            del self._movies[index]
        logger.info("Deleted movie %s", movie_id)
        return True
