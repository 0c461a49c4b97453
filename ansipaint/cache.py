"""Memoization of style expression to escape sequence."""
from __future__ import annotations

# std imports
import logging
import functools

from typing import Callable

logger = logging.getLogger(__name__)


class EscapeCache:
    """
    Bounded least-recently-used cache in front of a resolve function.

    Entries are pure functions of their key, so an evicted or cleared entry
    is only ever a cache miss.  Keys are the raw, unnormalized expression.

    :param compute: Function of one expression string returning its escape
        sequence.
    :param maxsize: Maximum number of expressions retained.
    """

    def __init__(self, compute: Callable[[str], str], maxsize: int = 1024) -> None:
        self.maxsize = maxsize
        self._cached = functools.lru_cache(maxsize=maxsize)(compute)

    def get(self, expression: str) -> str:
        """Return the cached escape sequence for ``expression``, computing it on a miss."""
        return self._cached(expression)

    def clear(self) -> None:
        """Drop every entry."""
        self._cached.cache_clear()
        logger.debug('escape cache cleared')

    def cache_info(self):
        """Return hits, misses, maxsize and currsize, as :func:`functools.lru_cache` does."""
        return self._cached.cache_info()

    def __len__(self) -> int:
        return self._cached.cache_info().currsize
