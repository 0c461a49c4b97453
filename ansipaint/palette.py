"""User-defined style names, checked after the built-in attribute table."""
from __future__ import annotations

# std imports
import logging
import threading
from collections.abc import MutableMapping

from typing import Callable, Iterator, Mapping, Optional

# local
from .terminal_seqs import PALETTE_VALUE_PATTERN

logger = logging.getLogger(__name__)


class Palette(MutableMapping):
    """
    Mutable mapping of palette name to raw SGR parameter string.

    Values are raw parameters such as ``'1;4'`` or ``'38;5;208'``.  An empty
    string disables a name: it still resolves, but to no parameter.

    :param entries: Initial palette entries.
    :param on_change: Called with no arguments after every successful update,
        used by the engine to drop cached escape sequences.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None,
                 on_change: Optional[Callable[[], None]] = None) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, str] = {}
        self._on_change = on_change
        if entries:
            for name, value in entries.items():
                self._entries[_check_name(name)] = _check_value(name, value)

    def __getitem__(self, name: str) -> str:
        with self._lock:
            return self._entries[name]

    def __setitem__(self, name: str, value: str) -> None:
        _check_name(name)
        _check_value(name, value)
        with self._lock:
            self._entries[name] = value
        logger.debug('palette %r set to %r', name, value)
        self._changed()

    def __delitem__(self, name: str) -> None:
        with self._lock:
            del self._entries[name]
        logger.debug('palette %r removed', name)
        self._changed()

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._entries))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        with self._lock:
            return f'{self.__class__.__name__}({self._entries!r})'

    def lookup(self, name: str) -> Optional[str]:
        """Return the raw value for ``name``, or None when it is not registered."""
        with self._lock:
            return self._entries.get(name)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()


def _check_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"palette name must be a str, got {type(name).__name__}")
    if not name or name.split() != [name]:
        raise ValueError(f"palette name must be a single non-empty word, got {name!r}")
    return name


def _check_value(name: str, value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"palette value for {name!r} must be a str, got {type(value).__name__}")
    if not PALETTE_VALUE_PATTERN.fullmatch(value):
        raise ValueError(f"palette value for {name!r} must be raw SGR parameters, got {value!r}")
    return value
