"""Tests for escape sequence memoization."""
import threading
from unittest import mock

import pytest

from ansipaint import Ansi, AnsiConfig, EscapeCache
from ansipaint import painter


def test_cache_hit_skips_parsing(ansi):
    """The second resolution of an expression does not re-parse it."""
    with mock.patch.object(painter, 'resolve_params', wraps=painter.resolve_params) as parse:
        first = ansi.resolve('bold fg_red')
        second = ansi.resolve('bold fg_red')
    assert first == second == '\x1b[1;31m'
    assert parse.call_count == 1
    info = ansi.cache_info()
    assert info.hits == 1
    assert info.misses == 1


def test_cache_keyed_by_raw_expression(ansi):
    """Differently spelled but equivalent expressions are separate entries."""
    ansi.resolve('bright fg_red')
    ansi.resolve('bright_fg_red')
    assert ansi.cache_info().currsize == 2


def test_cache_disabled_reparses():
    """Without caching every resolution parses the expression again."""
    ansi = Ansi(AnsiConfig(enabled=True, cache=False))
    with mock.patch.object(painter, 'resolve_params', wraps=painter.resolve_params) as parse:
        first = ansi.resolve('underline')
        second = ansi.resolve('underline')
    assert first == second == '\x1b[4m'
    assert parse.call_count == 2
    assert ansi.cache_info().currsize == 0


def test_cache_toggle_does_not_change_output(ansi):
    """Caching changes cost only, never output."""
    cached = ansi.resolve('italic bg_#000000')
    ansi.cache = False
    assert ansi.resolve('italic bg_#000000') == cached


def test_cache_toggle_clears(ansi):
    """Toggling caching drops memoized entries."""
    ansi.resolve('bold')
    ansi.cache = False
    ansi.cache = True
    assert ansi.cache_info().currsize == 0


def test_palette_change_clears_cache(ansi):
    """A palette update is visible to an already cached expression."""
    ansi.palette['accent'] = '31'
    assert ansi.resolve('accent') == '\x1b[31m'
    ansi.palette['accent'] = '32'
    assert ansi.resolve('accent') == '\x1b[32m'


def test_failed_resolution_is_not_cached(ansi):
    """An unresolvable expression leaves no entry behind."""
    with pytest.raises(ValueError):
        ansi.resolve('nope')
    assert ansi.cache_info().currsize == 0


def test_escape_cache_is_bounded():
    """Least recently used entries are evicted beyond maxsize."""
    cache = EscapeCache(str.upper, maxsize=2)
    cache.get('a')
    cache.get('b')
    cache.get('c')
    assert len(cache) == 2
    assert cache.cache_info().maxsize == 2


def test_escape_cache_clear():
    """clear() empties the cache."""
    cache = EscapeCache(str.upper)
    assert cache.get('a') == 'A'
    cache.clear()
    assert len(cache) == 0


def test_cache_size_from_config():
    """The cache bound comes from the configuration."""
    ansi = Ansi(AnsiConfig(enabled=True, cache_size=1))
    ansi.resolve('bold')
    ansi.resolve('italic')
    assert ansi.cache_info().currsize == 1


def test_concurrent_resolution_with_palette_updates(ansi):
    """Resolution stays consistent while another thread updates the palette."""
    ansi.palette['accent'] = '31'
    errors = []

    def _resolve():
        for _ in range(200):
            if ansi.resolve('bold accent') not in ('\x1b[1;31m', '\x1b[1;32m'):
                errors.append('unexpected sequence')

    def _update():
        for idx in range(200):
            ansi.palette['accent'] = '32' if idx % 2 else '31'

    threads = [threading.Thread(target=_resolve) for _ in range(4)]
    threads.append(threading.Thread(target=_update))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    ansi.palette['accent'] = '32'
    assert ansi.resolve('bold accent') == '\x1b[1;32m'
