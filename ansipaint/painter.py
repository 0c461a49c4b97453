"""
Styling engine: resolves style expressions and paints text with them.

Example::

    >>> ansi = Ansi(AnsiConfig(enabled=True))
    >>> ansi.paint('${bold fg_red}error:${bold off} disk full')
    '\\x1b[0;10m\\x1b[1;31merror:\\x1b[22m disk full\\x1b[0;10m'
"""
from __future__ import annotations

# std imports
import logging
import re
import threading

from typing import Any, Optional, Union

# local
from .cache import EscapeCache
from .config import AnsiConfig, check_flag, compile_color_tag
from .markup import bridge_markup
from .builder import StyleBuilder
from .palette import Palette
from .resolver import to_sequence, resolve_params
from .sgr_table import build_attribute_table
from .terminal_seqs import SGR_PATTERN

logger = logging.getLogger(__name__)


def _join(text: tuple[Any, ...]) -> str:
    return ''.join(str(part) for part in text)


class Ansi:
    """
    One independently configured styling engine.

    The attribute table is shared and read-only.  The palette and the escape
    cache belong to the engine and are guarded by a lock, an engine may be
    used from several threads.

    :param config: Engine settings, a default :class:`AnsiConfig` (rendering
        disabled) when omitted.
    """

    def __init__(self, config: Optional[AnsiConfig] = None) -> None:
        self.config = config if config is not None else AnsiConfig()
        self._table = build_attribute_table()
        self._lock = threading.RLock()
        self._cache = EscapeCache(self._compute, maxsize=self.config.cache_size)
        self.palette = Palette(self.config.palette, on_change=self._palette_changed)

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}(enabled={self.enabled}, '
                f'html_tags={self.html_tags}, cache={self.cache})')

    @property
    def enabled(self) -> bool:
        """Whether escape sequences are emitted."""
        return self.config.enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        check_flag('enabled', value)
        with self._lock:
            self.config.enabled = value
            self._cache.clear()
        logger.debug('rendering %s', 'enabled' if value else 'disabled')

    @property
    def html_tags(self) -> bool:
        """Whether markup tags such as ``<b>`` are substituted."""
        return self.config.html_tags

    @html_tags.setter
    def html_tags(self, value: bool) -> None:
        self.config.html_tags = check_flag('html_tags', value)

    @property
    def cache(self) -> bool:
        """Whether resolved style expressions are memoized."""
        return self.config.cache

    @cache.setter
    def cache(self, value: bool) -> None:
        check_flag('cache', value)
        with self._lock:
            self.config.cache = value
            self._cache.clear()

    @property
    def color_tag(self) -> re.Pattern:
        """Compiled pattern of an inline style tag, group 1 is the style expression."""
        return self.config.color_tag

    @color_tag.setter
    def color_tag(self, value: Union[str, re.Pattern]) -> None:
        self.config.color_tag = compile_color_tag(value)

    @property
    def reset_cmd(self) -> str:
        """Style expression painted before and after text."""
        return self.config.reset_cmd

    @reset_cmd.setter
    def reset_cmd(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"reset_cmd must be a str, got {type(value).__name__}")
        with self._lock:
            self._compute(value)
            self.config.reset_cmd = value

    def setup(self) -> None:
        """Enable rendering, calling it again is a no-op."""
        if self.config.enabled:
            return
        self.enabled = True

    def cache_info(self):
        """Return the escape cache statistics."""
        return self._cache.cache_info()

    def _palette_changed(self) -> None:
        with self._lock:
            self._cache.clear()

    def _compute(self, expression: str) -> str:
        return to_sequence(resolve_params(expression, self._table, self.palette))

    def resolve(self, expression: Any) -> str:
        """
        Return the escape sequence of a style expression.

        Tokens are validated whether or not rendering is enabled, so a
        malformed expression fails the same way in both states.

        :param expression: Style expression such as ``'bold fg_#ff0000'``.
        :returns: The SGR escape sequence, or the empty string when no
            parameter resolves or rendering is disabled.
        :raises UnresolvableTokenError: when a token cannot be resolved.
        """
        key = '' if expression is None else str(expression)
        with self._lock:
            if self.config.cache:
                sequence = self._cache.get(key)
            else:
                sequence = self._compute(key)
        return sequence if self.config.enabled else ''

    def reset_sequence(self) -> str:
        """Return the escape sequence of the configured reset command."""
        return self.resolve(self.config.reset_cmd)

    def _substitute_tags(self, text: str) -> str:
        return self.config.color_tag.sub(lambda match: self.resolve(match.group(1)), text)

    def raw_paint(self, *text: Any) -> str:
        """
        Substitute inline style tags and markup tags, without reset wrapping.

        :param text: Parts concatenated into the text to paint.
        :returns: Painted text.
        """
        painted = self._substitute_tags(_join(text))
        if self.config.html_tags:
            painted = bridge_markup(painted, colorize=self.config.enabled)
        return painted

    def paint(self, *text: Any) -> str:
        """
        Paint text between two reset sequences.

        :param text: Parts concatenated into the text to paint.
        :returns: ``reset + painted + reset``, or only the reset sequence
            when the painted text is empty.
        """
        painted = self.raw_paint(*text)
        reset = self.reset_sequence()
        if not painted:
            return reset
        return f'{reset}{painted}{reset}'

    __call__ = paint

    def no_paint(self, *text: Any) -> str:
        """
        Remove all styling from text.

        Inline style tags and literal SGR sequences are removed; known markup
        tags are consumed when markup bridging is enabled.

        :param text: Parts concatenated into the text to strip.
        :returns: Plain text.
        """
        plain = self.config.color_tag.sub('', _join(text))
        plain = SGR_PATTERN.sub('', plain)
        if self.config.html_tags:
            plain = bridge_markup(plain, colorize=False)
        return plain

    def style(self, *keywords: str) -> StyleBuilder:
        """Start a fresh style chain, optionally seeded with ``keywords``."""
        return StyleBuilder(self).add(*keywords)
