"""Configuration of a styling engine."""
from __future__ import annotations

# std imports
import re
from dataclasses import field, dataclass

from typing import Mapping, Union

# local
from .terminal_seqs import COLOR_TAG_PATTERN

DEFAULT_RESET_CMD = 'reset font_0'
DEFAULT_CACHE_SIZE = 1024


def check_flag(name: str, value: bool) -> bool:
    """Raise TypeError unless ``value`` is a bool."""
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, got {type(value).__name__}")
    return value


def compile_color_tag(pattern: Union[str, re.Pattern]) -> re.Pattern:
    """
    Compile the inline color tag pattern.

    :raises TypeError: when the pattern is neither a str nor a compiled pattern.
    :raises ValueError: when the pattern is not a valid regular expression,
        or has no capture group for the enclosed style expression.
    """
    if not isinstance(pattern, (str, re.Pattern)):
        raise TypeError(f"color_tag must be a str or compiled pattern, got {type(pattern).__name__}")
    try:
        compiled = re.compile(pattern)
    except re.error as err:
        raise ValueError(f"invalid color tag pattern {pattern!r}: {err}") from err
    if compiled.groups < 1:
        raise ValueError(f"color tag pattern must capture the style expression: {compiled.pattern!r}")
    return compiled


@dataclass
class AnsiConfig:
    """
    Settings of one :class:`~ansipaint.painter.Ansi` engine.

    :param enabled: Emit escape sequences; when False every resolution is empty.
    :param html_tags: Substitute markup tags such as ``<b>``.
    :param cache: Memoize resolved style expressions.
    :param cache_size: Maximum number of memoized expressions.
    :param color_tag: Regular expression of an inline style tag, group 1 is
        the style expression.
    :param reset_cmd: Style expression painted before and after text.
    :param palette: Initial palette entries only.  The engine copies them into
        its own :class:`~ansipaint.palette.Palette`, later updates go through
        ``Ansi.palette`` and are not reflected here.

    Change ``enabled``, ``html_tags``, ``cache``, ``color_tag`` and
    ``reset_cmd`` at runtime through the engine's properties, which validate
    the new value.
    """
    enabled: bool = False
    html_tags: bool = False
    cache: bool = True
    cache_size: int = DEFAULT_CACHE_SIZE
    color_tag: Union[str, re.Pattern] = COLOR_TAG_PATTERN
    reset_cmd: str = DEFAULT_RESET_CMD
    palette: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_flag('enabled', self.enabled)
        check_flag('html_tags', self.html_tags)
        check_flag('cache', self.cache)
        if isinstance(self.cache_size, bool) or not isinstance(self.cache_size, int):
            raise TypeError(f"cache_size must be an int, got {type(self.cache_size).__name__}")
        if self.cache_size < 1:
            raise ValueError(f"cache_size must be positive, got {self.cache_size}")
        if not isinstance(self.reset_cmd, str):
            raise TypeError(f"reset_cmd must be a str, got {type(self.reset_cmd).__name__}")
        self.color_tag = compile_color_tag(self.color_tag)
