"""
Style expression normalization and resolution.

A style expression is a string of space-separated tokens, such as
``'bold bright fg_red bg_#112233'``.  Resolution turns it into the SGR
escape sequence ``'\\x1b[1;91;48;2;17;34;51m'``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

# local
from .sgr_table import SGRParam
from .terminal_seqs import (
    CSI,
    SGR_FINAL,
    BG_HEX_PATTERN,
    FG_HEX_PATTERN,
    OFF_SUFFIX_PATTERN,
    RAW_PARAMS_PATTERN,
    BG_PREFIX_PATTERN,
    BRIGHT_PREFIX_PATTERN,
)

if TYPE_CHECKING:
    from .palette import Palette


class UnresolvableTokenError(ValueError):
    """
    A style expression token matched no attribute, palette name or pattern.

    :param token: The offending token, after normalization.
    :param expression: The complete style expression as given.
    """

    def __init__(self, token: str, expression: str) -> None:
        super().__init__(f"invalid token {token!r} in style expression {expression!r}")
        self.token = token
        self.expression = expression


def normalize(expression: Any) -> str:
    """
    Fold modifier words into their neighbours.

    ``'bright fg_red'`` becomes ``'bright_fg_red'``, ``'bg red'`` becomes
    ``'bg_red'`` and ``'bold off'`` becomes ``'bold_off'``.

    :param expression: Style expression, converted with :func:`str`; ``None``
        is the empty expression.
    :returns: Normalized expression.
    """
    text = '' if expression is None else str(expression)
    text = BRIGHT_PREFIX_PATTERN.sub('bright_', text)
    text = BG_PREFIX_PATTERN.sub('bg_', text)
    return OFF_SUFFIX_PATTERN.sub('_off', text)


def _hex_color(selector: int, match) -> str:
    red, green, blue = (int(group, 16) for group in match.groups())
    return f'{selector};2;{red};{green};{blue}'


def resolve_token(token: str, table: Mapping[str, SGRParam],
                  palette: 'Palette') -> Optional[str]:
    """
    Resolve a single normalized token.

    Lookup order is the attribute table, the palette, ``fg_#RRGGBB``,
    ``bg_#RRGGBB`` and finally the ``=<raw>`` override.

    :returns: SGR parameter string, or None when the token resolves to no
        parameter (reserved modifier words, disabled palette names).
    :raises KeyError: when nothing matches.
    """
    if token in table:
        param = table[token]
        return None if param is None else str(param)

    value = palette.lookup(token)
    if value is not None:
        return value or None

    if match := FG_HEX_PATTERN.fullmatch(token):
        return _hex_color(38, match)
    if match := BG_HEX_PATTERN.fullmatch(token):
        return _hex_color(48, match)
    if match := RAW_PARAMS_PATTERN.fullmatch(token):
        return match.group(1)
    raise KeyError(token)


def resolve_params(expression: Any, table: Mapping[str, SGRParam],
                   palette: 'Palette') -> list[str]:
    """
    Resolve every token of a style expression, in order.

    :raises UnresolvableTokenError: for the first token that cannot be
        resolved, no partial result is returned.
    """
    params = []
    for token in normalize(expression).split():
        try:
            param = resolve_token(token, table, palette)
        except KeyError:
            raise UnresolvableTokenError(token, '' if expression is None else str(expression)) from None
        if param is not None:
            params.append(param)
    return params


def to_sequence(params: list[str]) -> str:
    """
    Join SGR parameters into an escape sequence.

    :returns: ``'\\x1b[p1;p2m'``, or the empty string for no parameters.
    """
    if not params:
        return ''
    return f'{CSI}{";".join(params)}{SGR_FINAL}'
