"""
SGR (Select Graphic Rendition) attribute table.

Maps every recognized style keyword to its SGR parameter.  A parameter is an
``int`` for plain codes, a ``str`` for compound codes such as ``'4:3'`` or
``'38;5;208'``, or ``None`` for the reserved modifier words which resolve to
no parameter at all.

The hand-authored attributes live in :data:`NAMED_ATTRIBUTES`; the indexed,
RGB cube and grayscale colors are generated by :func:`build_attribute_table`.
"""
from __future__ import annotations

# std imports
import types
import functools

from typing import Mapping, Union, Optional

SGRParam = Optional[Union[int, str]]

NAMED_ATTRIBUTES: dict[str, SGRParam] = {
    # Attributes
    'reset': 0,
    'normal': 0,
    'bold': 1,
    'bold_off': 22,
    'intense': 1,
    'intense_off': 22,
    'faint': 2,
    'faint_off': 22,
    'dim': 2,
    'dim_off': 22,
    'italic': 3,
    'italic_off': 23,
    'oblique': 3,
    'oblique_off': 23,
    'underline': 4,
    'underline_off': 24,
    'blink': 5,
    'blink_off': 25,
    'slow_blink': 5,
    'slow_blink_off': 25,
    'rapid_blink': 6,
    'rapid_blink_off': 25,
    'inverse': 7,
    'inverse_off': 27,
    'hide': 8,
    'hide_off': 28,
    'conceal': 8,
    'reveal': 28,
    'cross_out': 9,
    'cross_out_off': 29,
    'strikethrough': 9,
    'strikethrough_off': 29,

    # Fonts
    'primary_font': 10,
    'font_0': 10,
    'font_1': 11,
    'font_2': 12,
    'font_3': 13,
    'font_4': 14,
    'font_5': 15,
    'font_6': 16,
    'font_7': 17,
    'font_8': 18,
    'font_9': 19,
    'black_letter': 20,
    'black_letter_off': 23,

    # Additional attributes
    'double_underline': 21,
    'double_underline_off': 24,
    'proportional': 26,
    'proportional_off': 50,

    # Foreground colors
    'fg_black': 30,
    'fg_red': 31,
    'fg_green': 32,
    'fg_yellow': 33,
    'fg_brown': 33,
    'fg_blue': 34,
    'fg_magenta': 35,
    'fg_cyan': 36,
    'fg_white': 37,
    'fg_default': 39,

    # Background colors
    'bg_black': 40,
    'bg_red': 41,
    'bg_green': 42,
    'bg_yellow': 43,
    'bg_brown': 43,
    'bg_blue': 44,
    'bg_magenta': 45,
    'bg_cyan': 46,
    'bg_white': 47,
    'bg_default': 49,

    # Less supported attributes
    'frame': 51,
    'frame_off': 54,
    'encircle': 52,
    'encircle_off': 54,
    'overline': 53,
    'overline_off': 55,
    'default_underline_color': 59,

    # MinTTY attributes, colon sub-parameters
    'shadow': '1:2',
    'shadow_off': 22,
    'solid_underline': '4:1',
    'solid_underline_off': 24,
    'wavy_underline': '4:3',
    'wavy_underline_off': 24,
    'dotted_underline': '4:4',
    'dotted_underline_off': 24,
    'dashed_underline': '4:5',
    'dashed_underline_off': 24,
    'overstrike': '8:7',
    'overstrike_off': 28,
    'superscript': 73,
    'superscript_off': 75,
    'subscript': 74,
    'subscript_off': 75,

    # Bright foreground colors
    'bright_fg_black': 90,
    'bright_fg_red': 91,
    'bright_fg_green': 92,
    'bright_fg_yellow': 93,
    'bright_fg_blue': 94,
    'bright_fg_magenta': 95,
    'bright_fg_cyan': 96,
    'bright_fg_white': 97,

    # Bright background colors
    'bright_bg_black': 100,
    'bright_bg_red': 101,
    'bright_bg_green': 102,
    'bright_bg_yellow': 103,
    'bright_bg_blue': 104,
    'bright_bg_magenta': 105,
    'bright_bg_cyan': 106,
    'bright_bg_white': 107,

    # Modifier words left over after normalization, they emit nothing.
    'on': None,
    'bright': None,
    'off': None,
}

# Extended color selectors: foreground, background and underline color.
_FG, _BG, _UL = 38, 48, 58

# First index of the 6x6x6 color cube and of the grayscale ramp.
_CUBE_BASE = 16
_GRAY_BASE = 232


def _extended(prefix: str, index: int, names: dict[str, SGRParam]) -> None:
    """Add foreground, background and underline names for a 256-color index."""
    for selector, name in ((_FG, prefix), (_BG, f'bg_{prefix}'), (_UL, f'underline_{prefix}')):
        assert name not in names, ('duplicate attribute keyword', name)
        names[name] = f'{selector};5;{index}'


@functools.lru_cache(maxsize=1)
def build_attribute_table() -> Mapping[str, SGRParam]:
    """
    Return the complete, read-only keyword to SGR parameter mapping.

    The table is built on first call and the same mapping is returned
    thereafter, it is safe to share between threads.

    Beyond :data:`NAMED_ATTRIBUTES`, it contains:

    - ``color0`` .. ``color255``, ``bg_color*`` and ``underline_color*``
      for the indexed 256-color palette.
    - ``rgbRGB``, ``bg_rgbRGB`` and ``underline_rgbRGB`` for each ``R``, ``G``
      and ``B`` coordinate of the 6x6x6 color cube, ``0`` through ``5``.
    - ``gray0`` .. ``gray23``, ``bg_gray*`` and ``underline_gray*`` for the
      grayscale ramp.

    :returns: Immutable mapping of keyword to parameter.
    """
    table = dict(NAMED_ATTRIBUTES)

    for index in range(256):
        _extended(f'color{index}', index, table)

    for red in range(6):
        for green in range(6):
            for blue in range(6):
                index = _CUBE_BASE + red * 36 + green * 6 + blue
                _extended(f'rgb{red}{green}{blue}', index, table)

    for step in range(24):
        _extended(f'gray{step}', _GRAY_BASE + step, table)

    return types.MappingProxyType(table)
