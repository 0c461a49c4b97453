"""
Markup tag bridge.

Replaces a closed set of HTML-like tags, ``<b>``, ``<i>``, ``<u>``, ``<sup>``,
``<sub>`` and their long forms ``<strong>`` and ``<em>``, with the matching
SGR on and off sequences.  Unknown tags are left untouched.
"""
from __future__ import annotations

# std imports
import types

from typing import Mapping

# local
from .terminal_seqs import MARKUP_TAG_PATTERN

MARKUP_TAGS: Mapping[str, str] = types.MappingProxyType({
    'b': '\x1b[1m',
    '/b': '\x1b[22m',
    'strong': '\x1b[1m',
    '/strong': '\x1b[22m',
    'i': '\x1b[3m',
    '/i': '\x1b[23m',
    'em': '\x1b[3m',
    '/em': '\x1b[23m',
    'u': '\x1b[4m',
    '/u': '\x1b[24m',
    'sup': '\x1b[73m',
    '/sup': '\x1b[75m',
    'sub': '\x1b[74m',
    '/sub': '\x1b[75m',
})


def bridge_markup(text: str, colorize: bool = True) -> str:
    """
    Substitute known markup tags in text.

    :param text: Text possibly containing markup tags.
    :param colorize: When True, known tags become their SGR sequence,
        otherwise they are consumed and replaced by the empty string.
    :returns: Text with known tags substituted.

    Example::

        >>> bridge_markup('<b>x</b> <blink>')
        '\\x1b[1mx\\x1b[22m <blink>'
        >>> bridge_markup('<b>x</b>', colorize=False)
        'x'
    """
    def _replace(match):
        sequence = MARKUP_TAGS.get(match.group(1))
        if sequence is None:
            return match.group()
        return sequence if colorize else ''

    return MARKUP_TAG_PATTERN.sub(_replace, text)
