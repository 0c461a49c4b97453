"""
Chained style composition.

Example::

    >>> ansi.style().bold.fg_red('alert')
    '\\x1b[0;10m\\x1b[1;31malert\\x1b[0;10m'
    >>> ansi.style('bright', 'bg', 'blue').add('underline')('note')
    '\\x1b[0;10m\\x1b[104;4mnote\\x1b[0;10m'
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .painter import Ansi


def _step(keyword: str) -> property:
    def fget(self: 'StyleBuilder') -> 'StyleBuilder':
        return self.add(keyword)
    fget.__doc__ = f"Append ``{keyword}`` to the style path."
    return property(fget)


class StyleBuilder:
    """
    Immutable, ordered path of style keywords bound to an engine.

    Every step returns a new builder, so a partial chain may be kept and
    extended in several directions.  Calling the builder paints text with the
    space-joined path as its style expression.

    :param engine: The engine used to resolve and paint.
    :param segments: Keywords accumulated so far.
    """

    def __init__(self, engine: 'Ansi', segments: tuple[str, ...] = ()) -> None:
        self._engine = engine
        self._segments = segments

    # modifiers, folded into the following or preceding keyword
    bright = _step('bright')
    bg = _step('bg')
    off = _step('off')

    # attributes
    bold = _step('bold')
    dim = _step('dim')
    italic = _step('italic')
    underline = _step('underline')
    blink = _step('blink')
    inverse = _step('inverse')
    hide = _step('hide')
    strikethrough = _step('strikethrough')

    # foreground colors
    fg_black = _step('fg_black')
    fg_red = _step('fg_red')
    fg_green = _step('fg_green')
    fg_yellow = _step('fg_yellow')
    fg_blue = _step('fg_blue')
    fg_magenta = _step('fg_magenta')
    fg_cyan = _step('fg_cyan')
    fg_white = _step('fg_white')

    @property
    def segments(self) -> tuple[str, ...]:
        """Keywords of the path, in order."""
        return self._segments

    @property
    def expression(self) -> str:
        """The space-joined style expression."""
        return ' '.join(self._segments)

    def add(self, *keywords: str) -> 'StyleBuilder':
        """
        Return a new builder with ``keywords`` appended.

        A keyword containing spaces is split into several segments.

        :raises TypeError: when a keyword is not a str.
        """
        segments = list(self._segments)
        for keyword in keywords:
            if not isinstance(keyword, str):
                raise TypeError(f"style keyword must be a str, got {type(keyword).__name__}")
            segments.extend(keyword.split())
        return StyleBuilder(self._engine, tuple(segments))

    def __call__(self, *text: Any) -> str:
        """
        Paint text with the accumulated style.

        :returns: Painted text, or the engine's reset sequence when no text
            (or only empty text) is given.
        """
        joined = ''.join(str(part) for part in text)
        if not joined:
            return self._engine.reset_sequence()
        return self._engine.paint(self._engine.resolve(self.expression), joined)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.expression!r})'
