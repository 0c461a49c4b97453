"""
ansipaint module.

Translate style expressions such as ``'bold fg_red bg_#112233'`` into ANSI
SGR escape sequences, paint text with them, and strip them back out.
"""
# re-export the public classes and the default engine's bound methods, so
# that 'from ansipaint import paint' works without constructing an engine.
# The default engine starts with rendering disabled, call setup() to enable.

# local
from .cache import EscapeCache
from .config import AnsiConfig
from .markup import MARKUP_TAGS, bridge_markup
from .builder import StyleBuilder
from .painter import Ansi
from .palette import Palette
from .resolver import UnresolvableTokenError, normalize
from .sgr_table import NAMED_ATTRIBUTES, build_attribute_table

ansi = Ansi()

paint = ansi.paint
raw_paint = ansi.raw_paint
no_paint = ansi.no_paint
resolve = ansi.resolve
setup = ansi.setup
style = ansi.style
palette = ansi.palette

# The __all__ attribute defines the items exported from statement, 'from
# ansipaint import *', but also to say, "This is the public API".
__all__ = ('Ansi', 'AnsiConfig', 'Palette', 'StyleBuilder', 'EscapeCache',
           'UnresolvableTokenError', 'ansi', 'paint', 'raw_paint', 'no_paint',
           'resolve', 'setup', 'style', 'palette', 'normalize', 'bridge_markup',
           'build_attribute_table', 'NAMED_ATTRIBUTES', 'MARKUP_TAGS')
__version__ = '0.1.0'
