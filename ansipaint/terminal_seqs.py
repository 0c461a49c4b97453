"""
Terminal sequence patterns used to resolve and strip styling.

This module provides the compiled patterns shared by the resolver, the
painter and the markup bridge.
"""
import re

# Control Sequence Introducer and SGR final byte.
CSI = '\x1b['
SGR_FINAL = 'm'

# Pattern for SGR (Select Graphic Rendition) sequences: CSI ... m
# Colons are accepted for sub-parameters such as '4:3' (wavy underline).
SGR_PATTERN = re.compile(r'\x1b\[[0-9:;]*m')

# Default inline color tag, '${bold fg_red}'. Group 1 is the style expression.
COLOR_TAG_PATTERN = re.compile(r'\$\{([^{}]*)\}')

# Markup tag, '<b>' or '</b>'. Group 1 is the tag name including any slash.
MARKUP_TAG_PATTERN = re.compile(r'<([^<>]*)>')

# Normalization rewrites, applied in this order.  The frontiers are
# alphanumeric only, so an underscore counts as a boundary and
# 'bright_bg red' still folds into 'bright_bg_red'.
BRIGHT_PREFIX_PATTERN = re.compile(r'(?<![A-Za-z0-9])bright\s+')
BG_PREFIX_PATTERN = re.compile(r'(?<![A-Za-z0-9])bg\s+')
OFF_SUFFIX_PATTERN = re.compile(r'\s+off(?![A-Za-z0-9])')

# True-color tokens: 'fg_#RRGGBB' and 'bg_#RRGGBB'.
FG_HEX_PATTERN = re.compile(r'fg_#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})')
BG_HEX_PATTERN = re.compile(r'bg_#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})')

# Raw override token, '=38;5;208'.  Group 1 is emitted verbatim.
RAW_PARAMS_PATTERN = re.compile(r'=([0-9:;]+)')

# Value accepted for a palette entry: raw parameters, or empty to disable.
PALETTE_VALUE_PATTERN = re.compile(r'[0-9:;]*')
