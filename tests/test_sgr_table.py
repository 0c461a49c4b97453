"""Tests for the SGR attribute table."""
import pytest

from ansipaint import NAMED_ATTRIBUTES, build_attribute_table


def test_table_is_built_once():
    """build_attribute_table() returns the same mapping on every call."""
    assert build_attribute_table() is build_attribute_table()


def test_table_is_read_only():
    """The attribute table cannot be mutated."""
    table = build_attribute_table()
    with pytest.raises(TypeError):
        table['bold'] = 5


def test_table_size():
    """Named attributes plus 3 names each for 256 indexed, 216 cube and 24 gray colors."""
    expected = len(NAMED_ATTRIBUTES) + 3 * (256 + 216 + 24)
    assert len(build_attribute_table()) == expected


@pytest.mark.parametrize('keyword,param', [
    ('bold', 1),
    ('bold_off', 22),
    ('fg_red', 31),
    ('bg_default', 49),
    ('bright_fg_white', 97),
    ('bright_bg_black', 100),
    ('wavy_underline', '4:3'),
    ('overstrike', '8:7'),
    ('superscript', 73),
    ('font_9', 19),
])
def test_named_attributes(keyword, param):
    """Hand-authored attributes map to their SGR parameter."""
    assert build_attribute_table()[keyword] == param


def test_indexed_colors():
    """color<N>, bg_color<N> and underline_color<N> use the 256-color selectors."""
    table = build_attribute_table()
    assert table['color0'] == '38;5;0'
    assert table['color255'] == '38;5;255'
    assert table['bg_color208'] == '48;5;208'
    assert table['underline_color17'] == '58;5;17'


def test_rgb_cube():
    """rgbRGB maps to 16 + 36*R + 6*G + B."""
    table = build_attribute_table()
    assert table['rgb000'] == '38;5;16'
    assert table['rgb555'] == '38;5;231'
    assert table['bg_rgb520'] == '48;5;208'
    assert table['underline_rgb123'] == '58;5;67'
    assert 'rgb600' not in table


def test_grayscale():
    """gray0 through gray23 map to indexes 232 through 255."""
    table = build_attribute_table()
    assert table['gray0'] == '38;5;232'
    assert table['bg_gray23'] == '48;5;255'
    assert table['underline_gray12'] == '58;5;244'
    assert 'gray24' not in table


def test_modifier_words_have_no_parameter():
    """The reserved words on, bright and off resolve to no parameter."""
    table = build_attribute_table()
    assert table['on'] is None
    assert table['bright'] is None
    assert table['off'] is None


def test_lookup_is_case_sensitive():
    """Keywords match exactly."""
    assert 'BOLD' not in build_attribute_table()
