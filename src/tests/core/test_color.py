"""
Tests for color helpers
=======================

Run with:
    python3 -m pytest tests/core/test_color.py -v
"""

import pytest

from solid_math.color import parse_color, format_color


def test_parse_six_digits():
    assert parse_color('#ff8000') == [1.0, 128 / 255, 0.0]


def test_parse_three_digits_doubles():
    """'#f80' reads as '#ff8800'."""
    assert parse_color('#f80') == parse_color('#ff8800')
    assert parse_color('#f80') == [1.0, 136 / 255, 0.0]


def test_format_rounds_up():
    """Channels are rounded up: 0.5 * 255 = 127.5 -> 128 = 0x80."""
    assert format_color([1.0, 0.5, 0.0]) == '#ff8000'
    assert format_color([0.001, 0.0, 0.0]) == '#010000'


def test_round_trip_every_channel_value():
    """format_color(parse_color(s)) == s for every 8-bit channel value."""
    for k in range(256):
        s = f"#{k:02x}{255 - k:02x}{(k * 7) % 256:02x}"
        assert format_color(parse_color(s)) == s, s


def test_format_default_color():
    """No color: the explicit default is used (black unless given)."""
    assert format_color() == '#000000'
    assert format_color(default=(1.0, 1.0, 1.0)) == '#ffffff'
    assert format_color([0.0, 0.0, 1.0], default=(1.0, 1.0, 1.0)) == '#0000ff'


@pytest.mark.parametrize("bad", ['ff8000', '#ff80', '#ff80001', '#gg0000', '#xyz',
                                 '#-10000', '#+f+f+f', '# f0000', '#-1f'])
def test_parse_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_color(bad)


def test_parse_channels_in_unit_range():
    """Signs and spaces are not hex digits: no negative channels."""
    with pytest.raises(ValueError, match="Invalid hex digit '-'"):
        parse_color('#-10000')
    assert all(0.0 <= c <= 1.0 for c in parse_color('#00ffA0'))


def test_format_snaps_near_integer_values():
    """Within 1e-9 of an integer the channel snaps to it; above that, ceil."""
    assert format_color([(100 + 1e-10) / 255, 0.0, 0.0]) == '#640000'
    assert format_color([(100 + 1e-3) / 255, 0.0, 0.0]) == '#650000'
