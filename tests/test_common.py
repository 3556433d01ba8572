import math

import pytest

from wiringcore.common import (
    PI,
    HALF_PI,
    TWO_PI,
    PinStatus,
    bit,
    bit_clear,
    bit_read,
    bit_set,
    bit_toggle,
    bit_write,
    constrain,
    degrees,
    high_byte,
    low_byte,
    make_word,
    map_range,
    radians,
    sq,
)


@pytest.mark.parametrize(
    "in_min,in_max,out_min,out_max",
    [(0, 1023, 0, 255), (10, 20, 100, 0), (-50, 50, -5, 5)],
)
def test_map_range_endpoints(in_min, in_max, out_min, out_max):
    assert map_range(in_min, in_min, in_max, out_min, out_max) == out_min
    assert map_range(in_max, in_min, in_max, out_min, out_max) == out_max


def test_map_range_identity():
    for x in range(-20, 21):
        assert map_range(x, 0, 10, 0, 10) == x


def test_map_range_midpoint():
    assert map_range(50, 0, 100, 0, 1000) == 500


def test_map_range_truncates_toward_zero():
    assert map_range(-1, 0, 2, 0, 1) == 0


def test_map_range_empty_input_range():
    with pytest.raises(ZeroDivisionError):
        map_range(5, 3, 3, 0, 10)


@pytest.mark.parametrize("word", [0x0000, 0x00FF, 0xFF00, 0x1234, 0xFFFF])
def test_make_word_round_trip(word):
    assert make_word(high_byte(word), low_byte(word)) == word


def test_make_word_single_value_is_kept():
    assert make_word(0x1234) == 0x1234
    assert make_word(0x11234) == 0x1234


def test_byte_helpers_stay_within_a_byte():
    for value in (0x1FFFF, 0xABCDEF, 0x100):
        assert 0 <= low_byte(value) <= 0xFF
        assert 0 <= high_byte(value) <= 0xFF


@pytest.mark.parametrize("amt", [-10, 0, 3, 7, 42])
def test_constrain(amt):
    result = constrain(amt, 0, 7)
    assert 0 <= result <= 7
    if 0 <= amt <= 7:
        assert result == amt


def test_constrain_bounds():
    assert constrain(-1, 2, 9) == 2
    assert constrain(100, 2, 9) == 9


def test_radians_of_known_angles():
    assert math.isclose(radians(180), PI)
    assert math.isclose(radians(90), HALF_PI)
    assert math.isclose(radians(360), TWO_PI)


@pytest.mark.parametrize("deg", [0.0, 12.5, 90.0, -270.0])
def test_degrees_radians_round_trip(deg):
    assert math.isclose(degrees(radians(deg)), deg, abs_tol=1e-9)


def test_sq():
    assert sq(-4) == sq(4)
    assert sq(3) == 9


@pytest.mark.parametrize("b", range(0, 40, 3))
def test_bit_is_single_bit(b):
    value = bit(b)
    assert bit_read(value, b) == 1
    assert value & (value - 1) == 0


@pytest.mark.parametrize("value", [0, 0b1010, 0xFF, 0x12345678])
@pytest.mark.parametrize("b", [0, 1, 7, 15, 31])
def test_bit_operations(value, b):
    assert bit_read(bit_set(value, b), b) == 1
    assert bit_read(bit_clear(value, b), b) == 0
    assert bit_toggle(bit_toggle(value, b), b) == value
    assert bit_read(bit_toggle(value, b), b) != bit_read(value, b)
    assert bit_clear(bit_set(value, b), b) == bit_clear(value, b)


def test_bit_write_with_pin_status():
    set_value = bit_write(0, 3, PinStatus.HIGH)
    assert bit_read(set_value, 3) == 1
    assert bit_write(set_value, 3, PinStatus.LOW) == 0