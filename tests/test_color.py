import pytest

from quadart.color import hex_to_color, set_alpha


def test_six_digits_are_opaque():
    assert hex_to_color("ffffff") == (255, 255, 255, 255)


def test_hash_prefix_is_accepted():
    assert hex_to_color("#ff0000") == hex_to_color("ff0000")


def test_eight_digits_carry_alpha():
    assert hex_to_color("000000ff") == (0, 0, 0, 255)
    assert hex_to_color("#00000000")[3] == 0


@pytest.mark.parametrize("bad", ["", "fff", "fffff", "fffffff", "fffffffff", "##ffffff"])
def test_invalid_length_raises(bad):
    with pytest.raises(ValueError, match="6 or 8 digits"):
        hex_to_color(bad)


def test_malformed_pair_reads_as_zero():
    assert hex_to_color("zzffff") == (0, 255, 255, 255)


def test_set_alpha_keeps_rgb():
    result = set_alpha((12, 34, 56, 78), 1.0)
    assert result[:3] == (12, 34, 56)
    assert result[3] == 255


def test_set_alpha_zero():
    assert set_alpha((1, 2, 3), 0.0) == (1, 2, 3, 0)


def test_set_alpha_round_trip_through_hex():
    color = hex_to_color("102030")
    assert set_alpha(color, 1.0) == color


@pytest.mark.parametrize("alpha", [-0.1, 1.5])
def test_set_alpha_out_of_range(alpha):
    with pytest.raises(ValueError):
        set_alpha((0, 0, 0), alpha)