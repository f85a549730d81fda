"""Tests for color space transforms (RGB ↔ HSL/HWB/LAB/LCH/OKLab/OKLCH)."""

import pytest

from engine.spaces import (
    SPACES,
    hex_to_rgb,
    hex_to_rgba,
    hsl_to_rgb,
    hwb_to_rgb,
    rgb_to_ansi256,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_xyz,
    round_dig,
    round_half_up,
)

SAMPLES = [
    (0, 0, 0),
    (255, 255, 255),
    (128, 128, 128),
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 87, 51),
    (121, 88, 159),
    (12, 200, 97),
    (250, 240, 5),
]


class TestHex:

    @pytest.mark.parametrize("value", ["#FF5733", "#000000", "#FFFFFF", "#79589F", "#0A0B0C"])
    def test_roundtrip(self, value):
        assert rgb_to_hex(*hex_to_rgb(value)) == value

    def test_lowercase_normalizes_to_upper(self):
        assert rgb_to_hex(*hex_to_rgb("#abcdef")) == "#ABCDEF"

    def test_shorthand_expands_each_digit(self):
        assert hex_to_rgba("f0a") == (255, 0, 170, None)

    def test_shorthand_alpha(self):
        assert hex_to_rgba("f0a8") == (255, 0, 170, 136)

    def test_eight_digits_carry_alpha(self):
        assert hex_to_rgba("79589f99") == (121, 88, 159, 153)

    def test_with_alpha_appends_pair(self):
        assert rgb_to_hex(121, 88, 159, 153) == "#79589F99"

    def test_bad_length(self):
        with pytest.raises(ValueError):
            hex_to_rgba("12345")


class TestRounding:

    def test_half_rounds_up(self):
        assert round_half_up(127.5) == 128
        assert round_half_up(0.5) == 1

    def test_negative_half_rounds_away_from_zero(self):
        assert round_half_up(-2.5) == -3

    def test_round_dig(self):
        assert round_dig(0.123456, 4) == pytest.approx(0.1235)
        assert round_dig(-80.0925, 2) == pytest.approx(-80.09)


class TestHSLAndHSV:

    def test_red(self):
        assert rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 1.0, 0.5))

    def test_gray_has_no_hue_or_saturation(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(128 / 255)

    def test_magenta_hue_wraps(self):
        h, _, _ = rgb_to_hsl(255, 0, 128)
        assert 300 < h < 360

    def test_hsv_blue(self):
        assert rgb_to_hsv(0, 0, 255) == pytest.approx((240.0, 1.0, 1.0))

    def test_hsv_black_has_zero_saturation(self):
        assert rgb_to_hsv(0, 0, 0) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize("hue", [120, 480, -240])
    def test_hue_is_wrapped(self, hue):
        assert hsl_to_rgb(hue, 1.0, 0.5) == (0, 255, 0)

    def test_sector_boundaries(self):
        assert hsl_to_rgb(0, 1.0, 0.5) == (255, 0, 0)
        assert hsl_to_rgb(60, 1.0, 0.5) == (255, 255, 0)
        assert hsl_to_rgb(180, 1.0, 0.5) == (0, 255, 255)
        assert hsl_to_rgb(240, 1.0, 0.5) == (0, 0, 255)
        assert hsl_to_rgb(300, 1.0, 0.5) == (255, 0, 255)


class TestHWB:

    def test_pure_hue(self):
        assert hwb_to_rgb(0, 0.0, 0.0) == (255, 0, 0)

    def test_whiteness_plus_blackness_over_one_is_gray(self):
        assert hwb_to_rgb(200, 0.6, 0.6) == (128, 128, 128)

    def test_full_whiteness_is_white(self):
        assert hwb_to_rgb(0, 1.0, 0.0) == (255, 255, 255)

    def test_full_blackness_is_black(self):
        assert hwb_to_rgb(0, 0.0, 1.0) == (0, 0, 0)


class TestCMYK:

    def test_black_avoids_division_by_zero(self):
        assert rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 1)

    def test_red(self):
        assert rgb_to_cmyk(255, 0, 0) == pytest.approx((0.0, 1.0, 1.0, 0.0))

    def test_white(self):
        assert rgb_to_cmyk(255, 255, 255) == pytest.approx((0.0, 0.0, 0.0, 0.0))


class TestCIE:

    def test_white_xyz_is_reference_white(self):
        assert rgb_to_xyz(255, 255, 255) == pytest.approx((95.047, 100.0, 108.883), abs=1e-3)

    def test_white_lab(self):
        assert rgb_to_lab(255, 255, 255) == pytest.approx((100.0, 0.0, 0.0), abs=0.01)

    def test_black_lab(self):
        assert rgb_to_lab(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-6)

    def test_red_lab(self):
        assert rgb_to_lab(255, 0, 0) == pytest.approx((53.24, 80.09, 67.20), abs=0.02)

    def test_lch_hue_range(self):
        for rgb in SAMPLES:
            _, C, H = rgb_to_lch(*rgb)
            assert C >= 0
            assert 0.0 <= H < 360.0


class TestOKLab:

    def test_white_lightness_is_one(self):
        L, a, b = rgb_to_oklab(255, 255, 255)
        assert L == pytest.approx(1.0, abs=1e-4)
        assert a == pytest.approx(0.0, abs=1e-4)
        assert b == pytest.approx(0.0, abs=1e-4)

    def test_black_lightness_is_zero(self):
        assert rgb_to_oklab(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_red(self):
        assert rgb_to_oklab(255, 0, 0) == pytest.approx((0.6280, 0.2249, 0.1258), abs=1e-3)


class TestInverseConsistency:
    """space -> RGB must reproduce the RGB a color was projected from."""

    @pytest.mark.parametrize("name", sorted(SPACES))
    @pytest.mark.parametrize("rgb", SAMPLES)
    def test_roundtrip_within_one(self, name, rgb):
        space = SPACES[name]
        recovered = space.to_rgb(*space.from_rgb(*rgb))
        assert recovered == pytest.approx(rgb, abs=1)


class TestANSI256:

    def test_black(self):
        assert rgb_to_ansi256(0, 0, 0) == 16

    def test_white(self):
        assert rgb_to_ansi256(255, 255, 255) == 231

    def test_mid_gray_uses_ramp(self):
        assert 232 <= rgb_to_ansi256(128, 128, 128) <= 255

    def test_ramp_ends(self):
        assert rgb_to_ansi256(8, 8, 8) == 232
        assert rgb_to_ansi256(248, 248, 248) == 255

    def test_red_uses_cube(self):
        assert rgb_to_ansi256(255, 0, 0) == 196

    def test_cube_index(self):
        assert rgb_to_ansi256(102, 153, 204) == 16 + 36 * 2 + 6 * 3 + 4
