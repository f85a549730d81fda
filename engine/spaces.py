"""
Color space transforms with sRGB as the hub.

Inverse transforms (space -> RGB) are used while parsing, forward transforms
(RGB -> space) while reporting. Both sides take and return 8-bit channels so a
polar or perceptual space can be fed straight back through its inverse.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

RGB = Tuple[int, int, int]
Coords = Tuple[float, float, float]


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def round_dig(x: float, n: int) -> float:
    """Round to n decimal places, halves away from zero."""
    p = 10 ** n
    return round_half_up(x * p) / p


def clamp_channel(v: float) -> int:
    """Clamp a 0-255 scaled value and round it to an 8-bit channel."""
    return round_half_up(clamp(v, 0, 255))


# HEX -------------------------------------------------------------

def hex_to_rgba(digits: str) -> Tuple[int, int, int, Optional[int]]:
    """Decode 3, 4, 6 or 8 hex digits; alpha is None unless encoded."""
    if len(digits) in (3, 4):
        values = [int(d, 16) * 17 for d in digits]
    elif len(digits) in (6, 8):
        values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    else:
        raise ValueError(f"hex color must have 3, 4, 6 or 8 digits, got {len(digits)}")
    alpha = values[3] if len(values) == 4 else None
    return values[0], values[1], values[2], alpha


def hex_to_rgb(s: str) -> RGB:
    """Convert '#RRGGBB' (or shorthand) to an RGB triple, ignoring alpha."""
    r, g, b, _ = hex_to_rgba(s.lstrip("#"))
    return r, g, b


def rgb_to_hex(r: int, g: int, b: int, a: Optional[int] = None) -> str:
    """Convert channels to upper-case '#RRGGBB', or '#RRGGBBAA' when a is given."""
    base = f"#{r:02X}{g:02X}{b:02X}"
    if a is None:
        return base
    return base + f"{a:02X}"


# HSL / HSV / HWB -------------------------------------------------

def _hue(rf: float, gf: float, bf: float, mx: float, d: float) -> float:
    if d == 0:
        return 0.0
    if mx == rf:
        h = (gf - bf) / d
        if gf < bf:
            h += 6
    elif mx == gf:
        h = (bf - rf) / d + 2
    else:
        h = (rf - gf) / d + 4
    return h * 60


def rgb_to_hsl(r: int, g: int, b: int) -> Coords:
    """Convert RGB to HSL. h in deg, s,l in [0,1]."""
    rf, gf, bf = r / 255, g / 255, b / 255
    mx = max(rf, gf, bf)
    mn = min(rf, gf, bf)
    d = mx - mn
    l = (mx + mn) / 2
    if d == 0:
        return 0.0, 0.0, l
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    return _hue(rf, gf, bf, mx, d), s, l


def rgb_to_hsv(r: int, g: int, b: int) -> Coords:
    """Convert RGB to HSV. h in deg, s,v in [0,1]."""
    rf, gf, bf = r / 255, g / 255, b / 255
    mx = max(rf, gf, bf)
    d = mx - min(rf, gf, bf)
    s = d / mx if mx != 0 else 0.0
    return _hue(rf, gf, bf, mx, d), s, mx


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL to RGB. h in deg, s,l in [0,1]."""
    h = h % 360
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r1, g1, b1 = c, x, 0
    elif h < 120:
        r1, g1, b1 = x, c, 0
    elif h < 180:
        r1, g1, b1 = 0, c, x
    elif h < 240:
        r1, g1, b1 = 0, x, c
    elif h < 300:
        r1, g1, b1 = x, 0, c
    else:
        r1, g1, b1 = c, 0, x

    return (
        clamp_channel((r1 + m) * 255),
        clamp_channel((g1 + m) * 255),
        clamp_channel((b1 + m) * 255),
    )


def rgb_to_hwb(r: int, g: int, b: int) -> Coords:
    """Convert RGB to HWB. h in deg, w,b in [0,1]."""
    h, _, _ = rgb_to_hsl(r, g, b)
    w = min(r, g, b) / 255
    bl = 1 - max(r, g, b) / 255
    return h, w, bl


def hwb_to_rgb(h: float, w: float, bl: float) -> RGB:
    """Convert HWB to RGB. w,bl in [0,1]; w+bl >= 1 collapses to gray."""
    if w + bl >= 1:
        gray = clamp_channel(w / (w + bl) * 255)
        return gray, gray, gray

    r, g, b = hsl_to_rgb(h, 1.0, 0.5)
    keep = 1 - w - bl
    return (
        clamp_channel((r / 255 * keep + w) * 255),
        clamp_channel((g / 255 * keep + w) * 255),
        clamp_channel((b / 255 * keep + w) * 255),
    )


# CMYK ------------------------------------------------------------

def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[float, float, float, float]:
    """Convert RGB to CMYK, all components in [0,1]."""
    if r == 0 and g == 0 and b == 0:
        return 0.0, 0.0, 0.0, 1.0
    rf, gf, bf = r / 255, g / 255, b / 255
    k = 1 - max(rf, gf, bf)
    return (
        (1 - rf - k) / (1 - k),
        (1 - gf - k) / (1 - k),
        (1 - bf - k) / (1 - k),
        k,
    )


# XYZ / LAB / LCH -------------------------------------------------

def s_to_lin(c: float) -> float:
    """sRGB companding, c in [0,1]."""
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def lin_to_s(c: float) -> float:
    """Linear to sRGB, result in [0,1] for in-gamut input."""
    return 12.92 * c if c <= 0.0031308 else 1.055 * (c ** (1 / 2.4)) - 0.055


# D65 reference white, XYZ scaled to 0-100
XR, YR, ZR = 95.047, 100.0, 108.883


def rgb_to_xyz(r: int, g: int, b: int) -> Coords:
    """sRGB D65 to XYZ (0-100 scale)."""
    R, G, B = s_to_lin(r / 255), s_to_lin(g / 255), s_to_lin(b / 255)
    x = R * 0.4124564 + G * 0.3575761 + B * 0.1804375
    y = R * 0.2126729 + G * 0.7151522 + B * 0.0721750
    z = R * 0.0193339 + G * 0.1191920 + B * 0.9503041
    return x * 100, y * 100, z * 100


def xyz_to_rgb(x: float, y: float, z: float) -> RGB:
    """XYZ (0-100 scale) to sRGB."""
    x, y, z = x / 100, y / 100, z / 100
    R = x * 3.2404542 + y * -1.5371385 + z * -0.4985314
    G = x * -0.9692660 + y * 1.8760108 + z * 0.0415560
    B = x * 0.0556434 + y * -0.2040259 + z * 1.0572252
    return (
        clamp_channel(lin_to_s(R) * 255),
        clamp_channel(lin_to_s(G) * 255),
        clamp_channel(lin_to_s(B) * 255),
    )


def f_lab(t: float) -> float:
    """LAB forward transform."""
    return t ** (1 / 3) if t > 0.008856 else 7.787 * t + 16 / 116


def f_inv_lab(t: float) -> float:
    """LAB inverse transform."""
    return t * t * t if t > 0.206893 else (t - 16 / 116) / 7.787


def rgb_to_lab(r: int, g: int, b: int) -> Coords:
    """Convert RGB to CIE LAB (D65)."""
    x, y, z = rgb_to_xyz(r, g, b)
    fx, fy, fz = f_lab(x / XR), f_lab(y / YR), f_lab(z / ZR)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Convert CIE LAB (D65) to RGB."""
    fy = (L + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    return xyz_to_rgb(f_inv_lab(fx) * XR, f_inv_lab(fy) * YR, f_inv_lab(fz) * ZR)


def to_polar(L: float, a: float, b: float) -> Coords:
    """Rectangular (L, a, b) to (L, C, H) with H in [0, 360)."""
    C = math.sqrt(a * a + b * b)
    H = math.degrees(math.atan2(b, a))
    if H < 0:
        H += 360
    return L, C, H


def from_polar(L: float, C: float, H: float) -> Coords:
    """(L, C, H) to rectangular (L, a, b)."""
    hr = math.radians(H)
    return L, C * math.cos(hr), C * math.sin(hr)


def rgb_to_lch(r: int, g: int, b: int) -> Coords:
    """Convert RGB to CIE LCH."""
    return to_polar(*rgb_to_lab(r, g, b))


def lch_to_rgb(L: float, C: float, H: float) -> RGB:
    """Convert CIE LCH to RGB."""
    return lab_to_rgb(*from_polar(L, C, H))


# OKLAB / OKLCH ---------------------------------------------------

def rgb_to_oklab(r: int, g: int, b: int) -> Coords:
    """Convert RGB to OKLab."""
    R, G, B = s_to_lin(r / 255), s_to_lin(g / 255), s_to_lin(b / 255)

    l = (0.4122214708 * R + 0.5363325363 * G + 0.0514459929 * B) ** (1 / 3)
    m = (0.2119034982 * R + 0.6806995451 * G + 0.1073969566 * B) ** (1 / 3)
    s = (0.0883024619 * R + 0.2817188376 * G + 0.6299787005 * B) ** (1 / 3)

    L = 0.2104542553 * l + 0.7936177850 * m - 0.0040720468 * s
    a = 1.9779984951 * l - 2.4285922050 * m + 0.4505937099 * s
    b_ = 0.0259040371 * l + 0.7827717662 * m - 0.8086757660 * s
    return L, a, b_


def oklab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Convert OKLab to RGB."""
    # OKLab -> LMS' -> LMS -> linear sRGB -> compand
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    R = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    G = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    B = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    return (
        clamp_channel(lin_to_s(R) * 255),
        clamp_channel(lin_to_s(G) * 255),
        clamp_channel(lin_to_s(B) * 255),
    )


def rgb_to_oklch(r: int, g: int, b: int) -> Coords:
    """Convert RGB to OKLCH."""
    return to_polar(*rgb_to_oklab(r, g, b))


def oklch_to_rgb(L: float, C: float, H: float) -> RGB:
    """Convert OKLCH to RGB."""
    return oklab_to_rgb(*from_polar(L, C, H))


# ANSI ------------------------------------------------------------

def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Nearest xterm-256 index: grayscale ramp for neutrals, else the 6x6x6 cube."""
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return 232 + (r - 8) * 24 // 247
    return 16 + 36 * (r // 51) + 6 * (g // 51) + b // 51


# Space registry --------------------------------------------------

@dataclass(frozen=True)
class ColorSpace:
    """A pair of transforms between RGB and one coordinate space."""

    name: str
    to_rgb: Callable[[float, float, float], RGB]
    from_rgb: Callable[[int, int, int], Coords]


SPACES: Dict[str, ColorSpace] = {
    space.name: space
    for space in (
        ColorSpace("hsl", hsl_to_rgb, rgb_to_hsl),
        ColorSpace("hwb", hwb_to_rgb, rgb_to_hwb),
        ColorSpace("lab", lab_to_rgb, rgb_to_lab),
        ColorSpace("lch", lch_to_rgb, rgb_to_lch),
        ColorSpace("oklab", oklab_to_rgb, rgb_to_oklab),
        ColorSpace("oklch", oklch_to_rgb, rgb_to_oklch),
    )
}
