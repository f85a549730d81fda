"""
Assemble the full color report: every projection, CSS strings and
accessibility metrics for one input.
"""

from engine.accessibility import analyze_accessibility
from engine.models import CanonicalColor, ColorFormats, ColorReport
from engine.parser import parse_color
from engine.spaces import (
    rgb_to_ansi256,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_oklch,
    round_dig,
    round_half_up,
)


def build_formats(color: CanonicalColor) -> ColorFormats:
    """Project a color into every supported space."""
    r, g, b = color.r, color.g, color.b
    h, s, l = rgb_to_hsl(r, g, b)
    _, sv, v = rgb_to_hsv(r, g, b)
    _, hw, hb = rgb_to_hwb(r, g, b)
    c, m, y, k = rgb_to_cmyk(r, g, b)
    lab_l, lab_a, lab_b = rgb_to_lab(r, g, b)
    lch_l, lch_c, lch_h = rgb_to_lch(r, g, b)
    ok_l, ok_a, ok_b = rgb_to_oklab(r, g, b)
    okc_l, okc_c, okc_h = rgb_to_oklch(r, g, b)

    # Percent-style components are reported on a 0-100 scale.
    s, l, sv, v, hw, hb = s * 100, l * 100, sv * 100, v * 100, hw * 100, hb * 100
    c, m, y, k = c * 100, m * 100, y * 100, k * 100

    fields = dict(
        hex=rgb_to_hex(r, g, b),
        rgb={"r": r, "g": g, "b": b},
        rgb_css=f"rgb({r}, {g}, {b})",
        hsl={"h": round_half_up(h), "s": round_half_up(s), "l": round_half_up(l)},
        hsl_css=f"hsl({h:.0f}, {s:.0f}%, {l:.0f}%)",
        hsv={"h": round_half_up(h), "s": round_half_up(sv), "v": round_half_up(v)},
        hwb={"h": round_half_up(h), "w": round_half_up(hw), "b": round_half_up(hb)},
        hwb_css=f"hwb({h:.0f} {hw:.0f}% {hb:.0f}%)",
        cmyk={
            "c": round_half_up(c),
            "m": round_half_up(m),
            "y": round_half_up(y),
            "k": round_half_up(k),
        },
        cmyk_css=f"cmyk({c:.0f}%, {m:.0f}%, {y:.0f}%, {k:.0f}%)",
        lab={"l": round_dig(lab_l, 2), "a": round_dig(lab_a, 2), "b": round_dig(lab_b, 2)},
        lab_css=f"lab({lab_l:.2f} {lab_a:.2f} {lab_b:.2f})",
        lch={"l": round_dig(lch_l, 2), "c": round_dig(lch_c, 2), "h": round_dig(lch_h, 2)},
        lch_css=f"lch({lch_l:.2f} {lch_c:.2f} {lch_h:.2f})",
        oklab={"l": round_dig(ok_l, 4), "a": round_dig(ok_a, 4), "b": round_dig(ok_b, 4)},
        oklab_css=f"oklab({ok_l:.4f} {ok_a:.4f} {ok_b:.4f})",
        oklch={"l": round_dig(okc_l, 4), "c": round_dig(okc_c, 4), "h": round_dig(okc_h, 2)},
        oklch_css=f"oklch({okc_l:.4f} {okc_c:.4f} {okc_h:.2f})",
        ansi256=rgb_to_ansi256(r, g, b),
    )

    if color.has_alpha:
        alpha = color.alpha
        fields.update(
            alpha=round_dig(alpha, 3),
            alpha_percent=round_half_up(alpha * 100),
            hexa=rgb_to_hex(r, g, b, color.a),
            rgba={"r": r, "g": g, "b": b, "a": round_dig(alpha, 3)},
            rgba_css=f"rgba({r}, {g}, {b}, {alpha:.3f})",
            hsla_css=f"hsla({h:.0f}, {s:.0f}%, {l:.0f}%, {alpha:.3f})",
            hwb_css=f"hwb({h:.0f} {hw:.0f}% {hb:.0f}% / {alpha:.3f})",
            lab_css=f"lab({lab_l:.2f} {lab_a:.2f} {lab_b:.2f} / {alpha:.3f})",
            lch_css=f"lch({lch_l:.2f} {lch_c:.2f} {lch_h:.2f} / {alpha:.3f})",
            oklab_css=f"oklab({ok_l:.4f} {ok_a:.4f} {ok_b:.4f} / {alpha:.3f})",
            oklch_css=f"oklch({okc_l:.4f} {okc_c:.4f} {okc_h:.2f} / {alpha:.3f})",
        )

    return ColorFormats(**fields)


def build_report(original_input: str, color: CanonicalColor) -> ColorReport:
    return ColorReport(
        original_input=original_input,
        has_alpha=color.has_alpha,
        formats=build_formats(color),
        accessibility=analyze_accessibility(color),
    )


def analyze_color(text: str) -> ColorReport:
    """Parse a color string and report it in every space.

    Raises ColorParseError when the input matches no supported grammar.
    """
    normalized = text.strip().lower()
    return build_report(normalized, parse_color(normalized))
