"""
WCAG contrast metrics against white and black text.
"""

from engine.models import AccessibilityResult, CanonicalColor
from engine.spaces import round_dig

AA_MIN_CONTRAST = 4.5


def relative_luminance(r: int, g: int, b: int) -> float:
    """Rec. 709 weighted sum over gamma-encoded channels (not linearized)."""
    return 0.2126 * r / 255 + 0.7152 * g / 255 + 0.0722 * b / 255


def contrast_with_white(luminance: float) -> float:
    return 1.05 / (luminance + 0.05)


def contrast_with_black(luminance: float) -> float:
    return (luminance + 0.05) / 0.05


def analyze_accessibility(color: CanonicalColor) -> AccessibilityResult:
    """Luminance, both contrast ratios, AA verdict and the better text color."""
    lum = relative_luminance(color.r, color.g, color.b)
    white = contrast_with_white(lum)
    black = contrast_with_black(lum)
    return AccessibilityResult(
        luminance=round_dig(lum, 4),
        contrast_white=round_dig(white, 2),
        contrast_black=round_dig(black, 2),
        wcag_aa_compliant=white >= AA_MIN_CONTRAST or black >= AA_MIN_CONTRAST,
        recommended_text_color="black" if black > white else "white",
    )
