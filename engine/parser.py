"""
Color string classification and channel extraction.

Supported: hex 3/4/6/8 (with or without '#'), rgb/rgba, hsl/hsla, hwb, lab,
lch, oklab, oklch and a small named set. Classification happens once per input
and picks a single ColorSyntax; extraction then reads numeric tokens for that
syntax and rebuilds RGB through the matching inverse transform.
"""

import logging
import re
from enum import Enum
from typing import Dict, List, Optional, Tuple

from engine.models import CanonicalColor
from engine.spaces import SPACES, clamp, clamp_channel, hex_to_rgba

logger = logging.getLogger(__name__)


class ColorParseError(ValueError):
    """Raised when an input matches no supported color grammar."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"could not parse color: {text}")


class ColorSyntax(str, Enum):
    HEX = "hex"
    RGBA = "rgba"
    RGB = "rgb"
    HSL = "hsl"
    HWB = "hwb"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    NAMED = "named"


NAMED: Dict[str, str] = {
    "white": "ffffff",
    "black": "000000",
    "red": "ff0000",
    "green": "008000",
    "blue": "0000ff",
    "yellow": "ffff00",
    "cyan": "00ffff",
    "magenta": "ff00ff",
    "gray": "808080",
    "grey": "808080",
    "transparent": "00000000",
}

# Longer prefixes first so "rgba" and "oklab" win over "rgb" and "lab".
_PREFIXES: Tuple[Tuple[str, ColorSyntax], ...] = (
    ("rgba", ColorSyntax.RGBA),
    ("rgb", ColorSyntax.RGB),
    ("hsl", ColorSyntax.HSL),
    ("hwb", ColorSyntax.HWB),
    ("oklab", ColorSyntax.OKLAB),
    ("oklch", ColorSyntax.OKLCH),
    ("lab", ColorSyntax.LAB),
    ("lch", ColorSyntax.LCH),
)

HEX_RE = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
NUM_RE = re.compile(r"(-?\d*\.?\d+)(%?)")

Token = Tuple[float, bool]


def classify(s: str) -> Optional[ColorSyntax]:
    """Pick the grammar family for a trimmed, lower-cased string."""
    if HEX_RE.match(s):
        return ColorSyntax.HEX
    for prefix, syntax in _PREFIXES:
        if s.startswith(prefix):
            return syntax
    if s in NAMED:
        return ColorSyntax.NAMED
    return None


def extract_numbers(s: str, limit: int = 4) -> List[Token]:
    """Scan up to `limit` signed decimals; each token notes a trailing '%'."""
    return [(float(num), pct == "%") for num, pct in NUM_RE.findall(s)[:limit]]


def alpha_to_channel(token: Token) -> int:
    """Fractions <= 1 scale by 255, larger values are literal; '%' is a percent."""
    value, is_pct = token
    if is_pct:
        value = value / 100
    return clamp_channel(value * 255 if value <= 1.0 else value)


def _pct(token: Token) -> float:
    """Percent-style component as a fraction in [0,1]."""
    return clamp(token[0] / 100, 0, 1)


def _ok_lightness(token: Token) -> float:
    value, is_pct = token
    return value / 100 if is_pct else value


def _space_coords(syntax: ColorSyntax, tokens: List[Token]) -> Tuple[float, float, float]:
    first, second, third = tokens[:3]
    if syntax in (ColorSyntax.HSL, ColorSyntax.HWB):
        return first[0] % 360, _pct(second), _pct(third)
    if syntax in (ColorSyntax.OKLAB, ColorSyntax.OKLCH):
        return _ok_lightness(first), second[0], third[0]
    return first[0], second[0], third[0]


def _from_hex(digits: str) -> CanonicalColor:
    r, g, b, a = hex_to_rgba(digits)
    if a is None:
        return CanonicalColor(r=r, g=g, b=b)
    return CanonicalColor(r=r, g=g, b=b, a=a, has_alpha=True)


def parse_color(text: str) -> CanonicalColor:
    """Parse any supported color string into a CanonicalColor.

    Functional notations need at least three numeric tokens; anything short of
    that fails rather than defaulting the missing channels to zero.
    """
    s = text.strip().lower()
    syntax = classify(s)
    logger.debug("classified %r as %s", s, syntax)

    if syntax is ColorSyntax.HEX:
        return _from_hex(s.lstrip("#"))
    if syntax is ColorSyntax.NAMED:
        return _from_hex(NAMED[s])
    if syntax is None:
        logger.info("no color grammar matches %r", s)
        raise ColorParseError(s)

    tokens = extract_numbers(s)
    if len(tokens) < 3:
        logger.info("%s color %r has %d of 3 required components", syntax.value, s, len(tokens))
        raise ColorParseError(s)

    if syntax in (ColorSyntax.RGB, ColorSyntax.RGBA):
        r, g, b = (clamp_channel(value) for value, _ in tokens[:3])
    else:
        r, g, b = SPACES[syntax.value].to_rgb(*_space_coords(syntax, tokens))

    if syntax is ColorSyntax.RGB or len(tokens) < 4:
        return CanonicalColor(r=r, g=g, b=b)
    return CanonicalColor(r=r, g=g, b=b, a=alpha_to_channel(tokens[3]), has_alpha=True)
