"""
Color analysis engine: parse a color string, project it into every supported
space and measure its contrast against black and white text.
"""

from engine.models import AccessibilityResult, CanonicalColor, ColorFormats, ColorReport
from engine.parser import ColorParseError, ColorSyntax, classify, parse_color
from engine.report import analyze_color

__all__ = [
    "analyze_color",
    "parse_color",
    "classify",
    "ColorParseError",
    "ColorSyntax",
    "CanonicalColor",
    "ColorFormats",
    "ColorReport",
    "AccessibilityResult",
]
