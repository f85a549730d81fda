"""
Pydantic models shared by the color engine and the service layer.
"""

from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CanonicalColor(BaseModel):
    """Normalized RGBA record every projection is computed from."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: int = Field(default=255, ge=0, le=255)
    has_alpha: bool = False

    @model_validator(mode="after")
    def _opaque_without_alpha(self) -> "CanonicalColor":
        if not self.has_alpha and self.a != 255:
            raise ValueError("a must be 255 when has_alpha is false")
        return self

    @property
    def alpha(self) -> float:
        """Alpha as a fraction in [0, 1]."""
        return self.a / 255


class AccessibilityResult(BaseModel):
    luminance: float
    contrast_white: float
    contrast_black: float
    wcag_aa_compliant: bool
    recommended_text_color: Literal["black", "white"]


class ColorFormats(BaseModel):
    """Every projection of a color; alpha fields stay None for opaque input."""

    hex: str
    rgb: Dict[str, int]
    rgb_css: str
    hsl: Dict[str, int]
    hsl_css: str
    hsv: Dict[str, int]
    hwb: Dict[str, int]
    hwb_css: str
    cmyk: Dict[str, int]
    cmyk_css: str
    lab: Dict[str, float]
    lab_css: str
    lch: Dict[str, float]
    lch_css: str
    oklab: Dict[str, float]
    oklab_css: str
    oklch: Dict[str, float]
    oklch_css: str
    ansi256: int = Field(ge=16, le=255)

    alpha: Optional[float] = None
    alpha_percent: Optional[int] = None
    hexa: Optional[str] = None
    rgba: Optional[Dict[str, Union[int, float]]] = None
    rgba_css: Optional[str] = None
    hsla_css: Optional[str] = None


class ColorReport(BaseModel):
    original_input: str
    has_alpha: bool
    formats: ColorFormats
    accessibility: AccessibilityResult
