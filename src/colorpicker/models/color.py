"""Color value models."""

from pydantic import BaseModel, ConfigDict, Field

from colorpicker import converter


class RGBColor(BaseModel):
    """Standard 8-bit RGB color.

    The model is frozen so colors are hashable values; every conversion
    returns a new object.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def from_hex(cls, text: str) -> "RGBColor":
        """Create from hex text such as 'FF8800', '#ff8800' or '#f80'.

        Raises:
            InvalidFormatError: If the text is not a valid hex color
        """
        r, g, b = converter.hex_to_rgb(converter.normalize_hex(text))
        return cls(r=r, g=g, b=b)

    @classmethod
    def from_hsv(cls, hsv: "HSVColor") -> "RGBColor":
        """Create from an HSV color."""
        r, g, b = converter.hsv_to_rgb(hsv.h, hsv.s, hsv.v)
        return cls(r=r, g=g, b=b)

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to hex string without '#' (e.g., 'FF0000').

        Example:
            >>> RGBColor(r=255, g=0, b=0).to_hex()
            'FF0000'
        """
        return converter.rgb_to_hex(self.r, self.g, self.b)

    def to_hsv(self) -> "HSVColor":
        """Convert to HSV."""
        return HSVColor.from_rgb(self)

    def websafe(self) -> "RGBColor":
        """Closest websafe color."""
        r, g, b = converter.websafe(self.r, self.g, self.b)
        return RGBColor(r=r, g=g, b=b)


class HSVColor(BaseModel):
    """Hue/saturation/value color.

    Hue is in degrees [0, 360); saturation and value are fractions.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, lt=360, description="Hue in degrees")
    s: float = Field(ge=0, le=1, description="Saturation (0-1)")
    v: float = Field(ge=0, le=1, description="Value/brightness (0-1)")

    @classmethod
    def from_rgb(cls, rgb: RGBColor) -> "HSVColor":
        """Create from an RGB color. Hue is rounded to whole degrees."""
        h, s, v = converter.rgb_to_hsv(rgb.r, rgb.g, rgb.b)
        return cls(h=h, s=s, v=v)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to (h, s, v) tuple."""
        return (self.h, self.s, self.v)

    def to_rgb(self) -> RGBColor:
        """Convert to RGB."""
        return RGBColor.from_hsv(self)

    def to_percent(self) -> tuple[float, int, int]:
        """Hue with saturation and value as whole percentages."""
        return converter.hsv_to_percent(self.h, self.s, self.v)


class ColorInfo(BaseModel):
    """Every representation of one color.

    Derived from an RGB value the same way a color picker refreshes all of
    its fields when the current color changes.
    """

    model_config = ConfigDict(frozen=True)

    rgb: RGBColor
    hsv: HSVColor
    hex: str = Field(pattern=r"^[0-9A-F]{6}$")
    websafe: RGBColor
    websafe_hex: str = Field(pattern=r"^[0-9A-F]{6}$")

    @classmethod
    def from_rgb(cls, rgb: RGBColor) -> "ColorInfo":
        """Build every representation from an RGB color."""
        safe = rgb.websafe()
        return cls(
            rgb=rgb,
            hsv=rgb.to_hsv(),
            hex=rgb.to_hex(),
            websafe=safe,
            websafe_hex=safe.to_hex(),
        )

    @classmethod
    def from_hex(cls, text: str) -> "ColorInfo":
        """Build every representation from hex text (shorthand and '#' allowed)."""
        return cls.from_rgb(RGBColor.from_hex(text))
