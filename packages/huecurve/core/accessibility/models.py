"""Value types for colors in the accessibility engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HSV(BaseModel):
    """Hue/saturation/value color. Saturation and value are percentages."""

    h: float = Field(ge=0.0, lt=360.0, description="Hue in degrees")
    s: float = Field(ge=0.0, le=100.0, description="Saturation (0-100)")
    v: float = Field(ge=0.0, le=100.0, description="Value / brightness (0-100)")

    model_config = ConfigDict(frozen=True)


class RGB(BaseModel):
    """8-bit RGB color."""

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    model_config = ConfigDict(frozen=True)

    def as_unit(self) -> tuple[float, float, float]:
        """Channels scaled to [0, 1]."""
        return self.r / 255.0, self.g / 255.0, self.b / 255.0


class RGBA(RGB):
    """8-bit RGB color with alpha in [0, 1]."""

    a: float = Field(default=1.0, ge=0.0, le=1.0)
