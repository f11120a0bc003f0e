"""
Sub-style models - the visual channels a Style bundles.

Fill, Stroke, CircleStyle (an image marker) and Text are plain mutable
value objects. Each exposes clone(), which returns an independent copy
with equivalent visual parameters; nested sub-styles are copied too.

Passing the same Fill or Stroke instance to several owners shares it;
pydantic keeps model instances as-is, so identity survives construction
and assignment.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_mapstyle.constants import LineCap, LineJoin
from chuk_mcp_mapstyle.models.color import as_array, as_string


def _check_color(v: Any) -> Any:
    if v is not None:
        as_array(v)
    return v


class Fill(BaseModel):
    """Fill style for polygons and marker interiors."""

    color: str | list[float] | None = Field(
        default=None,
        description="Fill color (CSS string or [r, g, b, a])",
    )

    model_config = {"validate_assignment": True}

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Any) -> Any:
        """Reject colors that cannot be parsed."""
        return _check_color(v)

    def clone(self) -> Fill:
        """Return an independent copy."""
        return self.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {"color": as_string(self.color) if self.color is not None else None}


class Stroke(BaseModel):
    """Stroke style for lines and outlines."""

    color: str | list[float] | None = Field(default=None, description="Stroke color")
    width: float | None = Field(default=None, ge=0, description="Stroke width in pixels")
    line_cap: LineCap = Field(default="round", description="Line cap")
    line_join: LineJoin = Field(default="round", description="Line join")
    line_dash: list[float] | None = Field(default=None, description="Dash pattern")
    line_dash_offset: float = Field(default=0, description="Dash offset")
    miter_limit: float = Field(default=10, ge=0, description="Miter limit")

    model_config = {"validate_assignment": True}

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: Any) -> Any:
        """Reject colors that cannot be parsed."""
        return _check_color(v)

    def clone(self) -> Stroke:
        """Return an independent copy."""
        return self.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        d: dict[str, Any] = {
            "color": as_string(self.color) if self.color is not None else None,
            "width": self.width,
            "line_cap": self.line_cap,
            "line_join": self.line_join,
            "miter_limit": self.miter_limit,
        }
        if self.line_dash:
            d["line_dash"] = list(self.line_dash)
            d["line_dash_offset"] = self.line_dash_offset
        return d


class CircleStyle(BaseModel):
    """
    Circular marker image.

    Used as the ``image`` of a Style to draw points.
    """

    radius: float = Field(..., gt=0, description="Marker radius in pixels")
    fill: Fill | None = Field(default=None, description="Marker fill")
    stroke: Stroke | None = Field(default=None, description="Marker outline")
    displacement: tuple[float, float] = Field(default=(0, 0), description="Pixel offset")
    rotation: float = Field(default=0, description="Rotation in radians")
    scale: float = Field(default=1, gt=0, description="Scale factor")
    opacity: float = Field(default=1, ge=0, le=1, description="Opacity (0-1)")

    model_config = {"validate_assignment": True}

    def clone(self) -> CircleStyle:
        """Return an independent copy, including fill and stroke."""
        return self.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "type": "circle",
            "radius": self.radius,
            "fill": self.fill.to_dict() if self.fill else None,
            "stroke": self.stroke.to_dict() if self.stroke else None,
            "displacement": list(self.displacement),
            "rotation": self.rotation,
            "scale": self.scale,
            "opacity": self.opacity,
        }


class Text(BaseModel):
    """Text label style."""

    text: str | None = Field(default=None, description="Label text")
    font: str = Field(default="10px sans-serif", description="CSS font")
    offset_x: float = Field(default=0, description="Horizontal offset in pixels")
    offset_y: float = Field(default=0, description="Vertical offset in pixels")
    scale: float = Field(default=1, gt=0, description="Scale factor")
    rotation: float = Field(default=0, description="Rotation in radians")
    text_align: str | None = Field(default=None, description="Alignment (left, center, ...)")
    text_baseline: str = Field(default="middle", description="Baseline")
    fill: Fill | None = Field(default=None, description="Glyph fill")
    stroke: Stroke | None = Field(default=None, description="Glyph halo")

    model_config = {"validate_assignment": True}

    def clone(self) -> Text:
        """Return an independent copy, including fill and stroke."""
        return self.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        d = self.model_dump(exclude={"fill", "stroke"})
        d["fill"] = self.fill.to_dict() if self.fill else None
        d["stroke"] = self.stroke.to_dict() if self.stroke else None
        return d
