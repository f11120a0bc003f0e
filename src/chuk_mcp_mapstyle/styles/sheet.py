"""
Style sheets - named, declarative style lists.

A style sheet is plain data (as read from YAML). Each call to styles()
builds new Style objects from it, so callers can mutate what they get
without affecting other callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_mapstyle.constants import SchemaVersion
from chuk_mcp_mapstyle.models.substyles import CircleStyle, Fill, Stroke, Text
from chuk_mcp_mapstyle.styles.adapter import StyleFunction, to_function
from chuk_mcp_mapstyle.styles.style import Style


def _build_image(config: Mapping[str, Any]) -> Any:
    """Build an image sub-style. Only circle markers are supported."""
    if "circle" in config:
        return CircleStyle.model_validate(config["circle"])
    raise ValueError(f"Unsupported image style: {sorted(config)}")


def build_style(config: Mapping[str, Any]) -> Style:
    """
    Build a Style from a declarative configuration.

    Args:
        config: Mapping with optional geometry, fill, stroke, image,
            text and z_index (or zIndex) keys

    Returns:
        A new Style
    """
    fill = config.get("fill")
    stroke = config.get("stroke")
    image = config.get("image")
    text = config.get("text")
    z_index = config.get("z_index", config.get("zIndex"))

    return Style(
        geometry=config.get("geometry"),
        fill=Fill.model_validate(fill) if fill is not None else None,
        stroke=Stroke.model_validate(stroke) if stroke is not None else None,
        image=_build_image(image) if image is not None else None,
        text=Text.model_validate(text) if text is not None else None,
        z_index=float(z_index) if z_index is not None else None,
    )


class StyleSheet(BaseModel):
    """A named list of style configurations."""

    schema_version: SchemaVersion = Field("stylesheet/v1", alias="schema")
    name: str = Field(..., description="Style sheet name")
    description: str = Field("", description="Style sheet description")
    styles_config: list[dict[str, Any]] = Field(
        default_factory=list,
        alias="styles",
        description="Style configurations in paint order",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def styles(self) -> list[Style]:
        """Build new Style objects for this sheet, in paint order."""
        return [build_style(config) for config in self.styles_config]

    def to_function(self) -> StyleFunction:
        """Build the styles once and wrap them in a style function."""
        return to_function(self.styles())


class StyleSheetMetadata(BaseModel):
    """Lightweight metadata for listing style sheets."""

    name: str
    description: str
    style_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_sheet(cls, sheet: StyleSheet) -> StyleSheetMetadata:
        """Create metadata from a style sheet."""
        return cls(
            name=sheet.name,
            description=sheet.description,
            style_count=len(sheet.styles_config),
        )
