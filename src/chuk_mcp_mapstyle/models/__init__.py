"""
Value models for the map style system.

This module provides:
- Fill, Stroke, CircleStyle, Text: clonable sub-styles
- Feature: protocol styles resolve geometry against
- as_array / as_string: color normalization
"""

from chuk_mcp_mapstyle.models.color import Color, as_array, as_string
from chuk_mcp_mapstyle.models.feature import Feature, SimpleFeature
from chuk_mcp_mapstyle.models.substyles import CircleStyle, Fill, Stroke, Text

__all__ = [
    "CircleStyle",
    "Color",
    "Feature",
    "Fill",
    "SimpleFeature",
    "Stroke",
    "Text",
    "as_array",
    "as_string",
]
