"""
Constants and enums for the map style system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class GeometryType(str, Enum):
    """
    Geometry type tags.

    CIRCLE is its own tag, distinct from POINT.
    """

    POINT = "Point"
    LINE_STRING = "LineString"
    LINEAR_RING = "LinearRing"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    CIRCLE = "Circle"


# Default appearance
DEFAULT_FILL_COLOR = "rgba(255,255,255,0.4)"
DEFAULT_STROKE_COLOR = "#3399CC"
DEFAULT_STROKE_WIDTH = 1.25
DEFAULT_CIRCLE_RADIUS = 5

# Editing appearance
EDITING_BASE_WIDTH = 3
EDITING_WHITE: tuple[float, float, float, float] = (255, 255, 255, 1)
EDITING_BLUE: tuple[float, float, float, float] = (0, 153, 255, 1)
EDITING_FILL_ALPHA = 0.5

# Stroke line caps/joins (canvas vocabulary)
LineCap = Literal["butt", "round", "square"]
LineJoin = Literal["bevel", "round", "miter"]

# Schema versions
SchemaVersion = Literal["stylesheet/v1"]

# Environment variable overriding the project style sheet directory
STYLES_DIR_ENV = "CHUK_MAPSTYLE_STYLES_DIR"


class ErrorCode:
    """Stable diagnostic codes for contract violations."""

    EXPECTED_STYLE = 41


class ErrorMessages:
    """Standardized error messages."""

    EXPECTED_STYLE = "Expected a `Style` or a sequence of `Style` objects, got {type_name}."
    INVALID_COLOR = "Invalid color: {color!r}."
    STYLESHEET_NOT_FOUND = "Style sheet '{name}' not found."
    UNKNOWN_GEOMETRY_TYPE = "Unknown geometry type: '{geometry_type}'."
