"""
Style system - how features are painted.

A feature plus a view resolution resolves, through a style function,
to an ordered list of Style descriptors. Index order is paint order.
"""

from chuk_mcp_mapstyle.styles.adapter import StyleFunction, resolve_styles, to_function
from chuk_mcp_mapstyle.styles.factory import RenderContext, create_editing_style
from chuk_mcp_mapstyle.styles.geometry import (
    ComputedGeometry,
    FeatureGeometry,
    FixedGeometry,
    PropertyGeometry,
    default_geometry_function,
    geometry_spec_from,
)
from chuk_mcp_mapstyle.styles.loader import StyleSheetLoader
from chuk_mcp_mapstyle.styles.sheet import StyleSheet, StyleSheetMetadata, build_style
from chuk_mcp_mapstyle.styles.style import Style

__all__ = [
    "ComputedGeometry",
    "FeatureGeometry",
    "FixedGeometry",
    "PropertyGeometry",
    "RenderContext",
    "Style",
    "StyleFunction",
    "StyleSheet",
    "StyleSheetLoader",
    "StyleSheetMetadata",
    "build_style",
    "create_editing_style",
    "default_geometry_function",
    "geometry_spec_from",
    "resolve_styles",
    "to_function",
]
