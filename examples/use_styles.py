#!/usr/bin/env python3
"""
Example: Using the Style System.

This demonstrates how a feature resolves to the styles that paint it:
the default style, a style sheet with a geometry override, and the
editing highlight for each geometry type.

Usage:
    python examples/use_styles.py
"""

from chuk_mcp_mapstyle.constants import GeometryType
from chuk_mcp_mapstyle.models import SimpleFeature
from chuk_mcp_mapstyle.styles import (
    RenderContext,
    StyleSheetLoader,
    create_editing_style,
    resolve_styles,
)


def main() -> None:
    """Demonstrate the style system."""
    print("CHUK Map Style System Demo")
    print("=" * 40)
    print()

    feature = SimpleFeature(
        {"name": "Town hall", "label_point": {"type": "Point", "coordinates": [2, 2]}},
        geometry={"type": "Polygon", "coordinates": [[[0, 0], [4, 0], [4, 4], [0, 0]]]},
    )

    # Default style: used when nothing else is configured
    context = RenderContext()
    print("Default style:")
    for geometry, style in resolve_styles(context.default_style, feature, 1.0):
        print(f"  {style!r} paints {geometry['type']}")
    print()

    # Style sheets from the built-in library
    loader = StyleSheetLoader()
    print("Available style sheets:")
    for meta in loader.list_sheets():
        print(f"  {meta.name}: {meta.style_count} style(s) - {meta.description[:50]}")
    print()

    poi = loader.get_sheet("poi")
    if poi:
        print("POI sheet paints the label point instead of the polygon:")
        for geometry, style in resolve_styles(poi.styles(), feature, 1.0):
            print(f"  {style!r} paints {geometry}")
        print()

    # Editing highlight, per geometry type
    print("Editing styles:")
    editing = create_editing_style()
    for gtype in GeometryType:
        styles = editing.get(gtype)
        if styles is None:
            continue
        print(f"  {gtype.value}: {len(styles)} style(s)")
    print()
    shared = editing[GeometryType.LINE_STRING] is editing[GeometryType.MULTI_LINE_STRING]
    print(f"LineString and MultiLineString share one list: {shared}")


if __name__ == "__main__":
    main()
