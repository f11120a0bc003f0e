"""
Style tools - MCP tools for inspecting and resolving map styles.

Tools for describing the built-in default and editing styles, listing
and describing style sheets, and resolving a feature against a sheet.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_mapstyle.constants import ErrorMessages, GeometryType
from chuk_mcp_mapstyle.models.feature import SimpleFeature
from chuk_mcp_mapstyle.styles import (
    RenderContext,
    StyleSheetLoader,
    create_editing_style,
    resolve_styles,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_style_tools(
    mcp: ChukMCPServer,
    context: RenderContext,
    sheet_loader: StyleSheetLoader,
) -> dict[str, Any]:
    """
    Register style tools with the MCP server.

    Args:
        mcp: The MCP server instance
        context: Render context owning the default style
        sheet_loader: The style sheet loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def mapstyle_default_style() -> str:
        """
        Describe the default style.

        The default style paints features that have no style of their own:
        a translucent white fill, a blue outline and a small circle marker.

        Returns:
            JSON string with the default style list

        Example:
            mapstyle_default_style()
        """
        try:
            styles = context.default_style()
            return json.dumps(
                {
                    "status": "success",
                    "styles": [style.to_dict() for style in styles],
                }
            )
        except Exception as e:
            logger.exception("Failed to describe default style")
            return json.dumps({"status": "error", "message": str(e)})

    tools["mapstyle_default_style"] = mapstyle_default_style

    @mcp.tool  # type: ignore[arg-type]
    async def mapstyle_editing_style(geometry_type: str) -> str:
        """
        Describe the editing highlight for a geometry type.

        Args:
            geometry_type: Geometry type (Point, LineString, Polygon,
                MultiPoint, MultiLineString, MultiPolygon, Circle,
                GeometryCollection)

        Returns:
            JSON string with the styles in paint order

        Example:
            mapstyle_editing_style(geometry_type="LineString")
        """
        try:
            try:
                gtype = GeometryType(geometry_type)
            except ValueError:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_GEOMETRY_TYPE.format(
                            geometry_type=geometry_type
                        ),
                    }
                )

            styles = create_editing_style().get(gtype)
            if styles is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"No editing style for geometry type: {gtype.value}",
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "geometry_type": gtype.value,
                    "styles": [style.to_dict() for style in styles],
                    "count": len(styles),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe editing style")
            return json.dumps({"status": "error", "message": str(e)})

    tools["mapstyle_editing_style"] = mapstyle_editing_style

    @mcp.tool  # type: ignore[arg-type]
    async def mapstyle_list_sheets() -> str:
        """
        List available style sheets.

        Returns all style sheets from the library and project with
        basic metadata.

        Returns:
            JSON string with list of style sheet summaries

        Example:
            mapstyle_list_sheets()
        """
        try:
            sheets = sheet_loader.list_sheets()
            return json.dumps(
                {
                    "status": "success",
                    "sheets": [
                        {
                            "name": s.name,
                            "description": s.description,
                            "style_count": s.style_count,
                        }
                        for s in sheets
                    ],
                    "count": len(sheets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list style sheets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["mapstyle_list_sheets"] = mapstyle_list_sheets

    @mcp.tool  # type: ignore[arg-type]
    async def mapstyle_describe_sheet(name: str) -> str:
        """
        Get detailed information about a style sheet.

        Args:
            name: Style sheet name

        Returns:
            JSON string with the sheet's styles in paint order

        Example:
            mapstyle_describe_sheet(name="roads")
        """
        try:
            sheet = sheet_loader.get_sheet(name)
            if sheet is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.STYLESHEET_NOT_FOUND.format(name=name),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "sheet": {
                        "name": sheet.name,
                        "description": sheet.description,
                        "styles": [style.to_dict() for style in sheet.styles()],
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe style sheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["mapstyle_describe_sheet"] = mapstyle_describe_sheet

    @mcp.tool  # type: ignore[arg-type]
    async def mapstyle_resolve(
        sheet: str | None = None,
        properties: dict[str, Any] | None = None,
        geometry: Any = None,
        resolution: float = 1.0,
    ) -> str:
        """
        Resolve which geometries get painted with which styles for a feature.

        Without a sheet, the default style is used. Styles whose geometry
        resolves to nothing are left out.

        Args:
            sheet: Optional style sheet name
            properties: Feature properties
            geometry: The feature's own geometry (e.g. GeoJSON)
            resolution: View resolution

        Returns:
            JSON string with (geometry, style) entries in paint order

        Example:
            mapstyle_resolve(sheet="poi", properties={"label_point": {...}})
        """
        try:
            if sheet is None:
                style_input: Any = context.default_style
            else:
                style_sheet = sheet_loader.get_sheet(sheet)
                if style_sheet is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.STYLESHEET_NOT_FOUND.format(name=sheet),
                        }
                    )
                style_input = style_sheet.styles()

            feature = SimpleFeature(properties, geometry)
            pairs = resolve_styles(style_input, feature, resolution)

            return json.dumps(
                {
                    "status": "success",
                    "resolution": resolution,
                    "entries": [
                        {"geometry": resolved, "style": style.to_dict()}
                        for resolved, style in pairs
                    ],
                    "count": len(pairs),
                },
                default=repr,
            )
        except Exception as e:
            logger.exception("Failed to resolve styles")
            return json.dumps({"status": "error", "message": str(e)})

    tools["mapstyle_resolve"] = mapstyle_resolve

    return tools
