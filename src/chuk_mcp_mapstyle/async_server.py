#!/usr/bin/env python3
"""
Async Map Style MCP Server using chuk-mcp-server

This server exposes the style system as MCP tools:
- Describe the default and editing styles
- List and describe style sheets (library and project)
- Resolve a feature against a style sheet
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_mapstyle.constants import STYLES_DIR_ENV
from chuk_mcp_mapstyle.styles import RenderContext, StyleSheetLoader
from chuk_mcp_mapstyle.tools import register_style_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-mapstyle")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
STYLES_DIR = Path(os.environ.get(STYLES_DIR_ENV) or BASE_PATH / "styles")
STYLES_LIBRARY_PATH = Path(__file__).parent / "styles" / "library"

# Shared state
render_context = RenderContext()
sheet_loader = StyleSheetLoader(
    library_path=STYLES_LIBRARY_PATH,
    project_path=STYLES_DIR,
)

# Register all tools
style_tools = register_style_tools(mcp, render_context, sheet_loader)

# Export tool functions for direct access
mapstyle_default_style = style_tools["mapstyle_default_style"]
mapstyle_editing_style = style_tools["mapstyle_editing_style"]
mapstyle_list_sheets = style_tools["mapstyle_list_sheets"]
mapstyle_describe_sheet = style_tools["mapstyle_describe_sheet"]
mapstyle_resolve = style_tools["mapstyle_resolve"]

logger.info("CHUK Map Style MCP Server initialized")
logger.info(f"  Library path: {STYLES_LIBRARY_PATH}")
logger.info(f"  Project styles dir: {STYLES_DIR}")
