"""
MCP tool implementations.

Tools are organized by domain:
- styles - Default/editing styles, style sheets and feature resolution
"""

from chuk_mcp_mapstyle.tools.styles import register_style_tools

__all__ = [
    "register_style_tools",
]
