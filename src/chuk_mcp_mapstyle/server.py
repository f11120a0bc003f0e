#!/usr/bin/env python3
"""
Entry point for the CHUK Map Style MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http) and a configurable
project style sheet directory.
"""

import argparse
import asyncio
import logging
import os

from chuk_mcp_mapstyle.constants import STYLES_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(description="CHUK Map Style MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--styles-dir",
        default=None,
        help="Project style sheet directory (default: ./styles)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging, including skipped style sheets",
    )
    return parser


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.styles_dir:
        os.environ[STYLES_DIR_ENV] = args.styles_dir

    # The server module reads the styles directory at import time
    from chuk_mcp_mapstyle.async_server import STYLES_DIR, mcp, sheet_loader

    sheet_count = len(sheet_loader.list_sheets())
    logger.info(f"Serving {sheet_count} style sheet(s); project styles from {STYLES_DIR}")

    if args.transport == "stdio":
        logger.info("Starting CHUK Map Style MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Map Style MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
