"""
Tests for the command line entry point.

Tests cover:
- Parser defaults
- Transport, port and styles directory options
"""

from pathlib import Path

import pytest

from chuk_mcp_mapstyle.constants import STYLES_DIR_ENV
from chuk_mcp_mapstyle.server import build_parser


class TestBuildParser:
    """Tests for the argument parser."""

    def test_defaults(self):
        """With no arguments the server runs over stdio on the default styles dir."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.styles_dir is None
        assert args.debug is False

    def test_http_options(self):
        """HTTP transport takes a port."""
        args = build_parser().parse_args(["--transport", "http", "--port", "9000", "--debug"])
        assert args.transport == "http"
        assert args.port == 9000
        assert args.debug is True

    def test_styles_dir(self, temp_dir: Path):
        """The project styles directory can be set on the command line."""
        args = build_parser().parse_args(["--styles-dir", str(temp_dir)])
        assert args.styles_dir == str(temp_dir)

    def test_unknown_transport_rejected(self):
        """Only stdio and http are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "grpc"])

    def test_styles_dir_env_name(self):
        """The override variable is namespaced to this server."""
        assert STYLES_DIR_ENV == "CHUK_MAPSTYLE_STYLES_DIR"
