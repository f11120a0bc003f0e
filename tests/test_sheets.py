"""
Tests for style sheets.

Tests cover:
- Building styles from declarative config
- StyleSheet models
- StyleSheetLoader discovery, precedence and caching
"""

import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_mapstyle.models import CircleStyle, Fill, SimpleFeature, Stroke, Text
from chuk_mcp_mapstyle.styles import (
    Style,
    StyleSheet,
    StyleSheetLoader,
    StyleSheetMetadata,
    build_style,
)

ROADS_OVERRIDE = """\
schema: stylesheet/v1
name: roads
description: Project roads
styles:
  - stroke:
      color: "#000000"
      width: 2
"""


class TestBuildStyle:
    """Tests for build_style."""

    def test_empty(self):
        """An empty config builds an empty style."""
        style = build_style({})
        assert isinstance(style, Style)
        assert style.fill is None
        assert style.z_index is None

    def test_all_channels(self):
        """Every channel is built into its sub-style type."""
        style = build_style(
            {
                "geometry": "label_point",
                "fill": {"color": "#fff"},
                "stroke": {"color": "#000", "width": 2},
                "image": {"circle": {"radius": 4, "fill": {"color": "#f00"}}},
                "text": {"text": "hi"},
                "z_index": 3,
            }
        )
        assert style.geometry == "label_point"
        assert isinstance(style.fill, Fill)
        assert isinstance(style.stroke, Stroke)
        assert isinstance(style.image, CircleStyle)
        assert isinstance(style.image.fill, Fill)
        assert isinstance(style.text, Text)
        assert style.z_index == 3

    def test_camel_case_z_index(self):
        """zIndex is accepted too."""
        assert build_style({"zIndex": 2}).z_index == 2

    def test_unsupported_image(self):
        """Only circle images are understood."""
        with pytest.raises(ValueError, match="Unsupported image style"):
            build_style({"image": {"icon": {"src": "x.png"}}})

    def test_invalid_sub_style(self):
        """Invalid sub-style settings fail validation."""
        with pytest.raises(ValidationError):
            build_style({"stroke": {"width": -2}})


class TestStyleSheet:
    """Tests for the StyleSheet model."""

    def test_from_dict(self):
        """Validates from YAML-shaped data using aliases."""
        sheet = StyleSheet.model_validate(
            {"schema": "stylesheet/v1", "name": "s", "styles": [{"fill": {"color": "#fff"}}]}
        )
        assert sheet.name == "s"
        assert sheet.schema_version == "stylesheet/v1"
        assert len(sheet.styles_config) == 1

    def test_unknown_schema_rejected(self):
        """Only the known schema version validates."""
        with pytest.raises(ValidationError):
            StyleSheet.model_validate({"schema": "stylesheet/v2", "name": "s"})

    def test_styles_are_fresh(self):
        """Each call builds new Style objects."""
        sheet = StyleSheet(name="s", styles=[{"fill": {"color": "#fff"}}])
        first = sheet.styles()
        second = sheet.styles()
        assert first is not second
        assert first[0] is not second[0]
        assert first[0].to_dict() == second[0].to_dict()

    def test_to_function(self):
        """The sheet adapts into a style function."""
        sheet = StyleSheet(name="s", styles=[{}, {}])
        fn = sheet.to_function()
        assert len(fn(SimpleFeature(), 1.0)) == 2
        assert fn() is fn()

    def test_metadata(self):
        """Metadata summarizes the sheet."""
        sheet = StyleSheet(name="s", description="d", styles=[{}, {}, {}])
        meta = StyleSheetMetadata.from_sheet(sheet)
        assert meta.name == "s"
        assert meta.description == "d"
        assert meta.style_count == 3


class TestStyleSheetLoader:
    """Tests for StyleSheetLoader."""

    def test_list_library(self, sheet_loader: StyleSheetLoader):
        """Lists the built-in sheets."""
        names = {meta.name for meta in sheet_loader.list_sheets()}
        assert {"roads", "water", "poi"} <= names

    def test_get_sheet(self, sheet_loader: StyleSheetLoader):
        """Loads a library sheet by name."""
        sheet = sheet_loader.get_sheet("roads")
        assert sheet is not None
        styles = sheet.styles()
        assert [s.stroke.width for s in styles] == [6, 4]

    def test_poi_sheet(self, sheet_loader: StyleSheetLoader):
        """The poi sheet paints a marker on the label point, on top."""
        style = sheet_loader.get_sheet("poi").styles()[0]
        assert style.geometry == "label_point"
        assert style.image.radius == 4
        assert style.z_index == math.inf

    def test_missing_sheet(self, sheet_loader: StyleSheetLoader):
        """Unknown names return None."""
        assert sheet_loader.get_sheet("nonexistent") is None

    def test_project_overrides_library(self, styles_library_path: Path, temp_dir: Path):
        """A project sheet with the same name wins."""
        project = temp_dir / "styles"
        project.mkdir()
        (project / "roads.yaml").write_text(ROADS_OVERRIDE)
        loader = StyleSheetLoader(library_path=styles_library_path, project_path=project)

        assert loader.get_sheet("roads").description == "Project roads"
        listed = {meta.name: meta for meta in loader.list_sheets()}
        assert listed["roads"].description == "Project roads"
        assert listed["roads"].style_count == 1

    def test_cache(self, temp_dir: Path):
        """Loaded sheets are cached until clear_cache()."""
        (temp_dir / "roads.yaml").write_text(ROADS_OVERRIDE)
        loader = StyleSheetLoader(library_path=temp_dir)

        first = loader.get_sheet("roads")
        assert loader.get_sheet("roads") is first
        loader.clear_cache()
        assert loader.get_sheet("roads") is not first

    def test_invalid_files_skipped(self, temp_dir: Path):
        """Broken sheets are skipped rather than failing the listing."""
        (temp_dir / "bad.yaml").write_text("name: bad\nstyles:\n  - fill:\n      color: nope\n")
        (temp_dir / "nameless.yaml").write_text("styles: []\n")
        (temp_dir / "future.yaml").write_text("schema: stylesheet/v2\nname: future\nstyles: []\n")
        (temp_dir / "roads.yaml").write_text(ROADS_OVERRIDE)
        loader = StyleSheetLoader(library_path=temp_dir)

        assert [meta.name for meta in loader.list_sheets()] == ["roads"]
        assert loader.get_sheet("bad") is None
        assert loader.get_sheet("future") is None

    def test_missing_directories(self, temp_dir: Path):
        """Nonexistent directories yield no sheets."""
        loader = StyleSheetLoader(library_path=temp_dir / "nope", project_path=temp_dir / "also")
        assert loader.list_sheets() == []
        assert loader.get_sheet("roads") is None
