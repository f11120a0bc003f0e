"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_mapstyle.models import SimpleFeature
from chuk_mcp_mapstyle.styles import RenderContext, StyleSheetLoader


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def styles_library_path() -> Path:
    """Path to the built-in style sheet library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_mapstyle" / "styles" / "library"


@pytest.fixture
def sheet_loader(styles_library_path: Path, temp_dir: Path) -> StyleSheetLoader:
    """Loader over the built-in library and an empty project directory."""
    return StyleSheetLoader(library_path=styles_library_path, project_path=temp_dir / "styles")


@pytest.fixture
def render_context() -> RenderContext:
    """A fresh render context."""
    return RenderContext()


@pytest.fixture
def feature() -> SimpleFeature:
    """A feature with its own geometry and an alternative one in a property."""
    return SimpleFeature(
        {"name": "Town hall", "label_point": {"type": "Point", "coordinates": [1, 2]}},
        geometry={"type": "Polygon", "coordinates": [[[0, 0], [4, 0], [4, 4], [0, 0]]]},
    )
