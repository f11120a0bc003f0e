"""
Style sheet loader - discovers and loads style sheets.

Style sheets can come from:
1. Built-in library (shipped with package)
2. Project style sheets (user's project/styles directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from chuk_mcp_mapstyle.styles.sheet import StyleSheet, StyleSheetMetadata

logger = logging.getLogger(__name__)


class StyleSheetLoader:
    """
    Discovers and loads style sheet definitions.

    Style sheets are loaded from YAML files in the library and project
    directories. Project sheets override library sheets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the style sheet loader.

        Args:
            library_path: Path to built-in style sheet library
            project_path: Path to project style sheets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, StyleSheet] = {}

    def list_sheets(self) -> list[StyleSheetMetadata]:
        """
        List all available style sheets.

        Returns sheets from both library and project, with project
        sheets taking precedence.
        """
        sheets: dict[str, StyleSheetMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                sheet = self._load_sheet_file(path)
                if sheet:
                    sheets[sheet.name] = StyleSheetMetadata.from_sheet(sheet)

        return list(sheets.values())

    def get_sheet(self, name: str) -> StyleSheet | None:
        """
        Get a style sheet by name.

        Project sheets take precedence over library sheets.

        Args:
            name: Style sheet name

        Returns:
            StyleSheet if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            sheet_file = directory / f"{name}.yaml"
            if sheet_file.exists():
                sheet = self._load_sheet_file(sheet_file)
                if sheet:
                    self._cache[name] = sheet
                    return sheet

        return None

    def _load_sheet_file(self, path: Path) -> StyleSheet | None:
        """Load a style sheet from a YAML file, skipping broken files."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)

            sheet = StyleSheet.model_validate(data)
            # Build once so bad sub-style settings surface at load time
            sheet.styles()
            return sheet
        except Exception:
            logger.warning("Skipping invalid style sheet: %s", path, exc_info=True)
            return None

    def clear_cache(self) -> None:
        """Clear the style sheet cache."""
        self._cache.clear()
