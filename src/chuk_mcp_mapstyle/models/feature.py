"""
Feature protocol - what the style machinery needs from a feature.

Feature storage lives elsewhere. Styles only ever ask a feature for a
named property or for its own geometry.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Feature(Protocol):
    """Anything exposing a property lookup and a default geometry."""

    def get(self, name: str) -> Any: ...

    def get_geometry(self) -> Any: ...


class SimpleFeature:
    """
    Minimal feature backed by a dictionary.

    Used where a feature has to be assembled from plain data,
    e.g. JSON arguments to a tool.
    """

    def __init__(self, properties: dict[str, Any] | None = None, geometry: Any = None):
        self.properties = dict(properties or {})
        self.geometry = geometry

    def get(self, name: str) -> Any:
        return self.properties.get(name)

    def get_geometry(self) -> Any:
        return self.geometry

    def __repr__(self) -> str:
        return f"SimpleFeature({self.properties!r}, geometry={self.geometry!r})"
