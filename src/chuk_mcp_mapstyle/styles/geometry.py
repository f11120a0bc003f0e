"""
Geometry resolution - which geometry a style paints for a feature.

A style can override the feature's own geometry. The configured value is
classified once, when it is set, into one of four variants:

- FeatureGeometry: nothing configured, paint the feature's own geometry
- PropertyGeometry: read a named property off the feature
- ComputedGeometry: call a user function with the feature
- FixedGeometry: always paint the same geometry, whatever the feature

Each variant exposes resolve(feature). Resolution is pure.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from chuk_mcp_mapstyle.models.feature import Feature

GeometryFunction = Callable[[Feature], Any]


def default_geometry_function(feature: Feature) -> Any:
    """Return the feature's own geometry."""
    return feature.get_geometry()


@dataclass(frozen=True)
class FeatureGeometry:
    """Paint the feature's own geometry."""

    kind = "feature"

    def resolve(self, feature: Feature) -> Any:
        return default_geometry_function(feature)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class PropertyGeometry:
    """
    Paint the geometry stored under a feature property.

    The property is not checked when configured; a missing property
    resolves to None.
    """

    name: str
    kind = "property"

    def resolve(self, feature: Feature) -> Any:
        return feature.get(self.name)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "name": self.name}


@dataclass(frozen=True, eq=False)
class ComputedGeometry:
    """Paint whatever a user function returns for the feature."""

    function: GeometryFunction
    kind = "computed"

    def resolve(self, feature: Feature) -> Any:
        return self.function(feature)

    def to_dict(self) -> dict[str, Any]:
        name = getattr(self.function, "__name__", type(self.function).__name__)
        return {"kind": self.kind, "function": name}


@dataclass(frozen=True, eq=False)
class FixedGeometry:
    """Paint the same geometry regardless of the feature."""

    geometry: Any
    kind = "fixed"

    def resolve(self, feature: Feature) -> Any:
        return self.geometry

    def to_dict(self) -> dict[str, Any]:
        geometry = self.geometry
        if hasattr(geometry, "to_dict"):
            geometry = geometry.to_dict()
        elif not isinstance(geometry, (dict, list, tuple, int, float)):
            geometry = repr(geometry)
        return {"kind": self.kind, "geometry": geometry}


GeometrySpec = FeatureGeometry | PropertyGeometry | ComputedGeometry | FixedGeometry


def _is_unset(value: Any) -> bool:
    """None, False, zero and NaN mean no override; containers never do."""
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def geometry_spec_from(value: Any) -> GeometrySpec:
    """
    Classify a configured geometry value.

    Args:
        value: None (or False, 0, NaN), a property name, a function
            of the feature, or a geometry to paint as-is

    Returns:
        The matching geometry spec variant
    """
    if callable(value):
        return ComputedGeometry(value)
    if isinstance(value, str):
        return PropertyGeometry(value)
    if _is_unset(value):
        return FeatureGeometry()
    return FixedGeometry(value)
