"""
Style descriptor - how to paint one resolved geometry.

A Style bundles:
- a geometry override (which geometry to paint for a feature)
- optional fill, stroke, image and text sub-styles
- an optional custom renderer
- an optional z-index paint-order key

Changes made through the setters only show once the feature or layer
using the style is painted again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from chuk_mcp_mapstyle.styles.geometry import (
    ComputedGeometry,
    FeatureGeometry,
    GeometryFunction,
    GeometrySpec,
    default_geometry_function,
    geometry_spec_from,
)

logger = logging.getLogger(__name__)

# Custom paint callback: (coordinates, state) -> None
Renderer = Callable[..., Any]

_CONFIG_KEYS = frozenset({"geometry", "fill", "image", "stroke", "text", "renderer", "z_index"})


def _clone_or_drop(value: Any, channel: str) -> Any:
    """Clone a sub-style; an uncopyable one is dropped, never shared."""
    if value is None:
        return None
    clone = getattr(value, "clone", None)
    if not callable(clone):
        logger.warning(
            "Dropping %s sub-style on clone: %s has no clone()",
            channel,
            type(value).__name__,
        )
        return None
    return clone()


class Style:
    """
    Container for feature rendering styles.

    When ``renderer`` is set, the backend must call it instead of
    drawing ``fill``, ``stroke`` and ``image`` itself.
    """

    def __init__(
        self,
        geometry: Any = None,
        fill: Any = None,
        image: Any = None,
        stroke: Any = None,
        text: Any = None,
        renderer: Renderer | None = None,
        z_index: float | None = None,
    ):
        """
        Initialize a style.

        Args:
            geometry: Property name, geometry, or function of the feature
                returning the geometry to paint instead of the feature's own
            fill: Fill style
            image: Image style (e.g. a CircleStyle marker)
            stroke: Stroke style
            text: Text style
            renderer: Custom renderer; replaces fill, stroke and image drawing
            z_index: Paint-order key, higher paints later
        """
        self._geometry: Any = None
        self._geometry_spec: GeometrySpec = FeatureGeometry()
        self._geometry_function: GeometryFunction = default_geometry_function
        if geometry is not None:
            self.geometry = geometry

        self.fill = fill
        self.image = image
        self.stroke = stroke
        self.text = text
        self.renderer = renderer
        self.z_index = z_index

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Style:
        """
        Create a style from a configuration record.

        Accepts ``zIndex`` as an alias of ``z_index``. Unknown keys are ignored.
        """
        options = {key: value for key, value in config.items() if key in _CONFIG_KEYS}
        if "zIndex" in config and "z_index" not in options:
            options["z_index"] = config["zIndex"]
        return cls(**options)

    @property
    def geometry(self) -> Any:
        """The configured geometry override, exactly as it was set."""
        return self._geometry

    @geometry.setter
    def geometry(self, value: Any) -> None:
        spec = geometry_spec_from(value)
        if isinstance(spec, FeatureGeometry):
            function = default_geometry_function
        elif isinstance(spec, ComputedGeometry):
            function = spec.function
        else:
            function = spec.resolve
        self._geometry_spec = spec
        self._geometry_function = function
        self._geometry = value

    @property
    def geometry_spec(self) -> GeometrySpec:
        """The classified geometry override."""
        return self._geometry_spec

    @property
    def geometry_function(self) -> GeometryFunction:
        """Function called with a feature, returning the geometry to paint."""
        return self._geometry_function

    @property
    def fill(self) -> Any:
        return self._fill

    @fill.setter
    def fill(self, value: Any) -> None:
        self._fill = value

    @property
    def image(self) -> Any:
        return self._image

    @image.setter
    def image(self, value: Any) -> None:
        self._image = value

    @property
    def stroke(self) -> Any:
        return self._stroke

    @stroke.setter
    def stroke(self, value: Any) -> None:
        self._stroke = value

    @property
    def text(self) -> Any:
        return self._text

    @text.setter
    def text(self, value: Any) -> None:
        self._text = value

    @property
    def renderer(self) -> Renderer | None:
        """Custom renderer, or None to draw fill/stroke/image normally."""
        return self._renderer

    @renderer.setter
    def renderer(self, value: Renderer | None) -> None:
        self._renderer = value

    @property
    def z_index(self) -> float | None:
        return self._z_index

    @z_index.setter
    def z_index(self, value: float | None) -> None:
        self._z_index = value

    def clone(self) -> Style:
        """
        Clone the style.

        Sub-styles are cloned. A geometry exposing clone() is cloned,
        any other geometry value is reused. The custom renderer is not
        carried over.
        """
        geometry = self._geometry
        geometry_clone = getattr(geometry, "clone", None)
        if callable(geometry_clone):
            geometry = geometry_clone()

        return Style(
            geometry=geometry,
            fill=_clone_or_drop(self._fill, "fill"),
            image=_clone_or_drop(self._image, "image"),
            stroke=_clone_or_drop(self._stroke, "stroke"),
            text=_clone_or_drop(self._text, "text"),
            z_index=self._z_index,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""

        def describe(value: Any) -> Any:
            if value is None:
                return None
            if hasattr(value, "to_dict"):
                return value.to_dict()
            return repr(value)

        z_index: Any = self._z_index
        if z_index is not None and z_index in (float("inf"), float("-inf")):
            z_index = "Infinity" if z_index > 0 else "-Infinity"

        return {
            "geometry": self._geometry_spec.to_dict(),
            "fill": describe(self._fill),
            "stroke": describe(self._stroke),
            "image": describe(self._image),
            "text": describe(self._text),
            "z_index": z_index,
            "has_renderer": self._renderer is not None,
        }

    def __repr__(self) -> str:
        channels = [
            name
            for name, value in (
                ("fill", self._fill),
                ("stroke", self._stroke),
                ("image", self._image),
                ("text", self._text),
                ("renderer", self._renderer),
            )
            if value is not None
        ]
        return f"Style({', '.join(channels) or 'empty'}, z_index={self._z_index!r})"
