"""
Style factories - the built-in appearances.

- RenderContext.default_style: fallback for features and layers without
  a style. Built once per context, then the same objects are returned
  on every call.
- create_editing_style: per-geometry-type highlight used while a feature
  is being edited. Built fresh on every call.

Both hand out shared objects. The default style's fill and stroke are
used by its marker as well as by the style itself, and several editing
geometry types point at the same list. Treat the results as read-only:
mutating them changes what every other holder sees.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Any

from chuk_mcp_mapstyle.constants import (
    DEFAULT_CIRCLE_RADIUS,
    DEFAULT_FILL_COLOR,
    DEFAULT_STROKE_COLOR,
    DEFAULT_STROKE_WIDTH,
    EDITING_BASE_WIDTH,
    EDITING_BLUE,
    EDITING_FILL_ALPHA,
    EDITING_WHITE,
    GeometryType,
)
from chuk_mcp_mapstyle.models.substyles import CircleStyle, Fill, Stroke
from chuk_mcp_mapstyle.styles.style import Style

logger = logging.getLogger(__name__)


class RenderContext:
    """
    Owns state shared across paint passes.

    Currently that is the default style, built lazily on first use.
    Initialization is guarded so concurrent first calls build it once.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._default_styles: list[Style] | None = None

    def default_style(self, feature: Any = None, resolution: float | None = None) -> list[Style]:
        """
        Get the default style.

        The arguments are accepted so this method is itself a style
        function; they do not affect the result.

        Returns:
            The cached one-element style list (same object every call)
        """
        styles = self._default_styles
        if styles is None:
            with self._lock:
                if self._default_styles is None:
                    self._default_styles = self._build_default_styles()
                    logger.debug("Default style initialized")
                styles = self._default_styles
        return styles

    def reset(self) -> None:
        """Drop the cached default style; the next call rebuilds it."""
        with self._lock:
            self._default_styles = None

    @staticmethod
    def _build_default_styles() -> list[Style]:
        fill = Fill(color=DEFAULT_FILL_COLOR)
        stroke = Stroke(color=DEFAULT_STROKE_COLOR, width=DEFAULT_STROKE_WIDTH)
        return [
            Style(
                image=CircleStyle(fill=fill, stroke=stroke, radius=DEFAULT_CIRCLE_RADIUS),
                fill=fill,
                stroke=stroke,
            )
        ]


def create_editing_style() -> dict[GeometryType, list[Style]]:
    """
    Create the styles used to highlight features being edited.

    Every call returns new lists and new Style objects. Within one
    result, multi-geometry types share the list of their single
    counterpart, and composite types concatenate the simple ones.

    Returns:
        Mapping of geometry type to styles in paint order
    """
    white = list(EDITING_WHITE)
    blue = list(EDITING_BLUE)
    width = EDITING_BASE_WIDTH

    styles: dict[GeometryType, list[Style]] = {}

    styles[GeometryType.POLYGON] = [
        Style(fill=Fill(color=[255, 255, 255, EDITING_FILL_ALPHA])),
    ]
    styles[GeometryType.MULTI_POLYGON] = styles[GeometryType.POLYGON]

    # White casing underneath, blue line on top
    styles[GeometryType.LINE_STRING] = [
        Style(stroke=Stroke(color=white, width=width + 2)),
        Style(stroke=Stroke(color=blue, width=width)),
    ]
    styles[GeometryType.MULTI_LINE_STRING] = styles[GeometryType.LINE_STRING]

    styles[GeometryType.CIRCLE] = (
        styles[GeometryType.POLYGON] + styles[GeometryType.LINE_STRING]
    )

    styles[GeometryType.POINT] = [
        Style(
            image=CircleStyle(
                radius=width * 2,
                fill=Fill(color=blue),
                stroke=Stroke(color=white, width=width / 2),
            ),
            z_index=math.inf,
        ),
    ]
    styles[GeometryType.MULTI_POINT] = styles[GeometryType.POINT]

    styles[GeometryType.GEOMETRY_COLLECTION] = (
        styles[GeometryType.POLYGON]
        + styles[GeometryType.LINE_STRING]
        + styles[GeometryType.POINT]
    )

    return styles
