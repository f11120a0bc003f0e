"""
Style function adapter - one calling convention for every style input.

Layers accept a style function, a sequence of styles, or a single style.
to_function() turns any of them into a style function
``(feature, resolution) -> list[Style]``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from chuk_mcp_mapstyle.constants import ErrorCode, ErrorMessages
from chuk_mcp_mapstyle.errors import ContractViolation
from chuk_mcp_mapstyle.models.feature import Feature
from chuk_mcp_mapstyle.styles.style import Style

StyleFunction = Callable[..., Sequence[Style]]
StyleLike = StyleFunction | Sequence[Style] | Style


def to_function(obj: StyleLike) -> StyleFunction:
    """
    Convert a style input into a style function.

    Functions are passed through unchanged. A list or tuple of styles,
    or a single style, is wrapped in a function that ignores its
    arguments and returns the same sequence on every call.

    Args:
        obj: A style function, a sequence of styles, or a single style

    Returns:
        A style function

    Raises:
        ContractViolation: If obj is none of the accepted shapes
    """
    if callable(obj):
        return obj

    if isinstance(obj, (list, tuple)):
        if not all(isinstance(item, Style) for item in obj):
            raise ContractViolation(
                ErrorCode.EXPECTED_STYLE,
                ErrorMessages.EXPECTED_STYLE.format(type_name="a sequence with non-Style items"),
            )
        styles: Sequence[Style] = obj
    elif isinstance(obj, Style):
        styles = [obj]
    else:
        raise ContractViolation(
            ErrorCode.EXPECTED_STYLE,
            ErrorMessages.EXPECTED_STYLE.format(type_name=type(obj).__name__),
        )

    def style_function(
        feature: Feature | None = None, resolution: float | None = None
    ) -> Sequence[Style]:
        return styles

    return style_function


def resolve_styles(
    obj: StyleLike, feature: Feature, resolution: float
) -> list[tuple[Any, Style]]:
    """
    Resolve a style input for one feature.

    Returns a list of ``(geometry, style)`` pairs in paint order. Pairs
    whose geometry resolves to None are skipped.
    """
    pairs: list[tuple[Any, Style]] = []
    for style in to_function(obj)(feature, resolution) or ():
        geometry = style.geometry_function(feature)
        if geometry is None:
            continue
        pairs.append((geometry, style))
    return pairs
