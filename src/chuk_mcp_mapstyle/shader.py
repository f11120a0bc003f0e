"""
Shader sources - a GLSL source string tagged with its pipeline stage.

Compilation happens in the rendering backend; this is only the value
handed to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ShaderStage(IntEnum):
    """Shader stage, using the WebGL enum values."""

    FRAGMENT = 0x8B30
    VERTEX = 0x8B31


@dataclass(frozen=True)
class ShaderSource:
    """GLSL source for one shader stage."""

    source: str
    stage: ShaderStage

    @classmethod
    def vertex(cls, source: str) -> ShaderSource:
        return cls(source, ShaderStage.VERTEX)

    @classmethod
    def fragment(cls, source: str) -> ShaderSource:
        return cls(source, ShaderStage.FRAGMENT)
