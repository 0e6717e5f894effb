"""Line and fill styles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from eidoplot.style.color import Color


@dataclass(frozen=True)
class Dash:
    """Dash length and gap, relative to the line width."""

    length: float = 5.0
    gap: float = 5.0


class PatternKind(enum.Enum):
    SOLID = "solid"
    DASH = "dash"
    DOT = "dot"


@dataclass(frozen=True)
class LinePattern:
    """How a line is drawn: solid, dashed or dotted."""

    kind: PatternKind = PatternKind.SOLID
    dash: Optional[Dash] = None

    def __post_init__(self) -> None:
        if (self.kind is PatternKind.DASH) != (self.dash is not None):
            raise ValueError("a dash is required for, and only for, dashed patterns")

    @classmethod
    def solid(cls) -> LinePattern:
        return cls(PatternKind.SOLID)

    @classmethod
    def dot(cls) -> LinePattern:
        """Dotted line, equivalent to a dash of (1, 1)."""
        return cls(PatternKind.DOT)

    @classmethod
    def dashed(cls, dash: Optional[Dash] = None) -> LinePattern:
        return cls(PatternKind.DASH, dash if dash is not None else Dash())


@dataclass(frozen=True)
class Line:
    """A stroke: color, width and pattern."""

    color: Color
    width: float = 1.0
    pattern: LinePattern = field(default_factory=LinePattern.solid)

    @classmethod
    def coerce(cls, value) -> Line:
        """Build a line from a color, (color, width), or (color, width, pattern or dash)."""
        if isinstance(value, Line):
            return value
        if isinstance(value, Color):
            return cls(value)
        if isinstance(value, tuple):
            if len(value) == 2:
                return cls(value[0], float(value[1]))
            if len(value) == 3:
                color, width, pattern = value
                if isinstance(pattern, Dash):
                    pattern = LinePattern.dashed(pattern)
                if isinstance(pattern, LinePattern):
                    return cls(color, float(width), pattern)
        raise TypeError(f"cannot make a line from {value!r}")


@dataclass(frozen=True)
class Fill:
    """A solid fill color."""

    color: Color

    @classmethod
    def coerce(cls, value) -> Fill:
        if isinstance(value, Fill):
            return value
        if isinstance(value, Color):
            return cls(value)
        raise TypeError(f"cannot make a fill from {value!r}")