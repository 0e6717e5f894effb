"""Bounds of data in view space."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPS = 1e-10


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


@dataclass
class ViewBounds:
    """A closed interval of data values; NaN bounds mean empty."""

    min: float = math.nan
    max: float = math.nan

    @classmethod
    def nan(cls) -> ViewBounds:
        return cls(math.nan, math.nan)

    @classmethod
    def coerce(cls, value) -> ViewBounds:
        """Build bounds from a single value, a (min, max) pair or bounds."""
        if isinstance(value, ViewBounds):
            return cls(value.min, value.max)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(float(value), float(value))
        if isinstance(value, tuple) and len(value) == 2:
            return cls(float(value[0]), float(value[1]))
        raise TypeError(f"cannot make view bounds from {value!r}")

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def center(self) -> float:
        return (self.min + self.max) / 2.0

    def contains(self, point: float) -> bool:
        return self.min - _EPS <= point <= self.max + _EPS

    def add_point(self, point: float) -> None:
        """Extend the bounds to include the point; NaN is ignored."""
        self.min = _fmin(self.min, point)
        self.max = _fmax(self.max, point)

    def add_bounds(self, bounds: ViewBounds) -> None:
        """Extend the bounds to include other bounds."""
        self.min = _fmin(self.min, bounds.min)
        self.max = _fmax(self.max, bounds.max)