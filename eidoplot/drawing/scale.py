"""Mapping between data space and surface space."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass

from eidoplot.data import ViewBounds
from eidoplot.ir.axis import Scale


class CoordMap(abc.ABC):
    """Maps data coordinates to surface space, starting at zero for the lowest shown value."""

    @abc.abstractmethod
    def map_coord(self, x: float) -> float:
        """Map a data value to a surface coordinate."""

    @abc.abstractmethod
    def view_bounds(self) -> ViewBounds:
        """The data bounds shown by this map."""


def _ratio(num: float, den: float) -> float:
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num)
    return num / den


@dataclass
class LinCoordMap(CoordMap):
    """Linear mapping of view bounds onto [offset, offset + scale]."""

    offset: float
    scale: float
    vb: ViewBounds

    def map_coord(self, x: float) -> float:
        return _ratio(x - self.vb.min, self.vb.span) * self.scale + self.offset

    def view_bounds(self) -> ViewBounds:
        return self.vb


@dataclass
class CoordMapXy:
    """A pair of coordinate maps for both axes."""

    x: CoordMap
    y: CoordMap

    def map_coord(self, dp) -> tuple[float, float]:
        return self.x.map_coord(dp[0]), self.y.map_coord(dp[1])


def map_scale_coord(
    scale: Scale, mesh_size: float, data_bounds: ViewBounds, insets: float
) -> CoordMap:
    """Build the coordinate map of an axis scale over the given surface length."""
    rng = scale.range
    if rng.min is None and rng.max is None:
        return LinCoordMap(insets, mesh_size - 2.0 * insets, ViewBounds.coerce(data_bounds))
    if rng.max is None:
        return LinCoordMap(0.0, mesh_size - insets, ViewBounds(rng.min, data_bounds.max))
    if rng.min is None:
        return LinCoordMap(insets, mesh_size - insets, ViewBounds(data_bounds.min, rng.max))
    return LinCoordMap(0.0, mesh_size, ViewBounds(rng.min, rng.max))