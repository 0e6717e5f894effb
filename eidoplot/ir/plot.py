"""Plot description: borders, insets, series and axes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from eidoplot.ir.axis import Axis
from eidoplot.style.color import BLACK
from eidoplot.style.paint import Fill, Line


@dataclass(frozen=True)
class BoxBorder:
    stroke: Line = field(default_factory=lambda: Line(BLACK))


@dataclass(frozen=True)
class AxisBorder:
    stroke: Line


@dataclass(frozen=True)
class AxisArrowBorder:
    stroke: Line
    size: float
    overflow: float


Border = Union[BoxBorder, AxisBorder, AxisArrowBorder]


@dataclass(frozen=True)
class AutoInsets:
    """Insets around the data that depend on the style of series."""


@dataclass(frozen=True)
class FixedInsets:
    x: float
    y: float


Insets = Union[AutoInsets, FixedInsets]


@dataclass
class XySeries:
    """Data plotted in XY space as a line."""

    line: Line
    points: list = field(default_factory=list)


SeriesPlot = XySeries


@dataclass
class Series:
    plot: SeriesPlot
    name: Optional[str] = None


@dataclass
class Plot:
    title: Optional[str] = None
    fill: Optional[Fill] = None
    border: Optional[Border] = field(default_factory=BoxBorder)
    insets: Optional[Insets] = field(default_factory=AutoInsets)
    x_axis: Axis = field(default_factory=Axis)
    y_axis: Axis = field(default_factory=Axis)
    series: list = field(default_factory=list)