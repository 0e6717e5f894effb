"""Axis description: scale, range, ticks and label."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from eidoplot.style import defaults
from eidoplot.style.color import Color
from eidoplot.style.font import Font


@dataclass(frozen=True)
class Range:
    """Bounds of an axis in data space; a missing bound is computed from data."""

    min: Optional[float] = None
    max: Optional[float] = None


@dataclass(frozen=True)
class Scale:
    """A linear axis scale over a range."""

    range: Range = field(default_factory=Range)


@dataclass(frozen=True)
class AutoLocator:
    """Locate ticks automatically."""


@dataclass(frozen=True)
class MaxNLocator:
    """Place at most about `bins` ticks at multiples of the given steps."""

    bins: int
    steps: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(float(s) for s in self.steps))


@dataclass(frozen=True)
class PiMultipleLocator:
    """Place ticks at multiples of fractions of pi."""

    bins: int


Locator = Union[AutoLocator, MaxNLocator, PiMultipleLocator]


@dataclass(frozen=True)
class AutoFormatter:
    """Format tick labels according to the locator."""


@dataclass(frozen=True)
class PrecFormatter:
    """Format tick labels with a fixed number of decimals."""

    prec: int


Formatter = Union[AutoFormatter, PrecFormatter]


def _ticks_font() -> Font:
    return Font().with_size(defaults.TICKS_LABEL_FONT_SIZE)


@dataclass(frozen=True)
class Ticks:
    """Major ticks: where they are, how they are labelled and their style."""

    locator: Locator = field(default_factory=AutoLocator)
    formatter: Formatter = field(default_factory=AutoFormatter)
    font: Font = field(default_factory=_ticks_font)
    color: Color = defaults.TICKS_LABEL_COLOR

    def with_locator(self, locator: Locator) -> Ticks:
        return replace(self, locator=locator)

    def with_formatter(self, formatter: Formatter) -> Ticks:
        return replace(self, formatter=formatter)

    def with_font(self, font: Font) -> Ticks:
        return replace(self, font=font)

    def with_color(self, color: Color) -> Ticks:
        return replace(self, color=color)


@dataclass(frozen=True)
class MinorTicks:
    locator: Locator = field(default_factory=AutoLocator)
    color: Color = defaults.TICKS_LABEL_COLOR

    def with_locator(self, locator: Locator) -> MinorTicks:
        return replace(self, locator=locator)

    def with_color(self, color: Color) -> MinorTicks:
        return replace(self, color=color)


@dataclass
class Axis:
    scale: Scale = field(default_factory=Scale)
    label: Optional[str] = None
    ticks: Optional[Ticks] = field(default_factory=Ticks)
    minor_ticks: Optional[MinorTicks] = None