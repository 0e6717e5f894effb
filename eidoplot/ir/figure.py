"""Figure description: size, plots, title, fill and layout."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from eidoplot import geom
from eidoplot.ir.plot import Plot
from eidoplot.ir.text import Text
from eidoplot.style import defaults
from eidoplot.style.color import WHITE
from eidoplot.style.paint import Fill


@dataclass
class Subplots:
    rows: int
    cols: int
    space: float
    plots: list = field(default_factory=list)


Plots = Union[Plot, Subplots]


@dataclass(frozen=True)
class Layout:
    padding: Optional[geom.Padding] = defaults.FIG_PADDING

    def __post_init__(self) -> None:
        if self.padding is not None:
            object.__setattr__(self, "padding", geom.Padding.coerce(self.padding))

    @classmethod
    def empty(cls) -> Layout:
        """A layout without padding."""
        return cls(None)

    def with_padding(self, padding) -> Layout:
        return replace(self, padding=padding)


@dataclass(frozen=True)
class Figure:
    plots: Plots
    size: geom.Size = defaults.FIG_SIZE
    title: Optional[Text] = None
    fill: Optional[Fill] = Fill(WHITE)
    layout: Optional[Layout] = None

    def __post_init__(self) -> None:
        if isinstance(self.title, str):
            object.__setattr__(self, "title", Text(self.title))
        if self.fill is not None:
            object.__setattr__(self, "fill", Fill.coerce(self.fill))

    def with_size(self, size: geom.Size) -> Figure:
        return replace(self, size=size)

    def with_title(self, title) -> Figure:
        return replace(self, title=title)

    def with_fill(self, fill) -> Figure:
        return replace(self, fill=fill)

    def with_layout(self, layout: Optional[Layout]) -> Figure:
        return replace(self, layout=layout)