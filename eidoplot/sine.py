"""Plot a sine wave and save it as PNG and/or SVG."""

from __future__ import annotations

import math
import sys
from typing import Optional, Sequence

from eidoplot.drawing.ctx import Options
from eidoplot.drawing.figure import draw
from eidoplot.fonts import FontDatabase, bundled_font_db
from eidoplot.ir.axis import Axis, PiMultipleLocator, Ticks
from eidoplot.ir.figure import Figure
from eidoplot.ir.plot import Plot, Series, XySeries
from eidoplot.ir.text import Text
from eidoplot.pxl import PxlSurface
from eidoplot.style.color import BLUE
from eidoplot.style.paint import Line, LinePattern
from eidoplot.svg import SvgSurface


def build_figure() -> Figure:
    """A figure with one period of y = sin(x)."""
    points = [(t * math.pi / 180.0, math.sin(t * math.pi / 180.0)) for t in range(361)]
    x_axis = Axis(label="x", ticks=Ticks(locator=PiMultipleLocator(bins=8)))
    y_axis = Axis(label="y")
    series = Series(
        name="y=sin(x)",
        plot=XySeries(line=Line(BLUE, 3.0, LinePattern.solid()), points=points),
    )
    plot = Plot(title=None, x_axis=x_axis, y_axis=y_axis, series=[series])
    return Figure(plot).with_title(Text.from_str("Sine wave"))


def write_svg(fig: Figure, path="plot.svg") -> None:
    surface = SvgSurface(800, 600)
    draw(fig, surface, Options())
    surface.save(path)


def write_png(fig: Figure, path="plot.png", fontdb: Optional[FontDatabase] = None) -> None:
    if fontdb is None:
        fontdb = bundled_font_db()
    surface = PxlSurface(1600, 1200, fontdb)
    draw(fig, surface, Options(fontdb=fontdb))
    surface.save(path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write plot.png and/or plot.svg as asked by the arguments; PNG by default."""
    args = sys.argv[1:] if argv is None else list(argv)
    fig = build_figure()
    fontdb = bundled_font_db()
    written = False
    for arg in args:
        if arg == "png":
            write_png(fig, "plot.png", fontdb)
            written = True
        elif arg == "svg":
            write_svg(fig, "plot.svg")
            written = True
    if not written:
        write_png(fig, "plot.png", fontdb)
    return 0


if __name__ == "__main__":
    sys.exit(main())