"""Drawing of a whole figure: background, title and plots."""

from __future__ import annotations

from typing import Optional

from eidoplot import geom, render
from eidoplot.drawing.ctx import Ctx, Options
from eidoplot.drawing.plot import draw_plot
from eidoplot.fonts import bundled_font_db
from eidoplot.ir.figure import Figure, Layout, Subplots
from eidoplot.style import defaults
from eidoplot.style.color import BLACK
from eidoplot.style.font import Font
from eidoplot.style.paint import Fill

_FIG_TITLE_MARGIN = 6.0
_FIG_TITLE_COLOR = BLACK


def draw(fig: Figure, surface: render.Surface, options: Optional[Options] = None) -> None:
    """Draw a figure on a surface, using the bundled fonts unless others are given."""
    fontdb = options.fontdb if options is not None else None
    if fontdb is None:
        fontdb = bundled_font_db()
    draw_figure(Ctx(surface, fontdb), fig)


def draw_figure(ctx: Ctx, fig: Figure) -> None:
    """Draw a figure through a drawing context."""
    ctx.prepare(fig.size)
    if fig.fill is not None:
        ctx.fill(fig.fill)

    rect = geom.Rect.from_ps(geom.Point.ORIGIN, fig.size)
    layout = fig.layout if fig.layout is not None else Layout()
    if layout.padding is not None:
        rect = rect.pad(layout.padding)

    if fig.title is not None:
        title = fig.title
        if title.font is None:
            title = title.with_font(
                Font(family=defaults.TITLE_FONT_FAMILY, size=defaults.TITLE_FONT_SIZE)
            )
        title_rect = geom.Rect(
            rect.x, rect.y, rect.width, title.font.size + 2.0 * _FIG_TITLE_MARGIN
        )
        ctx.draw_text(
            render.Text(
                text=title.text,
                font=title.font,
                fill=Fill(_FIG_TITLE_COLOR),
                anchor=render.TextAnchor(
                    title_rect.center, render.TextAlign.CENTER, render.TextBaseline.CENTER
                ),
            )
        )
        rect = rect.shifted_top_side(title_rect.height)

    _draw_figure_plots(ctx, fig.plots, rect)


def _draw_figure_plots(ctx: Ctx, plots, rect: geom.Rect) -> None:
    if not isinstance(plots, Subplots):
        draw_plot(ctx, plots, rect)
        return
    w = (rect.width - plots.space * (plots.cols - 1)) / plots.cols
    h = (rect.height - plots.space * (plots.rows - 1)) / plots.rows
    y = rect.y
    for c in range(plots.cols):
        x = rect.x
        for r in range(plots.rows):
            plot = plots.plots[r * plots.cols + c]
            draw_plot(ctx, plot, geom.Rect(x, y, w, h))
            x += w + plots.space
        y += h + plots.space