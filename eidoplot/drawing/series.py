"""View bounds and drawing of data series."""

from __future__ import annotations

from eidoplot import geom, render
from eidoplot.data import ViewBounds
from eidoplot.drawing.scale import CoordMapXy
from eidoplot.ir.plot import Series, XySeries


def xy_view_bounds(xy: XySeries) -> tuple[ViewBounds, ViewBounds]:
    """Bounds of the x and y values of an XY series."""
    x_bounds, y_bounds = ViewBounds.nan(), ViewBounds.nan()
    for x, y in xy.points:
        x_bounds.add_point(x)
        y_bounds.add_point(y)
    return x_bounds, y_bounds


def _plot_view_bounds(series_plot) -> tuple[ViewBounds, ViewBounds]:
    if isinstance(series_plot, XySeries):
        return xy_view_bounds(series_plot)
    raise TypeError(f"unknown series plot: {series_plot!r}")


def series_view_bounds(series: Series) -> tuple[ViewBounds, ViewBounds]:
    """Bounds of the data of a series."""
    return _plot_view_bounds(series.plot)


def draw_series_plot(
    ctx: render.Surface, series_plot, rect: geom.Rect, cm: CoordMapXy
) -> None:
    """Draw a series inside the plot rectangle."""
    if isinstance(series_plot, XySeries):
        _draw_series_xy(ctx, series_plot, rect, cm)
    else:
        raise TypeError(f"unknown series plot: {series_plot!r}")


def _draw_series_xy(ctx: render.Surface, xy: XySeries, rect: geom.Rect, cm: CoordMapXy) -> None:
    builder = geom.PathBuilder()
    for index, point in enumerate(xy.points):
        x, y = cm.map_coord(point)
        x = rect.left + x
        y = rect.bottom - y
        if index == 0:
            builder.move_to(x, y)
        else:
            builder.line_to(x, y)
    ctx.draw_path(render.Path(builder.finish(), fill=None, stroke=xy.line))