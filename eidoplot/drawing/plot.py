"""Layout and drawing of a single plot: axes, ticks, series and border."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from eidoplot import geom, render
from eidoplot.data import ViewBounds
from eidoplot.drawing.ctx import Ctx
from eidoplot.drawing.scale import CoordMap, CoordMapXy, map_scale_coord
from eidoplot.drawing.series import draw_series_plot, series_view_bounds
from eidoplot.drawing.ticks import label_formatter, locate
from eidoplot.ir.axis import Axis, Ticks
from eidoplot.ir.plot import (
    AutoInsets,
    AxisArrowBorder,
    AxisBorder,
    BoxBorder,
    FixedInsets,
    Plot,
)
from eidoplot.style import defaults
from eidoplot.style.color import BLACK, Color
from eidoplot.style.font import Font
from eidoplot.style.paint import Fill, Line

_PLOT_PADDING = geom.Padding.even(5.0)
_AXIS_LABEL_MARGIN = 4.0
_AXIS_LABEL_FONT_FAMILY = defaults.FONT_FAMILY
_AXIS_LABEL_FONT_SIZE = 14.0
_AXIS_LABEL_COLOR = BLACK
_AXIS_ANNOT_FONT_FAMILY = "Noto Sans Math"

_TICK_SIZE = 4.0
_TICK_COLOR = BLACK
_TICK_LABEL_MARGIN = 4.0


def plot_view_bounds(plot: Plot) -> tuple[ViewBounds, ViewBounds]:
    """Bounds of the x and y data over all series of the plot."""
    x_bounds, y_bounds = ViewBounds.nan(), ViewBounds.nan()
    for series in plot.series:
        x, y = series_view_bounds(series)
        x_bounds.add_bounds(x)
        y_bounds.add_bounds(y)
    return x_bounds, y_bounds


@dataclass
class _TickMarks:
    locs: list
    lbls: list
    annot: Optional[str]
    font: Font
    color: Color


@dataclass
class _Axis(CoordMap):
    ortho_sz: float
    coord_map: CoordMap
    ticks: Optional[_TickMarks]
    label: Optional[str]

    def map_coord(self, x: float) -> float:
        return self.coord_map.map_coord(x)

    def view_bounds(self) -> ViewBounds:
        return self.coord_map.view_bounds()


@dataclass
class _PlotAxes:
    x: _Axis
    y: _Axis


def _plot_insets(plot: Plot) -> tuple[float, float]:
    insets = plot.insets
    if isinstance(insets, FixedInsets):
        return insets.x, insets.y
    if isinstance(insets, AutoInsets):
        return defaults.PLOT_XY_AUTO_INSETS
    return 0.0, 0.0


def _setup_ticks(ticks: Ticks, vb: ViewBounds) -> _TickMarks:
    locs = locate(ticks.locator, vb)
    formatter = label_formatter(ticks, vb)
    return _TickMarks(
        locs=locs,
        lbls=[formatter.format_label(loc) for loc in locs],
        annot=formatter.axis_annotation(),
        font=ticks.font,
        color=ticks.color,
    )


def calculate_x_axis_height(x_axis: Axis) -> float:
    """Height taken below the plot by the x axis ticks and label."""
    height = 0.0
    if x_axis.ticks is not None:
        height += _TICK_SIZE + _TICK_LABEL_MARGIN + x_axis.ticks.font.size
    if x_axis.label is not None:
        height += 2.0 * _AXIS_LABEL_MARGIN + _AXIS_LABEL_FONT_SIZE
    return height


def _calculate_y_axis_width(ctx: Ctx, y_axis: Axis, y_ticks: Optional[_TickMarks]) -> float:
    width = 0.0
    if y_axis.label is not None:
        width += 2.0 * _AXIS_LABEL_MARGIN + _AXIS_LABEL_FONT_SIZE
    if y_ticks is not None:
        max_w = ctx.max_labels_width(y_ticks.font, y_ticks.lbls)
        width += _TICK_SIZE + _TICK_LABEL_MARGIN + max_w
    return width


def _setup_plot_axes(ctx: Ctx, plot: Plot, rect: geom.Rect) -> _PlotAxes:
    # The x axis height depends only on font sizes, while the y axis width
    # depends on the tick labels, which depend on the space left by the x axis.
    x_vb, y_vb = plot_view_bounds(plot)
    x_inset, y_inset = _plot_insets(plot)

    x_height = calculate_x_axis_height(plot.x_axis)
    rect = rect.shifted_bottom_side(-x_height)

    y_cm = map_scale_coord(plot.y_axis.scale, rect.height, y_vb, y_inset)
    y_ticks = None
    if plot.y_axis.ticks is not None:
        y_ticks = _setup_ticks(plot.y_axis.ticks, y_cm.view_bounds())
    y_axis = _Axis(
        ortho_sz=_calculate_y_axis_width(ctx, plot.y_axis, y_ticks),
        coord_map=y_cm,
        ticks=y_ticks,
        label=plot.y_axis.label,
    )
    rect = rect.shifted_left_side(y_axis.ortho_sz)

    x_cm = map_scale_coord(plot.x_axis.scale, rect.width, x_vb, x_inset)
    x_ticks = None
    if plot.x_axis.ticks is not None:
        x_ticks = _setup_ticks(plot.x_axis.ticks, x_cm.view_bounds())
    x_axis = _Axis(ortho_sz=x_height, coord_map=x_cm, ticks=x_ticks, label=plot.x_axis.label)

    return _PlotAxes(x=x_axis, y=y_axis)


def draw_plot(ctx: Ctx, plot: Plot, rect: geom.Rect) -> None:
    """Draw a plot with its axes inside the given rectangle."""
    rect = rect.pad(_PLOT_PADDING)
    axes = _setup_plot_axes(ctx, plot, rect)

    rect = rect.shifted_left_side(axes.y.ortho_sz).shifted_bottom_side(-axes.x.ortho_sz)

    _draw_plot_background(ctx, plot, rect)
    _draw_plot_series(ctx, plot, rect, axes)
    _draw_x_axis(ctx, axes.x, rect)
    _draw_y_axis(ctx, axes.y, rect)
    _draw_plot_border(ctx, plot.border, rect)


def _draw_plot_background(ctx: Ctx, plot: Plot, rect: geom.Rect) -> None:
    if plot.fill is not None:
        ctx.draw_rect(render.Rect(rect, fill=plot.fill))


def _draw_plot_border(ctx: Ctx, border, rect: geom.Rect) -> None:
    if border is None:
        return
    if isinstance(border, BoxBorder):
        ctx.draw_rect(render.Rect(rect, stroke=border.stroke))
    elif isinstance(border, AxisBorder):
        builder = geom.PathBuilder()
        builder.move_to(rect.left, rect.top)
        builder.line_to(rect.left, rect.bottom)
        builder.line_to(rect.right, rect.bottom)
        ctx.draw_path(render.Path(builder.finish(), stroke=border.stroke))
    elif isinstance(border, AxisArrowBorder):
        raise ValueError("axis arrow borders cannot be drawn")
    else:
        raise TypeError(f"unknown plot border: {border!r}")


def _draw_plot_series(ctx: Ctx, plot: Plot, rect: geom.Rect, axes: _PlotAxes) -> None:
    ctx.push_clip(render.Clip(rect.to_path()))
    cm = CoordMapXy(axes.x, axes.y)
    for series in plot.series:
        draw_series_plot(ctx, series.plot, rect, cm)
    ctx.pop_clip()


def _axis_label_font() -> Font:
    return Font(family=_AXIS_LABEL_FONT_FAMILY, size=_AXIS_LABEL_FONT_SIZE)


def _draw_x_axis(ctx: Ctx, x_axis: _Axis, rect: geom.Rect) -> None:
    label_y = rect.bottom + _AXIS_LABEL_MARGIN
    if x_axis.ticks is not None:
        _draw_x_ticks(ctx, rect, x_axis.ticks, x_axis)
        label_y += _TICK_SIZE + _TICK_LABEL_MARGIN + x_axis.ticks.font.size
    if x_axis.label is not None:
        anchor = render.TextAnchor(
            geom.Point(rect.center_x, label_y),
            render.TextAlign.CENTER,
            render.TextBaseline.HANGING,
        )
        ctx.draw_text(
            render.Text(x_axis.label, _axis_label_font(), Fill(_AXIS_LABEL_COLOR), anchor)
        )


def _draw_x_ticks(ctx: Ctx, rect: geom.Rect, x_ticks: _TickMarks, x_cm: CoordMap) -> None:
    transform = geom.Transform.from_translate(rect.left, rect.bottom)
    _draw_ticks_path(ctx, x_ticks.locs, x_cm, transform)

    fill = Fill(x_ticks.color)
    label_top = rect.bottom + _TICK_SIZE + _TICK_LABEL_MARGIN
    for xt, lbl in zip(x_ticks.locs, x_ticks.lbls):
        x = rect.left + x_cm.map_coord(xt)
        anchor = render.TextAnchor(
            geom.Point(x, label_top), render.TextAlign.CENTER, render.TextBaseline.HANGING
        )
        ctx.draw_text(render.Text(lbl, x_ticks.font, fill, anchor))

    if x_ticks.annot is not None:
        font = x_ticks.font.with_family(_AXIS_ANNOT_FONT_FAMILY)
        anchor = render.TextAnchor(
            geom.Point(rect.right, label_top + font.size),
            render.TextAlign.END,
            render.TextBaseline.HANGING,
        )
        ctx.draw_text(render.Text(x_ticks.annot, font, fill, anchor))


def _draw_y_axis(ctx: Ctx, y_axis: _Axis, rect: geom.Rect) -> None:
    if y_axis.ticks is not None:
        _draw_y_ticks(ctx, rect, y_axis.ticks, y_axis)
    if y_axis.label is not None:
        # drawn at the origin, then moved into place and rotated
        anchor = render.TextAnchor(
            geom.Point.ORIGIN, render.TextAlign.CENTER, render.TextBaseline.HANGING
        )
        tx = rect.left - y_axis.ortho_sz + _AXIS_LABEL_MARGIN
        ty = rect.center_y
        transform = geom.Transform.from_translate(tx, ty).pre_rotate(90.0)
        ctx.draw_text(
            render.Text(
                y_axis.label,
                _axis_label_font(),
                Fill(_AXIS_LABEL_COLOR),
                anchor,
                transform=transform,
            )
        )


def _draw_y_ticks(ctx: Ctx, rect: geom.Rect, y_ticks: _TickMarks, y_cm: CoordMap) -> None:
    transform = geom.Transform.from_translate(rect.left, rect.bottom).pre_rotate(90.0)
    _draw_ticks_path(ctx, y_ticks.locs, y_cm, transform)

    fill = Fill(y_ticks.color)
    y_vb = y_cm.view_bounds()
    x = rect.left - _TICK_SIZE - _TICK_LABEL_MARGIN
    for yt, lbl in zip(y_ticks.locs, y_ticks.lbls):
        if not y_vb.contains(yt):
            continue
        y = rect.bottom - y_cm.map_coord(yt)
        anchor = render.TextAnchor(
            geom.Point(x, y), render.TextAlign.END, render.TextBaseline.CENTER
        )
        ctx.draw_text(render.Text(lbl, y_ticks.font, fill, anchor))


def _draw_ticks_path(
    ctx: Ctx, ticks: Sequence[float], cm: CoordMap, transform: geom.Transform
) -> None:
    ctx.draw_path(
        render.Path(ticks_path(ticks, cm), stroke=Line(_TICK_COLOR), transform=transform)
    )


def ticks_path(ticks: Sequence[float], cm: CoordMap) -> geom.Path:
    """Tick marks along the x direction; the y axis draws the same path rotated."""
    builder = geom.PathBuilder()
    vb = cm.view_bounds()
    for tick in ticks:
        if not vb.contains(tick):
            continue
        x = cm.map_coord(tick)
        builder.move_to(x, -_TICK_SIZE)
        builder.line_to(x, _TICK_SIZE)
    return builder.finish()