import math

import pytest

from eidoplot import geom, render
from eidoplot.data import ViewBounds
from eidoplot.drawing.ctx import Ctx
from eidoplot.drawing.plot import (
    calculate_x_axis_height,
    draw_plot,
    plot_view_bounds,
    ticks_path,
)
from eidoplot.drawing.scale import LinCoordMap
from eidoplot.fonts import FontDatabase
from eidoplot.ir.axis import Axis, PiMultipleLocator, Ticks
from eidoplot.ir.plot import AxisArrowBorder, AxisBorder, Plot, Series, XySeries
from eidoplot.style.color import BLACK, BLUE, RED
from eidoplot.style.font import Font
from eidoplot.style.paint import Fill, Line


class Recorder(render.Surface):
    def __init__(self):
        self.calls = []

    def prepare(self, size):
        self.calls.append(("prepare", size))

    def fill(self, fill):
        self.calls.append(("fill", fill))

    def draw_rect(self, rect):
        self.calls.append(("draw_rect", rect))

    def draw_path(self, path):
        self.calls.append(("draw_path", path))

    def draw_text(self, text):
        self.calls.append(("draw_text", text))

    def push_clip(self, clip):
        self.calls.append(("push_clip", clip))

    def pop_clip(self):
        self.calls.append(("pop_clip", None))


SERIES_LINE = Line(BLUE, 2.0)


def _sine_points():
    return [(t / 10.0, math.sin(t / 10.0)) for t in range(0, 63)]


def _series(points, line=SERIES_LINE):
    return Series(XySeries(line, points))


def _draw(plot, rect=geom.Rect(0.0, 0.0, 400.0, 300.0)):
    rec = Recorder()
    draw_plot(Ctx(rec, FontDatabase()), plot, rect)
    return rec.calls


def _of(calls, name):
    return [arg for n, arg in calls if n == name]


def _coords(path):
    return [(s.x, s.y) for s in path if not isinstance(s, geom.Close)]


def _bounds(path):
    pts = _coords(path)
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return min(xs), min(ys), max(xs), max(ys)


def test_plot_view_bounds_merges_series():
    plot = Plot(series=[_series([(0.0, 1.0), (2.0, 3.0)]), _series([(-1.0, 5.0), (1.0, -2.0)])])
    x, y = plot_view_bounds(plot)
    assert (x.min, x.max) == (-1.0, 2.0)
    assert (y.min, y.max) == (-2.0, 5.0)


def test_plot_view_bounds_empty_is_nan():
    x, y = plot_view_bounds(Plot())
    assert [math.isnan(v) for v in (x.min, x.max, y.min, y.max)] == [True] * 4


def test_x_axis_height_without_ticks_or_label():
    assert calculate_x_axis_height(Axis(ticks=None)) == 0.0


def test_x_axis_height_label_and_ticks_add_up():
    both = calculate_x_axis_height(Axis(label="x"))
    ticks_only = calculate_x_axis_height(Axis())
    label_only = calculate_x_axis_height(Axis(label="x", ticks=None))
    assert label_only > 0
    assert both == pytest.approx(ticks_only + label_only)


def test_x_axis_height_follows_tick_font():
    small = calculate_x_axis_height(Axis())
    big = calculate_x_axis_height(Axis(ticks=Ticks().with_font(Font(size=20.0))))
    assert big - small == pytest.approx(20.0 - Ticks().font.size)


def test_ticks_path_skips_hidden_ticks():
    cm = LinCoordMap(0.0, 100.0, ViewBounds(0.0, 10.0))
    path = ticks_path([0.0, 5.0, 10.0, 20.0], cm)
    moves = [s for s in path if isinstance(s, geom.MoveTo)]
    lines = [s for s in path if isinstance(s, geom.LineTo)]
    assert len(moves) == 3 and len(lines) == 3
    assert [m.x for m in moves] == [cm.map_coord(t) for t in (0.0, 5.0, 10.0)]
    for m, ln in zip(moves, lines):
        assert m.x == ln.x
        assert m.y == -ln.y
        assert ln.y > 0


def test_ticks_path_without_visible_ticks_raises():
    cm = LinCoordMap(0.0, 100.0, ViewBounds(0.0, 10.0))
    with pytest.raises(ValueError):
        ticks_path([50.0], cm)


def test_draw_plot_clips_series():
    plot = Plot(x_axis=Axis(label="x"), y_axis=Axis(label="y"), series=[_series(_sine_points())])
    calls = _draw(plot)
    names = [n for n, _ in calls]
    assert names.count("push_clip") == 1 and names.count("pop_clip") == 1
    series_idx = next(
        i for i, (n, a) in enumerate(calls) if n == "draw_path" and a.stroke == SERIES_LINE
    )
    assert names.index("push_clip") < series_idx < names.index("pop_clip")

    clip = _of(calls, "push_clip")[0]
    left, top, right, bottom = _bounds(clip.path)
    assert 0.0 <= left < right <= 400.0
    assert 0.0 <= top < bottom <= 300.0
    for x, y in _coords(calls[series_idx][1].path):
        assert left <= x <= right
        assert top <= y <= bottom


def test_draw_plot_box_border_matches_clip():
    calls = _draw(Plot(series=[_series(_sine_points())]))
    name, border = calls[-1]
    assert name == "draw_rect"
    assert border.stroke == Line(BLACK)
    assert border.fill is None
    left, top, right, bottom = _bounds(_of(calls, "push_clip")[0].path)
    assert border.rect.left == pytest.approx(left)
    assert border.rect.top == pytest.approx(top)
    assert border.rect.right == pytest.approx(right)
    assert border.rect.bottom == pytest.approx(bottom)


def test_draw_plot_axis_labels():
    plot = Plot(x_axis=Axis(label="x"), y_axis=Axis(label="y"), series=[_series(_sine_points())])
    texts = {t.text: t for t in _of(_draw(plot), "draw_text")}
    assert texts["x"].transform is None
    assert texts["x"].anchor.baseline is render.TextBaseline.HANGING
    y_transform = texts["y"].transform
    assert abs(y_transform.sx) < 1e-9
    assert y_transform.ty == pytest.approx(texts["x"].anchor.pos.y, rel=1) or y_transform.ty > 0


def test_axis_border_draws_open_path():
    plot = Plot(border=AxisBorder(Line(RED)), series=[_series(_sine_points())])
    paths = [p for p in _of(_draw(plot), "draw_path") if p.stroke == Line(RED)]
    assert len(paths) == 1
    segments = list(paths[0].path)
    assert len(segments) == 3
    assert isinstance(segments[0], geom.MoveTo)
    assert not any(isinstance(s, geom.Close) for s in segments)


def test_axis_arrow_border_raises():
    border = AxisArrowBorder(Line(BLACK), 5.0, 2.0)
    with pytest.raises(ValueError):
        _draw(Plot(border=border, series=[_series(_sine_points())]))


def test_plot_fill_drawn_before_series():
    calls = _draw(Plot(fill=Fill(RED), series=[_series(_sine_points())]))
    names = [n for n, _ in calls]
    bg_idx = next(i for i, (n, a) in enumerate(calls) if n == "draw_rect" and a.fill == Fill(RED))
    assert bg_idx < names.index("push_clip")


def test_pi_multiple_locator_draws_annotation():
    plot = Plot(
        x_axis=Axis(ticks=Ticks().with_locator(PiMultipleLocator(8))),
        series=[_series(_sine_points())],
    )
    texts = [t for t in _of(_draw(plot), "draw_text") if t.text == "\u00d7 π"]
    assert len(texts) == 1
    assert str(texts[0].font.family) == "Noto Sans Math"
    assert texts[0].anchor.align is render.TextAlign.END


def test_no_ticks_and_no_labels_draw_no_text():
    plot = Plot(
        x_axis=Axis(ticks=None), y_axis=Axis(ticks=None), series=[_series(_sine_points())]
    )
    calls = _draw(plot)
    assert _of(calls, "draw_text") == []
    assert [p.stroke for p in _of(calls, "draw_path")] == [SERIES_LINE]


def test_y_tick_labels_lie_within_plot():
    calls = _draw(Plot(series=[_series(_sine_points())]))
    _, top, _, bottom = _bounds(_of(calls, "push_clip")[0].path)
    y_labels = [
        t
        for t in _of(calls, "draw_text")
        if t.anchor.align is render.TextAlign.END
        and t.anchor.baseline is render.TextBaseline.CENTER
    ]
    assert y_labels
    for t in y_labels:
        assert top - 1e-6 <= t.anchor.pos.y <= bottom + 1e-6