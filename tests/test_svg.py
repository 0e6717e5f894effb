import io
import xml.etree.ElementTree as ET

import pytest

from eidoplot import geom, render
from eidoplot.drawing.figure import draw
from eidoplot.ir.figure import Figure
from eidoplot.ir.plot import Plot, Series, XySeries
from eidoplot.ir.text import Text
from eidoplot.style.color import BLACK, BLUE, RED
from eidoplot.style.font import Font
from eidoplot.style.paint import Dash, Fill, Line, LinePattern
from eidoplot.svg import ClipStackError, SvgSurface

NS = "{http://www.w3.org/2000/svg}"


def parse(surface):
    return ET.fromstring(surface.to_string())


def square_path():
    builder = geom.PathBuilder()
    builder.move_to(0.0, 0.0)
    builder.line_to(10.0, 0.0)
    builder.line_to(10.0, 10.0)
    builder.close()
    return builder.finish()


def test_root_has_namespace_and_size():
    root = parse(SvgSurface(800, 600))
    assert root.tag == NS + "svg"
    assert root.get("width") == "800"
    assert root.get("height") == "600"


def test_prepare_sets_view_box():
    surface = SvgSurface(800, 600)
    surface.prepare(geom.Size(400.0, 300.0))
    assert parse(surface).get("viewBox") == "0 0 400 300"


def test_fill_covers_whole_surface():
    surface = SvgSurface(100, 100)
    surface.fill(Fill(RED))
    (rect,) = parse(surface).findall(NS + "rect")
    assert rect.get("width") == "100%"
    assert rect.get("height") == "100%"
    assert rect.get("fill") == RED.html()


def test_rect_without_paint_is_unpainted():
    surface = SvgSurface(100, 100)
    surface.draw_rect(render.Rect(geom.Rect(10.0, 20.0, 30.0, 40.0)))
    (rect,) = parse(surface).findall(NS + "rect")
    assert rect.get("fill") == "none"
    assert rect.get("stroke") == "none"
    assert float(rect.get("x")) == 10.0
    assert float(rect.get("height")) == 40.0
    assert rect.get("transform") is None


def test_dotted_stroke_uses_width_for_dash_and_gap():
    surface = SvgSurface(100, 100)
    stroke = Line(BLUE, 2.5, LinePattern.dot())
    surface.draw_rect(render.Rect(geom.Rect(0.0, 0.0, 5.0, 5.0), stroke=stroke))
    (rect,) = parse(surface).findall(NS + "rect")
    dash, gap = (float(v) for v in rect.get("stroke-dasharray").split())
    assert dash == gap == 2.5
    assert rect.get("stroke") == BLUE.html()


def test_dash_pattern_scales_with_width():
    surface = SvgSurface(100, 100)
    stroke = Line(BLUE, 2.0, LinePattern.dashed(Dash(3.0, 1.0)))
    surface.draw_path(render.Path(square_path(), stroke=stroke))
    (path,) = parse(surface).findall(NS + "path")
    assert [float(v) for v in path.get("stroke-dasharray").split()] == [6.0, 2.0]


def test_solid_stroke_has_no_dasharray():
    surface = SvgSurface(100, 100)
    surface.draw_path(render.Path(square_path(), stroke=Line(BLACK)))
    (path,) = parse(surface).findall(NS + "path")
    assert path.get("stroke-dasharray") is None
    assert path.get("fill") == "none"


def test_path_data():
    surface = SvgSurface(100, 100)
    surface.draw_path(render.Path(square_path(), fill=Fill(RED)))
    (path,) = parse(surface).findall(NS + "path")
    assert path.get("d") == "M0,0 L10,0 L10,10 z"
    assert path.get("fill") == RED.html()


def test_transform_matrix_order():
    surface = SvgSurface(100, 100)
    transform = geom.Transform(sx=1.0, ky=2.0, kx=3.0, sy=4.0, tx=5.0, ty=6.0)
    surface.draw_path(render.Path(square_path(), stroke=Line(BLACK), transform=transform))
    (path,) = parse(surface).findall(NS + "path")
    assert path.get("transform") == "matrix(1 3 2 4 5 6)"


def test_text_attributes():
    surface = SvgSurface(100, 100)
    anchor = render.TextAnchor(
        geom.Point(3.0, 4.0), render.TextAlign.END, render.TextBaseline.CENTER
    )
    surface.draw_text(render.Text("label", Font(size=12.0), Fill(RED), anchor))
    (text,) = parse(surface).findall(NS + "text")
    assert text.text == "label"
    assert text.get("text-anchor") == "end"
    assert text.get("dominant-baseline") == "middle"
    assert float(text.get("font-size")) == 12.0
    assert text.get("font-family") == "sans-serif"
    assert text.get("fill") == RED.html()


def test_clip_wraps_drawing_in_group():
    surface = SvgSurface(100, 100)
    surface.push_clip(render.Clip(square_path()))
    surface.draw_path(render.Path(square_path(), stroke=Line(BLACK)))
    surface.pop_clip()
    root = parse(surface)
    (clip,) = root.findall(NS + "clipPath")
    assert clip.get("id") == "eidoplot-clip1"
    assert clip.find(NS + "path").get("d") == root.find(NS + "g").find(NS + "path").get("d")
    (group,) = root.findall(NS + "g")
    assert group.get("clip-path") == "url(#eidoplot-clip1)"
    assert root.findall(NS + "path") == []


def test_nested_clips_get_distinct_ids():
    surface = SvgSurface(100, 100)
    surface.push_clip(render.Clip(square_path()))
    surface.push_clip(render.Clip(square_path()))
    surface.pop_clip()
    surface.pop_clip()
    root = parse(surface)
    outer = root.find(NS + "g")
    inner = outer.find(NS + "g")
    assert outer.get("clip-path") == "url(#eidoplot-clip1)"
    assert inner.get("clip-path") == "url(#eidoplot-clip2)"
    assert outer.find(NS + "clipPath").get("id") == "eidoplot-clip2"


def test_pop_without_push_raises():
    with pytest.raises(ClipStackError):
        SvgSurface(10, 10).pop_clip()


def test_unbalanced_clip_prevents_output(tmp_path):
    surface = SvgSurface(10, 10)
    surface.push_clip(render.Clip(square_path()))
    with pytest.raises(ClipStackError):
        surface.to_string()
    with pytest.raises(ClipStackError):
        surface.save(tmp_path / "out.svg")


def test_write_and_save_match_to_string(tmp_path):
    surface = SvgSurface(50, 40)
    surface.fill(Fill(BLUE))
    text_stream = io.StringIO()
    surface.write(text_stream)
    byte_stream = io.BytesIO()
    surface.write(byte_stream)
    target = tmp_path / "out.svg"
    surface.save(target)
    expected = surface.to_string()
    assert text_stream.getvalue() == expected
    assert byte_stream.getvalue().decode("utf-8") == expected
    assert target.read_text(encoding="utf-8") == expected


def test_draw_figure_produces_balanced_document():
    plot = Plot(series=[Series(XySeries(Line(BLUE, 2.0), [(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)]))])
    fig = Figure(plot).with_title(Text("Demo"))
    surface = SvgSurface(800, 600)
    draw(fig, surface)
    root = parse(surface)
    assert len(list(root.iter(NS + "clipPath"))) == len(list(root.iter(NS + "g"))) == 1
    texts = [t.text for t in root.iter(NS + "text")]
    assert "Demo" in texts
    assert root.get("viewBox") == "0 0 800 600"