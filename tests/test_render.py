import pytest

from eidoplot import geom, render
from eidoplot.style.color import BLACK
from eidoplot.style.font import Font
from eidoplot.style.paint import Fill


class Recorder(render.Surface):
    def __init__(self):
        self.calls = []

    def prepare(self, size):
        self.calls.append(("prepare", size))

    def fill(self, fill):
        self.calls.append(("fill", fill))

    def draw_rect(self, rect):
        self.calls.append(("rect", rect))

    def draw_path(self, path):
        self.calls.append(("path", path))

    def draw_text(self, text):
        self.calls.append(("text", text))

    def push_clip(self, clip):
        self.calls.append(("push", clip))

    def pop_clip(self):
        self.calls.append(("pop", None))


def test_surface_is_abstract():
    with pytest.raises(TypeError):
        render.Surface()


def test_recorder_receives_primitives():
    surface = Recorder()
    size = geom.Size(10.0, 20.0)
    rect = render.Rect(geom.Rect.from_xywh(0.0, 0.0, 5.0, 5.0))
    surface.prepare(size)
    surface.draw_rect(rect)
    surface.pop_clip()
    assert surface.calls == [("prepare", size), ("rect", rect), ("pop", None)]


def test_rect_defaults():
    r = render.Rect(geom.Rect.from_xywh(1.0, 2.0, 3.0, 4.0))
    assert r.fill is None and r.stroke is None and r.transform is None


def test_text_anchor_defaults():
    anchor = render.TextAnchor(geom.Point.ORIGIN)
    assert anchor.align is render.TextAlign.CENTER
    assert anchor.baseline is render.TextBaseline.BASE


def test_text_fields():
    anchor = render.TextAnchor(geom.Point(1.0, 2.0), render.TextAlign.END)
    text = render.Text("hi", Font(), Fill(BLACK), anchor)
    assert text.transform is None
    assert text.anchor.pos == geom.Point(1.0, 2.0)
    assert text.fill.color == BLACK