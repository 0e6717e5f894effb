"""A surface that builds an SVG document."""

from __future__ import annotations

import copy
import io
import math
import xml.etree.ElementTree as ET
from pathlib import Path as FsPath
from typing import Optional

from eidoplot import geom, render
from eidoplot.style.paint import Fill, Line, PatternKind

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

_TEXT_ANCHOR = {
    render.TextAlign.START: "start",
    render.TextAlign.CENTER: "middle",
    render.TextAlign.END: "end",
}

_DOMINANT_BASELINE = {
    render.TextBaseline.BASE: "alphabetic",
    render.TextBaseline.CENTER: "middle",
    render.TextBaseline.HANGING: "hanging",
}


class ClipStackError(RuntimeError):
    """Raised when push_clip and pop_clip calls are not balanced."""


def _num(value) -> str:
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def _path_data(path: geom.Path) -> str:
    parts = []
    for segment in path:
        if isinstance(segment, geom.MoveTo):
            parts.append(f"M{_num(segment.x)},{_num(segment.y)}")
        elif isinstance(segment, geom.LineTo):
            parts.append(f"L{_num(segment.x)},{_num(segment.y)}")
        elif isinstance(segment, geom.Close):
            parts.append("z")
        else:
            raise TypeError(f"unsupported path segment: {segment!r}")
    return " ".join(parts)


def _assign_transform(node: ET.Element, transform: Optional[geom.Transform]) -> None:
    if transform is not None:
        t = transform
        node.set(
            "transform",
            f"matrix({_num(t.sx)} {_num(t.kx)} {_num(t.ky)} {_num(t.sy)} "
            f"{_num(t.tx)} {_num(t.ty)})",
        )


def _assign_fill(node: ET.Element, fill: Optional[Fill]) -> None:
    node.set("fill", fill.color.html() if fill is not None else "none")


def _assign_stroke(node: ET.Element, stroke: Optional[Line]) -> None:
    if stroke is None:
        node.set("stroke", "none")
        return
    w = stroke.width
    node.set("stroke", stroke.color.html())
    node.set("stroke-width", _num(w))
    pattern = stroke.pattern
    if pattern.kind is PatternKind.DOT:
        node.set("stroke-dasharray", f"{_num(w)} {_num(w)}")
    elif pattern.kind is PatternKind.DASH:
        dash = pattern.dash
        node.set("stroke-dasharray", f"{_num(w * dash.length)} {_num(w * dash.gap)}")


class SvgSurface(render.Surface):
    """Draws figures into an in-memory SVG document."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._root = ET.Element(
            "svg", {"xmlns": SVG_NAMESPACE, "width": str(width), "height": str(height)}
        )
        self._clip_num = 0
        self._groups: list[ET.Element] = []

    def _check_balanced(self) -> None:
        if self._groups:
            raise ClipStackError("Unbalanced clip stack")

    def to_string(self) -> str:
        """Serialize the document; raises ClipStackError if a clip is still open."""
        self._check_balanced()
        root = copy.deepcopy(self._root)
        ET.indent(root, space="  ")
        return ET.tostring(root, encoding="unicode")

    def write(self, dest) -> None:
        """Write the document to a text or binary stream."""
        data = self.to_string()
        if isinstance(dest, io.TextIOBase):
            dest.write(data)
        else:
            dest.write(data.encode("utf-8"))

    def save(self, path) -> None:
        """Write the document to a file."""
        FsPath(path).write_text(self.to_string(), encoding="utf-8")

    def _append(self, node: ET.Element) -> None:
        parent = self._groups[-1] if self._groups else self._root
        parent.append(node)

    def _next_clip_id(self) -> str:
        self._clip_num += 1
        return f"eidoplot-clip{self._clip_num}"

    def prepare(self, size: geom.Size) -> None:
        self._root.set("viewBox", f"0 0 {_num(size.width)} {_num(size.height)}")

    def fill(self, fill: Fill) -> None:
        node = ET.Element("rect", {"width": "100%", "height": "100%"})
        node.set("fill", fill.color.html())
        self._append(node)

    def draw_rect(self, rect: render.Rect) -> None:
        r = rect.rect
        node = ET.Element(
            "rect",
            {
                "x": _num(r.x),
                "y": _num(r.y),
                "width": _num(r.width),
                "height": _num(r.height),
            },
        )
        _assign_fill(node, rect.fill)
        _assign_stroke(node, rect.stroke)
        _assign_transform(node, rect.transform)
        self._append(node)

    def draw_path(self, path: render.Path) -> None:
        node = ET.Element("path")
        _assign_fill(node, path.fill)
        _assign_stroke(node, path.stroke)
        _assign_transform(node, path.transform)
        node.set("d", _path_data(path.path))
        self._append(node)

    def draw_text(self, text: render.Text) -> None:
        node = ET.Element(
            "text",
            {
                "font-family": str(text.font.family),
                "font-size": _num(text.font.size),
                "fill": text.fill.color.html(),
                "x": _num(text.anchor.pos.x),
                "y": _num(text.anchor.pos.y),
                "text-rendering": "optimizeLegibility",
                "text-anchor": _TEXT_ANCHOR[text.anchor.align],
                "dominant-baseline": _DOMINANT_BASELINE[text.anchor.baseline],
            },
        )
        node.text = text.text
        _assign_transform(node, text.transform)
        self._append(node)

    def push_clip(self, clip: render.Clip) -> None:
        clip_id = self._next_clip_id()
        path_node = ET.Element("path", {"d": _path_data(clip.path)})
        _assign_transform(path_node, clip.transform)
        clip_node = ET.Element("clipPath", {"id": clip_id})
        clip_node.append(path_node)
        self._append(clip_node)
        self._groups.append(ET.Element("g", {"clip-path": f"url(#{clip_id})"}))

    def pop_clip(self) -> None:
        if not self._groups:
            raise ClipStackError("Unbalanced clip stack")
        self._append(self._groups.pop())