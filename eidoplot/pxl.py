"""A surface that rasterizes figures into a pixel image."""

from __future__ import annotations

import math
from itertools import pairwise
from typing import Optional

from PIL import Image, ImageChops, ImageDraw, ImageFont

from eidoplot import geom, render
from eidoplot.fonts import FontDatabase, bundled_font_db, parse_font_family
from eidoplot.style.color import Color
from eidoplot.style.paint import Fill, Line, PatternKind
from eidoplot.svg import ClipStackError

_H_ANCHOR = {
    render.TextAlign.START: "l",
    render.TextAlign.CENTER: "m",
    render.TextAlign.END: "r",
}

_V_ANCHOR = {
    render.TextBaseline.BASE: "s",
    render.TextBaseline.CENTER: "m",
    render.TextBaseline.HANGING: "a",
}


def _rgba(color: Color) -> tuple[int, int, int, int]:
    # Alpha is dropped, as in the SVG output.
    return (color.r, color.g, color.b, 255)


def _svg_matrix(t: geom.Transform) -> geom.Transform:
    # The SVG surface writes matrix(sx kx ky sy tx ty); rasterized output
    # follows the same convention so that both surfaces look alike.
    return geom.Transform(sx=t.sx, ky=t.kx, kx=t.ky, sy=t.sy, tx=t.tx, ty=t.ty)


def _scale(t: geom.Transform) -> float:
    return math.sqrt(abs(t.sx * t.sy - t.kx * t.ky))


def _subpaths(path: geom.Path) -> list[tuple[list, bool]]:
    result: list[list] = []
    current: Optional[list] = None
    start = (0.0, 0.0)
    for segment in path:
        if isinstance(segment, geom.MoveTo):
            start = (segment.x, segment.y)
            current = [start]
            result.append([current, False])
        elif isinstance(segment, geom.LineTo):
            if current is None:
                current = [start]
                result.append([current, False])
            current.append((segment.x, segment.y))
        elif isinstance(segment, geom.Close):
            if result and current is not None:
                result[-1][1] = True
            current = None
    return [(points, closed) for points, closed in result]


def _rect_subpaths(r: geom.Rect) -> list[tuple[list, bool]]:
    corners = [(r.left, r.top), (r.right, r.top), (r.right, r.bottom), (r.left, r.bottom)]
    return [(corners, True)]


def _dash_lengths(stroke: Line) -> Optional[tuple[float, float]]:
    pattern = stroke.pattern
    if pattern.kind is PatternKind.DOT:
        return stroke.width, stroke.width
    if pattern.kind is PatternKind.DASH:
        return stroke.width * pattern.dash.length, stroke.width * pattern.dash.gap
    return None


def _dash_polyline(points: list, on: float, off: float) -> list[list]:
    """Split a polyline into the visible pieces of an on/off dash pattern."""
    if on <= 0 or off <= 0:
        return [points]
    dashes: list[list] = []
    current = [points[0]]
    drawing = True
    remaining = on
    for (x0, y0), (x1, y1) in pairwise(points):
        length = math.hypot(x1 - x0, y1 - y0)
        pos = 0.0
        while length - pos > remaining:
            pos += remaining
            ratio = pos / length
            point = (x0 + (x1 - x0) * ratio, y0 + (y1 - y0) * ratio)
            if drawing:
                current.append(point)
                dashes.append(current)
            else:
                current = [point]
            drawing = not drawing
            remaining = on if drawing else off
        remaining -= length - pos
        if drawing:
            current.append((x1, y1))
    if drawing and len(current) > 1:
        dashes.append(current)
    return dashes


def _text_box(font, text: str, anchor: str):
    """Bounding box relative to the anchor point, and the draw offset for fonts without anchors."""
    try:
        return font.getbbox(text, anchor=anchor), None
    except (ValueError, TypeError):
        left, top, right, bottom = font.getbbox(text)
        w, h = right - left, bottom - top
        dx = {"l": 0.0, "m": w / 2.0, "r": w}[anchor[0]]
        dy = {"a": 0.0, "m": h / 2.0, "s": h}[anchor[1]]
        box = (left - dx, top - dy, right - dx, bottom - dy)
        return box, (-dx, -dy)


def _load_default_font(size: float):
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        return ImageFont.load_default()


def _load_truetype(path: str, size: float, index: int):
    try:
        return ImageFont.truetype(path, size=size, index=index)
    except TypeError:
        return ImageFont.truetype(path, size=max(1, round(size)), index=index)


class _Rasterizer:
    def __init__(self, size, view: geom.Transform, fontdb: FontDatabase) -> None:
        self.image = Image.new("RGBA", size, (0, 0, 0, 0))
        self.view = view
        self.fontdb = fontdb
        self.masks: list[Image.Image] = []
        self._fonts: dict = {}

    def _full(self, transform: Optional[geom.Transform]) -> geom.Transform:
        if transform is None:
            return self.view
        return self.view.pre_concat(_svg_matrix(transform))

    def _layer(self) -> Image.Image:
        return Image.new("RGBA", self.image.size, (0, 0, 0, 0))

    def _composite(self, layer: Image.Image) -> None:
        if self.masks:
            layer.putalpha(ImageChops.multiply(layer.getchannel("A"), self.masks[-1]))
        self.image.alpha_composite(layer)

    def shape(self, subpaths, transform, fill: Optional[Fill], stroke: Optional[Line]) -> None:
        t = self._full(transform)
        layer = self._layer()
        draw = ImageDraw.Draw(layer)
        mapped = [([t.map_point(x, y) for x, y in pts], closed) for pts, closed in subpaths]
        if fill is not None:
            for pts, _ in mapped:
                if len(pts) >= 3:
                    draw.polygon(pts, fill=_rgba(fill.color))
        if stroke is not None:
            scale = _scale(t)
            width = max(1, round(stroke.width * scale))
            color = _rgba(stroke.color)
            dash = _dash_lengths(stroke)
            for pts, closed in mapped:
                if closed and len(pts) > 1:
                    pts = pts + [pts[0]]
                if len(pts) < 2:
                    continue
                pieces = [pts] if dash is None else _dash_polyline(
                    pts, dash[0] * scale, dash[1] * scale
                )
                for piece in pieces:
                    draw.line(piece, fill=color, width=width, joint="curve")
        self._composite(layer)

    def _font(self, family, size: float):
        key = (str(family), round(size, 3))
        font = self._fonts.get(key)
        if font is None:
            found = self.fontdb.query(parse_font_family(str(family)))
            font = None
            if found is not None:
                path, index = found
                try:
                    font = _load_truetype(str(path), size, index)
                except OSError:
                    font = None
            if font is None:
                font = _load_default_font(size)
            self._fonts[key] = font
        return font

    def text(self, text: render.Text) -> None:
        if not text.text:
            return
        t = self._full(text.transform)
        size = text.font.size * _scale(t)
        if size <= 0:
            return
        x, y = t.map_point(text.anchor.pos.x, text.anchor.pos.y)
        font = self._font(text.font.family, size)
        anchor = _H_ANCHOR[text.anchor.align] + _V_ANCHOR[text.anchor.baseline]
        box, offset = _text_box(font, text.text, anchor)
        left, top, right, bottom = box
        radius = max(math.hypot(cx, cy) for cx in (left, right) for cy in (top, bottom))
        c = math.ceil(radius) + 2
        tile = Image.new("RGBA", (2 * c, 2 * c), (0, 0, 0, 0))
        tile_draw = ImageDraw.Draw(tile)
        color = _rgba(text.fill.color)
        if offset is None:
            tile_draw.text((c, c), text.text, fill=color, font=font, anchor=anchor)
        else:
            tile_draw.text((c + offset[0], c + offset[1]), text.text, fill=color, font=font)
        angle = math.degrees(math.atan2(t.ky, t.sx))
        if abs(angle) > 1e-9:
            tile = tile.rotate(-angle, resample=Image.Resampling.BICUBIC, center=(c, c))
        layer = self._layer()
        layer.paste(tile, (round(x) - c, round(y) - c))
        self._composite(layer)

    def push_clip(self, clip: render.Clip) -> None:
        t = self._full(clip.transform)
        mask = Image.new("L", self.image.size, 0)
        draw = ImageDraw.Draw(mask)
        for pts, _ in _subpaths(clip.path):
            mapped = [t.map_point(x, y) for x, y in pts]
            if len(mapped) >= 3:
                draw.polygon(mapped, fill=255)
        if self.masks:
            mask = ImageChops.multiply(mask, self.masks[-1])
        self.masks.append(mask)

    def pop_clip(self) -> None:
        self.masks.pop()


class PxlSurface(render.Surface):
    """Records drawing operations and rasterizes them into an RGBA image."""

    def __init__(self, width: int, height: int, fontdb: Optional[FontDatabase] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid surface size: {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.fontdb = fontdb
        self._view_box: Optional[geom.Size] = None
        self._ops: list[tuple] = []
        self._depth = 0

    def _view_transform(self) -> geom.Transform:
        vb = self._view_box
        if vb is None or vb.width <= 0 or vb.height <= 0:
            return geom.Transform.identity()
        s = min(self.width / vb.width, self.height / vb.height)
        return geom.Transform(
            sx=s,
            sy=s,
            tx=(self.width - vb.width * s) / 2.0,
            ty=(self.height - vb.height * s) / 2.0,
        )

    def _user_size(self) -> tuple[float, float]:
        if self._view_box is None:
            return float(self.width), float(self.height)
        return self._view_box.width, self._view_box.height

    def render(self) -> Image.Image:
        """Rasterize everything drawn so far; raises ClipStackError if a clip is open."""
        if self._depth:
            raise ClipStackError("Unbalanced clip stack")
        fontdb = self.fontdb if self.fontdb is not None else bundled_font_db()
        raster = _Rasterizer((self.width, self.height), self._view_transform(), fontdb)
        user_w, user_h = self._user_size()
        for op, arg in self._ops:
            if op == "fill":
                raster.shape(
                    _rect_subpaths(geom.Rect(0.0, 0.0, user_w, user_h)), None, arg, None
                )
            elif op == "rect":
                raster.shape(_rect_subpaths(arg.rect), arg.transform, arg.fill, arg.stroke)
            elif op == "path":
                raster.shape(_subpaths(arg.path), arg.transform, arg.fill, arg.stroke)
            elif op == "text":
                raster.text(arg)
            elif op == "push_clip":
                raster.push_clip(arg)
            else:
                raster.pop_clip()
        return raster.image

    def save(self, path) -> None:
        """Rasterize and write a PNG file."""
        self.render().save(path, format="PNG")

    def prepare(self, size: geom.Size) -> None:
        self._view_box = size

    def fill(self, fill: Fill) -> None:
        self._ops.append(("fill", fill))

    def draw_rect(self, rect: render.Rect) -> None:
        self._ops.append(("rect", rect))

    def draw_path(self, path: render.Path) -> None:
        self._ops.append(("path", path))

    def draw_text(self, text: render.Text) -> None:
        self._ops.append(("text", text))

    def push_clip(self, clip: render.Clip) -> None:
        self._ops.append(("push_clip", clip))
        self._depth += 1

    def pop_clip(self) -> None:
        if self._depth == 0:
            raise ClipStackError("Unbalanced clip stack")
        self._depth -= 1
        self._ops.append(("pop_clip", None))