"""Geometric primitives: points, sizes, rectangles, padding, paths and transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union


@dataclass(frozen=True)
class Point:
    """A point in surface coordinates."""

    x: float
    y: float

    ORIGIN: ClassVar["Point"]


Point.ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: float
    height: float


@dataclass(frozen=True)
class Padding:
    """Padding within a graphical element."""

    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def even(cls, value: float) -> Padding:
        """Uniform padding in all directions."""
        return cls(value, value, value, value)

    @classmethod
    def center(cls, v: float, h: float) -> Padding:
        """Vertical and horizontal padding."""
        return cls(v, h, v, h)

    @classmethod
    def coerce(cls, value) -> Padding:
        """Build padding from a number, a (v, h) pair or a (t, r, b, l) tuple."""
        if isinstance(value, Padding):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.even(float(value))
        if isinstance(value, tuple):
            if len(value) == 2:
                return cls.center(*value)
            if len(value) == 4:
                return cls(*value)
        raise TypeError(f"cannot make padding from {value!r}")

    @property
    def sum_ver(self) -> float:
        return self.top + self.bottom

    @property
    def sum_hor(self) -> float:
        return self.left + self.right


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle, y growing downwards."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_xywh(cls, x: float, y: float, w: float, h: float) -> Rect:
        return cls(x, y, w, h)

    @classmethod
    def from_trbl(cls, top: float, right: float, bottom: float, left: float) -> Rect:
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def from_ps(cls, top_left: Point, size: Size) -> Rect:
        return cls(top_left.x, top_left.y, size.width, size.height)

    def pad(self, padding) -> Rect:
        """Return the rectangle shrunk by the given padding."""
        p = Padding.coerce(padding)
        return Rect(
            self.x + p.left,
            self.y + p.top,
            self.width - p.sum_hor,
            self.height - p.sum_ver,
        )

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def left(self) -> float:
        return self.x

    def shifted_top_side(self, shift: float) -> Rect:
        return Rect(self.x, self.y + shift, self.width, self.height - shift)

    def shifted_right_side(self, shift: float) -> Rect:
        return Rect(self.x, self.y, self.width + shift, self.height)

    def shifted_bottom_side(self, shift: float) -> Rect:
        return Rect(self.x, self.y, self.width, self.height + shift)

    def shifted_left_side(self, shift: float) -> Rect:
        return Rect(self.x + shift, self.y, self.width - shift, self.height)

    def to_path(self) -> Path:
        """Return a closed path tracing the rectangle."""
        return PathBuilder.from_rect(self)


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class Close:
    pass


Segment = Union[MoveTo, LineTo, Close]


@dataclass(frozen=True)
class Path:
    """An immutable sequence of path segments."""

    segments: tuple

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)


class PathBuilder:
    """Incrementally builds a Path."""

    def __init__(self) -> None:
        self._segments: list = []
        self._last_move = (0.0, 0.0)
        self._needs_move = True

    def move_to(self, x: float, y: float) -> None:
        move = MoveTo(x, y)
        if self._segments and isinstance(self._segments[-1], MoveTo):
            self._segments[-1] = move
        else:
            self._segments.append(move)
        self._last_move = (x, y)
        self._needs_move = False

    def line_to(self, x: float, y: float) -> None:
        if self._needs_move:
            self.move_to(*self._last_move)
        self._segments.append(LineTo(x, y))

    def close(self) -> None:
        if self._segments and not isinstance(self._segments[-1], Close):
            self._segments.append(Close())
        self._needs_move = True

    def finish(self) -> Path:
        """Return the built path; raises ValueError if it is empty or invalid."""
        if len(self._segments) <= 1:
            raise ValueError("path has no drawable segments")
        for seg in self._segments:
            if isinstance(seg, (MoveTo, LineTo)) and not (
                math.isfinite(seg.x) and math.isfinite(seg.y)
            ):
                raise ValueError("path has non-finite coordinates")
        return Path(tuple(self._segments))

    @classmethod
    def from_rect(cls, rect: Rect) -> Path:
        """Return a closed path around the rectangle."""
        left, top, right, bottom = rect.left, rect.top, rect.right, rect.bottom
        values = (left, top, right, bottom)
        if not all(math.isfinite(v) for v in values) or left > right or top > bottom:
            raise ValueError(f"invalid rectangle {rect!r}")
        builder = cls()
        builder.move_to(left, top)
        builder.line_to(right, top)
        builder.line_to(right, bottom)
        builder.line_to(left, bottom)
        builder.close()
        return builder.finish()


@dataclass(frozen=True)
class Transform:
    """An affine transform: x' = sx*x + kx*y + tx, y' = ky*x + sy*y + ty."""

    sx: float = 1.0
    ky: float = 0.0
    kx: float = 0.0
    sy: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def from_translate(cls, tx: float, ty: float) -> Transform:
        return cls(tx=tx, ty=ty)

    @classmethod
    def from_rotate(cls, angle: float) -> Transform:
        """Rotation by the given angle in degrees."""
        rad = math.radians(angle)
        c, s = math.cos(rad), math.sin(rad)
        return cls(sx=c, ky=s, kx=-s, sy=c)

    def pre_concat(self, other: Transform) -> Transform:
        """Return self applied after other."""
        a, b = self, other
        return Transform(
            sx=a.sx * b.sx + a.kx * b.ky,
            ky=a.ky * b.sx + a.sy * b.ky,
            kx=a.sx * b.kx + a.kx * b.sy,
            sy=a.ky * b.kx + a.sy * b.sy,
            tx=a.sx * b.tx + a.kx * b.ty + a.tx,
            ty=a.ky * b.tx + a.sy * b.ty + a.ty,
        )

    def pre_rotate(self, angle: float) -> Transform:
        return self.pre_concat(Transform.from_rotate(angle))

    def pre_translate(self, tx: float, ty: float) -> Transform:
        return self.pre_concat(Transform.from_translate(tx, ty))

    def map_point(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.sx * x + self.kx * y + self.tx,
            self.ky * x + self.sy * y + self.ty,
        )