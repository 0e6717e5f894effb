"""Drawing primitives and the surface interface they are drawn on."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Optional

from eidoplot import geom
from eidoplot.style.font import Font
from eidoplot.style.paint import Fill, Line


@dataclass
class Rect:
    rect: geom.Rect
    fill: Optional[Fill] = None
    stroke: Optional[Line] = None
    transform: Optional[geom.Transform] = None


@dataclass
class Path:
    path: geom.Path
    fill: Optional[Fill] = None
    stroke: Optional[Line] = None
    transform: Optional[geom.Transform] = None


@dataclass
class Clip:
    path: geom.Path
    transform: Optional[geom.Transform] = None


class TextAlign(enum.Enum):
    START = "start"
    CENTER = "center"
    END = "end"


class TextBaseline(enum.Enum):
    BASE = "base"
    CENTER = "center"
    HANGING = "hanging"


@dataclass(frozen=True)
class TextAnchor:
    pos: geom.Point
    align: TextAlign = TextAlign.CENTER
    baseline: TextBaseline = TextBaseline.BASE


@dataclass
class Text:
    text: str
    font: Font
    fill: Fill
    anchor: TextAnchor
    transform: Optional[geom.Transform] = None


class Surface(abc.ABC):
    """Something that figures can be drawn on."""

    @abc.abstractmethod
    def prepare(self, size: geom.Size) -> None:
        """Prepare the surface for drawing, with the given size in plot units."""

    @abc.abstractmethod
    def fill(self, fill: Fill) -> None:
        """Fill the entire surface."""

    @abc.abstractmethod
    def draw_rect(self, rect: Rect) -> None:
        """Draw a rectangle."""

    @abc.abstractmethod
    def draw_path(self, path: Path) -> None:
        """Draw a path."""

    @abc.abstractmethod
    def draw_text(self, text: Text) -> None:
        """Draw some text."""

    @abc.abstractmethod
    def push_clip(self, clip: Clip) -> None:
        """Clip subsequent drawing to a path until the matching pop_clip."""

    @abc.abstractmethod
    def pop_clip(self) -> None:
        """Pop the clipping path pushed last."""