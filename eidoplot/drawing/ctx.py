"""Drawing context: a surface together with the fonts used to measure text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from eidoplot import geom, render
from eidoplot.fonts import FontDatabase
from eidoplot.style.font import Font
from eidoplot.style.paint import Fill


@dataclass
class Options:
    """Drawing options; without a font database the bundled fonts are used."""

    fontdb: Optional[FontDatabase] = None


class Ctx(render.Surface):
    """Forwards drawing to a surface and measures text with a font database."""

    def __init__(self, surface: render.Surface, fontdb: FontDatabase) -> None:
        self.surface = surface
        self.fontdb = fontdb

    def prepare(self, size: geom.Size) -> None:
        self.surface.prepare(size)

    def fill(self, fill: Fill) -> None:
        self.surface.fill(fill)

    def draw_rect(self, rect: render.Rect) -> None:
        self.surface.draw_rect(rect)

    def draw_path(self, path: render.Path) -> None:
        self.surface.draw_path(path)

    def draw_text(self, text: render.Text) -> None:
        self.surface.draw_text(text)

    def push_clip(self, clip: render.Clip) -> None:
        self.surface.push_clip(clip)

    def pop_clip(self) -> None:
        self.surface.pop_clip()

    def max_labels_width(self, font: Font, labels: Iterable[str]) -> float:
        """Width of the widest label; NaN when there are no labels."""
        widths = (self.fontdb.text_width(font.family, font.size, str(lbl)) for lbl in labels)
        return max(widths, default=math.nan)