"""Text with an optional font."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from eidoplot.style.font import Font


@dataclass(frozen=True)
class Text:
    text: str
    font: Optional[Font] = None

    def __post_init__(self) -> None:
        if self.font is not None:
            object.__setattr__(self, "font", Font.coerce(self.font))

    @classmethod
    def from_str(cls, text: str) -> Text:
        return cls(text)

    def with_font(self, font) -> Text:
        return replace(self, font=Font.coerce(font))

    def __str__(self) -> str:
        return self.text