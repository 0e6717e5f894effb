"""Font discovery, family resolution and text measurement."""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from PIL import ImageFont


class GenericFamily(enum.Enum):
    """CSS generic font families."""

    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    CURSIVE = "cursive"
    FANTASY = "fantasy"
    MONOSPACE = "monospace"


FamilyQuery = Union[GenericFamily, str]

_FONT_SUFFIXES = frozenset({".ttf", ".otf", ".ttc", ".otc"})
_COLLECTION_SUFFIXES = frozenset({".ttc", ".otc"})
_REGULAR_STYLES = frozenset({"regular", "book", "normal", "roman"})
_PROBE_SIZE = 12


def parse_font_family(value: str) -> list[FamilyQuery]:
    """Split a comma separated family string into generic families and names."""
    families: list[FamilyQuery] = []
    for part in (p.strip() for p in value.split(",")):
        try:
            families.append(GenericFamily(part))
        except ValueError:
            families.append(part.strip("'").strip('"'))
    return families


@dataclass(frozen=True)
class _Face:
    path: Path
    index: int
    family: str
    style: str


def _truetype(source, size: float, index: int = 0):
    try:
        return ImageFont.truetype(source, size=size, index=index)
    except TypeError:
        return ImageFont.truetype(source, size=max(1, round(size)), index=index)


def _default_font(size: float):
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        try:
            return ImageFont.load_default(size=max(1, round(size)))
        except TypeError:
            return ImageFont.load_default()


def _read_faces(file: Path) -> Iterator[_Face]:
    indices = itertools.count() if file.suffix.lower() in _COLLECTION_SUFFIXES else (0,)
    for index in indices:
        try:
            font = ImageFont.truetype(str(file), size=_PROBE_SIZE, index=index)
        except (OSError, ValueError):
            return
        family, style = font.getname()
        if family:
            yield _Face(file, index, family, style or "")


class FontDatabase:
    """A collection of font faces, searchable by family."""

    def __init__(self) -> None:
        self._faces: list[_Face] = []
        self._generic = {
            GenericFamily.SERIF: "Times New Roman",
            GenericFamily.SANS_SERIF: "Arial",
            GenericFamily.CURSIVE: "Comic Sans MS",
            GenericFamily.FANTASY: "Impact",
            GenericFamily.MONOSPACE: "Courier New",
        }
        self._fonts: dict = {}

    def __len__(self) -> int:
        return len(self._faces)

    def load_fonts_dir(self, path) -> int:
        """Load every font file found below a directory; return the number of faces added."""
        root = Path(path)
        if not root.is_dir():
            return 0
        files = sorted(
            p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in _FONT_SUFFIXES
        )
        before = len(self._faces)
        for file in files:
            self._faces.extend(_read_faces(file))
        return len(self._faces) - before

    def set_sans_serif_family(self, name: str) -> None:
        self._generic[GenericFamily.SANS_SERIF] = name

    def set_serif_family(self, name: str) -> None:
        self._generic[GenericFamily.SERIF] = name

    def set_monospace_family(self, name: str) -> None:
        self._generic[GenericFamily.MONOSPACE] = name

    def query(self, families) -> Optional[tuple[Path, int]]:
        """Return (path, index) of the best face for the first family that matches."""
        if isinstance(families, str):
            families = parse_font_family(families)
        for family in families:
            name = self._generic[family] if isinstance(family, GenericFamily) else family
            wanted = name.casefold()
            matches = [f for f in self._faces if f.family.casefold() == wanted]
            if matches:
                best = next(
                    (f for f in matches if f.style.casefold() in _REGULAR_STYLES), matches[0]
                )
                return best.path, best.index
        return None

    def text_width(self, family, size: float, text: str) -> float:
        """Advance width of the text; the built-in default font is used if no face matches."""
        found = self.query(parse_font_family(str(family)))
        key = (found, size)
        font = self._fonts.get(key)
        if font is None:
            if found is None:
                font = _default_font(size)
            else:
                path, index = found
                font = _truetype(str(path), size, index)
            self._fonts[key] = font
        return float(font.getlength(text))


_RESOURCE_DIR = Path(__file__).resolve().parent / "share"


def bundled_font_db() -> FontDatabase:
    """Return a database holding the fonts shipped with the package."""
    db = FontDatabase()
    db.load_fonts_dir(_RESOURCE_DIR)
    db.set_sans_serif_family("Noto Sans")
    db.set_serif_family("Noto Serif")
    db.set_monospace_family("Noto Mono")
    return db