"""RGBA colors and the standard named colors."""

from __future__ import annotations

import string
from dataclasses import dataclass


def _hex_digit(ch: str) -> int:
    if len(ch) != 1 or ch not in string.hexdigits:
        raise ValueError(f"invalid hex character: {ch!r}")
    return int(ch, 16)


@dataclass(frozen=True)
class Color:
    """An 8-bit per channel RGBA color."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"color component {name} out of range: {value!r}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(r, g, b)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        return cls(r, g, b, a)

    @classmethod
    def from_html(cls, hex_string: str) -> Color:
        """Parse #rgb, #rgba, #rrggbb or #rrggbbaa."""
        if not hex_string.startswith("#"):
            raise ValueError(f"invalid hex color: {hex_string!r}")
        digits = [_hex_digit(ch) for ch in hex_string[1:]]
        if len(digits) in (3, 4):
            channels = [d << 4 | d for d in digits]
        elif len(digits) in (6, 8):
            channels = [hi << 4 | lo for hi, lo in zip(digits[::2], digits[1::2])]
        else:
            raise ValueError(f"invalid hex color: {hex_string!r}")
        return cls(*channels)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def html(self) -> str:
        """Return the #rrggbb form, without alpha."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# standard CSS colors

BLACK = Color.from_html("#000000")
SILVER = Color.from_html("#c0c0c0")
GRAY = Color.from_html("#808080")
WHITE = Color.from_html("#ffffff")
MAROON = Color.from_html("#800000")
RED = Color.from_html("#ff0000")
PURPLE = Color.from_html("#800080")
FUCHSIA = Color.from_html("#ff00ff")
GREEN = Color.from_html("#008000")
LIME = Color.from_html("#00ff00")
OLIVE = Color.from_html("#808000")
YELLOW = Color.from_html("#ffff00")
NAVY = Color.from_html("#000080")
BLUE = Color.from_html("#0000ff")
TEAL = Color.from_html("#008080")
AQUA = Color.from_html("#00ffff")

# other named colors

ALICEBLUE = Color.from_html("#f0f8ff")
ANTIQUEWHITE = Color.from_html("#faebd7")
AQUAMARINE = Color.from_html("#7fffd4")
AZURE = Color.from_html("#f0ffff")
BEIGE = Color.from_html("#f5f5dc")
BISQUE = Color.from_html("#ffe4c4")
BLANCHEDALMOND = Color.from_html("#ffebcd")
BLUEVIOLET = Color.from_html("#8a2be2")
BROWN = Color.from_html("#a52a2a")
BURLYWOOD = Color.from_html("#deb887")
CADETBLUE = Color.from_html("#5f9ea0")
CHARTREUSE = Color.from_html("#7fff00")
CHOCOLATE = Color.from_html("#d2691e")
CORAL = Color.from_html("#ff7f50")
CORNFLOWERBLUE = Color.from_html("#6495ed")
CORNSILK = Color.from_html("#fff8dc")
CRIMSON = Color.from_html("#dc143c")
CYAN = AQUA
DARKBLUE = Color.from_html("#00008b")
DARKCYAN = Color.from_html("#008b8b")
DARKGOLDENROD = Color.from_html("#b8860b")
DARKGRAY = Color.from_html("#a9a9a9")
DARKGREEN = Color.from_html("#006400")
DARKGREY = Color.from_html("#a9a9a9")
DARKKHAKI = Color.from_html("#bdb76b")
DARKMAGENTA = Color.from_html("#8b008b")
DARKOLIVEGREEN = Color.from_html("#556b2f")
DARKORANGE = Color.from_html("#ff8c00")
DARKORCHID = Color.from_html("#9932cc")
DARKRED = Color.from_html("#8b0000")
DARKSALMON = Color.from_html("#e9967a")
DARKSEAGREEN = Color.from_html("#8fbc8f")
DARKSLATEBLUE = Color.from_html("#483d8b")
DARKSLATEGRAY = Color.from_html("#2f4f4f")
DARKSLATEGREY = Color.from_html("#2f4f4f")
DARKTURQUOISE = Color.from_html("#00ced1")
DARKVIOLET = Color.from_html("#9400d3")
DEEPPINK = Color.from_html("#ff1493")
DEEPSKYBLUE = Color.from_html("#00bfff")
DIMGRAY = Color.from_html("#696969")
DIMGREY = Color.from_html("#696969")
DODGERBLUE = Color.from_html("#1e90ff")
FIREBRICK = Color.from_html("#b22222")
FLORALWHITE = Color.from_html("#fffaf0")
FORESTGREEN = Color.from_html("#228b22")
GAINSBORO = Color.from_html("#dcdcdc")
GHOSTWHITE = Color.from_html("#f8f8ff")
GOLD = Color.from_html("#ffd700")
GOLDENROD = Color.from_html("#daa520")
GREENYELLOW = Color.from_html("#adff2f")
GREY = GRAY
HONEYDEW = Color.from_html("#f0fff0")
HOTPINK = Color.from_html("#ff69b4")
INDIANRED = Color.from_html("#cd5c5c")
INDIGO = Color.from_html("#4b0082")
IVORY = Color.from_html("#fffff0")
KHAKI = Color.from_html("#f0e68c")
LAVENDER = Color.from_html("#e6e6fa")
LAVENDERBLUSH = Color.from_html("#fff0f5")
LAWNGREEN = Color.from_html("#7cfc00")
LEMONCHIFFON = Color.from_html("#fffacd")
LIGHTBLUE = Color.from_html("#add8e6")
LIGHTCORAL = Color.from_html("#f08080")
LIGHTCYAN = Color.from_html("#e0ffff")
LIGHTGOLDENRODYELLOW = Color.from_html("#fafad2")
LIGHTGRAY = Color.from_html("#d3d3d3")
LIGHTGREEN = Color.from_html("#90ee90")
LIGHTGREY = Color.from_html("#d3d3d3")
LIGHTPINK = Color.from_html("#ffb6c1")
LIGHTSALMON = Color.from_html("#ffa07a")
LIGHTSEAGREEN = Color.from_html("#20b2aa")
LIGHTSKYBLUE = Color.from_html("#87cefa")
LIGHTSLATEGRAY = Color.from_html("#778899")
LIGHTSLATEGREY = Color.from_html("#778899")
LIGHTSTEELBLUE = Color.from_html("#b0c4de")
LIGHTYELLOW = Color.from_html("#ffffe0")
LIMEGREEN = Color.from_html("#32cd32")
LINEN = Color.from_html("#faf0e6")
MAGENTA = FUCHSIA
MEDIUMAQUAMARINE = Color.from_html("#66cdaa")
MEDIUMBLUE = Color.from_html("#0000cd")
MEDIUMORCHID = Color.from_html("#ba55d3")
MEDIUMPURPLE = Color.from_html("#9370db")
MEDIUMSEAGREEN = Color.from_html("#3cb371")
MEDIUMSLATEBLUE = Color.from_html("#7b68ee")
MEDIUMSPRINGGREEN = Color.from_html("#00fa9a")
MEDIUMTURQUOISE = Color.from_html("#48d1cc")
MEDIUMVIOLETRED = Color.from_html("#c71585")
MIDNIGHTBLUE = Color.from_html("#191970")
MINTCREAM = Color.from_html("#f5fffa")
MISTYROSE = Color.from_html("#ffe4e1")
MOCCASIN = Color.from_html("#ffe4b5")
NAVAJOWHITE = Color.from_html("#ffdead")
OLDLACE = Color.from_html("#fdf5e6")
OLIVEDRAB = Color.from_html("#6b8e23")
ORANGE = Color.from_html("#ffa500")
ORANGERED = Color.from_html("#ff4500")
ORCHID = Color.from_html("#da70d6")
PALEGOLDENROD = Color.from_html("#eee8aa")
PALEGREEN = Color.from_html("#98fb98")
PALETURQUOISE = Color.from_html("#afeeee")
PALEVIOLETRED = Color.from_html("#db7093")
PAPAYAWHIP = Color.from_html("#ffefd5")
PEACHPUFF = Color.from_html("#ffdab9")
PERU = Color.from_html("#cd853f")
PINK = Color.from_html("#ffc0cb")
PLUM = Color.from_html("#dda0dd")
POWDERBLUE = Color.from_html("#b0e0e6")
REBECCAPURPLE = Color.from_html("#663399")
ROSYBROWN = Color.from_html("#bc8f8f")
ROYALBLUE = Color.from_html("#4169e1")
SADDLEBROWN = Color.from_html("#8b4513")
SALMON = Color.from_html("#fa8072")
SANDYBROWN = Color.from_html("#f4a460")
SEAGREEN = Color.from_html("#2e8b57")
SEASHELL = Color.from_html("#fff5ee")
SIENNA = Color.from_html("#a0522d")
SKYBLUE = Color.from_html("#87ceeb")
SLATEBLUE = Color.from_html("#6a5acd")
SLATEGRAY = Color.from_html("#708090")
SLATEGREY = Color.from_html("#708090")
SNOW = Color.from_html("#fffafa")
SPRINGGREEN = Color.from_html("#00ff7f")
STEELBLUE = Color.from_html("#4682b4")
TAN = Color.from_html("#d2b48c")
THISTLE = Color.from_html("#d8bfd8")
TOMATO = Color.from_html("#ff6347")
TURQUOISE = Color.from_html("#40e0d0")
VIOLET = Color.from_html("#ee82ee")
WHEAT = Color.from_html("#f5deb3")
WHITESMOKE = Color.from_html("#f5f5f5")
YELLOWGREEN = Color.from_html("#9acd32")