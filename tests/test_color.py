import pytest

from eidoplot.style import color
from eidoplot.style.color import Color


def test_named_html():
    assert color.BLUE.html() == "#0000ff"
    assert color.REBECCAPURPLE.html() == "#663399"
    assert color.BLACK.html() == "#000000"


def test_aliases():
    assert color.CYAN.html() == color.AQUA.html() == "#00ffff"
    assert color.MAGENTA.html() == color.FUCHSIA.html() == "#ff00ff"
    assert color.GREY.html() == color.GRAY.html() == "#808080"


def test_named_are_opaque():
    assert Color.from_html("#ffffff") == color.WHITE
    assert Color.from_rgb(*color.TOMATO.rgb) == color.TOMATO
    assert Color.from_html("#ff6347ff") == color.TOMATO


def test_short_form_doubles_digits():
    assert Color.from_html("#abc") == Color.from_html("#aabbcc")
    assert Color.from_html("#fff") == color.WHITE


def test_short_alpha_form():
    assert Color.from_html("#abcd") == Color.from_html("#aabbccdd")


def test_uppercase_accepted():
    assert Color.from_html("#C0C0C0") == color.SILVER


@pytest.mark.parametrize("hex_string", ["#123456", "#12345678", "#abc", "#abcd"])
def test_html_roundtrip_rgb(hex_string):
    c = Color.from_html(hex_string)
    assert Color.from_html(c.html()).rgb == c.rgb


def test_html_ignores_alpha():
    c = Color.from_html("#11223344")
    assert c.html() == "#112233"
    assert Color.from_rgba(*c.rgba) == c


def test_from_rgb_is_opaque():
    c = Color.from_rgb(10, 20, 30)
    assert c.rgba == (10, 20, 30, 255)
    assert c.rgb == (10, 20, 30)


@pytest.mark.parametrize("bad", ["000000", "#12345", "#", "#ggg", "#12 456"])
def test_invalid_html(bad):
    with pytest.raises(ValueError):
        Color.from_html(bad)


def test_component_out_of_range():
    with pytest.raises(ValueError):
        Color.from_rgb(256, 0, 0)
    with pytest.raises(ValueError):
        Color.from_rgba(0, 0, 0, -1)