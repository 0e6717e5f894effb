from eidoplot.ir.axis import (
    AutoFormatter,
    AutoLocator,
    Axis,
    MaxNLocator,
    MinorTicks,
    PiMultipleLocator,
    PrecFormatter,
    Range,
    Scale,
    Ticks,
)
from eidoplot.style import defaults
from eidoplot.style.color import BLACK, RED
from eidoplot.style.font import Font


def test_default_axis():
    axis = Axis()
    assert axis.label is None
    assert axis.minor_ticks is None
    assert axis.scale == Scale(Range(None, None))
    assert axis.ticks == Ticks()


def test_default_ticks():
    ticks = Ticks()
    assert ticks.locator == AutoLocator()
    assert ticks.formatter == AutoFormatter()
    assert ticks.font.size == defaults.TICKS_LABEL_FONT_SIZE
    assert ticks.color == BLACK


def test_ticks_from_locator():
    ticks = Ticks(PiMultipleLocator(bins=8))
    assert ticks.locator.bins == 8
    assert ticks.formatter == AutoFormatter()


def test_ticks_with_builders_leave_original():
    base = Ticks()
    changed = (
        base.with_locator(MaxNLocator(5, [1, 2]))
        .with_formatter(PrecFormatter(3))
        .with_font(Font(size=9.0))
        .with_color(RED)
    )
    assert changed.locator == MaxNLocator(5, (1.0, 2.0))
    assert changed.formatter == PrecFormatter(3)
    assert changed.font.size == 9.0
    assert changed.color == RED
    assert base == Ticks()


def test_maxn_steps_become_tuple():
    assert MaxNLocator(4, [1, 2.5]).steps == (1.0, 2.5)


def test_minor_ticks():
    minor = MinorTicks(PiMultipleLocator(4))
    assert minor.color == defaults.TICKS_LABEL_COLOR
    assert minor.with_color(RED).color == RED
    assert minor.with_locator(AutoLocator()).locator == AutoLocator()
    assert minor.locator == PiMultipleLocator(4)


def test_axis_instances_are_independent():
    a, b = Axis(), Axis()
    a.label = "x"
    assert b.label is None