"""Tick location and tick label formatting."""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from eidoplot.data import ViewBounds
from eidoplot.ir.axis import (
    AutoLocator,
    MaxNLocator,
    PiMultipleLocator,
    PrecFormatter,
    Ticks,
)

AUTO_BINS = 10
AUTO_STEPS = (1.0, 2.0, 2.5, 5.0)
PI_STEPS = (math.pi / 8.0, math.pi / 6.0, math.pi / 4.0, math.pi / 3.0, math.pi / 2.0)


def locate(locator, vb: ViewBounds) -> list[float]:
    """Return tick locations for the given view bounds."""
    if isinstance(locator, AutoLocator):
        return _max_n_ticks(AUTO_BINS, AUTO_STEPS, vb)
    if isinstance(locator, MaxNLocator):
        return _max_n_ticks(locator.bins, locator.steps, vb)
    if isinstance(locator, PiMultipleLocator):
        return _max_n_ticks(locator.bins, PI_STEPS, vb)
    raise TypeError(f"unknown tick locator: {locator!r}")


@dataclass
class _Stepper:
    steps: Sequence[float]
    scale: float
    idx: int = 0

    @property
    def step(self) -> float:
        return self.steps[self.idx] * self.scale

    def next_smaller(self) -> None:
        if self.idx == 0:
            self.idx = len(self.steps)
            self.scale *= 0.1
        self.idx -= 1

    def next_bigger(self) -> None:
        self.idx += 1
        if self.idx == len(self.steps):
            self.idx = 0
            self.scale *= 10.0


def _is_close(a: float, b: float) -> bool:
    return abs(a - b) < 1e-10


def _largest_le(value: float, step: float) -> float:
    d, m = value / step, math.fmod(value, step)
    return d + 1.0 if _is_close(m / step, 1.0) else d


def _smallest_ge(value: float, step: float) -> float:
    d, m = value / step, math.fmod(value, step)
    return d if _is_close(m / step, 0.0) else d + 1.0


def _max_n_ticks(bins: int, steps: Sequence[float], vb: ViewBounds) -> list[float]:
    if not steps or any(not s > 0 for s in steps):
        raise ValueError(f"tick steps must be positive and non-empty: {tuple(steps)!r}")
    if bins <= 0:
        raise ValueError(f"tick bins must be positive: {bins}")
    target = vb.span / bins
    if not (math.isfinite(target) and target > 0):
        raise ValueError(f"cannot locate ticks in {vb!r}")

    stepper = _Stepper(steps, 10.0 ** math.floor(math.log10(target)))
    while stepper.step > target:
        stepper.next_smaller()
    while stepper.step < target:
        stepper.next_bigger()
    step = stepper.step

    vmin = math.floor(vb.min / step) * step
    low = _largest_le(vb.min - vmin, step)
    high = _smallest_ge(vb.max - vmin, step)

    ticks = []
    val = low
    while val <= high:
        ticks.append(vmin + val * step)
        val += 1.0
    return ticks


class LabelFormatter(abc.ABC):
    """Turns tick locations into label strings."""

    def axis_annotation(self) -> Optional[str]:
        """Text shown once next to the axis, if any."""
        return None

    @abc.abstractmethod
    def format_label(self, data: float) -> str:
        """Format the label of one tick."""


@dataclass(frozen=True)
class PrecLabelFormat(LabelFormatter):
    """Fixed number of decimals."""

    prec: int

    def format_label(self, data: float) -> str:
        return f"{data:.{self.prec}f}"


@dataclass(frozen=True)
class PiMultipleLabelFormat(LabelFormatter):
    """Labels as multiples of pi, with a "× π" annotation."""

    prec: int = 2

    def axis_annotation(self) -> Optional[str]:
        return "\u00d7 π"

    def format_label(self, data: float) -> str:
        return f"{data / math.pi:.{self.prec}f}"


def label_formatter(ticks: Ticks, vb: ViewBounds) -> LabelFormatter:
    """Return the label formatter for the ticks."""
    if isinstance(ticks.formatter, PrecFormatter):
        return PrecLabelFormat(ticks.formatter.prec)
    return _auto_label_formatter(ticks.locator)


def _auto_label_formatter(locator) -> LabelFormatter:
    if isinstance(locator, PiMultipleLocator):
        return PiMultipleLabelFormat(prec=2)
    if isinstance(locator, AutoLocator):
        return PrecLabelFormat(2)
    raise ValueError(f"no automatic label format for locator {locator!r}")