"""Default values for figure, title, tick and plot styling."""

from eidoplot.geom import Padding, Size
from eidoplot.style.color import BLACK

FONT_FAMILY = "sans-serif"

FIG_SIZE = Size(800.0, 600.0)
FIG_PADDING = Padding.even(20.0)

TITLE_FONT_FAMILY = FONT_FAMILY
TITLE_FONT_SIZE = 24.0

TICKS_LABEL_FONT_SIZE = 12.0
TICKS_LABEL_COLOR = BLACK

PLOT_XY_AUTO_INSETS = (15.0, 15.0)