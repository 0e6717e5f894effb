# eidoplot

eidoplot describes a figure as plain data (figure, plots, axes, series) and
then draws it onto a rendering surface. Two surfaces are included: an SVG
writer built on the standard library and a PNG writer built on Pillow.

## Installation

```
pip install .
```

## Drawing a figure

```python
import math

from eidoplot.drawing.ctx import Options
from eidoplot.drawing.figure import draw
from eidoplot.ir.axis import Axis, PiMultipleLocator, Ticks
from eidoplot.ir.figure import Figure
from eidoplot.ir.plot import Plot, Series, XySeries
from eidoplot.ir.text import Text
from eidoplot.style.color import Color
from eidoplot.style.paint import Line
from eidoplot.svg import SvgSurface

points = [(math.radians(t), math.sin(math.radians(t))) for t in range(361)]

plot = Plot(
    x_axis=Axis(label="x", ticks=Ticks().with_locator(PiMultipleLocator(bins=8))),
    y_axis=Axis(label="y"),
    series=[
        Series(
            name="y=sin(x)",
            plot=XySeries(line=Line.coerce((Color.from_html("#0000ff"), 3.0)), points=points),
        )
    ],
)
fig = Figure(plot).with_title(Text.from_str("Sine wave"))

surface = SvgSurface(800, 600)
draw(fig, surface, Options())
surface.save("plot.svg")
```

`draw(fig, surface, options)` lays the figure out and issues calls on any
`eidoplot.render.Surface`: `prepare`, `fill`, `draw_rect`, `draw_path`,
`draw_text`, `push_clip` and `pop_clip`.

## Surfaces

- `eidoplot.svg.SvgSurface(width, height)` builds an SVG document in memory.
  `to_string()` returns it, `write(dest)` writes it to a text or binary
  stream and `save(path)` writes it to a file.
- `eidoplot.pxl.PxlSurface(width, height, fontdb=None)` records the drawing
  calls; `render()` rasterizes them into a Pillow RGBA image and `save(path)`
  writes a PNG file. The figure's size is scaled to fit the pixel size.

Both raise `eidoplot.svg.ClipStackError` when `pop_clip` is called without a
matching `push_clip`, or when output is asked for while a clip is still open.

## Modules

- `eidoplot.ir`: the figure description. `Figure`, `Layout` and `Subplots`
  (`ir.figure`), `Plot`, `Series`, `XySeries`, the borders `BoxBorder`,
  `AxisBorder`, `AxisArrowBorder` and the insets `AutoInsets`, `FixedInsets`
  (`ir.plot`), `Axis`, `Scale`, `Range`, `Ticks`, `MinorTicks`, the locators
  `AutoLocator`, `MaxNLocator`, `PiMultipleLocator` and the formatters
  `AutoFormatter`, `PrecFormatter` (`ir.axis`), and `Text` (`ir.text`).
- `eidoplot.style`: colours with the CSS named colours (`style.color`),
  `Font` and `Family` with `is_valid_font_family` (`style.font`), `Line`,
  `LinePattern`, `Dash` and `Fill` (`style.paint`), and default values
  (`style.defaults`).
- `eidoplot.drawing`: the drawing context and `Options` (`drawing.ctx`),
  figure and plot layout (`drawing.figure`, `drawing.plot`), coordinate
  mapping (`drawing.scale`), series drawing (`drawing.series`) and tick
  location and label formatting (`drawing.ticks`).
- `eidoplot.geom`: `Point`, `Size`, `Rect`, `Padding`, `Path`, `PathBuilder`
  and `Transform`.
- `eidoplot.data`: `ViewBounds`, the data range shown along an axis.
- `eidoplot.fonts`: `FontDatabase`, `parse_font_family` and
  `bundled_font_db`, used to pick fonts and measure label widths.

## Sine example

The package includes a command that plots one period of a sine wave:

```
eidoplot-sine          # writes plot.png
eidoplot-sine svg      # writes plot.svg
eidoplot-sine png svg  # writes both
```

The same is available as `eidoplot.sine.main(argv)`, with `build_figure()`,
`write_svg(fig, path)` and `write_png(fig, path, fontdb)`.

## Limitations

- No font files are shipped. `bundled_font_db()` loads any font files found
  in a `share` directory inside the package; when none is there, or no face
  matches a family, text is measured and rasterized with Pillow's default
  font. The SVG output names font families and leaves their lookup to the
  viewer.
- Only linear scales and XY line series are supported.
- Minor ticks, series names and plot titles are part of the description but
  are not drawn.
- An `AxisArrowBorder` cannot be drawn and raises `ValueError`; a
  `MaxNLocator` needs a `PrecFormatter`, as no automatic label format exists
  for it.

## Running the tests

```
pip install .[test]
pytest
```