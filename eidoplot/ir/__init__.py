"""Figure description: figures, layouts, plots, axes, series and text."""