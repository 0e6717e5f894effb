"""Declarative plotting: describe a figure and draw it onto SVG or PNG surfaces."""

__version__ = "0.1.0"