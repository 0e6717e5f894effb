"""Styling: colours, fonts, lines, fills and default values."""