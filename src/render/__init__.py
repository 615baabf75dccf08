"""Figure rendering layer.

This package turns plot traces into an interactive Plotly page or a
static matplotlib image, and writes error text into the display region.
"""
