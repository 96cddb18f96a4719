"""
Configuration & Global Constants
================================
Central registry for rendering and editing constants, so that numbers such as
glyph tessellation are not scattered through the views.

Exports:
    QUADRIC_SLICES (int): Subdivisions around a glyph's axis.
    EDGE_RADIUS (float): Default radius of edge cylinders and tubes.
    ARROW_BASE_RADIUS, ARROW_HEIGHT (float): Default arrow head size.
    HISTOGRAM_VALUE_MIN, HISTOGRAM_VALUE_MAX (int): Accepted histogram heights.
"""

# Glyph tessellation
QUADRIC_SLICES: int = 8

EDGE_RADIUS: float = 0.02
ARROW_BASE_RADIUS: float = 0.05
ARROW_HEIGHT: float = 0.15

# Histogram height editor (QIntValidator range)
HISTOGRAM_VALUE_MIN: int = 0
HISTOGRAM_VALUE_MAX: int = 2**31 - 1
