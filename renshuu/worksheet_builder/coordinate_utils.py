"""Coordinate Conversion Utilities

Pure helpers for converting between the coordinate systems used when drawing
worksheets:

- Layout coordinates: origin at the top-left of the page, y grows downward
- ReportLab coordinates: origin at the bottom-left, y grows upward

All functions are pure and can be tested in isolation.
"""

from typing import Tuple


def flip_y_coordinate(y: float, page_height: float) -> float:
    """
    Flip Y coordinate between top-left and bottom-left origin systems.

    Args:
        y: Y coordinate in source system
        page_height: Height of the page (in same units as y)

    Returns:
        Y coordinate in flipped system

    Examples:
        >>> flip_y_coordinate(0, 792)  # Top becomes bottom
        792
        >>> flip_y_coordinate(792, 792)  # Bottom becomes top
        0

    Notes:
        This function is its own inverse:
        flip_y_coordinate(flip_y_coordinate(y, h), h) == y
    """
    return page_height - y


def rect_to_bottom_left(
    x: float,
    y: float,
    width: float,
    height: float,
    page_height: float
) -> Tuple[float, float, float, float]:
    """
    Convert a top-left anchored rectangle to ReportLab's (x, y, width, height).

    Args:
        x, y: Top-left corner in layout coordinates
        width, height: Rectangle size
        page_height: Height of the page

    Returns:
        Tuple of (x, y, width, height) where (x, y) is the bottom-left corner

    Examples:
        >>> rect_to_bottom_left(72, 72, 58.5, 58.5, 792)
        (72, 661.5, 58.5, 58.5)
    """
    return x, page_height - y - height, width, height


def middle_to_baseline(y: float, ascent: float, descent: float) -> float:
    """
    Convert a vertical text middle into an alphabetic baseline.

    Both values are in layout coordinates (y grows downward). The glyph box
    spans ``ascent`` above the baseline and ``-descent`` below it, so its
    middle sits ``(ascent + descent) / 2`` above the baseline.

    Args:
        y: Desired vertical middle of the text
        ascent: Font ascent at the current size (positive)
        descent: Font descent at the current size (negative or zero)

    Returns:
        Baseline y in layout coordinates

    Examples:
        >>> middle_to_baseline(10, 8, -2)
        13.0
    """
    return y + (ascent + descent) / 2
