"""Worksheet Builder Package

This package turns a character sequence and a font into a practice PDF:

Core Classes:
- WorksheetBuilder: Main orchestrator class (from builder.py)
- GridLayoutEngine: Block geometry per character
- FontManager: Font loading and name resolution
- ReportLabRenderer: DocumentRenderer on a ReportLab canvas

Utilities:
- coordinate_utils: Coordinate conversion functions

Helper Functions:
- create_worksheet_pdf: Create a worksheet PDF in one call
- resolve_font_name: Pick a display name from parsed font names
"""

from .builder import WorksheetBuilder, create_worksheet_pdf
from .font_manager import FontDescriptor, FontManager, resolve_font_name
from .layout_engine import (
    BlockLayout,
    Box,
    Grid,
    GridLayoutEngine,
    TextOverlay,
    page_count,
    page_index,
    starts_new_page,
)
from .renderer import DocumentRenderer, ReportLabRenderer
from . import coordinate_utils

# Expose public API
__all__ = [
    # Main builder class
    'WorksheetBuilder',

    # Helper functions
    'create_worksheet_pdf',
    'resolve_font_name',
    'page_count',
    'page_index',
    'starts_new_page',

    # Component classes
    'FontManager',
    'FontDescriptor',
    'GridLayoutEngine',
    'DocumentRenderer',
    'ReportLabRenderer',

    # Layout values
    'BlockLayout',
    'Box',
    'Grid',
    'TextOverlay',

    # Utilities module
    'coordinate_utils',
]
