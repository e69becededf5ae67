"""Worksheet Builder Module

Orchestrates worksheet generation by coordinating specialized components:
- FontManager: Reads the font file and resolves its name
- GridLayoutEngine: Computes block geometry per character
- DocumentRenderer: Draws pages, boxes and glyphs (ReportLab by default)

Generation runs in two phases. ``load_font`` reads and names the font; nothing
is drawn until it has succeeded. ``generate`` then registers the font once and
draws every character in sequence order, starting a new page every eight
characters, before exporting the document.
"""
import logging
from typing import Optional, Sequence

from ..config import BLACK, DOTTED_LINE_GREY, GUIDE_LINE_DASH, SOLID_LINE_DASH
from ..paper_profile import LETTER, PaperProfile
from .font_manager import FontDescriptor, FontManager
from .layout_engine import BlockLayout, Box, GridLayoutEngine, TextOverlay
from .renderer import DocumentRenderer, ReportLabRenderer

logger = logging.getLogger(__name__)


class WorksheetBuilder:
    """Build a handwriting practice PDF for a sequence of characters.

    Attributes:
        output_path: Where the finished PDF is written
        paper_profile: Page size and margins
        renderer: Drawing backend (a fresh ReportLabRenderer unless given)
        font_manager: Font loader
        layout_engine: Block geometry for paper_profile
    """

    def __init__(
        self,
        output_path: str,
        paper_profile: PaperProfile = LETTER,
        renderer: Optional[DocumentRenderer] = None,
        font_manager: Optional[FontManager] = None,
    ):
        """
        Initialize worksheet builder.

        Args:
            output_path: Where to save the final PDF
            paper_profile: Paper preset to lay out on
            renderer: Optional renderer; one builder drives one renderer for a single document
            font_manager: Optional font loader
        """
        self.output_path = output_path
        self.paper_profile = paper_profile
        self.renderer = renderer or ReportLabRenderer(paper_profile)
        self.font_manager = font_manager or FontManager()
        self.layout_engine = GridLayoutEngine(paper_profile)

    def load_font(self, font_path: str, source_name: Optional[str] = None) -> FontDescriptor:
        """
        Read the font file and resolve its name.

        Args:
            font_path: Path to a TrueType font
            source_name: Original file name, if the file was stored under another name

        Returns:
            FontDescriptor for generate()

        Raises:
            FontError: If the file cannot be read or parsed
        """
        return self.font_manager.load(font_path, source_name=source_name)

    def generate(self, font: FontDescriptor, characters: Sequence[str]) -> str:
        """
        Draw all characters and export the document.

        Args:
            font: Font loaded by load_font()
            characters: Characters to practice, one block each (may be empty)

        Returns:
            Path to the written PDF

        Raises:
            UnsupportedFontError: If the renderer cannot embed the font
            RenderingError: If the document cannot be written
        """
        try:
            self.renderer.register_font(font)
            self.renderer.set_active_font(font.font_id)

            for char, layout in self.layout_engine.iter_layouts(characters):
                # Add a page after rendering every eight characters
                if layout.starts_new_page:
                    self.renderer.new_page()
                self._draw_block(char, layout)

            logger.info(
                f"Laid out {len(characters)} character(s) on {self.renderer.page_count} page(s) "
                f"with font '{font.display_name}'"
            )
            return self.renderer.export(self.output_path)
        finally:
            # The font is not kept once the document is written (or abandoned)
            self.renderer.release_fonts()

    def build(self, font_path: str, characters: Sequence[str], source_name: Optional[str] = None) -> str:
        """Load the font, then generate the worksheet."""
        font = self.load_font(font_path, source_name=source_name)
        return self.generate(font, characters)

    def _draw_block(self, char: str, layout: BlockLayout):
        """Draw the three grids of one block, then the glyph overlays."""
        for grid in layout.grids:
            for box in grid.boxes():
                self._draw_box(box)

        for overlay in layout.overlays:
            self._place_text(char, overlay)

    def _draw_box(self, box: Box):
        """Draw a solid box outline with dotted center and diagonal guides."""
        r = self.renderer
        x, y, size = box.x, box.y, box.size

        r.stroke_rect(x, y, size, size)

        r.set_line_dash_pattern(GUIDE_LINE_DASH, 0)
        r.set_draw_color(DOTTED_LINE_GREY)

        # Horizontal and vertical center lines
        r.draw_line(x, y + size / 2, x + size, y + size / 2)
        r.draw_line(x + size / 2, y, x + size / 2, y + size)

        # Diagonals
        r.draw_line(x, y, x + size, y + size)
        r.draw_line(x + size, y, x, y + size)

        # Reset line style
        r.set_line_dash_pattern(SOLID_LINE_DASH, 0)
        r.set_draw_color(BLACK)

    def _place_text(self, char: str, overlay: TextOverlay):
        """Draw ``char`` vertically centered in the box at the overlay's origin."""
        self.renderer.set_font_size(overlay.size)
        self.renderer.set_text_color(overlay.color)

        # Average the box center and the text line center
        line_height = self.renderer.measure_line_height()
        adjust = (overlay.size + line_height) / 4

        self.renderer.draw_text(char, overlay.x, overlay.y + adjust, baseline="middle")


def create_worksheet_pdf(
    output_path: str,
    font_path: str,
    characters: Sequence[str],
    paper_profile: PaperProfile = LETTER,
    source_name: Optional[str] = None,
) -> str:
    """
    Create a practice worksheet PDF.

    Args:
        output_path: Where to save the PDF
        font_path: TrueType font to render the characters with
        characters: Characters to practice
        paper_profile: Paper preset (US Letter by default)
        source_name: Original font file name for messages

    Returns:
        Path to created document
    """
    builder = WorksheetBuilder(output_path, paper_profile=paper_profile)
    return builder.build(font_path, characters, source_name=source_name)
