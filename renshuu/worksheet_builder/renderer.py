"""Document Renderer Module

Drawing backend used by the worksheet builder. ``DocumentRenderer`` is the
capability set the builder needs (pages, shapes, text, fonts, export);
``ReportLabRenderer`` implements it on a ReportLab canvas.

Renderer coordinates use a top-left origin in the paper profile's unit, the
same system the layout engine produces.
"""
import logging
from abc import ABC, abstractmethod
from io import BytesIO
from typing import List

from reportlab.lib import colors
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas as pdfcanvas

from ..config import LINE_HEIGHT_FACTOR
from ..exceptions import RenderingError, UnsupportedFontError
from ..paper_profile import LETTER, PaperProfile
from . import coordinate_utils
from .font_manager import FontDescriptor

logger = logging.getLogger(__name__)

BASELINES = ("alphabetic", "middle", "top")


class DocumentRenderer(ABC):
    """Stateful drawing surface driven by the worksheet builder."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages started so far (the first page always exists)."""

    @abstractmethod
    def new_page(self) -> None:
        """Finish the current page and start drawing on a fresh one."""

    @abstractmethod
    def set_line_dash_pattern(self, pattern: List[float], phase: float = 0) -> None:
        """Set the dash pattern for subsequent lines; ``[]`` means solid."""

    @abstractmethod
    def set_draw_color(self, color: str) -> None:
        """Set the stroke color as a hex string."""

    @abstractmethod
    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Stroke a rectangle whose top-left corner is (x, y)."""

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Stroke a straight line."""

    @abstractmethod
    def set_font_size(self, size: float) -> None:
        """Set the size of subsequent text."""

    @abstractmethod
    def set_text_color(self, color: str) -> None:
        """Set the fill color of subsequent text as a hex string."""

    @abstractmethod
    def measure_line_height(self) -> float:
        """Line height at the current font size."""

    @abstractmethod
    def draw_text(self, text: str, x: float, y: float, baseline: str = "alphabetic") -> None:
        """Draw text at (x, y), with y interpreted according to ``baseline``."""

    @abstractmethod
    def register_font(self, font: FontDescriptor) -> None:
        """Embed a font so it can be selected by its ``font_id``."""

    @abstractmethod
    def set_active_font(self, font_id: str) -> None:
        """Use a registered font for subsequent text."""

    @abstractmethod
    def export(self, destination: str) -> str:
        """Write the finished document to ``destination`` and return the path."""

    def release_fonts(self) -> None:
        """Drop any fonts this renderer added to a shared registry."""


class ReportLabRenderer(DocumentRenderer):
    """DocumentRenderer on top of ``reportlab.pdfgen.canvas``.

    The document is assembled in memory and only written when ``export`` is
    called, so a generation that fails part way leaves no file behind.

    Attributes:
        profile: Paper profile giving page size and unit
    """

    DEFAULT_FONT = "Helvetica"

    def __init__(self, profile: PaperProfile = LETTER, title: str = "Renshuu practice sheet"):
        self.profile = profile
        self._page_width, self._page_height = profile.page_size_points
        self._buffer = BytesIO()
        self._canvas = pdfcanvas.Canvas(
            self._buffer,
            pagesize=(self._page_width, self._page_height),
            pageCompression=1,
        )
        self._canvas.setTitle(title)
        self._font_name = self.DEFAULT_FONT
        self._font_size = 12.0
        self._page_count = 1
        self._exported = False
        self._registered_fonts: List[TTFont] = []

    def _pt(self, value: float) -> float:
        return self.profile.to_points(value)

    def _y(self, y: float) -> float:
        return coordinate_utils.flip_y_coordinate(self._pt(y), self._page_height)

    @property
    def page_count(self) -> int:
        return self._page_count

    def new_page(self) -> None:
        self._canvas.showPage()
        self._page_count += 1
        # showPage resets the graphics state, including the font
        self._canvas.setFont(self._font_name, self._pt(self._font_size))

    def set_line_dash_pattern(self, pattern: List[float], phase: float = 0) -> None:
        self._canvas.setDash([self._pt(p) for p in pattern], self._pt(phase))

    def set_draw_color(self, color: str) -> None:
        self._canvas.setStrokeColor(colors.HexColor(color))

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        rx, ry, rw, rh = coordinate_utils.rect_to_bottom_left(
            self._pt(x), self._pt(y), self._pt(width), self._pt(height), self._page_height
        )
        self._canvas.rect(rx, ry, rw, rh, stroke=1, fill=0)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._canvas.line(self._pt(x1), self._y(y1), self._pt(x2), self._y(y2))

    def set_font_size(self, size: float) -> None:
        self._font_size = size
        self._canvas.setFont(self._font_name, self._pt(size))

    def set_text_color(self, color: str) -> None:
        self._canvas.setFillColor(colors.HexColor(color))

    def measure_line_height(self) -> float:
        return self._font_size * LINE_HEIGHT_FACTOR

    def draw_text(self, text: str, x: float, y: float, baseline: str = "alphabetic") -> None:
        if baseline not in BASELINES:
            raise ValueError(f"Unsupported baseline '{baseline}', expected one of {BASELINES}")

        if baseline != "alphabetic":
            ascent, descent = pdfmetrics.getAscentDescent(self._font_name, self._pt(self._font_size))
            # Metrics come back in points; layout works in profile units
            scale = self._pt(1)
            ascent, descent = ascent / scale, descent / scale
            if baseline == "middle":
                y = coordinate_utils.middle_to_baseline(y, ascent, descent)
            else:
                y = y + ascent

        self._canvas.drawString(self._pt(x), self._y(y), text)

    def register_font(self, font: FontDescriptor) -> None:
        # The registry is process-wide; the id already names these exact bytes
        if font.font_id in pdfmetrics.getRegisteredFontNames():
            logger.debug(f"Font '{font.display_name}' already registered as {font.font_id}")
            return

        try:
            ttfont = TTFont(font.font_id, BytesIO(font.data))
            pdfmetrics.registerFont(ttfont)
        except Exception as e:
            raise UnsupportedFontError(font.source_name, str(e)) from e

        self._registered_fonts.append(ttfont)
        logger.debug(f"Registered font '{font.display_name}' as {font.font_id}")

    def set_active_font(self, font_id: str) -> None:
        self._font_name = font_id
        self._canvas.setFont(font_id, self._pt(self._font_size))

    def export(self, destination: str) -> str:
        if self._exported:
            raise RenderingError("Document has already been exported")

        # Close the last page; save() adds no extra page once it is empty
        self._canvas.showPage()
        self._canvas.save()
        self._exported = True

        try:
            with open(destination, "wb") as f:
                f.write(self._buffer.getvalue())
        except OSError as e:
            raise RenderingError(f"Failed to write PDF to '{destination}': {e}") from e

        logger.info(f"Saved {self._page_count} page(s) to {destination}")
        return destination

    def release_fonts(self) -> None:
        """Unregister the fonts this renderer registered so their bytes can be freed."""
        while self._registered_fonts:
            ttfont = self._registered_fonts.pop()
            ttfont.unregister()
            logger.debug(f"Unregistered font {ttfont.fontName}")
