"""Worksheet Result Dataclass

Result outputs from the worksheet pipeline.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class WorksheetResult:
    """Result from the worksheet pipeline.

    Attributes:
        status: Processing status ("completed" or "failed")
        status_message: Human-readable status message

        # Output
        output_pdf_path: Path to the generated PDF (None on failure)
        font_name: Display name resolved for the font
        character_count: Number of characters laid out
        page_count: Number of pages in the PDF

        # Error Handling
        error: Error message if generation failed (None otherwise)
    """

    # Status
    status: str
    status_message: str

    # Output
    output_pdf_path: Optional[str] = None
    font_name: Optional[str] = None
    character_count: int = 0
    page_count: int = 0

    # Error Handling
    error: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """True if the worksheet was written."""
        return self.status == "completed" and self.output_pdf_path is not None

    @property
    def is_failed(self) -> bool:
        """True if generation failed with an error."""
        return self.status == "failed"

    def to_gradio_outputs(self) -> tuple:
        """Convert to Gradio UI outputs format.

        Returns:
            Tuple of (output_file, status)
        """
        return self.output_pdf_path, self.status_message
