"""Worksheet Options Dataclass

Configuration options for the worksheet pipeline.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .config import DEFAULT_OUTPUT_FILENAME
from .exceptions import InvalidConfigurationError
from .paper_profile import PAPER_PROFILES


@dataclass
class WorksheetOptions:
    """Configuration options for generating one worksheet.

    Attributes:
        font_path: Path to the TrueType font to embed
        characters: Characters to practice, in order

        # Output Options
        paper: Paper preset name (only "letter" for now)
        output_path: Where to write the PDF

        # Internal State (populated by caller)
        original_filename: Original font file name when font_path is a temporary upload
    """

    # Required
    font_path: str
    characters: List[str] = field(default_factory=list)

    # Output Options
    paper: str = "letter"
    output_path: str = DEFAULT_OUTPUT_FILENAME

    # Internal State
    original_filename: Optional[str] = None

    def __post_init__(self):
        """Validate configuration options after initialization."""
        if self.paper.lower() not in PAPER_PROFILES:
            raise InvalidConfigurationError(
                f"paper must be one of {', '.join(sorted(PAPER_PROFILES))}, got {self.paper}"
            )
        if not self.output_path:
            raise InvalidConfigurationError("output_path cannot be empty")
        if isinstance(self.characters, str):
            raise InvalidConfigurationError(
                "characters must be a sequence of characters, not a string; use split_characters()"
            )
