"""Paper Profile Dataclass

Page size, margin and unit presets for worksheet layout.
"""
from dataclasses import dataclass
from typing import Dict

from reportlab.lib.units import cm, inch, mm

from .config import BLOCK_ROWS_PER_PAGE, BLOCKS_PER_ROW
from .exceptions import InvalidConfigurationError

# Size of one profile unit in PDF points
UNIT_SCALE = {
    "pt": 1.0,
    "in": inch,
    "cm": cm,
    "mm": mm,
}

# Large box edge relative to a block: each block is two large boxes wide
# and five tall
BLOCK_WIDTH_IN_BOXES = 2
BLOCK_HEIGHT_IN_BOXES = 5


@dataclass(frozen=True)
class PaperProfile:
    """Named page-size/margin/unit configuration.

    Attributes:
        name: Preset name (e.g. "letter")
        unit: Unit of every other measurement ("pt", "in", "cm" or "mm")
        page_width: Physical page width
        page_height: Physical page height
        margin: Margin applied on every side
        available_horizontal: Usable width between the horizontal margins
        available_vertical: Usable height between the vertical margins
    """

    name: str
    unit: str
    page_width: float
    page_height: float
    margin: float
    available_horizontal: float
    available_vertical: float

    def __post_init__(self):
        """Validate the profile so a bad preset is rejected before any drawing."""
        if self.unit not in UNIT_SCALE:
            raise InvalidConfigurationError(
                f"Unknown unit '{self.unit}' for paper profile '{self.name}'"
            )
        if self.margin < 0:
            raise InvalidConfigurationError(
                f"Margin must be non-negative, got {self.margin}"
            )
        if not (0 < self.available_horizontal < self.page_width):
            raise InvalidConfigurationError(
                f"available_horizontal must be between 0 and page width {self.page_width}, "
                f"got {self.available_horizontal}"
            )
        if not (0 < self.available_vertical < self.page_height):
            raise InvalidConfigurationError(
                f"available_vertical must be between 0 and page height {self.page_height}, "
                f"got {self.available_vertical}"
            )
        if self.vertical_gap < 0:
            raise InvalidConfigurationError(
                f"Paper profile '{self.name}' is too short for {BLOCK_ROWS_PER_PAGE} rows of blocks: "
                f"vertical gap would be {self.vertical_gap:.2f}{self.unit}"
            )

    @property
    def large_box_dimension(self) -> float:
        """Edge length of the full-size boxes."""
        return self.available_horizontal / (BLOCKS_PER_ROW * BLOCK_WIDTH_IN_BOXES)

    @property
    def grid_width(self) -> float:
        return self.large_box_dimension * BLOCK_WIDTH_IN_BOXES

    @property
    def grid_height(self) -> float:
        return self.large_box_dimension * BLOCK_HEIGHT_IN_BOXES

    @property
    def vertical_gap(self) -> float:
        """Space left between the stacked block rows on a page."""
        return self.available_vertical - self.grid_height * BLOCK_ROWS_PER_PAGE

    @property
    def page_size_points(self) -> tuple:
        """Page size as (width, height) in PDF points."""
        return self.to_points(self.page_width), self.to_points(self.page_height)

    def to_points(self, value: float) -> float:
        """Convert a measurement in this profile's unit to PDF points."""
        return value * UNIT_SCALE[self.unit]


# For now, only US Letter is supported
LETTER = PaperProfile(
    name="letter",
    unit="pt",
    page_width=612,
    page_height=792,
    margin=72,  # 1 inch margin on each side
    available_horizontal=468,
    available_vertical=648,
)

PAPER_PROFILES: Dict[str, PaperProfile] = {
    LETTER.name: LETTER,
}


def get_paper_profile(name: str) -> PaperProfile:
    """
    Look up a paper preset by name.

    Args:
        name: Preset name, case-insensitive (e.g. "letter")

    Returns:
        The matching PaperProfile

    Raises:
        InvalidConfigurationError: If no preset has that name
    """
    try:
        return PAPER_PROFILES[name.lower()]
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown paper profile '{name}'. Supported: {', '.join(sorted(PAPER_PROFILES))}"
        )
