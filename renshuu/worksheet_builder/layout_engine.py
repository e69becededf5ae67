"""Grid Layout Engine

Maps a character's position in the sequence to the page, block slot and
box geometry of its practice block.

Each character gets one block made of three grids that share an origin:

- large: one column of five full-size boxes
- half: a 2x6 grid of half-size boxes to the right of the large column
- quarter: a 4x8 grid of quarter-size boxes below the first three half rows

Blocks are placed four to a row and two rows to a page. Coordinates use a
top-left origin in the paper profile's unit. Everything here is pure, so the
same index and profile always give the same geometry.
"""
import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from ..config import BLACK, BLOCKS_PER_ROW, BLOCK_ROWS_PER_PAGE, CHARACTERS_PER_PAGE, TEXT_GREY
from ..paper_profile import PaperProfile


@dataclass(frozen=True)
class Box:
    """One square tracing cell."""

    x: float
    y: float
    size: float


@dataclass(frozen=True)
class Grid:
    """Uniform rectangular arrangement of boxes."""

    x: float
    y: float
    box_size: float
    columns: int
    rows: int

    def boxes(self) -> List[Box]:
        """Enumerate boxes column by column, top to bottom within a column."""
        return [
            Box(self.x + col * self.box_size, self.y + row * self.box_size, self.box_size)
            for col in range(self.columns)
            for row in range(self.rows)
        ]

    @property
    def box_count(self) -> int:
        return self.columns * self.rows


@dataclass(frozen=True)
class TextOverlay:
    """Placement of the practice glyph over a box."""

    x: float
    y: float
    size: float
    color: str


@dataclass(frozen=True)
class BlockLayout:
    """Complete geometry for one character's block.

    Attributes:
        index: Zero-based position of the character in the sequence
        page_index: Zero-based page the block lands on
        x_block: Column slot on the page (0-3)
        y_block: Row slot on the page (0-1)
        x, y: Top-left corner of the block
        large, half, quarter: The three grids
        overlays: Glyph placements in drawing order
    """

    index: int
    page_index: int
    x_block: int
    y_block: int
    x: float
    y: float
    large: Grid
    half: Grid
    quarter: Grid
    overlays: Tuple[TextOverlay, ...]

    @property
    def grids(self) -> Tuple[Grid, Grid, Grid]:
        return self.large, self.half, self.quarter

    @property
    def starts_new_page(self) -> bool:
        return starts_new_page(self.index)


def page_index(index: int) -> int:
    """Zero-based page holding the character at ``index``."""
    return index // CHARACTERS_PER_PAGE


def starts_new_page(index: int) -> bool:
    """True if a page break must be issued before drawing ``index``."""
    return index > 0 and index % CHARACTERS_PER_PAGE == 0


def page_count(character_count: int) -> int:
    """
    Number of pages a sequence occupies.

    An empty sequence still produces the first (blank) page.

    Examples:
        >>> page_count(0)
        1
        >>> page_count(17)
        3
    """
    return max(1, math.ceil(character_count / CHARACTERS_PER_PAGE))


class GridLayoutEngine:
    """Computes block layouts for a paper profile.

    Attributes:
        profile: Paper profile the layout is computed for
        large_box_dimension: Edge of the full-size boxes
        grid_width: Width of one block (two large boxes)
        grid_height: Height of one block (five large boxes)
        vertical_gap: Space between the two block rows of a page
    """

    def __init__(self, profile: PaperProfile):
        self.profile = profile
        self.large_box_dimension = profile.large_box_dimension
        self.grid_width = profile.grid_width
        self.grid_height = profile.grid_height
        self.vertical_gap = profile.vertical_gap

        self._block_top_offsets = (0, self.grid_height + self.vertical_gap)

    def block_origin(self, index: int) -> Tuple[float, float]:
        """Top-left corner of the block for ``index``."""
        x_block, y_block = self.block_slot(index)
        x = x_block * self.grid_width + self.profile.margin
        y = self._block_top_offsets[y_block] + self.profile.margin
        return x, y

    @staticmethod
    def block_slot(index: int) -> Tuple[int, int]:
        """(column, row) slot of ``index`` on its page."""
        x_block = index % BLOCKS_PER_ROW
        # Switch block rows every four characters
        y_block = (index // BLOCKS_PER_ROW) % BLOCK_ROWS_PER_PAGE
        return x_block, y_block

    def layout(self, index: int) -> BlockLayout:
        """
        Compute the block geometry for the character at ``index``.

        Args:
            index: Zero-based character index (no upper bound)

        Returns:
            BlockLayout with grids and glyph overlays

        Raises:
            ValueError: If index is negative
        """
        if index < 0:
            raise ValueError(f"Character index must be non-negative, got {index}")

        size = self.large_box_dimension
        x_block, y_block = self.block_slot(index)
        x, y = self.block_origin(index)

        large = Grid(x, y, size, 1, 5)
        half = Grid(x + size, y, size / 2, 2, 6)
        quarter = Grid(x + size, y + size * 3, size / 4, 4, 8)

        overlays = (
            # Black glyph in the first large box, grey in the second
            TextOverlay(x, y, size, BLACK),
            TextOverlay(x, y + size, size, TEXT_GREY),
            TextOverlay(half.x, half.y, half.box_size, TEXT_GREY),
            TextOverlay(quarter.x, quarter.y, quarter.box_size, TEXT_GREY),
        )

        return BlockLayout(
            index=index,
            page_index=page_index(index),
            x_block=x_block,
            y_block=y_block,
            x=x,
            y=y,
            large=large,
            half=half,
            quarter=quarter,
            overlays=overlays,
        )

    def iter_layouts(self, characters: Sequence[str]) -> Iterator[Tuple[str, BlockLayout]]:
        """Yield (character, layout) pairs in sequence order."""
        for i, char in enumerate(characters):
            yield char, self.layout(i)
