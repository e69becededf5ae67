#!/usr/bin/env python3
"""Tests for the grid layout engine, paper profiles and coordinate helpers."""
import itertools
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from renshuu.config import BLACK, TEXT_GREY
from renshuu.exceptions import InvalidConfigurationError
from renshuu.paper_profile import LETTER, PaperProfile, get_paper_profile
from renshuu.worksheet_builder import (
    GridLayoutEngine,
    coordinate_utils,
    page_count,
    page_index,
    starts_new_page,
)

L = 58.5  # 468 / 8


@pytest.fixture
def engine():
    return GridLayoutEngine(LETTER)


def _overlaps(a, b):
    """True if two boxes share interior area."""
    return (
        a.x < b.x + b.size and b.x < a.x + a.size
        and a.y < b.y + b.size and b.y < a.y + a.size
    )


def test_letter_geometry(engine):
    assert engine.large_box_dimension == L
    assert engine.grid_width == 2 * L
    assert engine.grid_height == 5 * L
    assert engine.vertical_gap == pytest.approx(648 - 10 * L)


def test_page_index_and_page_breaks():
    for i in range(100):
        assert page_index(i) == i // 8
        assert starts_new_page(i) == (i > 0 and i % 8 == 0)
    assert not starts_new_page(0)


@pytest.mark.parametrize("count,pages", [(0, 1), (1, 1), (8, 1), (9, 2), (16, 2), (17, 3), (64, 8)])
def test_page_count(count, pages):
    assert page_count(count) == pages


def test_first_row_origins(engine):
    """Characters 0-3 share a row and step right by one block width."""
    layouts = [engine.layout(i) for i in range(4)]

    assert [l.y_block for l in layouts] == [0, 0, 0, 0]
    assert [l.x_block for l in layouts] == [0, 1, 2, 3]
    assert [l.x for l in layouts] == [72, 72 + 2 * L, 72 + 4 * L, 72 + 6 * L]
    assert all(l.y == 72 for l in layouts)

    for left, right in zip(layouts, layouts[1:]):
        assert right.x - left.x == 2 * L


def test_second_row_origin(engine):
    layout = engine.layout(4)
    assert (layout.x_block, layout.y_block) == (0, 1)
    assert layout.x == 72
    assert layout.y == pytest.approx(72 + 5 * L + engine.vertical_gap)
    # Second row ends exactly at the bottom margin
    assert layout.y + 5 * L == pytest.approx(72 + 648)


def test_ninth_character_starts_new_page(engine):
    first = engine.layout(0)
    ninth = engine.layout(8)

    assert ninth.starts_new_page
    assert ninth.page_index == 1
    assert (ninth.x_block, ninth.y_block) == (0, 0)
    assert (ninth.x, ninth.y) == (first.x, first.y)


def test_grids(engine):
    layout = engine.layout(5)
    x, y = layout.x, layout.y

    assert (layout.large.x, layout.large.y, layout.large.box_size) == (x, y, L)
    assert (layout.large.columns, layout.large.rows) == (1, 5)
    assert (layout.half.x, layout.half.y, layout.half.box_size) == (x + L, y, L / 2)
    assert (layout.half.columns, layout.half.rows) == (2, 6)
    assert (layout.quarter.x, layout.quarter.y, layout.quarter.box_size) == (x + L, y + 3 * L, L / 4)
    assert (layout.quarter.columns, layout.quarter.rows) == (4, 8)


def test_box_counts_and_no_overlap(engine):
    layout = engine.layout(0)

    assert len(layout.large.boxes()) == 5
    assert len(layout.half.boxes()) == 12
    assert len(layout.quarter.boxes()) == 32
    assert [g.box_count for g in layout.grids] == [5, 12, 32]

    boxes = [box for grid in layout.grids for box in grid.boxes()]
    assert len(boxes) == 49
    for a, b in itertools.combinations(boxes, 2):
        assert not _overlaps(a, b), f"{a} overlaps {b}"


def test_blocks_stay_inside_margins(engine):
    for i in range(8):
        layout = engine.layout(i)
        for box in (b for grid in layout.grids for b in grid.boxes()):
            assert box.x >= 72 and box.x + box.size <= 72 + 468 + 1e-9
            assert box.y >= 72 and box.y + box.size <= 72 + 648 + 1e-9


def test_box_enumeration_is_column_major(engine):
    half = engine.layout(0).half
    boxes = half.boxes()

    # First column top to bottom, then the second column
    assert [(b.x, b.y) for b in boxes[:6]] == [(half.x, half.y + r * L / 2) for r in range(6)]
    assert boxes[6].x == half.x + L / 2
    assert boxes[6].y == half.y


def test_overlays(engine):
    layout = engine.layout(2)
    x, y = layout.x, layout.y

    assert [(o.x, o.y, o.size, o.color) for o in layout.overlays] == [
        (x, y, L, BLACK),
        (x, y + L, L, TEXT_GREY),
        (x + L, y, L / 2, TEXT_GREY),
        (x + L, y + 3 * L, L / 4, TEXT_GREY),
    ]


def test_layout_is_pure(engine):
    assert engine.layout(13) == engine.layout(13)
    assert GridLayoutEngine(LETTER).layout(13) == engine.layout(13)


def test_large_index(engine):
    layout = engine.layout(1_000_003)
    assert layout.page_index == 125_000
    assert (layout.x_block, layout.y_block) == (3, 0)


def test_negative_index_rejected(engine):
    with pytest.raises(ValueError):
        engine.layout(-1)


def test_iter_layouts(engine):
    pairs = list(engine.iter_layouts(["a", "b", "c"]))
    assert [c for c, _ in pairs] == ["a", "b", "c"]
    assert [l.index for _, l in pairs] == [0, 1, 2]
    assert list(engine.iter_layouts([])) == []


def test_profile_rejects_short_page():
    with pytest.raises(InvalidConfigurationError):
        PaperProfile("short", "pt", 612, 792, 72, 468, 500)


def test_profile_rejects_bad_extents():
    with pytest.raises(InvalidConfigurationError):
        PaperProfile("wide", "pt", 612, 792, 72, 700, 648)
    with pytest.raises(InvalidConfigurationError):
        PaperProfile("empty", "pt", 612, 792, 72, 0, 648)
    with pytest.raises(InvalidConfigurationError):
        PaperProfile("furlongs", "furlong", 612, 792, 72, 468, 648)


def test_profile_units():
    assert LETTER.to_points(10) == 10
    inches = PaperProfile("letter-in", "in", 8.5, 11, 1, 6.5, 9)
    assert inches.to_points(1) == 72
    assert inches.page_size_points == (612, 792)


def test_get_paper_profile():
    assert get_paper_profile("Letter") is LETTER
    with pytest.raises(InvalidConfigurationError):
        get_paper_profile("a3")


def test_coordinate_utils():
    assert coordinate_utils.flip_y_coordinate(0, 792) == 792
    assert coordinate_utils.flip_y_coordinate(
        coordinate_utils.flip_y_coordinate(100, 792), 792) == 100
    assert coordinate_utils.rect_to_bottom_left(72, 72, L, L, 792) == (72, 792 - 72 - L, L, L)
    assert coordinate_utils.middle_to_baseline(10, 8, -2) == 13.0
