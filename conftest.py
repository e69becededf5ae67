"""Shared pytest fixtures.

Builds a small but real TrueType font with fontTools so the tests can run the
whole pipeline, ReportLab embedding included, without any system fonts.
"""
import os
import sys

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

UNITS_PER_EM = 1000
ASCENT = 800
DESCENT = -200


def _rect_glyph(x0, y0, x1, y1):
    pen = TTGlyphPen(None)
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()
    return pen.glyph()


def build_test_font(path, family_name="Renshuu Test", style_name="Regular",
                    characters="ABCDEFGHIJKLMNOPQRSTUVWXYZ"):
    """Write a TrueType font where every character in ``characters`` is a filled box."""
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space", "box"])

    cmap = {ord(" "): "space"}
    cmap.update({ord(c): "box" for c in characters})
    fb.setupCharacterMap(cmap)

    fb.setupGlyf({
        ".notdef": _rect_glyph(50, 0, 550, 700),
        "space": TTGlyphPen(None).glyph(),
        "box": _rect_glyph(100, 0, 500, 700),
    })
    fb.setupHorizontalMetrics({
        ".notdef": (600, 50),
        "space": (300, 0),
        "box": (600, 100),
    })
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({
        "familyName": family_name,
        "styleName": style_name,
        "fullName": f"{family_name} {style_name}",
        "psName": f"{family_name.replace(' ', '')}-{style_name}",
        "uniqueFontIdentifier": f"{family_name} {style_name}",
        "version": "Version 1.0",
    })
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=abs(DESCENT),
        fsType=0,
    )
    fb.setupPost()
    fb.setupMaxp()
    fb.save(str(path))
    return str(path)


@pytest.fixture
def font_path(tmp_path):
    """Path to a freshly built "Renshuu Test Regular" TrueType font."""
    return build_test_font(tmp_path / "RenshuuTest-Regular.ttf")


@pytest.fixture
def make_font(tmp_path):
    """Factory for test fonts with custom names."""
    def _make(filename="Custom.ttf", **kwargs):
        return build_test_font(tmp_path / filename, **kwargs)
    return _make


@pytest.fixture
def garbage_font_path(tmp_path):
    """A .ttf file that is not a font."""
    path = tmp_path / "broken.ttf"
    path.write_bytes(b"this is not a font file at all")
    return str(path)
