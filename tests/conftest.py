"""Shared pytest fixtures."""

import pytest
from ufoLib2 import Font
from ufoLib2.objects import Component


def _add_glyph(font_or_layer, name, unicodes=(), components=()):
    """Add a glyph with codepoints and component bases."""
    glyph = font_or_layer.newGlyph(name)
    glyph.unicodes = list(unicodes)
    for base in components:
        glyph.components.append(Component(baseGlyph=base))
    return glyph


@pytest.fixture
def add_glyph():
    """Helper adding a glyph with codepoints and component bases."""
    return _add_glyph


@pytest.fixture
def sample_font():
    """A small font with composites, extra layers and glyph-name metadata."""
    font = Font()

    _add_glyph(font, ".notdef")
    _add_glyph(font, "space", [0x20])
    _add_glyph(font, "A", [0x41])
    _add_glyph(font, "e", [0x65])
    _add_glyph(font, "f", [0x66])
    _add_glyph(font, "i", [0x69])
    _add_glyph(font, "acutecomb", [0x301])
    _add_glyph(font, "dotlessi", [0x131])
    _add_glyph(font, "eacute", [0xE9], ["e", "acutecomb"])
    _add_glyph(font, "f_i", [], ["f", "i"])
    _add_glyph(font, "f_f_i", [], ["f", "f_i"])
    _add_glyph(font, "florin", [0x192])
    _add_glyph(font, "Aring", [0xC5], ["A", "ringcomb"])
    _add_glyph(font, "ringcomb", [0x30A])

    background = font.newLayer("public.background")
    _add_glyph(background, "A")
    font.newLayer("sketches")

    font.kerning[("A", "florin")] = -40
    font.groups["public.kern1.A"] = ["A", "Aring"]
    font.features.text = "feature liga { sub f i by f_i; } liga;\n"

    font.lib["public.glyphOrder"] = [
        ".notdef",
        "space",
        "A",
        "Aring",
        "e",
        "eacute",
        "f",
        "f_f_i",
        "f_i",
        "florin",
        "i",
    ]
    font.lib["public.postscriptNames"] = {
        "f_i": "fi",
        "f_f_i": "ffi",
        "florin": "uni0192",
    }
    font.lib["com.example.note"] = "untouched"

    return font


@pytest.fixture
def sample_ufo(tmp_path, sample_font):
    """sample_font saved to disk as Sample.ufo."""
    path = tmp_path / "Sample.ufo"
    sample_font.save(path)
    return path
