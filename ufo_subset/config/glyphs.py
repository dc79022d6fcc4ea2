"""
Glyph retention configuration.

Defines which glyphs survive subsetting regardless of their codepoints,
and the UFO lib keys that name glyphs.
"""

# Highest primary codepoint kept unconditionally (Basic Latin, U+0000-U+007F)
BASIC_LATIN_MAX = 0x7F

# Glyph names kept even without a Basic Latin codepoint
DEFAULT_KEEP_NAMES = frozenset(
    [
        ".notdef",
        # Accented letters (composites of Basic Latin bases)
        "eacute",
        "egrave",
        # Ligatures
        "f_f",
        "f_i",
        "f_f_i",
        # Stylistic alternates
        "g.salt",
        "zero.slash",
        # Oldstyle figures
        "zero.osf",
        "one.osf",
        "two.osf",
        "three.osf",
        "four.osf",
        "five.osf",
        "six.osf",
        "seven.osf",
        "eight.osf",
        "nine.osf",
    ]
)

# Written to metainfo.plist to mark the output as a derived artifact
CREATOR = "ufo-subset"

# UFO lib keys that reference glyph names
GLYPH_ORDER_KEY = "public.glyphOrder"
POSTSCRIPT_NAMES_KEY = "public.postscriptNames"
