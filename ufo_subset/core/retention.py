"""
Retention predicate: which glyphs are wanted directly.

A glyph is wanted directly when its primary codepoint is Basic Latin or its
name is on the allow-list. Glyphs that fail both may still survive as
components of a wanted glyph (see closure.py).
"""

from collections.abc import Collection, Iterable

from ufoLib2.objects import Glyph, Layer

from ufo_subset.config.glyphs import BASIC_LATIN_MAX, DEFAULT_KEEP_NAMES


def is_directly_wanted(
    glyph: Glyph, keep_names: Collection[str] = DEFAULT_KEEP_NAMES
) -> bool:
    """
    Check whether a glyph must be kept on its own merits.

    Args:
        glyph: Glyph to test
        keep_names: Glyph names kept verbatim (no wildcards, case-sensitive)

    Returns:
        True if the primary codepoint is <= U+007F or the name is allow-listed
    """
    if glyph.unicodes and glyph.unicodes[0] <= BASIC_LATIN_MAX:
        return True
    return glyph.name in keep_names


def directly_wanted(
    layer: Layer, keep_names: Iterable[str] = DEFAULT_KEEP_NAMES
) -> set[str]:
    """Names of every glyph in the layer that passes is_directly_wanted."""
    keep_names = frozenset(keep_names)
    return {glyph.name for glyph in layer if is_directly_wanted(glyph, keep_names)}
