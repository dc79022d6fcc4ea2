"""
Filtering of glyph-name metadata stored in the UFO lib.

Only public.glyphOrder and public.postscriptNames are rewritten; every other
lib key passes through untouched.
"""

from collections.abc import MutableMapping, Set

from ufo_subset.config.glyphs import GLYPH_ORDER_KEY, POSTSCRIPT_NAMES_KEY


def filter_glyph_order(lib: MutableMapping, retained: Set[str]) -> None:
    """Drop glyph order entries that are not retained, keeping their order."""
    order = lib.get(GLYPH_ORDER_KEY)
    if order is None:
        return
    lib[GLYPH_ORDER_KEY] = [name for name in order if name in retained]


def filter_postscript_names(lib: MutableMapping, retained: Set[str]) -> None:
    """Drop PostScript name mappings whose glyph is not retained."""
    names = lib.get(POSTSCRIPT_NAMES_KEY)
    if names is None:
        return
    lib[POSTSCRIPT_NAMES_KEY] = {
        glyph: ps_name for glyph, ps_name in names.items() if glyph in retained
    }


def filter_lib(lib: MutableMapping, retained: Set[str]) -> None:
    """Restrict every glyph-name lib entry to the retained names."""
    filter_glyph_order(lib, retained)
    filter_postscript_names(lib, retained)
