"""
Subset validation.

Checks that a subset UFO is self-consistent: a single layer, no kerning,
groups or features, and no glyph-name reference to a glyph that was removed.
"""

import sys
from pathlib import Path

from ufoLib2 import Font

from ufo_subset.config.glyphs import CREATOR, GLYPH_ORDER_KEY, POSTSCRIPT_NAMES_KEY
from ufo_subset.core.font_io import check_input_path, load_ufo, read_creator
from ufo_subset.utils.logging import logger


def check_single_layer(font: Font) -> bool:
    """Check that only the default layer is left."""
    layer_names = font.layers.layerOrder
    if len(layer_names) != 1:
        logger.error(f"Expected a single layer, found: {', '.join(layer_names)}")
        return False
    logger.info(f"Single layer: {layer_names[0]}")
    return True


def check_auxiliary_tables(font: Font) -> bool:
    """Check that kerning, groups and features are empty."""
    success = True
    if font.kerning:
        logger.error(f"Kerning not empty ({len(font.kerning)} pairs)")
        success = False
    if font.groups:
        logger.error(f"Groups not empty ({len(font.groups)} groups)")
        success = False
    if font.features.text:
        logger.error("Feature code not empty")
        success = False
    if success:
        logger.info("No kerning, groups or features")
    return success


def check_components(font: Font) -> bool:
    """
    Report component bases that name no glyph in the font.

    Subsetting keeps every base that exists, so a missing base was already
    missing from the source. It is reported but does not fail validation.
    """
    missing = 0
    for glyph in font:
        for component in glyph.components:
            if component.baseGlyph not in font:
                logger.warning(
                    f"Glyph '{glyph.name}' uses missing component '{component.baseGlyph}'"
                )
                missing += 1
    if not missing:
        logger.info(f"All components resolve ({len(font)} glyphs)")
    return True


def check_lib(font: Font) -> bool:
    """Check that glyph order and PostScript names only name existing glyphs."""
    success = True

    for name in font.lib.get(GLYPH_ORDER_KEY, []):
        if name not in font:
            logger.error(f"{GLYPH_ORDER_KEY} lists missing glyph '{name}'")
            success = False

    for name in font.lib.get(POSTSCRIPT_NAMES_KEY, {}):
        if name not in font:
            logger.error(f"{POSTSCRIPT_NAMES_KEY} maps missing glyph '{name}'")
            success = False

    if success:
        logger.info("Glyph order and PostScript names are consistent")
    return success


def validate_font(font: Font) -> bool:
    """Run every in-memory check, reporting all failures."""
    results = [
        check_single_layer(font),
        check_auxiliary_tables(font),
        check_components(font),
        check_lib(font),
    ]
    return all(results)


def validate_subset(path: Path) -> None:
    """
    Validate a subset UFO on disk.

    Raises:
        SystemExit: If the path is invalid or any check fails
    """
    check_input_path(path)
    font = load_ufo(path)

    success = validate_font(font)

    creator = read_creator(path)
    if creator != CREATOR:
        logger.warning(f"Creator is '{creator}', not '{CREATOR}'")

    if not success:
        logger.error(f"{path} failed validation")
        sys.exit(1)
    logger.info(f"{path} passed validation")
