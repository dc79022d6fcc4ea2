"""
UFO subsetting operations.

Reduces a UFO source to the glyphs it must keep (Basic Latin, allow-listed
names and their components) and drops layers, kerning, groups and features.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ufoLib2 import Font

from ufo_subset.config.glyphs import CREATOR, DEFAULT_KEEP_NAMES
from ufo_subset.core.closure import (
    close_over_components,
    component_graph,
    missing_component_bases,
)
from ufo_subset.core.font_io import (
    check_input_path,
    check_output_path,
    load_ufo,
    save_ufo,
)
from ufo_subset.core.lib_filter import filter_lib
from ufo_subset.core.prune import drop_auxiliary_tables, prune_glyphs, prune_layers
from ufo_subset.core.retention import directly_wanted
from ufo_subset.utils.logging import logger


@dataclass
class SubsetResult:
    """Summary of one subsetting run."""

    retained: frozenset[str]
    removed_glyphs: list[str] = field(default_factory=list)
    removed_layers: list[str] = field(default_factory=list)
    missing_components: set[str] = field(default_factory=set)


def subset_font(
    font: Font, keep_names: Iterable[str] = DEFAULT_KEEP_NAMES
) -> SubsetResult:
    """
    Subset a font in place.

    Steps:
      1. Evaluate the retention predicate over the default layer
      2. Close the wanted set over component bases
      3. Remove other layers, kerning, groups, features and unwanted glyphs
      4. Filter public.glyphOrder and public.postscriptNames

    Args:
        font: Font to modify
        keep_names: Glyph names kept regardless of codepoint

    Returns:
        SubsetResult describing what was kept and removed
    """
    layer = font.layers.defaultLayer
    graph = component_graph(layer)
    wanted = directly_wanted(layer, keep_names)
    retained = close_over_components(graph, wanted)

    missing = missing_component_bases(graph, retained)
    for base in sorted(missing):
        logger.warning(f"Component base '{base}' is referenced but not in the font")

    removed_layers = prune_layers(font)
    drop_auxiliary_tables(font)
    removed_glyphs = prune_glyphs(layer, retained)
    filter_lib(font.lib, retained)

    return SubsetResult(
        retained=retained,
        removed_glyphs=removed_glyphs,
        removed_layers=removed_layers,
        missing_components=missing,
    )


def subset_ufo(
    input_path: Path,
    output_path: Path,
    keep_names: Iterable[str] = DEFAULT_KEEP_NAMES,
    creator: str = CREATOR,
) -> SubsetResult:
    """
    Subset a UFO source on disk into a new UFO.

    Both paths are checked before anything is loaded: the input must be an
    existing .ufo directory and the output must not exist.

    Raises:
        SystemExit: On invalid paths, load failure or save failure
    """
    check_input_path(input_path)
    check_output_path(output_path)

    logger.info(f"Loading {input_path}")
    font = load_ufo(input_path)

    result = subset_font(font, keep_names)
    logger.info(
        f"Keeping {len(result.retained)} glyphs, removing {len(result.removed_glyphs)}"
    )
    for name in result.removed_layers:
        logger.info(f"  Removed layer {name}")

    save_ufo(font, output_path, creator)
    logger.info(f"Created {output_path}")
    return result
