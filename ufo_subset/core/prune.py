"""
Pruning of everything that is not retained.

Layers other than the default one, kerning, groups and feature code are
dropped outright; the default layer keeps exactly the retained glyphs.
"""

from collections.abc import Set

from ufoLib2 import Font
from ufoLib2.objects import Layer


def prune_layers(font: Font) -> list[str]:
    """
    Delete every layer except the default one.

    Returns:
        Names of the removed layers, in layer order
    """
    default_name = font.layers.defaultLayer.name
    to_remove = [name for name in font.layers.layerOrder if name != default_name]
    for name in to_remove:
        del font.layers[name]
    return to_remove


def drop_auxiliary_tables(font: Font) -> None:
    """Clear kerning, groups and feature code."""
    font.kerning.clear()
    font.groups.clear()
    font.features.text = ""


def prune_glyphs(layer: Layer, retained: Set[str]) -> list[str]:
    """
    Delete every glyph whose name is not retained.

    Args:
        layer: Layer to prune in place
        retained: Names to keep

    Returns:
        Sorted names of the removed glyphs
    """
    to_delete = sorted(name for name in layer.keys() if name not in retained)
    for name in to_delete:
        del layer[name]
    return to_delete
