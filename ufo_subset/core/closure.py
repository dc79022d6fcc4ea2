"""
Component dependency closure.

Expands a set of wanted glyph names so that every component base of a
retained glyph is retained too, transitively.
"""

from collections.abc import Iterable

from ufoLib2.objects import Layer


def component_graph(layer: Layer) -> dict[str, list[str]]:
    """Map each glyph name in the layer to the base names of its components."""
    return {
        glyph.name: [component.baseGlyph for component in glyph.components]
        for glyph in layer
    }


def close_over_components(
    graph: dict[str, list[str]], wanted: Iterable[str]
) -> frozenset[str]:
    """
    Compute the smallest superset of wanted closed under component bases.

    Bases that are not in the graph are skipped: they are never added and
    never expanded. Cycles terminate because a name is only queued the first
    time it is seen.

    Args:
        graph: Adjacency view from component_graph()
        wanted: Directly wanted glyph names

    Returns:
        The retained glyph names
    """
    retained = set(wanted)
    pending = list(retained)

    while pending:
        name = pending.pop()
        for base in graph.get(name, ()):
            if base in retained or base not in graph:
                continue
            retained.add(base)
            pending.append(base)

    return frozenset(retained)


def missing_component_bases(
    graph: dict[str, list[str]], names: Iterable[str]
) -> set[str]:
    """Component bases referenced from names that do not exist in the graph."""
    return {
        base
        for name in names
        for base in graph.get(name, ())
        if base not in graph
    }
