"""Tests for component dependency closure."""

from ufo_subset.core.closure import (
    close_over_components,
    component_graph,
    missing_component_bases,
)
from ufo_subset.core.retention import directly_wanted


def test_component_graph(sample_font):
    """Test the adjacency view lists component bases per glyph."""
    graph = component_graph(sample_font.layers.defaultLayer)
    assert graph["f_f_i"] == ["f", "f_i"]
    assert graph["A"] == []
    assert set(graph) == set(sample_font.keys())


def test_transitive_composite():
    """Test f_f_i keeps f, f_i and i through nested composites."""
    graph = {
        "f_f_i": ["f", "f_i"],
        "f_i": ["i"],
        "f": [],
        "i": [],
        "l": [],
    }
    assert close_over_components(graph, {"f_f_i"}) == {"f_f_i", "f", "f_i", "i"}


def test_closure_is_minimal():
    """Test nothing beyond the wanted names and their bases is retained."""
    graph = {"a": ["b"], "b": [], "c": ["b"], "d": []}
    assert close_over_components(graph, {"a"}) == {"a", "b"}


def test_missing_base_is_ignored():
    """Test a base that is not in the graph is left out without failing."""
    graph = {"Aring": ["A", "ringcomb"], "A": []}
    retained = close_over_components(graph, {"Aring"})
    assert retained == {"Aring", "A"}
    assert missing_component_bases(graph, retained) == {"ringcomb"}


def test_cycles_terminate():
    """Test cyclic and self-referencing components do not loop."""
    graph = {"a": ["b"], "b": ["a", "c"], "c": ["c"], "d": []}
    assert close_over_components(graph, {"a"}) == {"a", "b", "c"}


def test_empty_wanted():
    """Test an empty wanted set stays empty."""
    assert close_over_components({"a": ["b"], "b": []}, set()) == frozenset()


def test_closure_completeness(sample_font):
    """Test every base of a retained glyph is retained or absent from the font."""
    layer = sample_font.layers.defaultLayer
    wanted = directly_wanted(layer, {"eacute", "f_f_i"})
    retained = close_over_components(component_graph(layer), wanted)
    for name in retained:
        for component in layer[name].components:
            assert component.baseGlyph in retained or component.baseGlyph not in layer
