"""Tests for graph values and node tables."""
import pytest

from wlrefine.errors import DuplicateNodeId, InvalidGraphReference
from wlrefine.graph.model import Graph, build_node_table


def test_from_lists_coerces_ids():
    G = Graph.from_lists([(1, 3), (2, "4")], [(1, 2)])
    assert [n.id for n in G.nodes] == ["1", "2"]
    assert [n.initial_label for n in G.nodes] == [3, 4]
    assert G.edges[0].source == "1"
    assert len(G) == 2


def test_node_table_sorted_and_indexed():
    G = Graph.from_lists([("b", 1), ("a", 2), ("c", 1)], [("a", "b"), ("b", "c")])
    t = build_node_table(G)
    assert t.ids == ("a", "b", "c")
    assert t.index == {"a": 0, "b": 1, "c": 2}
    assert t.initial == (2, 1, 1)
    assert sorted(t.adj[1]) == [0, 2]
    assert t.adj[0] == (1,)


def test_node_table_duplicate_edge_kept():
    G = Graph.from_lists([("a", 1), ("b", 1)], [("a", "b"), ("b", "a")])
    t = build_node_table(G)
    assert t.adj[0] == (1, 1)


def test_node_table_errors():
    with pytest.raises(InvalidGraphReference) as exc:
        build_node_table(Graph.from_lists([("a", 1)], [("z", "a")]), "A")
    assert exc.value.missing == "z"
    assert exc.value.graph == "A"

    with pytest.raises(DuplicateNodeId):
        build_node_table(Graph.from_lists([("a", 1), ("a", 1)]))
