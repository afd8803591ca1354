from __future__ import annotations

from typing import Optional, Sequence

import networkx as nx

from wlrefine.graph.model import Edge, Graph, Node


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def graph_from_nx(G: nx.Graph, label_attr: str = "label", default_label: int = 0) -> Graph:
    """
    Convert a NetworkX graph into a Graph.

    Node ids become str(node); the initial label is G.nodes[v][label_attr]
    (default_label when missing). Multigraph edges are kept with multiplicity.
    """
    nodes = tuple(
        Node(str(v), int(G.nodes[v].get(label_attr, default_label))) for v in G.nodes()
    )
    edges = tuple(Edge(str(u), str(v)) for u, v in G.edges())
    return Graph(nodes=nodes, edges=edges)


def graph_from_g6(g6: str, labels: Optional[Sequence[int]] = None) -> Graph:
    """
    Parse a graph6 string into a Graph on ids "0".."n-1".

    labels[v] is the initial label of vertex v; defaults to vertex degree.
    """
    s = strip_graph6_header(g6)
    G = nx.from_graph6_bytes(s.encode("ascii"))
    n = G.number_of_nodes()
    if labels is None:
        labels = [G.degree(v) for v in range(n)]
    elif len(labels) != n:
        raise ValueError(f"expected {n} labels for graph6 {s!r}, got {len(labels)}.")
    return Graph(
        nodes=tuple(Node(str(v), int(labels[v])) for v in range(n)),
        edges=tuple(Edge(str(u), str(v)) for u, v in G.edges()),
    )


def graph_to_nx(graph: Graph, label_attr: str = "label") -> nx.Graph:
    """NetworkX Graph with initial labels stored under label_attr (repeated edges collapse)."""
    G = nx.Graph()
    for node in graph.nodes:
        G.add_node(node.id, **{label_attr: node.initial_label})
    G.add_edges_from((e.source, e.target) for e in graph.edges)
    return G
