"""Labeled undirected graphs and the indexed node table used by refinement."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from wlrefine.errors import DuplicateNodeId, InvalidGraphReference


@dataclass(frozen=True)
class Node:
    id: str
    initial_label: int


@dataclass(frozen=True)
class Edge:
    source: str
    target: str


@dataclass(frozen=True)
class Graph:
    """
    Node-labeled undirected graph.

    Edges are undirected; an edge list may repeat a pair or contain a
    self-loop, and every entry is counted as given when building adjacency.
    """

    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()

    @classmethod
    def from_lists(
        cls,
        nodes: Iterable[Tuple[str, int]],
        edges: Iterable[Tuple[str, str]] = (),
    ) -> "Graph":
        return cls(
            nodes=tuple(Node(str(i), int(lbl)) for i, lbl in nodes),
            edges=tuple(Edge(str(u), str(v)) for u, v in edges),
        )

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True)
class NodeTable:
    """
    Arena view of one graph.

    ids[i] is the id of node i (ids sorted ascending), index maps an id back
    to i, adj[i] lists neighbor indices with one entry per incident edge end.
    """

    ids: Tuple[str, ...]
    index: Dict[str, int]
    initial: Tuple[int, ...]
    adj: Tuple[Tuple[int, ...], ...]

    def __len__(self) -> int:
        return len(self.ids)


def build_node_table(graph: Graph, name: str = "A") -> NodeTable:
    """
    Validate graph and index its nodes.

    Raises DuplicateNodeId for a repeated id and InvalidGraphReference for
    an edge endpoint that is not a node of this graph.
    """
    ordered = sorted(graph.nodes, key=lambda n: n.id)
    index: Dict[str, int] = {}
    for i, node in enumerate(ordered):
        if node.id in index:
            raise DuplicateNodeId(name, node.id)
        index[node.id] = i

    adj: List[List[int]] = [[] for _ in ordered]
    for e in graph.edges:
        for end in (e.source, e.target):
            if end not in index:
                raise InvalidGraphReference(name, e.source, e.target, end)
        u, v = index[e.source], index[e.target]
        adj[u].append(v)
        adj[v].append(u)

    return NodeTable(
        ids=tuple(n.id for n in ordered),
        index=index,
        initial=tuple(n.initial_label for n in ordered),
        adj=tuple(tuple(a) for a in adj),
    )
