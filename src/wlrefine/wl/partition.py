"""Partition views over WL steps (label ids are per-step tokens; compare classes, not ids)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from wlrefine.errors import InvalidHorizon
from wlrefine.graph.model import Graph, build_node_table
from .refine import WLStep


NodeKey = Tuple[str, str]


def color_classes(labels: Mapping[str, str]) -> List[List[str]]:
    """Group node ids by label, sorted deterministically."""
    groups: Dict[str, List[str]] = {}
    for v, c in labels.items():
        groups.setdefault(c, []).append(v)
    cls = [sorted(L) for L in groups.values()]
    cls.sort(key=lambda L: (len(L), L))
    return cls


def joint_partition(step: WLStep) -> FrozenSet[FrozenSet[NodeKey]]:
    """
    Partition of all nodes of both graphs at this step.

    Nodes are keyed by (graph, id) with graph in {"A", "B"}, so shared ids
    across the two graphs stay distinct.
    """
    groups: Dict[str, set] = {}
    for name, labels in (("A", step.labels_a), ("B", step.labels_b)):
        for v, c in labels.items():
            groups.setdefault(c, set()).add((name, v))
    return frozenset(frozenset(g) for g in groups.values())


def histogram_witness(step: WLStep) -> Optional[str]:
    """Smallest label id (numeric order) whose counts differ between A and B."""
    if step.is_isomorphic_candidate:
        return None
    for c in step.unique_labels:
        if step.label_counts_a.get(c, 0) != step.label_counts_b.get(c, 0):
            return c
    return None


def first_distinguishing_step(steps: Sequence[WLStep]) -> Optional[int]:
    """First k at which the histograms disagree, or None."""
    for step in steps:
        if not step.is_isomorphic_candidate:
            return step.k
    return None


def first_stable_step(steps: Sequence[WLStep]) -> Optional[int]:
    """
    First k >= 1 whose joint partition equals the one at k-1, or None.

    Read-only query over a finished run; refinement itself always runs the
    full horizon.
    """
    prev = None
    for step in steps:
        cur = joint_partition(step)
        if prev is not None and cur == prev:
            return step.k
        prev = cur
    return None


@dataclass(frozen=True)
class SignatureTree:
    """
    A node's label at step k unrolled back to k=0.

    own:       the node's own tree at k-1 (None at k=0)
    neighbors: its neighbors' trees at k-1, in numeric label order
    """
    node_id: str
    k: int
    label: str
    own: Optional["SignatureTree"]
    neighbors: Tuple["SignatureTree", ...]

    def render(self) -> str:
        if self.own is None:
            return self.label
        inner = ",".join(n.render() for n in self.neighbors)
        return f"({self.own.render()},[{inner}])"


def expand_signature(
    steps: Sequence[WLStep],
    graph: Graph,
    node_id: str,
    k: int,
    side: str = "A",
) -> SignatureTree:
    """
    Unroll the label of node_id at step k level by level down to k=0.

    graph must be the graph refined on this side ("A" or "B"). The tree has
    on the order of degree**k leaves; intended for small graphs.
    """
    if k < 0 or k >= len(steps):
        raise InvalidHorizon(f"k must be in 0..{len(steps) - 1}, got {k}.")
    if side not in ("A", "B"):
        raise ValueError(f"side must be 'A' or 'B', got {side!r}.")
    table = build_node_table(graph, side)
    if node_id not in table.index:
        raise KeyError(f"graph {side}: unknown node {node_id!r}")

    def labels_at(level: int) -> Mapping[str, str]:
        step = steps[level]
        return step.labels_a if side == "A" else step.labels_b

    def unroll(u: int, level: int) -> SignatureTree:
        v = table.ids[u]
        label = labels_at(level)[v]
        if level == 0:
            return SignatureTree(v, 0, label, None, ())
        prev = labels_at(level - 1)
        nbrs = sorted(table.adj[u], key=lambda w: (int(prev[table.ids[w]]), table.ids[w]))
        return SignatureTree(
            node_id=v,
            k=level,
            label=label,
            own=unroll(u, level - 1),
            neighbors=tuple(unroll(w, level - 1) for w in nbrs),
        )

    return unroll(table.index[node_id], k)
