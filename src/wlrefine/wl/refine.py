"""
WL-1 color refinement on a pair of labeled graphs with shared label ids.

Label ids are decimal strings minted from one counter that runs for the
whole call: ids are never reused, so equality of ids is only meaningful
within a step. Compare partitions across steps via wlrefine.wl.partition.
"""
from __future__ import annotations

import logging
import os
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Hashable, List, Mapping as MappingT, Sequence, Tuple, TypeVar

from wlrefine.errors import InvalidHorizon
from wlrefine.graph.model import Graph, NodeTable, build_node_table


logger = logging.getLogger(__name__)


def _env_max_k(default: int = 5) -> int:
    """Default horizon from WLREFINE_MAX_K (a non-negative integer)."""
    raw = os.environ.get("WLREFINE_MAX_K")
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidHorizon(f"WLREFINE_MAX_K must be a non-negative integer, got {raw!r}.") from None
    if value < 0:
        raise InvalidHorizon(f"WLREFINE_MAX_K must be a non-negative integer, got {raw!r}.")
    return value


DEFAULT_MAX_K = _env_max_k()

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class Mapping:
    """A signature seen at some step and the label id minted for it."""
    signature: str
    label: str


@dataclass(frozen=True)
class NodeState:
    """
    Label of one node at one step, with the signature it was derived from.

    self_label / neighbor_labels are the previous-step labels that make up
    the signature (at k=0: the raw initial value and no neighbors).
    """
    id: str
    label: str
    signature: str
    self_label: str
    neighbor_labels: Tuple[str, ...]


@dataclass(frozen=True)
class WLStep:
    """
    State of both graphs after k refinement rounds.

    Maps are read-only views. Node-keyed maps are ordered by node id;
    histograms and unique_labels are ordered by the numeric value of the
    label id.
    """
    k: int
    labels_a: MappingT[str, str]
    labels_b: MappingT[str, str]
    label_counts_a: MappingT[str, int]
    label_counts_b: MappingT[str, int]
    unique_labels: Tuple[str, ...]
    mappings: Tuple[Mapping, ...]
    is_isomorphic_candidate: bool
    nodes_a: MappingT[str, NodeState]
    nodes_b: MappingT[str, NodeState]


def _mint(keys: Sequence[K], counter: int) -> Tuple[Dict[K, int], int]:
    """Assign fresh ids counter+1, counter+2, ... to keys in the given order."""
    mp: Dict[K, int] = {}
    for key in keys:
        counter += 1
        mp[key] = counter
    return mp, counter


def _signature(self_label: int, neigh: Sequence[int]) -> str:
    return f"({self_label},[{','.join(str(c) for c in neigh)}])"


def _node_signatures(table: NodeTable, colors: Sequence[int]) -> List[Tuple[str, List[int]]]:
    """(signature, numerically sorted neighbor labels) for every node of table."""
    out = []
    for u in range(len(table)):
        neigh = sorted(colors[v] for v in table.adj[u])
        out.append((_signature(colors[u], neigh), neigh))
    return out


def _histogram(colors: Sequence[int]) -> Dict[str, int]:
    cnt = Counter(colors)
    return {str(c): cnt[c] for c in sorted(cnt)}


def _assemble(
    k: int,
    colA: Sequence[int],
    colB: Sequence[int],
    nodesA: Dict[str, NodeState],
    nodesB: Dict[str, NodeState],
    mappings: Tuple[Mapping, ...],
) -> WLStep:
    histA = _histogram(colA)
    histB = _histogram(colB)
    uniq = sorted(set(colA) | set(colB))
    return WLStep(
        k=k,
        labels_a=MappingProxyType({v: s.label for v, s in nodesA.items()}),
        labels_b=MappingProxyType({v: s.label for v, s in nodesB.items()}),
        label_counts_a=MappingProxyType(histA),
        label_counts_b=MappingProxyType(histB),
        unique_labels=tuple(str(c) for c in uniq),
        mappings=mappings,
        is_isomorphic_candidate=histA == histB,
        nodes_a=MappingProxyType(nodesA),
        nodes_b=MappingProxyType(nodesB),
    )


def _initial_step(
    ta: NodeTable, tb: NodeTable, counter: int
) -> Tuple[WLStep, List[int], List[int], int]:
    """Step 0: raw initial labels of both graphs, canonicalized in ascending order."""
    raw = sorted(set(ta.initial) | set(tb.initial))
    mp, counter = _mint(raw, counter)

    def states(table: NodeTable) -> Tuple[List[int], Dict[str, NodeState]]:
        colors = [mp[x] for x in table.initial]
        nodes = {
            table.ids[u]: NodeState(
                id=table.ids[u],
                label=str(colors[u]),
                signature=f"[{table.initial[u]}]",
                self_label=str(table.initial[u]),
                neighbor_labels=(),
            )
            for u in range(len(table))
        }
        return colors, nodes

    colA, nodesA = states(ta)
    colB, nodesB = states(tb)
    mappings = tuple(Mapping(f"Initial: {x}", str(mp[x])) for x in raw)
    return _assemble(0, colA, colB, nodesA, nodesB, mappings), colA, colB, counter


def _refine_step(
    k: int,
    ta: NodeTable,
    tb: NodeTable,
    prevA: Sequence[int],
    prevB: Sequence[int],
    counter: int,
) -> Tuple[WLStep, List[int], List[int], int]:
    """
    One WL-1 round over both graphs.

    Signatures of all nodes of A and B are pooled, sorted as strings, and
    minted in that order, so equal local structure gets equal ids in both
    graphs regardless of node order.
    """
    sigA = _node_signatures(ta, prevA)
    sigB = _node_signatures(tb, prevB)
    pool = sorted({s for s, _ in sigA} | {s for s, _ in sigB})
    mp, counter = _mint(pool, counter)

    def states(
        table: NodeTable, prev: Sequence[int], sigs: List[Tuple[str, List[int]]]
    ) -> Tuple[List[int], Dict[str, NodeState]]:
        colors = [mp[s] for s, _ in sigs]
        nodes = {
            table.ids[u]: NodeState(
                id=table.ids[u],
                label=str(colors[u]),
                signature=sigs[u][0],
                self_label=str(prev[u]),
                neighbor_labels=tuple(str(c) for c in sigs[u][1]),
            )
            for u in range(len(table))
        }
        return colors, nodes

    colA, nodesA = states(ta, prevA, sigA)
    colB, nodesB = states(tb, prevB, sigB)
    mappings = tuple(Mapping(s, str(mp[s])) for s in pool)
    return _assemble(k, colA, colB, nodesA, nodesB, mappings), colA, colB, counter


def refine(graph_a: Graph, graph_b: Graph, max_k: int = DEFAULT_MAX_K) -> Tuple[WLStep, ...]:
    """
    Run WL-1 refinement on graph_a and graph_b in lockstep for max_k rounds.

    Returns max_k + 1 steps (k = 0..max_k). There is no early exit when the
    partition stabilizes.

    is_isomorphic_candidate is True iff the label histograms of the two
    graphs agree at that step. This is necessary for isomorphism but not
    sufficient: e.g. a 6-cycle and two disjoint triangles with uniform
    initial labels agree at every k.

    Raises:
      InvalidHorizon if max_k < 0.
      InvalidGraphReference / DuplicateNodeId for malformed graphs.
    """
    if max_k < 0:
        raise InvalidHorizon(f"max_k must be >= 0, got {max_k}.")

    ta = build_node_table(graph_a, "A")
    tb = build_node_table(graph_b, "B")

    step, colA, colB, counter = _initial_step(ta, tb, 0)
    steps = [step]
    logger.debug("k=0: %d initial labels, candidate=%s", len(step.mappings), step.is_isomorphic_candidate)

    for k in range(1, max_k + 1):
        step, colA, colB, counter = _refine_step(k, ta, tb, colA, colB, counter)
        steps.append(step)
        logger.debug(
            "k=%d: %d distinct signatures, candidate=%s",
            k,
            len(step.mappings),
            step.is_isomorphic_candidate,
        )

    return tuple(steps)
