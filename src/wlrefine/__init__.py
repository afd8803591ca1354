"""
wlrefine: Weisfeiler-Lehman (WL-1) color refinement on pairs of labeled
graphs, with shared label ids, per-step histograms and an isomorphism
candidate verdict.
"""

from .errors import GraphError, InvalidGraphReference, DuplicateNodeId, InvalidHorizon
from .graph.model import Node, Edge, Graph
from .wl.refine import DEFAULT_MAX_K, Mapping, NodeState, WLStep, refine
from .wl.partition import (
    color_classes,
    joint_partition,
    histogram_witness,
    first_distinguishing_step,
    first_stable_step,
    SignatureTree,
    expand_signature,
)
from .wl.features import KernelScore, feature_vectors, wl_kernel
from .io.graph6 import graph_from_g6, graph_from_nx, graph_to_nx

__all__ = [
    # Errors
    "GraphError",
    "InvalidGraphReference",
    "DuplicateNodeId",
    "InvalidHorizon",
    # Graphs
    "Node",
    "Edge",
    "Graph",
    # Refinement
    "DEFAULT_MAX_K",
    "Mapping",
    "NodeState",
    "WLStep",
    "refine",
    # Partitions
    "color_classes",
    "joint_partition",
    "histogram_witness",
    "first_distinguishing_step",
    "first_stable_step",
    "SignatureTree",
    "expand_signature",
    # Features
    "KernelScore",
    "feature_vectors",
    "wl_kernel",
    # IO
    "graph_from_g6",
    "graph_from_nx",
    "graph_to_nx",
]
