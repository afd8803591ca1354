from .graph6 import graph_from_g6, graph_from_nx, graph_to_nx, strip_graph6_header

__all__ = [
    "graph_from_g6",
    "graph_from_nx",
    "graph_to_nx",
    "strip_graph6_header",
]
