from .model import Node, Edge, Graph, NodeTable, build_node_table

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "NodeTable",
    "build_node_table",
]
