from __future__ import annotations


class GraphError(ValueError):
    """Base class for malformed graph input."""


class InvalidGraphReference(GraphError):
    """An edge endpoint is not a node id of its graph."""

    def __init__(self, graph: str, source: str, target: str, missing: str):
        self.graph = graph
        self.source = source
        self.target = target
        self.missing = missing
        super().__init__(
            f"graph {graph}: edge ({source!r}, {target!r}) references unknown node {missing!r}"
        )


class DuplicateNodeId(GraphError):
    """A node id occurs more than once in the same graph."""

    def __init__(self, graph: str, node_id: str):
        self.graph = graph
        self.node_id = node_id
        super().__init__(f"graph {graph}: duplicate node id {node_id!r}")


class InvalidHorizon(ValueError):
    """Refinement horizon (or a step index into a result) is out of range."""
