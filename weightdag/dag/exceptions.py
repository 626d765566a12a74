"""
Exception classes for the dag module.
"""


class DAGError(Exception):
    """Base exception for all graph-related errors."""

    pass


class ForeignVertexError(DAGError):
    """Raised when a vertex that belongs to another graph is passed in."""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} does not belong to this graph")


class CyclicGraphError(DAGError):
    """Raised when the graph cannot be topologically sorted."""

    def __init__(self, ordered: int, total: int):
        self.ordered = ordered
        self.total = total
        super().__init__(
            f"The graph contains a cycle and cannot be topologically sorted "
            f"({ordered} of {total} vertices ordered)"
        )
