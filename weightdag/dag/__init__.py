"""Weighted DAG implementation for weightdag."""

from .entities import Edge, Vertex
from .exceptions import CyclicGraphError, DAGError, ForeignVertexError
from .graph import DAG, LongestPath
from .ids import IdSource

__all__ = [
    "DAG",
    "Vertex",
    "Edge",
    "LongestPath",
    "IdSource",
    "DAGError",
    "ForeignVertexError",
    "CyclicGraphError",
]
