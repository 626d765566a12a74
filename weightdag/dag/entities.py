"""Vertex and edge records owned by a DAG."""

from typing import Any, Generic, List, Tuple, TypeVar

W = TypeVar("W")


class Vertex(Generic[W]):
    """A graph vertex holding a weight, an identifier and its incident edges.

    Vertices are created by ``DAG.add_vertex``; only the owning graph
    mutates the edge lists.
    """

    __slots__ = ("_id", "_weight", "_incoming", "_outgoing", "_owner")

    def __init__(self, identifier: int, weight: W, owner: Any = None) -> None:
        self._id = identifier
        self._weight = weight
        self._incoming: List["Edge[W]"] = []
        self._outgoing: List["Edge[W]"] = []
        self._owner = owner

    @property
    def id(self) -> int:
        return self._id

    @property
    def weight(self) -> W:
        return self._weight

    @property
    def incoming(self) -> Tuple["Edge[W]", ...]:
        """Edges terminating at this vertex, in insertion order."""
        return tuple(self._incoming)

    @property
    def outgoing(self) -> Tuple["Edge[W]", ...]:
        """Edges originating at this vertex, in insertion order."""
        return tuple(self._outgoing)

    def add_incoming_edge(self, edge: "Edge[W]") -> None:
        self._incoming.append(edge)

    def add_outgoing_edge(self, edge: "Edge[W]") -> None:
        self._outgoing.append(edge)

    def __repr__(self) -> str:
        return f"Vertex(id={self._id}, weight={self._weight})"


class Edge(Generic[W]):
    """A directed, weighted connection between two vertices of one graph."""

    __slots__ = ("_origin", "_destination", "_weight")

    def __init__(self, origin: Vertex[W], destination: Vertex[W], weight: W) -> None:
        self._origin = origin
        self._destination = destination
        self._weight = weight

    @property
    def origin(self) -> Vertex[W]:
        return self._origin

    @property
    def destination(self) -> Vertex[W]:
        return self._destination

    @property
    def weight(self) -> W:
        return self._weight

    def __repr__(self) -> str:
        return (
            f"Edge({self._origin.id} -> {self._destination.id}, "
            f"weight={self._weight})"
        )
