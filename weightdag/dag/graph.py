"""Weighted directed acyclic graph with cycle-safe insertion and longest paths."""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Generic, List, Optional, Tuple, TypeVar

from ..config import DAGOptions
from ..weights.base import Weight, WeightFunction
from ..weights.functions import identity
from .entities import Edge, Vertex
from .exceptions import CyclicGraphError, ForeignVertexError
from .ids import IdSource

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=Weight)


@dataclass(frozen=True)
class LongestPath(Generic[W]):
    """Result of a longest path search that also tracks the route taken."""

    weight: W
    vertices: Tuple[Vertex[W], ...]

    @property
    def ids(self) -> List[int]:
        return [vertex.id for vertex in self.vertices]


class DAG(Generic[W]):
    """A directed acyclic graph over weights of one type.

    Edges that would close a cycle are rejected at insertion, so the graph
    is acyclic at all times. ``order_vertices`` arranges the vertex sequence
    topologically; ``find_longest_path`` uses that order to prune branches
    that cannot reach the goal.

    The graph is not thread-safe.
    """

    def __init__(
        self,
        vertex_fn: Optional[WeightFunction] = None,
        edge_fn: Optional[WeightFunction] = None,
        options: Optional[DAGOptions] = None,
        id_source: Optional[IdSource] = None,
    ) -> None:
        """
        Args:
            vertex_fn: Default transform for vertex weights in path searches.
            edge_fn: Default transform for edge weights in path searches.
            options: Behavioural switches, see DAGOptions.
            id_source: Identifier source for new vertices. Share one between
                graphs to keep identifiers unique across them.
        """
        self.vertex_fn = vertex_fn
        self.edge_fn = edge_fn
        self.options = options if options is not None else DAGOptions()
        self.id_source = id_source if id_source is not None else IdSource()

        self._vertices: List[Vertex[W]] = []
        self._edges: List[Edge[W]] = []
        self._positions: Dict[Vertex[W], int] = {}
        # An empty graph is trivially in topological order.
        self._sorted = True

    @property
    def vertices(self) -> Tuple[Vertex[W], ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Edge[W], ...]:
        return tuple(self._edges)

    def is_sorted(self) -> bool:
        """Return True if the vertex sequence is currently in topological order."""
        return self._sorted

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, Vertex) and vertex._owner is self

    def _check_owned(self, *vertices: Vertex[W]) -> None:
        for vertex in vertices:
            if vertex not in self:
                raise ForeignVertexError(vertex)

    def add_vertex(self, weight: W) -> Vertex[W]:
        """Add a vertex with the given weight and return it.

        The new vertex has no edges, so appending it keeps a sorted
        sequence sorted.
        """
        vertex = Vertex(self.id_source.next_id(), weight, owner=self)
        self._positions[vertex] = len(self._vertices)
        self._vertices.append(vertex)
        logger.debug(f"Added vertex {vertex.id} with weight {weight}")
        return vertex

    def add_edge(
        self, origin: Vertex[W], destination: Vertex[W], weight: W
    ) -> Optional[Edge[W]]:
        """
        Add an edge from origin to destination unless it would create a cycle.

        Returns:
            The new edge, or None if destination already reaches origin. A
            rejected edge leaves the graph untouched.

        Raises:
            ForeignVertexError: If either vertex belongs to another graph.
        """
        self._check_owned(origin, destination)

        if self.has_path(destination, origin):
            if self.options.warn_on_rejected_edge:
                logger.warning(
                    f"Edge from {origin.id} to {destination.id} was not added, "
                    "it would create a cycle"
                )
            return None

        edge = Edge(origin, destination, weight)
        self._edges.append(edge)
        origin.add_outgoing_edge(edge)
        destination.add_incoming_edge(edge)
        self._sorted = False
        logger.debug(f"Added edge {origin.id} -> {destination.id} ({weight})")
        return edge

    def has_path(self, start: Vertex[W], goal: Vertex[W]) -> bool:
        """Return True if goal can be reached from start along outgoing edges.

        Every vertex trivially reaches itself.
        """
        self._check_owned(start, goal)

        visited = {start}
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex is goal:
                return True
            for edge in vertex._outgoing:
                destination = edge.destination
                if destination not in visited:
                    visited.add(destination)
                    stack.append(destination)
        return False

    def order_vertices(self) -> None:
        """
        Arrange the vertex sequence in topological order (Kahn's algorithm).

        Vertices that become ready at the same time keep first-in first-out
        order, starting from the current order of the origin vertices.

        Raises:
            CyclicGraphError: If not every vertex could be ordered. The
                graph is left unchanged.
        """
        queue: Deque[Vertex[W]] = deque(
            vertex for vertex in self._vertices if not vertex._incoming
        )
        ordered: List[Vertex[W]] = []

        while queue:
            vertex = queue.popleft()
            ordered.append(vertex)

            for edge in vertex._outgoing:
                destination = edge.destination
                destination._incoming.remove(edge)
                if not destination._incoming:
                    queue.append(destination)

        # The pass above consumed the incoming lists; rebuild them from the
        # authoritative edge sequence.
        for vertex in self._vertices:
            vertex._incoming.clear()
        for edge in self._edges:
            edge.destination.add_incoming_edge(edge)

        if len(ordered) != len(self._vertices):
            raise CyclicGraphError(len(ordered), len(self._vertices))

        self._vertices = ordered
        self._positions = {vertex: index for index, vertex in enumerate(ordered)}
        self._sorted = True
        logger.debug(f"Ordered {len(ordered)} vertices topologically")

    def find_longest_path(
        self,
        start: Vertex[W],
        goal: Vertex[W],
        vertex_fn: Optional[WeightFunction] = None,
        edge_fn: Optional[WeightFunction] = None,
    ) -> Optional[W]:
        """
        Find the weight of the heaviest path from start to goal.

        Vertex and edge weights along the path are passed through vertex_fn
        and edge_fn before being combined. Functions given here take
        precedence over the ones bound to the graph; the identity is used
        when neither is set.

        With ``options.memoize`` each vertex is evaluated once per search,
        so the cost is linear in the size of the graph; without it shared
        sub-paths are walked again, which is exponential on converging
        branches. The search recurses once per vertex on the path, so a
        path longer than Python's recursion limit (about 1000 vertices)
        raises RecursionError.

        Returns:
            The accumulated weight, or None if goal is not reachable.
        """
        result = self.find_longest_route(start, goal, vertex_fn, edge_fn)
        return None if result is None else result.weight

    def find_longest_route(
        self,
        start: Vertex[W],
        goal: Vertex[W],
        vertex_fn: Optional[WeightFunction] = None,
        edge_fn: Optional[WeightFunction] = None,
    ) -> Optional[LongestPath[W]]:
        """Like find_longest_path, but also return the vertices on the path."""
        self._check_owned(start, goal)

        vertex_fn = vertex_fn or self.vertex_fn or identity
        edge_fn = edge_fn or self.edge_fn or identity

        if not self._sorted:
            logger.debug("Searching an unsorted graph, order pruning is disabled")

        memo: Optional[Dict[Vertex[W], Optional[W]]] = (
            {} if self.options.memoize else None
        )
        choices: Dict[Vertex[W], Vertex[W]] = {}
        weight = self._search(start, goal, vertex_fn, edge_fn, memo, choices)
        if weight is None:
            return None

        route = [start]
        while route[-1] is not goal:
            route.append(choices[route[-1]])
        return LongestPath(weight=weight, vertices=tuple(route))

    def _search(
        self,
        start: Vertex[W],
        goal: Vertex[W],
        vertex_fn: WeightFunction,
        edge_fn: WeightFunction,
        memo: Optional[Dict[Vertex[W], Optional[W]]],
        choices: Dict[Vertex[W], Vertex[W]],
    ) -> Optional[W]:
        if memo is not None and start in memo:
            return memo[start]

        if start is goal:
            result = vertex_fn(goal.weight)
        else:
            result = self._search_edges(start, goal, vertex_fn, edge_fn, memo, choices)

        if memo is not None:
            memo[start] = result
        return result

    def _search_edges(
        self,
        start: Vertex[W],
        goal: Vertex[W],
        vertex_fn: WeightFunction,
        edge_fn: WeightFunction,
        memo: Optional[Dict[Vertex[W], Optional[W]]],
        choices: Dict[Vertex[W], Vertex[W]],
    ) -> Optional[W]:
        goal_position = self._positions[goal]
        best: Optional[W] = None
        for edge in start._outgoing:
            destination = edge.destination

            # In topological order nothing after the goal can lead back to it.
            if self._sorted and self._positions[destination] > goal_position:
                continue

            weight = self._search(destination, goal, vertex_fn, edge_fn, memo, choices)
            if weight is None:
                continue

            candidate = weight.combine(edge_fn(edge.weight))
            if best is None or best < candidate:
                best = candidate
                choices[start] = destination

        return None if best is None else best.combine(vertex_fn(start.weight))

    def dump_vertices(self) -> List[str]:
        """Describe every vertex (identifier and weight) in current order."""
        lines = [
            f"Identifier: {vertex.id} Weight: {vertex.weight}"
            for vertex in self._vertices
        ]
        for line in lines:
            logger.debug(line)
        return lines

    def dump_edges(self) -> List[str]:
        """Describe every edge (origin, destination and weight) in insertion order."""
        lines = [
            f"Origin: {edge.origin.id} Destination: {edge.destination.id} "
            f"Weight: {edge.weight}"
            for edge in self._edges
        ]
        for line in lines:
            logger.debug(line)
        return lines
