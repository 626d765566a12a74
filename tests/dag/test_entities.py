"""Tests for the Vertex and Edge records."""

import pytest

from weightdag.dag import DAG
from weightdag.weights import IntegerWeight


@pytest.mark.short
class TestEntities:
    def test_edge_lists_are_read_only_views(self):
        dag = DAG()
        a = dag.add_vertex(IntegerWeight(1))
        b = dag.add_vertex(IntegerWeight(2))
        edge = dag.add_edge(a, b, IntegerWeight(3))

        outgoing = a.outgoing
        assert isinstance(outgoing, tuple)
        assert outgoing == (edge,)
        with pytest.raises(AttributeError):
            a.weight = IntegerWeight(5)

    def test_repr(self):
        dag = DAG()
        a = dag.add_vertex(IntegerWeight(7))
        b = dag.add_vertex(IntegerWeight(9))
        edge = dag.add_edge(a, b, IntegerWeight(13))

        assert repr(a) == "Vertex(id=0, weight=7)"
        assert repr(edge) == "Edge(0 -> 1, weight=13)"

    def test_vertices_hash_by_identity(self):
        dag = DAG()
        a = dag.add_vertex(IntegerWeight(1))
        b = dag.add_vertex(IntegerWeight(1))

        assert a != b
        assert len({a, b}) == 2
