"""Tests for loading graphs from YAML descriptions."""

import pytest

from weightdag.config import DAGOptions
from weightdag.model import GraphDescription, GraphDescriptionError, WeightTypeEnum
from weightdag.weights import FloatWeight, IntegerWeight, double_weight, triple_weight


@pytest.mark.short
class TestGraphDescription:
    def test_load_from_file(self, graph_yaml):
        description = GraphDescription.from_yaml(graph_yaml)

        assert description.weight_type == WeightTypeEnum.integer
        assert [v.name for v in description.vertices] == ["a", "b", "c", "d", "e"]
        assert len(description.edges) == 6

    def test_load_from_string(self):
        description = GraphDescription.from_yaml(
            "weight_type: float\nvertices:\n  - {name: x, weight: 1.5}\n"
        )
        assert description.weight_type == WeightTypeEnum.float
        assert description.make_weight(1.5) == FloatWeight(1.5)

    def test_build(self, graph_yaml):
        result = GraphDescription.from_yaml(graph_yaml).build()
        dag, v = result.dag, result.vertices

        assert result.rejected == []
        assert len(dag) == 5
        assert len(dag.edges) == 6
        assert v["a"].weight == IntegerWeight(7)

        dag.order_vertices()
        assert dag.find_longest_path(
            v["a"], v["b"], double_weight, triple_weight
        ) == IntegerWeight(134)

    def test_build_reports_rejected_edges(self):
        description = GraphDescription(
            vertices=[{"name": "a", "weight": 1}, {"name": "b", "weight": 2}],
            edges=[
                {"origin": "a", "destination": "b", "weight": 1},
                {"origin": "b", "destination": "a", "weight": 1},
            ],
        )

        result = description.build(DAGOptions(warn_on_rejected_edge=False))

        assert result.rejected == [("b", "a")]
        assert len(result.dag.edges) == 1

    def test_unknown_vertex(self):
        with pytest.raises(GraphDescriptionError, match="unknown vertex 'z'"):
            GraphDescription.from_yaml(
                "vertices:\n  - {name: a, weight: 1}\n"
                "edges:\n  - {origin: a, destination: z, weight: 1}\n"
            )

    def test_duplicate_names(self):
        with pytest.raises(GraphDescriptionError, match="duplicate vertex names: a"):
            GraphDescription.from_yaml(
                "vertices:\n  - {name: a, weight: 1}\n  - {name: a, weight: 2}\n"
            )

    def test_integer_graph_rejects_fractions(self):
        with pytest.raises(GraphDescriptionError, match="whole-number"):
            GraphDescription.from_yaml("vertices:\n  - {name: a, weight: 1.5}\n")

    def test_not_a_mapping(self):
        with pytest.raises(GraphDescriptionError, match="must be a mapping"):
            GraphDescription.from_yaml("- a\n- b\n")

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.yaml"
        with pytest.raises(GraphDescriptionError) as excinfo:
            GraphDescription.from_yaml(missing)
        assert excinfo.value.source == missing
