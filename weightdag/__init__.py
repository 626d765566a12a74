"""weightdag: weighted directed acyclic graphs with longest path search."""

__version__ = "0.1.0"

from weightdag.config import DAGOptions
from weightdag.dag import (
    DAG,
    CyclicGraphError,
    DAGError,
    Edge,
    ForeignVertexError,
    IdSource,
    LongestPath,
    Vertex,
)
from weightdag.weights import (
    FloatWeight,
    IntegerWeight,
    Scale,
    Weight,
    WeightFunction,
    double_weight,
    identity,
    triple_weight,
)

__all__ = [
    "__version__",
    "DAG",
    "Vertex",
    "Edge",
    "LongestPath",
    "IdSource",
    "DAGOptions",
    "DAGError",
    "ForeignVertexError",
    "CyclicGraphError",
    "Weight",
    "WeightFunction",
    "IntegerWeight",
    "FloatWeight",
    "identity",
    "Scale",
    "double_weight",
    "triple_weight",
]
