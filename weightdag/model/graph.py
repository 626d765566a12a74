"""Pydantic model describing a weighted graph in YAML."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Tuple, Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from weightdag.config import DAGOptions
from weightdag.dag import DAG, Vertex
from weightdag.weights import WEIGHT_TYPES

logger = logging.getLogger(__name__)


class GraphDescriptionError(Exception):
    """Raised when a graph description cannot be loaded."""

    def __init__(self, message: str, source: Union[str, Path, None] = None):
        self.message = message
        self.source = source
        if source is not None:
            super().__init__(f"{source}: {message}")
        else:
            super().__init__(message)


class WeightTypeEnum(str, Enum):
    integer = "integer"
    float = "float"


class VertexSpec(BaseModel):
    name: str = Field(..., description="Name used to reference the vertex")
    weight: float

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Vertex name must be a non-empty string")
        return v.strip()


class EdgeSpec(BaseModel):
    origin: str
    destination: str
    weight: float


@dataclass
class BuildResult:
    """A graph built from a description, plus what could not be added."""

    dag: DAG
    vertices: Dict[str, Vertex]
    rejected: List[Tuple[str, str]] = field(default_factory=list)


class GraphDescription(BaseModel):
    """A weighted graph: typed vertices by name and edges between them."""

    weight_type: WeightTypeEnum = WeightTypeEnum.integer
    vertices: List[VertexSpec] = Field(default_factory=list)
    edges: List[EdgeSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_references(self) -> "GraphDescription":
        errors: List[str] = []

        names = [vertex.name for vertex in self.vertices]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            errors.append(f"Found duplicate vertex names: {', '.join(duplicates)}")

        known = set(names)
        for edge in self.edges:
            for end in (edge.origin, edge.destination):
                if end not in known:
                    errors.append(
                        f"Edge {edge.origin} -> {edge.destination} references "
                        f"unknown vertex '{end}'"
                    )

        if self.weight_type == WeightTypeEnum.integer:
            values = [v.weight for v in self.vertices] + [e.weight for e in self.edges]
            if any(value != int(value) for value in values):
                errors.append("Integer graphs only accept whole-number weights")

        if errors:
            raise ValueError("\n".join(errors))
        return self

    @classmethod
    def from_yaml(cls, path_or_content: Union[str, Path]) -> "GraphDescription":
        """Load a graph description from a YAML file or string content."""
        source = None
        try:
            if isinstance(path_or_content, Path) or "\n" not in path_or_content:
                # Treat as file path
                source = path_or_content
                with open(path_or_content, "r") as f:
                    data = yaml.safe_load(f)
            else:
                # Treat as YAML content string
                data = yaml.safe_load(path_or_content)
        except OSError as e:
            raise GraphDescriptionError(f"Could not read graph: {e}", source) from e
        except yaml.YAMLError as e:
            raise GraphDescriptionError(f"Invalid YAML: {e}", source) from e

        if not isinstance(data, dict):
            raise GraphDescriptionError("Graph description must be a mapping", source)

        try:
            return cls(**data)
        except PydanticValidationError as e:
            raise GraphDescriptionError(str(e), source) from e

    def make_weight(self, value: float):
        """Wrap a raw number in the weight type of this graph."""
        weight_cls = WEIGHT_TYPES[self.weight_type.value]
        if self.weight_type == WeightTypeEnum.integer:
            return weight_cls(int(value))
        return weight_cls(value)

    def build(self, options: Union[DAGOptions, None] = None) -> BuildResult:
        """Create a DAG with the described vertices and edges.

        Edges are inserted in the listed order; an edge that would close a
        cycle is skipped and reported in ``BuildResult.rejected``.
        """
        dag: DAG = DAG(options=options)
        result = BuildResult(dag=dag, vertices={})

        for spec in self.vertices:
            result.vertices[spec.name] = dag.add_vertex(self.make_weight(spec.weight))

        for spec in self.edges:
            edge = dag.add_edge(
                result.vertices[spec.origin],
                result.vertices[spec.destination],
                self.make_weight(spec.weight),
            )
            if edge is None:
                result.rejected.append((spec.origin, spec.destination))

        if result.rejected:
            logger.info(f"{len(result.rejected)} edge(s) rejected while building graph")
        return result
