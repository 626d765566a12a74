"""Pydantic models for weightdag."""

from weightdag.model.graph import (
    BuildResult,
    EdgeSpec,
    GraphDescription,
    GraphDescriptionError,
    VertexSpec,
    WeightTypeEnum,
)

__all__ = [
    "BuildResult",
    "EdgeSpec",
    "GraphDescription",
    "GraphDescriptionError",
    "VertexSpec",
    "WeightTypeEnum",
]
