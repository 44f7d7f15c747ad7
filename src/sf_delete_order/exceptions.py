"""Exception hierarchy for delete order computation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .salesforce.models import LookupField, SObject


class DeleteOrderError(Exception):
    """Base exception for delete order errors."""
    pass


class GraphContractError(DeleteOrderError):
    """A dependency graph was used outside of its contract.

    These are caller programming errors. They cannot occur when the graph
    is only built through :func:`sf_delete_order.salesforce.ordering.delete_order`.
    """


class InvalidGraphSize(GraphContractError, ValueError):
    """Graph requested with a negative vertex count."""

    def __init__(self, vertex_count: int):
        self.vertex_count = vertex_count
        super().__init__(f"Vertex count must be >= 0, got {vertex_count}")


class VertexIndexError(GraphContractError, IndexError):
    """Edge endpoint outside ``0 <= index < vertex_count``."""

    def __init__(self, vertex: int, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex} out of range for graph with {vertex_count} vertices"
        )


class UnknownTargetError(DeleteOrderError):
    """A lookup field points at an SObject that is not in the input set."""

    def __init__(self, sobject: "SObject", field: "LookupField"):
        self.sobject = sobject
        self.field = field
        self.target = field.target_sobject
        super().__init__(
            f"{sobject.name}.{field.full_name} references unknown SObject "
            f"'{field.target_sobject}'. Include its metadata file or remove the field."
        )


class MetadataParseError(DeleteOrderError):
    """An SObject metadata file could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class TemplateError(DeleteOrderError):
    """Output template is unusable."""
    pass


class ConfigError(DeleteOrderError):
    """Raised when the config file cannot be parsed or validated."""
    pass


__all__ = [
    "DeleteOrderError",
    "GraphContractError",
    "InvalidGraphSize",
    "VertexIndexError",
    "UnknownTargetError",
    "MetadataParseError",
    "TemplateError",
    "ConfigError",
]
