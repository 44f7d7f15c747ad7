"""Salesforce SObject metadata and delete ordering."""

from .models import (
    DeleteConstraint,
    LookupField,
    LookupType,
    SObject,
    is_sobject,
)
from .ordering import delete_order, map_name_to_index, requires_ordering, to_graph
from .parser import parse_path, parse_paths, parse_sobject_file

__all__ = [
    "DeleteConstraint",
    "LookupField",
    "LookupType",
    "SObject",
    "is_sobject",
    "delete_order",
    "map_name_to_index",
    "requires_ordering",
    "to_graph",
    "parse_path",
    "parse_paths",
    "parse_sobject_file",
]
