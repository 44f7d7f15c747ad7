"""CLI command modules for sf-delete-order."""

from .graph import graph
from .init import init
from .order import order

__all__ = ["graph", "init", "order"]
