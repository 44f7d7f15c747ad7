"""Core graph primitives."""

from .graph import DirectedGraph

__all__ = ["DirectedGraph"]
