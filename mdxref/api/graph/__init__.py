"""Reference graph construction."""

from .build_graph import build_graph
from .ReferenceGraph import ReferenceGraph

__all__ = ["ReferenceGraph", "build_graph"]
