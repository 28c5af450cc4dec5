"""Reference graph model (UNO: single model)."""

from collections.abc import Mapping
from dataclasses import dataclass

from ..link.LinkReference import LinkReference


@dataclass(frozen=True)
class ReferenceGraph:
    """Directed graph of document -> referenced document.

    ``nodes`` holds exactly the loaded document paths and ``edges`` has an
    entry (possibly empty) for every node. Targets that are not documents
    appear in ``edges`` and in ``stubs`` but never in ``nodes``.
    """

    nodes: frozenset[str]
    edges: Mapping[str, frozenset[str]]
    stubs: frozenset[str]
    links: tuple[LinkReference, ...]

    def __post_init__(self) -> None:
        unknown = set(self.edges) - self.nodes
        if unknown:
            raise ValueError(f"Edge sources are not documents: {sorted(unknown)}")
        overlap = self.stubs & self.nodes
        if overlap:
            raise ValueError(f"Stub nodes overlap documents: {sorted(overlap)}")

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.edges.values())

    def outgoing(self, path: str) -> frozenset[str]:
        """Targets linked from ``path`` (documents and stubs)."""
        return self.edges.get(path, frozenset())

    def incoming(self, path: str) -> frozenset[str]:
        """Documents that link to ``path``."""
        return frozenset(source for source, targets in self.edges.items() if path in targets)
