"""Corpus model (UNO: single model)."""

from dataclasses import dataclass, field
from pathlib import Path

from .Document import Document
from .SkippedDocument import SkippedDocument


@dataclass(frozen=True)
class Corpus:
    """Documents loaded from one root directory, sorted by path."""

    root: Path
    documents: tuple[Document, ...]
    skipped: tuple[SkippedDocument, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for doc in self.documents:
            if doc.path in seen:
                raise ValueError(f"Duplicate document path: {doc.path}")
            seen.add(doc.path)

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self):
        return iter(self.documents)

    @property
    def paths(self) -> frozenset[str]:
        return frozenset(doc.path for doc in self.documents)
