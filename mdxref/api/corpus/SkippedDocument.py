"""Skipped document model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SkippedDocument:
    """A file that matched the corpus filter but could not be read."""

    path: str
    reason: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "reason": self.reason}
