"""Link reference model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkReference:
    """An internal link found in a document.

    ``raw_target`` is the target as written; ``target`` is the decoded,
    normalized, root-relative path it points at, and ``fragment`` the
    ``#section`` part (without ``#``), kept for reporting only.
    """

    source: str
    line_number: int
    column_number: int
    label: str
    raw_target: str
    target: str
    fragment: str = ""
    is_embed: bool = False

    @property
    def is_self_reference(self) -> bool:
        return self.target == self.source
