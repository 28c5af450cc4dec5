"""MarkdownLink model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MarkdownLink:
    """A parsed ``[label](target)`` inline link, before any resolution."""

    line_number: int
    column_number: int
    label: str
    target: str
    is_embed: bool = False
