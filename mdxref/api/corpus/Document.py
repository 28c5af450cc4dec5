"""Document model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """One markdown file of the corpus.

    ``path`` is the POSIX path relative to the corpus root and identifies
    the document.
    """

    path: str
    title: str
    content: str = ""
