"""Lazy, restartable sequence of a document's internal links."""

from collections.abc import Iterable, Iterator

from .._constants import DEFAULT_EXTERNAL_SCHEMES
from ..corpus.Document import Document
from .is_external_target import is_external_target
from .LinkReference import LinkReference
from .parse_markdown_links import parse_markdown_links
from .resolve_target import resolve_target


class LinkSequence:
    """Internal links of one document.

    Nothing is parsed until the sequence is iterated, and every iteration
    rescans the (immutable) document content, so the sequence can be
    consumed any number of times with identical results.
    """

    def __init__(self, document: Document, external_schemes: Iterable[str] = DEFAULT_EXTERNAL_SCHEMES):
        self.document = document
        self.external_schemes = tuple(external_schemes)

    def __iter__(self) -> Iterator[LinkReference]:
        for link in parse_markdown_links(self.document.content):
            if is_external_target(link.target, self.external_schemes):
                continue
            if link.target.startswith("#"):
                # In-page anchor, not a document reference
                continue
            target, fragment = resolve_target(self.document.path, link.target)
            if not target:
                continue
            yield LinkReference(
                source=self.document.path,
                line_number=link.line_number,
                column_number=link.column_number,
                label=link.label,
                raw_target=link.target,
                target=target,
                fragment=fragment,
                is_embed=link.is_embed,
            )

    def __repr__(self) -> str:
        return f"LinkSequence({self.document.path!r})"
