"""Integrity checker (UNO: single function)."""

from collections.abc import Iterable
from pathlib import Path

from ...logging_config import get_logger
from ..corpus.Document import Document
from ..corpus.SkippedDocument import SkippedDocument
from ..graph.ReferenceGraph import ReferenceGraph
from .DanglingLink import DanglingLink
from .EmptyCorpusError import EmptyCorpusError
from .IntegrityReport import IntegrityReport
from .normalize_entry_point import normalize_entry_point
from .ResourceLink import ResourceLink
from .SelfReference import SelfReference

logger = get_logger("check")


def _is_file_under(root: str, target: str) -> bool:
    if not root or target == ".." or target.startswith("../"):
        return False
    return (Path(root) / target).is_file()


def check_integrity(
    graph: ReferenceGraph,
    documents: Iterable[Document],
    entry_points: Iterable[str] = (),
    skipped: Iterable[SkippedDocument] = (),
    root: str = "",
) -> IntegrityReport:
    """Check the reference graph for dangling links, orphans, isolated documents and self-references.

    A target that is not a document but names an existing file under
    ``root`` (an embedded image, a PDF) is reported as a resource link, not
    as dangling. Without a ``root`` every non-document target is dangling.

    Args:
        graph: Graph built from ``documents``
        documents: The real (loaded) documents
        entry_points: Document paths exempt from the orphan check
        skipped: Files that could not be read, listed in the report
        root: Corpus root, for the report header and resource lookups

    Returns:
        IntegrityReport with counts and itemized findings

    Raises:
        EmptyCorpusError: If ``documents`` is empty
    """
    paths = sorted({doc.path for doc in documents})
    if not paths:
        raise EmptyCorpusError("Cannot check integrity of an empty document set")
    known = set(paths)

    entries: list[str] = []
    for entry in entry_points:
        normalized = normalize_entry_point(entry)
        if normalized and normalized not in entries:
            entries.append(normalized)
    for entry in entries:
        if entry not in known:
            logger.warning("Entry point %s is not a loaded document", entry)

    existing_stubs = {stub for stub in graph.stubs if _is_file_under(root, stub)}

    dangling: list[DanglingLink] = []
    resources: list[ResourceLink] = []
    self_references: list[SelfReference] = []
    linked_from_elsewhere: set[str] = set()
    links_elsewhere: set[str] = set()

    for link in graph.links:
        if link.target in existing_stubs:
            resources.append(
                ResourceLink(
                    source=link.source,
                    raw_target=link.raw_target,
                    target=link.target,
                    line_number=link.line_number,
                    is_embed=link.is_embed,
                )
            )
        elif link.target not in known:
            dangling.append(
                DanglingLink(
                    source=link.source,
                    raw_target=link.raw_target,
                    target=link.target,
                    line_number=link.line_number,
                    column_number=link.column_number,
                    is_embed=link.is_embed,
                )
            )
        elif link.is_self_reference:
            self_references.append(
                SelfReference(
                    source=link.source,
                    raw_target=link.raw_target,
                    line_number=link.line_number,
                    fragment=link.fragment,
                )
            )
        else:
            linked_from_elsewhere.add(link.target)
            links_elsewhere.add(link.source)

    orphans = [path for path in paths if path not in linked_from_elsewhere and path not in entries]
    isolated = [path for path in paths if path not in linked_from_elsewhere and path not in links_elsewhere]

    for finding in dangling:
        logger.info("Dangling link in %s:%d -> %s", finding.source, finding.line_number, finding.raw_target)
    for finding in self_references:
        logger.info("Self-reference in %s:%d", finding.source, finding.line_number)

    return IntegrityReport(
        root=root,
        document_count=len(paths),
        link_count=len(graph.links),
        dangling=dangling,
        orphans=orphans,
        isolated=isolated,
        self_references=self_references,
        resources=resources,
        skipped=[s.to_dict() for s in sorted(skipped, key=lambda s: s.path)],
        entry_points=entries,
    )
