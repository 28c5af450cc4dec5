"""Reference graph builder (UNO: single function)."""

from collections.abc import Iterable
from types import MappingProxyType

from ...logging_config import get_logger
from ..config.MdxrefConfig import MdxrefConfig
from ..corpus.Document import Document
from ..link.extract_links import extract_links
from ..link.LinkReference import LinkReference
from .ReferenceGraph import ReferenceGraph

logger = get_logger("graph")


def build_graph(documents: Iterable[Document], config: MdxrefConfig | None = None) -> ReferenceGraph:
    """Build the reference graph of ``documents`` in a single pass.

    Documents are processed in path order and edges are sets, so the graph
    does not depend on the order the documents were loaded in.

    Args:
        documents: Loaded documents (a Corpus works too)
        config: Run configuration, used for the external scheme list

    Returns:
        ReferenceGraph with one node per document and dangling targets as stubs
    """
    ordered = sorted(documents, key=lambda doc: doc.path)
    nodes = frozenset(doc.path for doc in ordered)

    edges: dict[str, set[str]] = {doc.path: set() for doc in ordered}
    stubs: set[str] = set()
    links: list[LinkReference] = []

    for doc in ordered:
        for link in extract_links(doc, config):
            links.append(link)
            edges[doc.path].add(link.target)
            if link.target not in nodes:
                stubs.add(link.target)

    links.sort(key=lambda link: (link.source, link.line_number, link.column_number))
    logger.info("Built graph: %d documents, %d links, %d dangling targets", len(nodes), len(links), len(stubs))

    return ReferenceGraph(
        nodes=nodes,
        edges=MappingProxyType({path: frozenset(targets) for path, targets in edges.items()}),
        stubs=frozenset(stubs),
        links=tuple(links),
    )
