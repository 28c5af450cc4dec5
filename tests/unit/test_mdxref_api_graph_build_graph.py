"""Tests for the reference graph builder."""

import pytest

from mdxref.api.corpus import Document, load_corpus
from mdxref.api.graph import ReferenceGraph, build_graph


def _docs(**contents: str) -> list[Document]:
    return [Document(path=f"{name}.md", title=name, content=content) for name, content in contents.items()]


def test_single_edge():
    graph = build_graph(_docs(A="[B](./B.md)", B="no links"))

    assert graph.nodes == frozenset({"A.md", "B.md"})
    assert dict(graph.edges) == {"A.md": frozenset({"B.md"}), "B.md": frozenset()}
    assert graph.edge_count == 1
    assert graph.stubs == frozenset()
    assert graph.outgoing("A.md") == frozenset({"B.md"})
    assert graph.incoming("B.md") == frozenset({"A.md"})
    assert graph.incoming("A.md") == frozenset()


def test_dangling_targets_become_stubs_not_nodes():
    graph = build_graph(_docs(A="[Missing](./NoSuchFile.md)"))

    assert graph.nodes == frozenset({"A.md"})
    assert graph.stubs == frozenset({"NoSuchFile.md"})
    assert graph.outgoing("A.md") == frozenset({"NoSuchFile.md"})


def test_duplicate_links_are_one_edge_but_all_links_kept():
    graph = build_graph(_docs(A="[B](B.md) [again](./B.md#x)", B=""))
    assert graph.edge_count == 1
    assert len(graph.links) == 2
    assert [(link.target, link.fragment) for link in graph.links] == [("B.md", ""), ("B.md", "x")]


def test_document_order_does_not_matter():
    docs = _docs(A="[B](B.md) [C](C.md)", B="[C](C.md) [Z](Z.md)", C="[A](A.md)")
    forward = build_graph(docs)
    backward = build_graph(list(reversed(docs)))

    assert forward.nodes == backward.nodes
    assert dict(forward.edges) == dict(backward.edges)
    assert forward.stubs == backward.stubs
    assert forward.links == backward.links


def test_builds_from_loaded_corpus(wwdc_corpus):
    corpus = load_corpus(wwdc_corpus)
    graph = build_graph(corpus)

    assert graph.nodes == corpus.paths
    assert len(graph.links) == 7
    assert graph.stubs == frozenset({"Expand on Swift macros.md"})
    assert graph.incoming("Meet SwiftData.md") == frozenset({"README.md", "SwiftUI/Explore SwiftUI animation.md"})


def test_graph_invariants_are_enforced():
    with pytest.raises(ValueError, match="not documents"):
        ReferenceGraph(nodes=frozenset(), edges={"A.md": frozenset()}, stubs=frozenset(), links=())
    with pytest.raises(ValueError, match="overlap"):
        ReferenceGraph(nodes=frozenset({"A.md"}), edges={}, stubs=frozenset({"A.md"}), links=())


def test_edges_are_read_only():
    graph = build_graph(_docs(A=""))
    with pytest.raises(TypeError):
        graph.edges["B.md"] = frozenset()  # type: ignore[index]
