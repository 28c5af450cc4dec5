"""Tests for the integrity checker."""

import pytest

from mdxref.api.check import (
    DanglingLink,
    EmptyCorpusError,
    ResourceLink,
    SelfReference,
    check_integrity,
    normalize_entry_point,
)
from mdxref.api.corpus import Document, SkippedDocument
from mdxref.api.graph import build_graph


def _check(entry_points=(), **contents: str):
    docs = [Document(path=f"{name}.md", title=name, content=content) for name, content in contents.items()]
    return check_integrity(build_graph(docs), docs, entry_points=entry_points)


def test_single_edge_with_entry_point():
    report = _check(entry_points=["A.md"], A="[B](./B.md)", B="")
    assert report.document_count == 2
    assert report.link_count == 1
    assert report.dangling == []
    assert report.orphans == []
    assert report.is_valid is True


def test_single_edge_without_entry_point_reports_source_as_orphan():
    report = _check(A="[B](./B.md)", B="")
    assert report.orphans == ["A.md"]
    assert report.orphan_count == 1


def test_dangling_link():
    report = _check(A="# A\n[Missing](./NoSuchFile.md)")
    assert report.dangling == [
        DanglingLink(
            source="A.md", raw_target="./NoSuchFile.md", target="NoSuchFile.md", line_number=2, column_number=1
        )
    ]
    assert report.dangling_count == 1
    assert report.is_valid is False


def test_external_links_are_never_dangling():
    report = _check(A="[docs](https://developer.apple.com/documentation/swiftui/)")
    assert report.dangling == []
    assert report.link_count == 0


def test_self_reference_is_a_warning_and_not_incoming():
    report = _check(A="[see also](A.md#top) [B](B.md)", B="")
    assert report.self_references == [SelfReference(source="A.md", raw_target="A.md#top", line_number=1, fragment="top")]
    assert report.orphans == ["A.md"]
    assert report.is_valid is True


def test_entry_points_are_normalized():
    report = _check(entry_points=["./A.md", "A.md"], A="")
    assert report.entry_points == ["A.md"]
    assert report.orphans == []


def test_unknown_entry_point_is_logged(caplog):
    with caplog.at_level("WARNING", logger="mdxref.check"):
        report = _check(entry_points=["index.md"], A="")
    assert report.orphans == ["A.md"]
    assert "Entry point index.md is not a loaded document" in caplog.text


def test_skipped_files_are_reported():
    docs = [Document(path="A.md", title="A")]
    report = check_integrity(
        build_graph(docs), docs, skipped=[SkippedDocument(path="z.md", reason="bad"), SkippedDocument("b.md", "x")]
    )
    assert report.skipped == [{"path": "b.md", "reason": "x"}, {"path": "z.md", "reason": "bad"}]
    assert report.skipped_count == 2


def test_empty_document_set_is_fatal():
    with pytest.raises(EmptyCorpusError):
        check_integrity(build_graph([]), [])


def test_entry_point_excluded_in_thirty_document_corpus():
    names = [f"doc{i:02d}" for i in range(30)]
    contents = {}
    for i, name in enumerate(names):
        # doc00 -> doc01 -> ... -> doc29 -> doc01; nothing links back to doc00
        nxt = names[i + 1] if i + 1 < len(names) else names[1]
        contents[name] = f"# {name}\n[next]({nxt}.md)\n"

    assert _check(**contents).orphans == ["doc00.md"]

    report = _check(entry_points=["doc00.md"], **contents)
    assert report.document_count == 30
    assert report.orphans == []
    assert report.dangling == []


def test_report_dump_contains_counts():
    dumped = _check(A="[x](x.md)").model_dump(mode="python")
    assert dumped["dangling_count"] == 1
    assert dumped["orphan_count"] == 1
    assert dumped["self_reference_count"] == 0
    assert dumped["skipped_count"] == 0
    assert dumped["is_valid"] is False


@pytest.mark.parametrize(
    ("entry", "expected"),
    [("index.md", "index.md"), ("./index.md", "index.md"), ("/index.md", "index.md"), ("a\\b.md", "a/b.md"), ("./", "")],
)
def test_normalize_entry_point(entry, expected):
    assert normalize_entry_point(entry) == expected


def test_normalize_absolute_entry_point_under_root(tmp_path):
    assert normalize_entry_point(str(tmp_path / "sub" / "index.md"), tmp_path) == "sub/index.md"


def test_isolated_documents_have_no_links_either_way():
    report = _check(entry_points=["C.md"], A="[B](./B.md)", B="", C="[me](C.md) [gone](gone.md)")
    assert report.isolated == ["C.md"]
    assert report.isolated_count == 1
    assert report.orphans == ["A.md"]


def test_link_with_parentheses_reaches_document():
    docs = [
        Document(path="A.md", title="A", content="[b](./Meet%20SwiftData%20(Part%201).md)"),
        Document(path="Meet SwiftData (Part 1).md", title="Part 1"),
    ]
    report = check_integrity(build_graph(docs), docs, entry_points=["A.md"])
    assert report.dangling == []
    assert report.orphans == []
    assert report.is_valid is True


def test_existing_non_document_target_is_a_resource(make_corpus):
    root = make_corpus({"images/flow.png": b"\x89PNG", "notes.pdf": b"%PDF"})
    docs = [Document(path="A.md", title="A", content="![diagram](images/flow.png) [pdf](notes.pdf) [gone](gone.png)")]

    report = check_integrity(build_graph(docs), docs, root=str(root))

    assert report.resources == [
        ResourceLink(source="A.md", raw_target="images/flow.png", target="images/flow.png", line_number=1, is_embed=True),
        ResourceLink(source="A.md", raw_target="notes.pdf", target="notes.pdf", line_number=1),
    ]
    assert [(d.target, d.is_embed) for d in report.dangling] == [("gone.png", False)]
    assert report.resource_count == 2
    assert report.isolated == ["A.md"]


def test_missing_embed_is_dangling_and_flagged():
    report = _check(A="![diagram](images/flow.png)")
    assert [(d.target, d.is_embed) for d in report.dangling] == [("images/flow.png", True)]


def test_directory_and_escaping_targets_stay_dangling(make_corpus, tmp_path):
    root = make_corpus({"sub/x.png": b""})
    (tmp_path / "outside.png").write_bytes(b"")
    docs = [Document(path="A.md", title="A", content="[dir](sub/) [up](../outside.png)")]

    report = check_integrity(build_graph(docs), docs, root=str(root))

    assert report.resources == []
    assert sorted(d.target for d in report.dangling) == ["../outside.png", "sub"]
