from dataclasses import dataclass

import pytest

from notegraph.resolver import LinkResolver, normalize_for_matching
from notegraph.wikilink import WikiLink


@dataclass
class Note:
    path: str
    id: str


def make_resolver(*pairs):
    resolver = LinkResolver()
    for path, file_id in pairs:
        resolver.add_file(Note(path, file_id))
    return resolver


def test_new_resolver_registers_files():
    resolver = make_resolver(("note1.md", "id1"), ("note2.md", "id2"))
    assert resolver.stats() == {"total_files": 2, "unique_basenames": 2, "duplicate_names": 0}
    assert resolver.get_path("id2") == "note2.md"


def test_resolve_by_id_does_not_match():
    resolver = make_resolver(("concepts/note1.md", "abc123"), ("projects/note2.md", "def456"))
    assert resolver.resolve_link("abc123", "") is None
    assert resolver.resolve_link("xyz789", "") is None


@pytest.mark.parametrize(
    "target, expected",
    [
        ("concepts/network.md", "id1"),
        ("concepts/network", "id1"),
        ("projects/mnemosyne", "id2"),
        ("does/not/exist", None),
    ],
)
def test_resolve_by_path(target, expected):
    resolver = make_resolver(("concepts/network.md", "id1"), ("projects/mnemosyne.md", "id2"))
    assert resolver.resolve_link(target, "") == expected


def test_resolve_by_basename():
    resolver = make_resolver(
        ("deep/nested/path/unique-name.md", "id1"), ("other/location/different.md", "id2")
    )
    assert resolver.resolve_link("unique-name", "") == "id1"
    assert resolver.resolve_link("different", "") == "id2"


@pytest.mark.parametrize(
    "target, expected",
    [
        ("network-theory", "id1"),
        ("network theory", "id1"),
        ("Network-Theory", "id1"),
        ("ai-concepts", "id2"),
        ("ai concepts", "id2"),
    ],
)
def test_resolve_case_insensitive(target, expected):
    resolver = make_resolver(("Network-Theory.md", "id1"), ("AI-Concepts.md", "id2"))
    assert resolver.resolve_link(target, "") == expected


def test_ambiguous_links():
    resolver = make_resolver(
        ("concepts/network.md", "id1"),
        ("projects/network.md", "id2"),
        ("archive/network.md", "id3"),
    )
    assert resolver.resolve_link("network", "") in {"id1", "id2", "id3"}
    assert resolver.resolve_link("network", "concepts/other.md") == "id1"


def test_priority():
    resolver = make_resolver(("exact-match.md", "id1"), ("folder/target.md", "id2"))
    assert resolver.resolve_link("target", "") == "id2"
    assert resolver.resolve_link("exact-match", "") == "id1"


@pytest.mark.parametrize("target", ["nonexistent", "", "random-file"])
def test_no_match(target):
    resolver = make_resolver(("note1.md", "id1"), ("note2.md", "id2"))
    assert resolver.resolve_link(target, "") is None


@pytest.mark.parametrize(
    "target, expected",
    [
        ("C++ Programming", "cpp"),
        ("[Draft] Proposal", "draft"),
        ("2023-01-15 Meeting", "meeting"),
    ],
)
def test_special_characters(target, expected):
    resolver = make_resolver(
        ("notes/C++ Programming.md", "cpp"),
        ("guides/[Draft] Proposal.md", "draft"),
        ("data/2023-01-15 Meeting.md", "meeting"),
    )
    assert resolver.resolve_link(target, "") == expected


def test_resolve_links():
    resolver = make_resolver(("note1.md", "id1"), ("note2.md", "id2"), ("folder/note3.md", "id3"))
    links = [WikiLink(target="note2"), WikiLink(target="note3"), WikiLink(target="missing")]
    resolved, unresolved = resolver.resolve_links(links, "note1.md")
    assert resolved == {"note2": "id2", "note3": "id3"}
    assert [link.target for link in unresolved] == ["missing"]


def test_stats():
    resolver = make_resolver(
        ("note1.md", "id1"),
        ("note2.md", "id2"),
        ("folder1/duplicate.md", "id3"),
        ("folder2/duplicate.md", "id4"),
    )
    stats = resolver.stats()
    assert stats["total_files"] == 4
    assert stats["unique_basenames"] == 3
    assert stats["duplicate_names"] == 1


def test_get_path():
    resolver = make_resolver(("concepts/network.md", "id1"), ("projects/mnemosyne.md", "id2"))
    assert resolver.get_path("id1") == "concepts/network.md"
    assert resolver.get_path("id999") is None


def test_relative_path():
    resolver = make_resolver(
        ("concepts/network.md", "id1"),
        ("concepts/graph.md", "id2"),
        ("projects/mnemosyne.md", "id3"),
    )
    assert resolver.resolve_link("graph", "concepts/network.md") == "id2"
    assert resolver.resolve_link("../projects/mnemosyne", "concepts/network.md") == "id3"


@pytest.mark.parametrize(
    "target, source, expected",
    [
        ("../../shallow", "a/b/c/deep.md", "shallow"),
        ("./shallow", "a/b/other.md", "shallow"),
        ("../../../index", "a/b/c/deep.md", "root"),
        ("../index", "a/b/file.md", "a-index"),
        ("index", "", "root"),
        ("a/index", "", "a-index"),
        ("a/b/shallow.md", "", "shallow"),
    ],
)
def test_complex_paths(target, source, expected):
    resolver = make_resolver(
        ("a/b/c/deep.md", "deep"),
        ("a/b/shallow.md", "shallow"),
        ("index.md", "root"),
        ("a/index.md", "a-index"),
    )
    assert resolver.resolve_link(target, source) == expected


def test_edge_cases():
    resolver = LinkResolver()
    assert resolver.resolve_link("anything", "") is None

    resolver.add_file(Note("", "empty-path"))
    resolver.add_file(Note("file with spaces.md", "spaces"))
    resolver.add_file(Note("file-with-dashes.md", "dashes"))
    resolver.add_file(Note("file_with_underscores.md", "underscores"))

    assert resolver.resolve_link("file with spaces", "") == "spaces"
    assert resolver.resolve_link("file-with-dashes", "") == "dashes"
    assert resolver.resolve_link("file with dashes", "") == "dashes"


def test_duplicate_handling():
    resolver = make_resolver(
        ("2023/01/index.md", "2023-01"),
        ("2023/02/index.md", "2023-02"),
        ("2023/03/index.md", "2023-03"),
        ("index.md", "root-index"),
    )
    candidates = {"2023-01", "2023-02", "2023-03", "root-index"}
    assert resolver.resolve_link("index", "") in candidates
    assert resolver.resolve_link("index", "2023/02/other.md") in candidates
    stats = resolver.stats()
    assert stats["total_files"] == 4
    assert stats["unique_basenames"] == 1
    assert stats["duplicate_names"] == 3


def test_resolve_links_batch():
    resolver = make_resolver(("a.md", "a"), ("b.md", "b"), ("c.md", "c"))
    links = [
        WikiLink(target="a"),
        WikiLink(target="b"),
        WikiLink(target="missing"),
        WikiLink(target="c"),
        WikiLink(target=""),
        WikiLink(target="also-missing"),
    ]
    resolved, unresolved = resolver.resolve_links(links, "source.md")
    assert resolved == {"a": "a", "b": "b", "c": "c"}
    assert sorted(link.target for link in unresolved) == ["", "also-missing", "missing"]


@pytest.mark.parametrize(
    "target, expected",
    [
        ("hub-node", "hub"),
        ("important", "important"),
        ("MIXED-case_FILE", "mixed"),
        ("mixed case file", "mixed"),
        ("multiple   dashes   underscores", "multiple"),
        ("multiple-dashes-underscores", "multiple"),
    ],
)
def test_normalization_edge_cases(target, expected):
    resolver = make_resolver(
        ("~hub-node.md", "hub"),
        ("+important.md", "important"),
        ("mixed-CASE_file.md", "mixed"),
        ("multiple---dashes___underscores.md", "multiple"),
    )
    assert resolver.resolve_link(target, "") == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("~Hub-Node", "hub node"),
        ("+important", "important"),
        ("a__b--c", "a b c"),
        ("  spaced   out ", "spaced out"),
    ],
)
def test_normalize_for_matching(value, expected):
    assert normalize_for_matching(value) == expected