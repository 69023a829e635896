"""Unit tests for TreeRelation."""

import pytest

from copytree.file_tree.tree_relation import ROOT, TreeRelation


@pytest.fixture
def relation():
    relation = TreeRelation()
    relation.add_file(("src", "main.rs"))
    relation.add_file(("src", "lib.rs"))
    relation.add_file(("README.md",))
    return relation


def test_every_prefix_becomes_a_parent(relation):
    assert relation.children(ROOT) == [("README.md",), ("src",)]
    assert relation.children(("src",)) == [("src", "lib.rs"), ("src", "main.rs")]
    assert relation.children(("README.md",)) == []


def test_insertion_is_idempotent(relation):
    parents = [ROOT, ("src",), ("README.md",)]
    before = {parent: relation.children(parent) for parent in parents}
    relation.add_file(("src", "main.rs"))
    relation.add_file(("README.md",))
    after = {parent: relation.children(parent) for parent in parents}
    assert before == after


def test_children_are_sorted_by_code_point():
    relation = TreeRelation()
    for name in ["b.txt", "B.txt", "a.txt", "_x", "Z"]:
        relation.add_file((name,))
    assert [child[-1] for child in relation.children(ROOT)] == ["B.txt", "Z", "_x", "a.txt", "b.txt"]


def test_deep_file_creates_every_directory():
    relation = TreeRelation()
    relation.add_file(("a", "b", "c", "d.txt"))
    assert relation.directory_count() == 3
    assert ("a", "b") in relation
    assert ("a", "b", "c", "d.txt") not in relation


def test_empty_relation():
    relation = TreeRelation()
    assert relation.is_empty()
    assert relation.directory_count() == 0
    assert relation.children(ROOT) == []
    relation.add_file(())
    assert relation.is_empty()


def test_from_paths_normalizes_spellings(tmp_path):
    relation = TreeRelation.from_paths(
        [tmp_path / "src" / "main.rs", "./src/lib.rs", "README.md", "."],
        tmp_path,
    )
    assert relation.children(ROOT) == [("README.md",), ("src",)]
    assert relation.children(("src",)) == [("src", "lib.rs"), ("src", "main.rs")]


def test_no_node_without_file_descendant(tmp_path):
    relation = TreeRelation.from_paths(["docs/guide/intro.md"], tmp_path)
    for parent in [ROOT, ("docs",), ("docs", "guide")]:
        assert relation.children(parent)
    assert ("docs", "guide", "intro.md") not in relation
    assert relation.directory_count() == 2
