"""Unit tests for GitIgnoreExclusionRules."""

from unittest.mock import patch

import pytest
from pathspec import GitIgnoreSpec

from copytree.exceptions import InvalidPatternError
from copytree.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def temp_gitignore(tmp_path):
    path = tmp_path / ".gitignore"
    path.write_text("*.txt\n!important.txt\nsubdir/\n*.py[cod]\n**/__pycache__/\n")
    return path


@pytest.fixture
def temp_dockerignore(tmp_path):
    path = tmp_path / ".dockerignore"
    path.write_text("*.log\nnode_modules/\n!important.log\n")
    return path


@pytest.mark.parametrize(
    "path,expected",
    [
        ("file.txt", True),
        ("important.txt", False),
        ("file.py", False),
        ("subdir/", True),
        ("subdir/file.py", True),
        ("another_dir/file.txt", True),
        ("another_dir/file.py", False),
        ("nested/deeper/file.txt", True),
        ("file.pyc", True),
        ("file.pyd", True),
        ("file.pyx", False),
        ("__pycache__/cache_file.py", True),
        ("lib/__pycache__/cache_file.py", True),
    ],
)
def test_gitignore_exclusion_rules(temp_gitignore, path, expected):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_directory_pattern_needs_trailing_slash_for_the_directory_itself():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("build/")
    assert rules.exclude("build/")
    assert not rules.exclude("build")


def test_empty_file_excludes_nothing(tmp_path):
    empty = tmp_path / "empty.ignore"
    empty.write_text("")
    rules = GitIgnoreExclusionRules(empty)
    assert not rules.exclude("any_file.txt")


def test_comments_and_blank_lines_are_ignored(tmp_path):
    path = tmp_path / "rules"
    path.write_text("# build output\n\nbuild/\n")
    rules = GitIgnoreExclusionRules(path)
    assert rules.exclude("build/app.js")
    assert not rules.exclude("# build output")


def test_nonexistent_file():
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules("nonexistent_file")


def test_multiple_files_are_combined(temp_gitignore, temp_dockerignore):
    rules = GitIgnoreExclusionRules([temp_gitignore, temp_dockerignore])
    assert rules.exclude("file.txt")
    assert not rules.exclude("important.txt")
    assert rules.exclude("debug.log")
    assert not rules.exclude("important.log")
    assert rules.exclude("node_modules/package.json")


def test_later_rules_override_earlier_ones():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.log")
    assert rules.exclude("keep.log")
    rules.add_rule("!keep.log")
    assert not rules.exclude("keep.log")
    rules.add_rule("keep.log")
    assert rules.exclude("keep.log")


def test_add_rule_and_load_rules_mix(temp_dockerignore):
    rules = GitIgnoreExclusionRules()
    assert not rules.has_rules()
    rules.add_rule("*.tmp")
    rules.load_rules(temp_dockerignore)
    assert rules.has_rules()
    assert rules.exclude("scratch.tmp")
    assert rules.exclude("server.log")


def test_rejected_pattern_raises_invalid_pattern_error():
    rules = GitIgnoreExclusionRules()
    with patch(
        "copytree.exclusion_rules.git_rules.GitIgnoreSpec.from_lines",
        side_effect=ValueError("bad escape"),
    ):
        with pytest.raises(InvalidPatternError) as exc_info:
            rules.add_rule("broken\\")

    assert exc_info.value.pattern == "broken\\"
    assert exc_info.value.reason == "bad escape"
    assert isinstance(exc_info.value.__cause__, ValueError)
    # The rejected pattern was not kept
    assert not rules.has_rules()


def test_rejected_pattern_in_file_names_the_line(tmp_path):
    path = tmp_path / "rules"
    path.write_text("*.log\nbad\n")
    real_from_lines = GitIgnoreSpec.from_lines

    def from_lines(lines):
        if list(lines) == ["bad"]:
            raise ValueError("rejected")
        return real_from_lines(lines)

    rules = GitIgnoreExclusionRules()
    with patch("copytree.exclusion_rules.git_rules.GitIgnoreSpec.from_lines", side_effect=from_lines):
        with pytest.raises(InvalidPatternError, match="'bad'"):
            rules.load_rules(path)
