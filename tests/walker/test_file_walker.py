"""Unit tests for the FileWalker class."""

import os
from pathlib import Path

import pytest

from copytree.exceptions import RootNotFoundError, WalkIOError
from copytree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from copytree.exclusion_rules.glob_rules import GlobExclusionRules
from copytree.walker.file_walker import FileWalker
from copytree.walker.permission_action import PermissionAction

real_scandir = os.scandir


def as_posix(paths):
    return [Path(path).as_posix() for path in paths]


@pytest.fixture
def project(tmp_path, monkeypatch):
    (tmp_path / "src" / "utils").mkdir(parents=True)
    (tmp_path / "docs").mkdir()
    (tmp_path / "build").mkdir()
    (tmp_path / "src" / "main.py").write_text("def main():\n    pass\n")
    (tmp_path / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (tmp_path / "src" / "main.pyc").write_bytes(b"\x00compiled")
    (tmp_path / "docs" / "README.md").write_text("# Docs\n")
    (tmp_path / "build" / "app.js").write_text("console.log('x')\n")
    (tmp_path / "README.md").write_text("# Project\n")
    (tmp_path / ".env").write_text("SECRET=1\n")
    (tmp_path / ".gitignore").write_text("*.pyc\nbuild/\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def deny_listing(monkeypatch):
    """Make listing any directory with one of the given names fail with EACCES."""
    denied = set()

    def scandir(path="."):
        if Path(path).name in denied:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    return denied


def test_walk_is_sorted_and_filtered(project):
    walker = FileWalker(current_dir=project)
    assert as_posix(walker.walk(["."])) == [
        "README.md",
        "docs/README.md",
        "src/main.py",
        "src/utils/helpers.py",
    ]


def test_walk_without_gitignore(project):
    walker = FileWalker(current_dir=project, respect_gitignore=False)
    files = as_posix(walker.walk(["."]))
    assert "build/app.js" in files
    assert "src/main.pyc" in files
    assert ".env" not in files


def test_hidden_entries(project):
    (project / ".config").mkdir()
    (project / ".config" / "settings.toml").write_text("x = 1\n")
    (project / ".git").mkdir()
    (project / ".git" / "HEAD").write_text("ref: refs/heads/main\n")

    hidden = as_posix(FileWalker(current_dir=project, include_hidden=True).walk(["."]))
    assert ".env" in hidden
    assert ".gitignore" in hidden
    assert ".config/settings.toml" in hidden
    assert not any(path.startswith(".git/") for path in hidden)

    visible = as_posix(FileWalker(current_dir=project).walk(["."]))
    assert not any(path.startswith(".") for path in visible)


def test_paths_are_spelled_from_the_root(project):
    files = as_posix(FileWalker(current_dir=project).walk(["src"]))
    assert files == ["src/main.py", "src/utils/helpers.py"]

    absolute = FileWalker(current_dir=project).walk([str(project / "docs")])
    assert absolute == [project / "docs" / "README.md"]


def test_multiple_roots_keep_their_order(project):
    files = as_posix(FileWalker(current_dir=project).walk(["src/utils", "docs"]))
    assert files == ["src/utils/helpers.py", "docs/README.md"]


def test_file_root_is_included(project):
    assert as_posix(FileWalker(current_dir=project).walk(["README.md"])) == ["README.md"]


def test_excluded_file_root_is_skipped(project):
    rules = GlobExclusionRules(["README.md"], current_dir=project)
    assert FileWalker(rules, current_dir=project).walk(["README.md"]) == []


def test_missing_root_raises_before_traversal(project):
    walker = FileWalker(current_dir=project)
    files = walker.iterate_files(["missing", "src"])
    with pytest.raises(RootNotFoundError) as exc_info:
        next(files)
    assert exc_info.value.path == "missing"


def test_glob_rules_apply_relative_to_current_dir(project):
    rules = GlobExclusionRules(["src/utils"], current_dir=project)
    files = as_posix(FileWalker(rules, current_dir=project).walk(["."]))
    assert "src/utils/helpers.py" not in files
    assert "src/main.py" in files


def test_directory_only_gitignore_rules_see_directories(project):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("utils/")
    files = as_posix(FileWalker(rules, current_dir=project).walk(["."]))
    assert files == ["README.md", "docs/README.md", "src/main.py"]


def test_excluded_directory_is_never_listed(project, deny_listing):
    (project / "secret").mkdir()
    (project / "secret" / "key.pem").write_text("-----BEGIN-----\n")
    deny_listing.add("secret")

    rules = GlobExclusionRules(["secret"], current_dir=project)
    walker = FileWalker(rules, current_dir=project, permission_action=PermissionAction.RAISE)
    files = as_posix(walker.walk(["."]))
    assert "secret/key.pem" not in files
    assert walker.errors == []


def test_unreadable_directory_raises(project, deny_listing):
    deny_listing.add("docs")
    walker = FileWalker(current_dir=project)
    with pytest.raises(WalkIOError) as exc_info:
        walker.walk(["."])
    assert Path(exc_info.value.path).name == "docs"
    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_unreadable_directory_warn_records_error(project, deny_listing):
    deny_listing.add("docs")
    walker = FileWalker(current_dir=project, permission_action=PermissionAction.WARN)
    files = as_posix(walker.walk(["."]))
    assert "docs/README.md" not in files
    assert "src/main.py" in files
    assert len(walker.errors) == 1
    assert "Permission denied" in str(walker.errors[0])


def test_unreadable_directory_ignore_is_silent(project, deny_listing):
    deny_listing.add("docs")
    walker = FileWalker(current_dir=project, permission_action=PermissionAction.IGNORE)
    files = as_posix(walker.walk(["."]))
    assert "docs/README.md" not in files
    assert walker.errors == []


def test_nested_gitignore_applies_below_its_directory(project):
    (project / "src" / ".gitignore").write_text("helpers.py\n")
    (project / "docs" / "helpers.py").write_text("x\n")
    files = as_posix(FileWalker(current_dir=project).walk(["."]))
    assert "src/utils/helpers.py" not in files
    assert "docs/helpers.py" in files


def test_nested_gitignore_negation(project):
    (project / "src" / "utils" / ".gitignore").write_text("*.py\n!helpers.py\n")
    (project / "src" / "utils" / "other.py").write_text("x\n")
    files = as_posix(FileWalker(current_dir=project).walk(["."]))
    assert "src/utils/helpers.py" in files
    assert "src/utils/other.py" not in files


def test_ancestor_gitignore_inside_work_tree(project):
    (project / ".git").mkdir()
    (project / "src" / "debug.pyc").write_bytes(b"\x00")
    files = as_posix(FileWalker(current_dir=project).walk(["src"]))
    assert "src/debug.pyc" not in files
    assert "src/main.pyc" not in files


def test_ancestor_gitignore_outside_work_tree_is_ignored(project):
    files = as_posix(FileWalker(current_dir=project).walk(["src"]))
    assert "src/main.pyc" in files


@pytest.fixture
def project_with_symlinks(project):
    try:
        os.symlink(project / "docs", project / "docs_link", target_is_directory=True)
        os.symlink(project / "README.md", project / "README_link.md")
        os.symlink(project / "src", project / "src" / "utils" / "loop", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("Symbolic links are not supported")
    return project


def test_symlinks_are_skipped_by_default(project_with_symlinks):
    files = as_posix(FileWalker(current_dir=project_with_symlinks).walk(["."]))
    assert "README_link.md" not in files
    assert not any(path.startswith("docs_link/") for path in files)
    assert not any("/loop/" in path for path in files)


def test_symlinks_are_followed_without_looping(project_with_symlinks):
    walker = FileWalker(current_dir=project_with_symlinks, follow_symlinks=True)
    files = as_posix(walker.walk(["."]))
    assert "README_link.md" in files
    assert "docs_link/README.md" in files
    # The link points back at a directory on the current descent path
    assert not any("/loop/" in path for path in files)
    assert "src/utils/helpers.py" in files


def test_relative_roots_resolve_against_current_dir(tmp_path):
    work = tmp_path / "work"
    (work / "src" / "build").mkdir(parents=True)
    (work / "src" / "main.rs").write_text("fn main() {}\n")
    (work / "src" / "build" / "out.o").write_text("object\n")
    (work / "src" / ".gitignore").write_text("build/\n")
    (work / "notes.txt").write_text("notes\n")

    walker = FileWalker(current_dir=work)
    assert as_posix(walker.walk(["src", "notes.txt"])) == ["src/main.rs", "notes.txt"]


def test_skip_files_are_never_reported(project):
    walker = FileWalker(current_dir=project, skip_files=["docs/README.md", project / "README.md"])
    assert as_posix(walker.walk(["."])) == ["src/main.py", "src/utils/helpers.py"]
    assert as_posix(walker.walk(["README.md"])) == []
