"""Collection of the files below a set of requested roots.

This module provides the FileWalker class, which lists directories recursively and
reports every regular file that survives hidden-file filtering, .gitignore rules and
the user's exclusion rules.
"""

import os
import stat
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Sequence, Set

from copytree.exceptions import RootNotFoundError, WalkIOError
from copytree.exclusion_rules.base_rules import BaseExclusionRules
from copytree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from copytree.paths import match_components
from copytree.types import PathType

from .file_identifier import FileIdentifier
from .permission_action import PermissionAction

GITIGNORE_FILE = ".gitignore"
GIT_DIR = ".git"


class IgnoreFile(NamedTuple):
    """A loaded .gitignore file and the absolute directory its patterns are relative to."""

    base: Path
    rules: GitIgnoreExclusionRules


class FileWalker:
    """Recursive, gitignore-aware file collector.

    Roots are processed in the order given. A root that is a file is reported as is; a
    root that is a directory is listed recursively with entries in name order, so the
    result is deterministic.

    Exclusion happens before descent: a directory matched by the exclusion rules or by
    a .gitignore file is never listed, which also means an unreadable directory that is
    excluded never produces an error. Directories are offered to the rules with a
    trailing slash so that directory-only gitignore patterns such as ``build/`` apply.

    Exclusion rules see paths relative to ``current_dir``; .gitignore patterns see paths
    relative to the directory holding the .gitignore file.

    Symbolic Link Behavior:
        Symbolic links are skipped by default. With ``follow_symlinks`` they are
        treated as their targets, and a directory already on the current descent path
        is not entered again.

    Error Handling:
        A missing root raises RootNotFoundError before that root is traversed. A
        directory that cannot be listed is handled according to ``permission_action``:
        RAISE raises WalkIOError, WARN skips the subtree and appends the error to
        ``errors``, IGNORE skips it silently.

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding paths.
        current_dir (Path): Directory that exclusion candidates are made relative to.
        respect_gitignore (bool): Whether .gitignore files are honored.
        include_hidden (bool): Whether entries starting with a dot are included.
        follow_symlinks (bool): Whether symbolic links are followed.
        permission_action (PermissionAction): How listing failures are handled.
        skip_files (Set[Path]): Absolute paths of files that are never reported.
        errors (List[WalkIOError]): Failures skipped under PermissionAction.WARN.

    Example:
        >>> walker = FileWalker(current_dir=".")  # doctest: +SKIP
        >>> [str(path) for path in walker.walk(["src"])]  # doctest: +SKIP
        ['src/copytree/__init__.py', 'src/copytree/cli/main.py']
    """

    def __init__(
        self,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        *,
        current_dir: Optional[PathType] = None,
        respect_gitignore: bool = True,
        include_hidden: bool = False,
        follow_symlinks: bool = False,
        permission_action: PermissionAction = PermissionAction.RAISE,
        skip_files: Sequence[PathType] = (),
    ) -> None:
        self.exclusion_rules = exclusion_rules
        self.current_dir = Path(os.path.abspath(current_dir)) if current_dir is not None else Path.cwd()
        self.skip_files: Set[Path] = {self._absolute(Path(file)) for file in skip_files}
        self.respect_gitignore = respect_gitignore
        self.include_hidden = include_hidden
        self.follow_symlinks = follow_symlinks
        self.permission_action = permission_action
        self.errors: List[WalkIOError] = []

    def walk(self, roots: Sequence[PathType]) -> List[Path]:
        """Collect the files below every root.

        Args:
            roots: Files and directories to collect from.

        Returns:
            Paths of the included files, spelled relative to the given roots.

        Raises:
            RootNotFoundError: If a root does not exist.
            WalkIOError: If a root cannot be inspected, or a directory cannot be listed
                and permission_action is RAISE.
        """
        return list(self.iterate_files(roots))

    def iterate_files(self, roots: Sequence[PathType]) -> Iterator[Path]:
        """Lazily yield included files; see :meth:`walk`."""
        for root in roots:
            root_path = Path(root)
            try:
                root_stat = os.stat(self._absolute(root_path))
            except FileNotFoundError:
                raise RootNotFoundError(root)
            except OSError as e:
                raise WalkIOError(root_path, e) from e

            is_dir = stat.S_ISDIR(root_stat.st_mode)
            if self._is_excluded(root_path, is_dir):
                continue

            if not is_dir:
                if self._absolute(root_path) not in self.skip_files:
                    yield root_path
                continue

            ignore_files = self._ancestor_ignore_files(root_path) if self.respect_gitignore else []
            yield from self._walk_directory(root_path, ignore_files, (FileIdentifier.from_stat(root_stat),))

    def _walk_directory(
        self,
        directory: Path,
        ignore_files: List[IgnoreFile],
        ancestors: Sequence[FileIdentifier],
    ) -> Iterator[Path]:
        try:
            with os.scandir(self._absolute(directory)) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            self._handle_error(directory, e)
            return

        if self.respect_gitignore:
            ignore_files = ignore_files + self._load_ignore_file(directory)

        for entry in entries:
            path = directory / entry.name
            try:
                if entry.is_symlink() and not self.follow_symlinks:
                    continue
                is_dir = entry.is_dir()
                is_file = entry.is_file()
            except OSError:
                continue

            if is_dir and entry.name == GIT_DIR:
                continue
            if not self.include_hidden and entry.name.startswith("."):
                continue
            if self._is_gitignored(path, is_dir, ignore_files):
                continue
            if self._is_excluded(path, is_dir):
                continue

            if is_dir:
                try:
                    identifier = FileIdentifier.from_stat(entry.stat())
                except OSError as e:
                    self._handle_error(path, e)
                    continue
                if identifier in ancestors:
                    # Symlink loop back into the current descent path
                    continue
                yield from self._walk_directory(path, ignore_files, (*ancestors, identifier))
            elif is_file and self._absolute(path) not in self.skip_files:
                yield path

    def _is_excluded(self, path: Path, is_dir: bool) -> bool:
        if self.exclusion_rules is None:
            return False
        components = match_components(path, self.current_dir)
        if not components:
            return False
        candidate = "/".join(components) + ("/" if is_dir else "")
        return self.exclusion_rules.exclude(candidate)

    def _is_gitignored(self, path: Path, is_dir: bool, ignore_files: Sequence[IgnoreFile]) -> bool:
        if not ignore_files:
            return False
        absolute = self._absolute(path)
        for ignore_file in ignore_files:
            try:
                relative = absolute.relative_to(ignore_file.base)
            except ValueError:
                continue
            candidate = relative.as_posix() + ("/" if is_dir else "")
            if ignore_file.rules.exclude(candidate):
                return True
        return False

    def _load_ignore_file(self, directory: Path) -> List[IgnoreFile]:
        gitignore = self._absolute(directory) / GITIGNORE_FILE
        if not gitignore.is_file():
            return []
        try:
            rules = GitIgnoreExclusionRules(gitignore)
        except OSError as e:
            self._handle_error(gitignore, e)
            return []
        return [IgnoreFile(self._absolute(directory), rules)]

    def _ancestor_ignore_files(self, root: Path) -> List[IgnoreFile]:
        """Load .gitignore files from the parents of ``root`` up to its git work tree root.

        Outside a git work tree no parent .gitignore applies.
        """
        absolute_root = self._absolute(root)
        parents = list(absolute_root.parents)
        work_tree = next((d for d in [absolute_root, *parents] if (d / GIT_DIR).exists()), None)
        if work_tree is None or work_tree == absolute_root:
            return []

        chain = parents[: parents.index(work_tree) + 1]
        ignore_files: List[IgnoreFile] = []
        for directory in reversed(chain):
            ignore_files.extend(self._load_ignore_file(directory))
        return ignore_files

    def _absolute(self, path: Path) -> Path:
        return Path(os.path.normpath(self.current_dir / path))

    def _handle_error(self, path: Path, error: OSError) -> None:
        walk_error = WalkIOError(path, error)
        if self.permission_action == PermissionAction.RAISE:
            raise walk_error from error
        if self.permission_action == PermissionAction.WARN:
            self.errors.append(walk_error)
