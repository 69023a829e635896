"""Directory hierarchy reconstructed from a flat list of file paths.

The walker only reports files. Directories come into existence here as prefixes of
those file paths, so a directory without any included file never appears.
"""

from typing import Dict, Iterable, List, Sequence, Set

from copytree.paths import path_components
from copytree.types import Components, PathType

ROOT: Components = ()


class TreeRelation:
    """Mapping from each parent path to the set of its immediate children.

    Paths are tuples of components and the conceptual root is the empty tuple. The
    relation is an arena keyed by path rather than a linked node structure: nodes hold
    no references to each other, and iteration order is decided only when children are
    requested, by sorting them.

    Example:
        >>> relation = TreeRelation()
        >>> relation.add_file(("src", "main.rs"))
        >>> relation.add_file(("src", "lib.rs"))
        >>> relation.add_file(("README.md",))
        >>> relation.children(())
        [('README.md',), ('src',)]
        >>> relation.children(("src",))
        [('src', 'lib.rs'), ('src', 'main.rs')]
    """

    def __init__(self) -> None:
        self._children: Dict[Components, Set[Components]] = {}

    @classmethod
    def from_paths(cls, paths: Iterable[PathType], current_dir: PathType) -> "TreeRelation":
        """Build a relation from file paths made relative to ``current_dir``.

        Args:
            paths: File paths, absolute or relative, already filtered by exclusion rules.
            current_dir: Directory that relative paths are anchored to.

        Returns:
            The populated relation. Paths that normalize to nothing are skipped.
        """
        relation = cls()
        for path in paths:
            relation.add_file(path_components(path, current_dir))
        return relation

    def add_file(self, components: Sequence[str]) -> None:
        """Insert a file and every directory implied by it.

        Each strict prefix of the path, including the empty root, is recorded as the
        parent of the next longer prefix. Inserting the same file again changes nothing.
        """
        path = tuple(components)
        for depth in range(len(path)):
            self._children.setdefault(path[:depth], set()).add(path[: depth + 1])

    def children(self, parent: Components) -> List[Components]:
        """Return the children of ``parent`` sorted by code point, or an empty list."""
        return sorted(self._children.get(parent, ()))

    def is_empty(self) -> bool:
        return not self._children

    def directory_count(self) -> int:
        """Number of directories implied by the files, excluding the root."""
        return sum(1 for parent in self._children if parent != ROOT)

    def __contains__(self, parent: object) -> bool:
        return parent in self._children
