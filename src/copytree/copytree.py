"""Conversion of a set of filesystem locations into a single text artifact.

This module provides StreamingCopyTree, which produces the tree and the file sections
incrementally, and CopyTree, which produces everything at construction time.
"""

import os
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence

from copytree.content.file_content_printer import FileContentPrinter
from copytree.content.size_limit import DEFAULT_MAX_FILE_BYTES
from copytree.exceptions import TokenizationError, WalkIOError
from copytree.exclusion_rules.base_rules import BaseExclusionRules
from copytree.file_tree.tree_relation import TreeRelation
from copytree.file_tree.tree_renderer import stream_tree_lines
from copytree.root_scope import RootScope, resolve_root_scope
from copytree.token_counter import TokenCounter
from copytree.types import PathType
from copytree.walker.file_walker import FileWalker
from copytree.walker.permission_action import PermissionAction

DEFAULT_ROOTS = (".",)


class StreamingCopyTree:
    """Streaming producer of the tree and file sections for a set of roots.

    The filesystem is walked once, at construction: the file list, the tree relation and
    the root scope are final from then on. File contents are read only while
    :meth:`stream_contents` is consumed, one file at a time.

    Streaming properties:
    - Each streaming operation (tree, contents) can only be performed once
    - Line, character and token counts grow as output is streamed
    - Counts are final once streaming_complete is True

    Attributes:
        paths (List[str]): Requested roots.
        current_dir (Path): Directory every relative path is resolved against, read once.
        scope (RootScope): Label and anchor used to render the tree.
        relation (TreeRelation): Directory hierarchy implied by the included files.
        files (List[Path]): Included files, in output order.

    Example:
        >>> copy = StreamingCopyTree(["src"])  # doctest: +SKIP
        >>> for line in copy.stream_tree():  # doctest: +SKIP
        ...     print(line, end="")
        src
        └─ main.rs
        <BLANKLINE>

    Raises:
        RootNotFoundError: If a requested root does not exist.
        WalkIOError: If a directory cannot be listed and permission_action is RAISE.
        TokenizerNotAvailableError: If a tokenizer model is given without tiktoken.
    """

    def __init__(
        self,
        paths: Optional[Sequence[PathType]] = None,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        current_dir: Optional[PathType] = None,
        respect_gitignore: bool = True,
        include_hidden: bool = False,
        follow_symlinks: bool = False,
        permission_action: PermissionAction = PermissionAction.RAISE,
        max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
        tokenizer_model: Optional[str] = None,
        skip_files: Sequence[PathType] = (),
    ) -> None:
        """Walk the requested roots and prepare the output.

        Args:
            paths: Files and directories to include. Defaults to the current directory.
            exclusion_rules: Rules applied to every walked path, or None.
            current_dir: Directory relative paths are anchored to. Defaults to the
                process working directory.
            respect_gitignore: Whether .gitignore files are honored.
            include_hidden: Whether hidden files and directories are included.
            follow_symlinks: Whether symbolic links are followed.
            permission_action: How listing and read failures are handled.
            max_file_bytes: Files larger than this get a skip notice; 0 disables the limit.
            tokenizer_model: Model for token counting, or None to disable it.
            skip_files: Files left out of the walk, such as the file the output is
                written to.
        """
        self.paths = [str(path) for path in (paths or DEFAULT_ROOTS)]
        self.current_dir = Path(os.path.abspath(current_dir)) if current_dir is not None else Path.cwd()

        # Fail on a bad tokenizer before touching the filesystem
        self._counter = TokenCounter(model=tokenizer_model)

        self._walker = FileWalker(
            exclusion_rules,
            current_dir=self.current_dir,
            respect_gitignore=respect_gitignore,
            include_hidden=include_hidden,
            follow_symlinks=follow_symlinks,
            permission_action=permission_action,
            skip_files=skip_files,
        )
        self.files = self._walker.walk(self.paths)
        self.relation = TreeRelation.from_paths(self.files, self.current_dir)
        self.scope: RootScope = resolve_root_scope(self.paths, self.current_dir)

        self._content_printer = FileContentPrinter(
            self.files,
            max_file_bytes=max_file_bytes,
            permission_action=permission_action,
            base_dir=self.current_dir,
        )
        self._read_errors: List[WalkIOError] = []
        self._skipped_count = 0

        self._tree_complete = False
        self._contents_complete = False

    @property
    def file_count(self) -> int:
        """Number of included files. Final after construction."""
        return len(self.files)

    @property
    def directory_count(self) -> int:
        """Number of directories shown in the tree, excluding the root. Final after construction."""
        return self.relation.directory_count()

    @property
    def skipped_count(self) -> int:
        """Number of file sections that carry a skip notice instead of content."""
        return self._skipped_count

    @property
    def errors(self) -> List[WalkIOError]:
        """Failures skipped under PermissionAction.WARN, from walking and then from reading."""
        return self._walker.errors + self._read_errors

    @property
    def streaming_complete(self) -> bool:
        return self._tree_complete and self._contents_complete

    @property
    def token_count(self) -> Optional[int]:
        """Tokens in the output streamed so far, or None if token counting is disabled."""
        return self._counter.total_tokens

    @property
    def line_count(self) -> int:
        return self._counter.total_lines

    @property
    def character_count(self) -> int:
        return self._counter.total_characters

    def _count_and_yield(self, text: str) -> str:
        try:
            self._counter.count(text)
        except TokenizationError:
            # Lines and characters are still counted
            pass
        return text

    def stream_tree(self) -> Iterator[str]:
        """Stream the rendered tree line by line, followed by the blank separator line.

        Raises:
            RuntimeError: If the tree has already been streamed.

        Note:
            Each yielded line includes a trailing newline.
        """
        if self._tree_complete:
            raise RuntimeError("Tree has already been streamed")

        for line in stream_tree_lines(self.relation, self.scope):
            yield self._count_and_yield(line + "\n")

        yield self._count_and_yield("\n")
        self._tree_complete = True

    def stream_contents(self) -> Iterator[str]:
        """Stream one complete section per included file.

        Raises:
            RuntimeError: If contents have already been streamed.
            WalkIOError: If a file cannot be read and permission_action is RAISE.
        """
        if self._contents_complete:
            raise RuntimeError("Contents have already been streamed")

        for section in self._content_printer.yield_file_sections():
            if section.skipped:
                self._skipped_count += 1
            if section.error is not None and self._walker.permission_action == PermissionAction.WARN:
                self._read_errors.append(section.error)
            yield self._count_and_yield(section.render())

        self._contents_complete = True

    def stream(self) -> Iterator[str]:
        """Stream the whole artifact: the tree, then the file sections."""
        yield from self.stream_tree()
        yield from self.stream_contents()


class CopyTree(StreamingCopyTree):
    """Producer that builds the complete artifact during initialization.

    The whole output, including every included file, is held in memory. Use
    StreamingCopyTree when that matters.

    Example:
        >>> copy = CopyTree(["README.md", "src"], max_file_bytes=0)  # doctest: +SKIP
        >>> print(copy.tree_string, end="")  # doctest: +SKIP
        .
        ├─ README.md
        └─ src
           └─ main.rs
        <BLANKLINE>
    """

    def __init__(self, paths: Optional[Sequence[PathType]] = None, **kwargs: Any) -> None:
        super().__init__(paths, **kwargs)
        self._tree_string = "".join(self.stream_tree())
        self._content_string = "".join(self.stream_contents())

    @property
    def tree_string(self) -> str:
        """The rendered tree and the blank separator line."""
        return self._tree_string

    @property
    def content_string(self) -> str:
        """All file sections."""
        return self._content_string

    @property
    def text(self) -> str:
        """The complete artifact handed to the output sink."""
        return self._tree_string + self._content_string
