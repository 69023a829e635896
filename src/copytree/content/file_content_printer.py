"""File content sections of the output.

Each included file becomes one section: a header line naming the file, then either
its complete text or a skip notice explaining why the text was left out. Skipping is a
local recovery; the file is still part of the tree.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Sequence

from copytree.exceptions import WalkIOError
from copytree.types import PathType
from copytree.walker.permission_action import PermissionAction

from .binary_detector import is_binary_file
from .size_limit import DEFAULT_MAX_FILE_BYTES

SIZE_EXCEEDED_NOTICE = "<skipped: file size {size} bytes exceeds --max-file-bytes {limit}>"
BINARY_NOTICE = "<skipped: binary file>"
UNREADABLE_NOTICE = "<skipped: unreadable file>"


def format_header(path: PathType) -> str:
    """Return the header line that opens a file section.

    Example:
        >>> format_header("src/main.rs")
        '--- src/main.rs ---\\n'
    """
    return f"--- {path} ---\n"


@dataclass(frozen=True)
class FileSection:
    """The output section for one file.

    Exactly one of ``content`` and ``skip_notice`` is set.

    Attributes:
        path: The file path as the walker reported it.
        content: The file's complete text.
        skip_notice: Bracketed notice used instead of the content.
        error: The read failure behind an unreadable-file notice, if any.
    """

    path: Path
    content: Optional[str] = None
    skip_notice: Optional[str] = None
    error: Optional[WalkIOError] = None

    @property
    def skipped(self) -> bool:
        return self.skip_notice is not None

    def render(self) -> str:
        """Return the header, the body and the blank line that ends the section."""
        body = self.skip_notice if self.skip_notice is not None else self.content or ""
        return f"{format_header(self.path)}{body}\n\n"


class FileContentPrinter:
    """Reads included files and formats them as output sections.

    Files are read whole, using the configured encoding in strict mode with line
    endings preserved. Files over ``max_file_bytes`` are not read at all. Binary files
    (by extension or content) and files that fail to decode get a binary-file notice.

    Attributes:
        files (Sequence[Path]): Files to format, in output order.
        max_file_bytes (int): Size limit for included content; 0 disables the limit.
        encoding (str): The encoding used to read files.
        permission_action (PermissionAction): How read failures are handled.
        base_dir (Optional[Path]): Directory relative file paths are read from, or None
            for the process working directory.

    Example:
        >>> printer = FileContentPrinter(["src/main.rs"], max_file_bytes=0)  # doctest: +SKIP
        >>> print("".join(printer.stream_contents()), end="")  # doctest: +SKIP
        --- src/main.rs ---
        fn main() {}
    """

    def __init__(
        self,
        files: Sequence[PathType],
        *,
        max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
        encoding: str = "utf-8",
        permission_action: PermissionAction = PermissionAction.RAISE,
        base_dir: Optional[PathType] = None,
    ) -> None:
        """Initialize the FileContentPrinter.

        Raises:
            ValueError: If max_file_bytes is negative.
            LookupError: If the specified encoding is not available.
        """
        if max_file_bytes < 0:
            raise ValueError("max_file_bytes cannot be negative")

        # Validate encoding early to fail fast
        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.files = [Path(file) for file in files]
        self.max_file_bytes = max_file_bytes
        self.encoding = encoding
        self.permission_action = permission_action
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def _source(self, path: Path) -> Path:
        return self.base_dir / path if self.base_dir is not None else path

    def read_section(self, path: Path) -> FileSection:
        """Build the section for a single file.

        Raises:
            WalkIOError: If the file cannot be read and permission_action is RAISE.
        """
        source = self._source(path)
        try:
            if self.max_file_bytes > 0:
                size = source.stat().st_size
                if size > self.max_file_bytes:
                    notice = SIZE_EXCEEDED_NOTICE.format(size=size, limit=self.max_file_bytes)
                    return FileSection(path, skip_notice=notice)

            if is_binary_file(source):
                return FileSection(path, skip_notice=BINARY_NOTICE)

            with open(source, "r", encoding=self.encoding, newline="") as file:
                return FileSection(path, content=file.read())
        except UnicodeDecodeError:
            return FileSection(path, skip_notice=BINARY_NOTICE)
        except OSError as e:
            error = WalkIOError(path, e)
            if self.permission_action == PermissionAction.RAISE:
                raise error from e
            return FileSection(path, skip_notice=UNREADABLE_NOTICE, error=error)

    def yield_file_sections(self) -> Iterator[FileSection]:
        """Yield one section per file, reading each file only when its section is requested."""
        for path in self.files:
            yield self.read_section(path)

    def stream_contents(self) -> Iterator[str]:
        """Yield the rendered text of every section in order."""
        for section in self.yield_file_sections():
            yield section.render()
