"""Binary file detection utilities."""

import codecs
from pathlib import Path

from copytree.types import PathType

# Extensions that are binary with high confidence
BINARY_EXTENSIONS = frozenset(
    {
        # Executables and objects
        ".exe",
        ".dll",
        ".so",
        ".dylib",
        ".o",
        ".a",
        ".lib",
        ".class",
        ".pyc",
        ".wasm",
        ".bin",
        # Images
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".bmp",
        ".tiff",
        ".ico",
        ".webp",
        # Audio and video
        ".mp3",
        ".wav",
        ".flac",
        ".ogg",
        ".mp4",
        ".mkv",
        ".mov",
        ".avi",
        # Archives
        ".zip",
        ".tar",
        ".gz",
        ".bz2",
        ".xz",
        ".7z",
        ".rar",
        ".jar",
        # Documents and databases
        ".pdf",
        ".sqlite",
        ".sqlite3",
        ".db",
    }
)

# Extensions that are text with high confidence
TEXT_EXTENSIONS = frozenset(
    {
        # Source code
        ".py",
        ".rs",
        ".go",
        ".c",
        ".h",
        ".cpp",
        ".hpp",
        ".java",
        ".kt",
        ".js",
        ".ts",
        ".tsx",
        ".jsx",
        ".rb",
        ".php",
        ".sh",
        ".swift",
        ".scala",
        # Markup, data and configuration
        ".md",
        ".rst",
        ".txt",
        ".html",
        ".css",
        ".xml",
        ".svg",
        ".json",
        ".yaml",
        ".yml",
        ".toml",
        ".ini",
        ".cfg",
        ".csv",
        ".lock",
    }
)

# More than this share of control characters marks a chunk as binary
CONTROL_CHAR_THRESHOLD = 0.01
_TEXT_CONTROL_BYTES = frozenset({9, 10, 12, 13})


def is_binary_file(file_path: PathType, chunk_size: int = 8192) -> bool:
    """Detect if a file is binary using extension hints and content analysis.

    Known extensions are decided without reading the file. Otherwise the first
    ``chunk_size`` bytes are inspected: a NUL byte, bytes that are not valid UTF-8, or
    more than 1% control characters other than common whitespace mark the file as
    binary. A multi-byte UTF-8 sequence cut off at the end of the chunk is not counted
    as invalid.

    Args:
        file_path: Path to the file to analyze.
        chunk_size: Number of bytes to inspect. Defaults to 8192.

    Returns:
        True if the file appears to be binary, False if it appears to be text.

    Raises:
        OSError: If the file cannot be read.

    Example:
        >>> is_binary_file("logo.png")
        True
        >>> is_binary_file("README.md")
        False
    """
    path = Path(file_path)
    extension = path.suffix.lower()

    if extension in BINARY_EXTENSIONS:
        return True
    if extension in TEXT_EXTENSIONS:
        return False

    with open(path, "rb") as file:
        chunk = file.read(chunk_size)

    if not chunk:
        return False
    if b"\0" in chunk:
        return True

    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        decoder.decode(chunk, final=False)
    except UnicodeDecodeError:
        return True

    control_chars = sum(1 for byte in chunk if byte < 32 and byte not in _TEXT_CONTROL_BYTES)
    return control_chars / len(chunk) > CONTROL_CHAR_THRESHOLD
