"""Reading and formatting of file contents."""

from .binary_detector import is_binary_file
from .file_content_printer import FileContentPrinter, FileSection, format_header
from .size_limit import DEFAULT_MAX_FILE_BYTES, parse_file_size

__all__ = [
    "DEFAULT_MAX_FILE_BYTES",
    "FileContentPrinter",
    "FileSection",
    "format_header",
    "is_binary_file",
    "parse_file_size",
]
