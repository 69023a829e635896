"""Delivery of the generated text to stdout, a file, or the system clipboard."""

import sys
from typing import Iterable, Optional

import pyperclip

from copytree.cli.safe_writer import SafeWriter
from copytree.exceptions import ClipboardError
from copytree.types import PathType

FILE_WRITTEN_MESSAGE = "Output written to {path}."
CLIPBOARD_MESSAGE = "Copied to clipboard."


def copy_to_clipboard(text: str) -> None:
    """Put ``text`` on the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available or copying fails.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Could not copy to clipboard: {e}", cause=e) from e


def emit_output(chunks: Iterable[str], to_stdout: bool = False, out_file: Optional[PathType] = None) -> None:
    """Send the output to exactly one destination.

    With ``to_stdout`` the chunks are written to standard output unmodified as they are
    produced. Otherwise, with ``out_file``, they are written to that file and a
    confirmation is printed. Otherwise the complete text is copied to the clipboard and
    a confirmation is printed.

    Args:
        chunks: The output text, in pieces.
        to_stdout: Whether to print instead of copying.
        out_file: File to write instead of copying.

    Raises:
        BrokenPipeError: If writing stops because of SIGPIPE or SIGINT.
        ClipboardError: If copying to the clipboard fails.
        OSError: If the output file cannot be written.
    """
    if to_stdout:
        with SafeWriter(sys.stdout.fileno()) as writer:
            for chunk in chunks:
                writer.write(chunk)
    elif out_file is not None:
        with SafeWriter(out_file) as writer:
            for chunk in chunks:
                writer.write(chunk)
        print(FILE_WRITTEN_MESSAGE.format(path=out_file))
    else:
        copy_to_clipboard("".join(chunks))
        print(CLIPBOARD_MESSAGE)
