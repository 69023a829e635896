"""Signal-aware writing of output to a file descriptor or file."""

import errno
import os
import types
from typing import Optional, Type, Union

from copytree.cli.signal_handler import signal_handler
from copytree.types import PathType


class SafeWriter:
    """Writes UTF-8 text unmodified, stopping as soon as a signal has been received.

    Writes go straight to the file descriptor with ``os.write``, so nothing is held back
    in a Python-level buffer when the process is interrupted. Partial writes are
    completed before returning.

    Attributes:
        file: The file descriptor or path the writer was created with.
        fd: The file descriptor being written to.
        bytes_written: Total number of bytes written so far.

    Example:
        >>> import sys
        >>> with SafeWriter(sys.stdout.fileno()) as writer:  # doctest: +SKIP
        ...     writer.write("src\\n└─ main.rs\\n")
    """

    def __init__(self, file: Union[int, PathType]) -> None:
        """Initialize the safe writer.

        Args:
            file: A file descriptor, or a path that is opened (and truncated) for writing.

        Raises:
            TypeError: If ``file`` is neither a descriptor nor a path.
        """
        self.file = file
        self.bytes_written = 0
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._owns_fd = False
        elif isinstance(file, (str, os.PathLike)):
            self.fd = os.open(file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
            self._owns_fd = True
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write ``data`` completely.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is broken.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        view = memoryview(data.encode("utf-8"))
        try:
            while view:
                written = os.write(self.fd, view)
                self.bytes_written += written
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Close the descriptor if this writer opened it. Closing twice is harmless."""
        if self._closed:
            return
        self._closed = True

        if self._owns_fd:
            try:
                os.close(self.fd)
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence
            if exc_type is None:
                raise
