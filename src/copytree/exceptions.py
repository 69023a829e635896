from typing import Optional

from copytree.types import PathType


class RootNotFoundError(Exception):
    """
    Exception raised when a requested root path does not exist.

    The walker checks every requested root before traversing it, so this error is
    reported before any output for that root is produced.

    Attributes:
        path (str): The requested root, exactly as the user supplied it.

    Example:
        >>> error = RootNotFoundError("missing/dir")
        >>> str(error)
        'root path not found: missing/dir'
    """

    def __init__(self, path: PathType) -> None:
        self.path = str(path)
        super().__init__(f"root path not found: {self.path}")


class WalkIOError(Exception):
    """
    Exception raised when the filesystem fails while listing a directory or reading a file.

    The underlying OSError is kept as ``__cause__`` and in the ``error`` attribute so that
    callers can inspect errno values.

    Attributes:
        path (str): The directory or file that could not be accessed.
        error (OSError): The original error.

    Example:
        >>> error = WalkIOError("secret", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Error accessing secret: [Errno 13] Permission denied'
    """

    def __init__(self, path: PathType, error: OSError) -> None:
        self.path = str(path)
        self.error = error
        super().__init__(f"Error accessing {self.path}: {error}")


class InvalidPatternError(ValueError):
    """
    Exception raised when a gitignore-style pattern cannot be compiled.

    Glob exclusion patterns never fail to compile. Patterns in gitignore syntax are
    compiled by pathspec, which rejects some inputs (for example a dangling escape).
    Those patterns are compiled while command-line arguments are parsed, so this error
    surfaces before any filesystem work begins.

    Attributes:
        pattern (str): The offending pattern.
        reason (str): Human-readable explanation.

    Example:
        >>> error = InvalidPatternError("build/[", "unbalanced bracket")
        >>> error.pattern
        'build/['
        >>> str(error)
        "Invalid pattern 'build/[': unbalanced bracket"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class ClipboardError(Exception):
    """Exception raised when the output could not be copied to the system clipboard."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)


class TokenizerNotAvailableError(Exception):
    """
    Exception raised when token counting is requested without the tiktoken package.

    tiktoken is an optional dependency installed through the 'token_counting' extra.

    Attributes:
        message (str): Detailed error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        self.message = (
            f"{message} To enable token counting, install copytree with the 'token_counting' "
            "extra: 'pip install copytree[token_counting]'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass
