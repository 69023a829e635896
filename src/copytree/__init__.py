"""Directory tree and file content copying utilities.

This package turns one or more files and directories into a single text
artifact: an ASCII tree of the included files followed by their contents,
ready to be pasted into a Large Language Model (LLM) prompt.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("copytree")
except PackageNotFoundError:
    __version__ = "unknown"
