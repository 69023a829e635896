"""Parsing of the per-file content size limit."""

from typing import Union

from humanfriendly import InvalidSize, parse_size

# Files larger than this are listed with a skip notice instead of their contents
DEFAULT_MAX_FILE_BYTES = 16 * 1024


def parse_file_size(size: Union[str, int]) -> int:
    """Parse a human-readable file size to bytes.

    Plain numbers are bytes. Suffixes follow humanfriendly: ``KB``/``MB`` are decimal,
    ``KiB``/``MiB`` are binary. Zero is allowed and means "no limit" to callers.

    Args:
        size: Size like ``"16KiB"``, ``"1MB"``, ``"4096"`` or an int.

    Returns:
        Size in bytes.

    Raises:
        ValueError: If the size is malformed or negative.

    Example:
        >>> parse_file_size("16KiB")
        16384
        >>> parse_file_size("1MB")
        1000000
        >>> parse_file_size(0)
        0
    """
    if isinstance(size, int):
        value = size
    else:
        try:
            value = int(parse_size(size.strip(), binary=False))
        except InvalidSize as e:
            raise ValueError(f"Invalid size format '{size}': {e}")

    if value < 0:
        raise ValueError("Size cannot be negative")
    return value
