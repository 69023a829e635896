"""File identifier for recognizing directories already on the descent path."""

import os
from typing import NamedTuple


class FileIdentifier(NamedTuple):
    """Device and inode pair that uniquely identifies a directory.

    Used while following symbolic links: a directory whose identifier is already on
    the current descent path would lead back into itself.

    Attributes:
        device_id: The device ID from stat information.
        inode_number: The inode number from stat information.

    Note:
        On Windows, os.stat provides usable st_dev/st_ino values on NTFS volumes.
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        return cls(stat_result.st_dev, stat_result.st_ino)
