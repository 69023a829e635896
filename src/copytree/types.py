from os import PathLike
from typing import Tuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# A path expressed as its ordered components, e.g. ("src", "main.py")
Components = Tuple[str, ...]
