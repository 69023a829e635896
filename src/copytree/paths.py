"""Path normalization relative to an explicit current directory.

Every component that reasons about paths (the exclusion matcher, the tree builder and
the root-scope resolver) receives the current directory as a parameter instead of
reading it from the process, so the same inputs always give the same answers.
"""

from pathlib import Path, PurePath

from copytree.types import Components, PathType


def make_relative_path(path: PathType, current_dir: PathType) -> PurePath:
    """Express a path relative to the current directory.

    Absolute paths below ``current_dir`` lose that prefix; absolute paths elsewhere are
    kept as they are. Current-directory markers (``.`` and ``./``) are dropped, so the
    current directory itself normalizes to an empty path.

    Args:
        path: The path to normalize.
        current_dir: The directory that relative paths are anchored to.

    Returns:
        The normalized path. ``PurePath().parts`` is empty for the current directory.

    Example:
        >>> make_relative_path("/work/src/main.py", "/work").as_posix()
        'src/main.py'
        >>> make_relative_path("./src/main.py", "/work").as_posix()
        'src/main.py'
        >>> make_relative_path(".", "/work").parts
        ()
    """
    candidate = Path(path)
    if candidate.is_absolute():
        try:
            candidate = candidate.relative_to(current_dir)
        except ValueError:
            pass

    parts = [part for part in candidate.parts if part != "."]
    return PurePath(*parts)


def path_components(path: PathType, current_dir: PathType) -> Components:
    """Return the components of ``path`` relative to ``current_dir``.

    A filesystem anchor such as ``/`` is kept as the first component when the path lies
    outside the current directory.
    """
    return make_relative_path(path, current_dir).parts


def match_components(path: PathType, current_dir: PathType) -> Components:
    """Return the components used for pattern matching.

    Same as :func:`path_components`, except that a leading filesystem anchor is removed:
    the anchor is not a named path component and cannot be matched by a pattern segment.

    Example:
        >>> match_components("/elsewhere/target/x.o", "/work")
        ('elsewhere', 'target', 'x.o')
    """
    relative = make_relative_path(path, current_dir)
    if relative.anchor:
        return relative.parts[1:]
    return relative.parts


def components_to_text(components: Components) -> str:
    """Join components with the platform separator; the empty path becomes ``.``."""
    return str(PurePath(*components))
