"""Resolution of the display label and anchor for the rendered tree."""

from typing import List, NamedTuple, Optional, Sequence

from copytree.paths import components_to_text, path_components
from copytree.types import Components, PathType

CURRENT_DIR_LABEL = "."


class RootScope(NamedTuple):
    """Label and optional anchor used to render the tree.

    Attributes:
        label: Text printed as the first line of the tree.
        anchor: Components of the subtree to render, or None to render from the root
            of the tree relation.
    """

    label: str
    anchor: Optional[Components]


def _common_prefix(left: Components, right: Components) -> Components:
    prefix: List[str] = []
    for a, b in zip(left, right):
        if a != b:
            break
        prefix.append(a)
    return tuple(prefix)


def resolve_root_scope(requested: Sequence[PathType], current_dir: PathType) -> RootScope:
    """Compute the root scope for a set of requested roots.

    Requested roots are normalized relative to ``current_dir``. If any of them is the
    current directory itself, or none were given, the whole tree is rendered under the
    label ``"."``. Otherwise the longest common component-wise prefix of all roots
    becomes both the anchor and, joined with the platform separator, the label. Roots
    with nothing in common fall back to ``"."`` without an anchor.

    Args:
        requested: Root paths as the user supplied them.
        current_dir: Directory that relative roots are anchored to.

    Returns:
        The resolved :class:`RootScope`.

    Example:
        >>> resolve_root_scope(["src", "src/output.rs"], "/work")
        RootScope(label='src', anchor=('src',))
        >>> resolve_root_scope(["src", "docs"], "/work")
        RootScope(label='.', anchor=None)
        >>> resolve_root_scope(["./"], "/work")
        RootScope(label='.', anchor=None)
    """
    unanchored = RootScope(CURRENT_DIR_LABEL, None)
    if not requested:
        return unanchored

    normalized = []
    for raw in requested:
        components = path_components(str(raw).strip(), current_dir)
        if not components:
            return unanchored
        normalized.append(components)

    prefix = normalized[0]
    for components in normalized[1:]:
        prefix = _common_prefix(prefix, components)
        if not prefix:
            return unanchored

    return RootScope(components_to_text(prefix), prefix)
