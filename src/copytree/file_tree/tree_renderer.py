"""ASCII rendering of a tree relation."""

from pathlib import PurePath
from typing import Iterator

from copytree.file_tree.tree_relation import ROOT, TreeRelation
from copytree.root_scope import RootScope
from copytree.types import Components

BRANCH = "├─ "
LAST_BRANCH = "└─ "
VERTICAL = "│  "
SPACE = "   "


def display_name(node: Components) -> str:
    """Return the name shown for a node: its last component, or the full path when that is empty.

    Example:
        >>> display_name(("src", "main.rs"))
        'main.rs'
        >>> display_name(("/",))
        '/'
    """
    path = PurePath(*node)
    return path.name or str(path)


def stream_tree_lines(relation: TreeRelation, scope: RootScope) -> Iterator[str]:
    """Generate the tree one line at a time, without trailing newlines.

    The first line is the scope label. Rendering starts at the children of the scope
    anchor when the relation knows that anchor, otherwise at the children of the root.
    Children are visited depth-first in code point order, so the output is identical
    across runs and platforms for the same relation.

    Args:
        relation: The tree relation to render.
        scope: Label and anchor for the rendering.

    Yields:
        Lines of the tree representation.

    Example:
        >>> relation = TreeRelation()
        >>> for path in [("README.md",), ("src", "lib.rs"), ("src", "main.rs")]:
        ...     relation.add_file(path)
        >>> for line in stream_tree_lines(relation, RootScope(".", None)):
        ...     print(line)
        .
        ├─ README.md
        └─ src
           ├─ lib.rs
           └─ main.rs
    """
    yield scope.label

    if relation.is_empty():
        return

    start = scope.anchor if scope.anchor is not None and scope.anchor in relation else ROOT

    def write_node(node: Components, prefix: str, is_last: bool) -> Iterator[str]:
        connector = LAST_BRANCH if is_last else BRANCH
        yield f"{prefix}{connector}{display_name(node)}"

        children = relation.children(node)
        child_prefix = prefix + (SPACE if is_last else VERTICAL)
        for i, child in enumerate(children):
            yield from write_node(child, child_prefix, i == len(children) - 1)

    top_level = relation.children(start)
    for i, child in enumerate(top_level):
        yield from write_node(child, "", i == len(top_level) - 1)


def render_tree(relation: TreeRelation, scope: RootScope) -> str:
    """Render the complete tree as text ending in a newline."""
    return "\n".join(stream_tree_lines(relation, scope)) + "\n"
