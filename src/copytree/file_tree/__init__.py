"""Reconstruction and rendering of the directory tree implied by a list of files."""

from .tree_relation import ROOT, TreeRelation
from .tree_renderer import display_name, render_tree, stream_tree_lines

__all__ = ["ROOT", "TreeRelation", "display_name", "render_tree", "stream_tree_lines"]
