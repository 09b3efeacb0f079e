"""panetree - immutable binary split-tree layout engine for session panes"""

from .tree import (
    LeafNode,
    PaneRect,
    SplitDirection,
    SplitNode,
    TreeNode,
    build_balanced_split,
    build_grid_tree,
    collect_slot_ids,
    compute_pane_rects,
    create_leaf,
    find_node,
    find_sibling_slot_id,
    grid_dimensions,
    node_to_dict,
    remove_leaf,
    split_leaf,
    update_ratio,
)
from .workspace import Workspace

__version__ = "0.1.0"

__all__ = [
    "LeafNode",
    "SplitNode",
    "SplitDirection",
    "TreeNode",
    "PaneRect",
    "node_to_dict",
    "create_leaf",
    "split_leaf",
    "remove_leaf",
    "update_ratio",
    "collect_slot_ids",
    "find_sibling_slot_id",
    "find_node",
    "grid_dimensions",
    "build_balanced_split",
    "build_grid_tree",
    "compute_pane_rects",
    "Workspace",
]
