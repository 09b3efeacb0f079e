"""Split tree 布局引擎"""

from .geometry import PaneRect, compute_pane_rects
from .grid import build_balanced_split, build_grid_tree, grid_dimensions
from .ops import create_leaf, remove_leaf, split_leaf, update_ratio
from .traversal import collect_slot_ids, find_node, find_sibling_slot_id
from .types import LeafNode, SplitDirection, SplitNode, TreeNode, node_to_dict

__all__ = [
    # Types
    "LeafNode",
    "SplitNode",
    "SplitDirection",
    "TreeNode",
    "node_to_dict",
    # Mutations
    "create_leaf",
    "split_leaf",
    "remove_leaf",
    "update_ratio",
    # Traversal
    "collect_slot_ids",
    "find_sibling_slot_id",
    "find_node",
    # Grid
    "grid_dimensions",
    "build_balanced_split",
    "build_grid_tree",
    # Geometry
    "PaneRect",
    "compute_pane_rects",
]
