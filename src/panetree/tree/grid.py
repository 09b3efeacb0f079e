"""Grid-equivalent tree builder

Builds split trees that render the same as the legacy fixed grid layout
(1x1 up to 3x3), so initial multi-pane placement stays backward compatible
while remaining an ordinary, mutable split tree.
"""

from collections.abc import Sequence

from ..config import EMPTY_SLOT_ID
from ..core.ids import next_node_id
from .ops import create_leaf
from .types import SplitDirection, SplitNode, TreeNode


def grid_dimensions(count: int) -> tuple[int, int]:
    """Return (columns, rows) matching the legacy grid layout.

    1->1x1, 2->2x1, 3->3x1, 4->2x2, 5-6->3x2, 7+->3x3
    """
    if count <= 1:
        return (1, 1)
    if count == 2:
        return (2, 1)
    if count == 3:
        return (3, 1)
    if count == 4:
        return (2, 2)
    if count <= 6:
        return (3, 2)
    return (3, 3)


def build_balanced_split(nodes: Sequence[TreeNode], direction: SplitDirection) -> TreeNode:
    """Recursively halve ``nodes`` into a balanced split tree along one axis.

    Each split's ratio is ``len(first half) / len(nodes)``, so every input
    node ends up with an equal share of space regardless of tree depth.

    Raises:
        ValueError: if ``nodes`` is empty
    """
    if not nodes:
        raise ValueError("build_balanced_split requires at least one node")
    if len(nodes) == 1:
        return nodes[0]

    mid = (len(nodes) + 1) // 2
    return SplitNode(
        id=next_node_id(),
        direction=direction,
        children=(
            build_balanced_split(nodes[:mid], direction),
            build_balanced_split(nodes[mid:], direction),
        ),
        ratio=mid / len(nodes),
    )


def build_grid_tree(slot_ids: Sequence[str]) -> TreeNode:
    """Build a 2D grid tree from slot ids.

    Slots are chunked into rows of ``cols``; each row becomes a balanced
    VERTICAL split and the rows are stacked with a balanced HORIZONTAL split.
    The last row takes every remaining slot, so counts above 9 put the
    overflow there instead of dropping it.
    """
    if not slot_ids:
        return create_leaf(EMPTY_SLOT_ID)
    if len(slot_ids) == 1:
        return create_leaf(slot_ids[0])

    cols, rows = grid_dimensions(len(slot_ids))

    row_nodes: list[TreeNode] = []
    for r in range(rows):
        start = r * cols
        end = len(slot_ids) if r == rows - 1 else min(start + cols, len(slot_ids))
        row_leaves = [create_leaf(slot_id) for slot_id in slot_ids[start:end]]
        if row_leaves:
            row_nodes.append(build_balanced_split(row_leaves, SplitDirection.VERTICAL))

    return build_balanced_split(row_nodes, SplitDirection.HORIZONTAL)
