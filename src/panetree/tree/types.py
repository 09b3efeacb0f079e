"""Split tree 数据模型

A layout is a strict binary tree: leaves hold one session slot each, splits
divide their space between exactly two children.
"""

from dataclasses import dataclass
from enum import Enum


class SplitDirection(Enum):
    """Split orientation.

    HORIZONTAL stacks the children top/bottom, VERTICAL places them side by
    side.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class LeafNode:
    """One occupied screen region"""

    id: str
    slot_id: str  # opaque session identifier, owned by the caller


@dataclass(frozen=True)
class SplitNode:
    """Binary division of space

    Attributes:
        id: node identifier (target for resize handles)
        direction: how the two children are arranged
        children: (first, second)
        ratio: first child's share of the available space, expected in (0, 1)
    """

    id: str
    direction: SplitDirection
    children: tuple["TreeNode", "TreeNode"]
    ratio: float


TreeNode = LeafNode | SplitNode


def node_to_dict(node: TreeNode) -> dict:
    """转换为字典 (JSON 兼容)"""
    if isinstance(node, LeafNode):
        return {"type": "leaf", "id": node.id, "slot_id": node.slot_id}
    first, second = node.children
    return {
        "type": "split",
        "id": node.id,
        "direction": node.direction.value,
        "ratio": node.ratio,
        "children": [node_to_dict(first), node_to_dict(second)],
    }
