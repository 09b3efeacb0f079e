"""Split tree geometry

Turns a tree into one rectangle per pane. Coordinates are in whatever unit
``width``/``height`` are given in (fractions of 1.0 by default); pixel
rounding and drawing belong to the rendering layer.
"""

from dataclasses import asdict, dataclass

from .types import LeafNode, SplitDirection, TreeNode


@dataclass
class PaneRect:
    """Pane 区域"""

    slot_id: str
    index: int  # position in collect_slot_ids order
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> dict:
        """转换为字典"""
        return asdict(self)


def compute_pane_rects(
    tree: TreeNode, width: float = 1.0, height: float = 1.0
) -> list[PaneRect]:
    """Compute pane rectangles in canonical pane order.

    HORIZONTAL splits divide height, VERTICAL splits divide width; the first
    child gets ``ratio`` of the space. Ratios are used as stored.
    """
    rects: list[PaneRect] = []

    def walk(node: TreeNode, x: float, y: float, w: float, h: float) -> None:
        if isinstance(node, LeafNode):
            rects.append(PaneRect(node.slot_id, len(rects), x, y, w, h))
            return

        first, second = node.children
        if node.direction == SplitDirection.HORIZONTAL:
            first_h = h * node.ratio
            walk(first, x, y, w, first_h)
            walk(second, x, y + first_h, w, h - first_h)
        else:
            first_w = w * node.ratio
            walk(first, x, y, first_w, h)
            walk(second, x + first_w, y, w - first_w, h)

    walk(tree, 0.0, 0.0, width, height)
    return rects
