"""Split tree mutations

All operations are pure: they never modify their input and return a new tree
that reuses every subtree off the changed path by reference. When the target
is not found the input tree itself is returned, so callers can detect a no-op
with ``is``.
"""

from dataclasses import replace

from ..config import DEFAULT_SPLIT_RATIO
from ..core.ids import next_node_id
from .types import LeafNode, SplitDirection, SplitNode, TreeNode


def create_leaf(slot_id: str) -> LeafNode:
    """Create a new leaf node for the given slot."""
    return LeafNode(id=next_node_id(), slot_id=slot_id)


def _with_children(tree: SplitNode, first: TreeNode, second: TreeNode) -> SplitNode:
    """Rebuild ``tree`` around new children, or return it if nothing changed."""
    old_first, old_second = tree.children
    if first is old_first and second is old_second:
        return tree
    return replace(tree, children=(first, second))


def split_leaf(
    tree: TreeNode,
    target_slot_id: str,
    new_slot_id: str,
    direction: SplitDirection,
) -> TreeNode:
    """Split the leaf holding ``target_slot_id`` into (original, new leaf).

    The new split gets ratio 0.5. ``new_slot_id`` is not checked for
    uniqueness; the caller owns slot ids.

    Returns:
        The new tree, or ``tree`` unchanged if the target is not found.
    """
    if isinstance(tree, LeafNode):
        if tree.slot_id != target_slot_id:
            return tree
        return SplitNode(
            id=next_node_id(),
            direction=direction,
            children=(tree, create_leaf(new_slot_id)),
            ratio=DEFAULT_SPLIT_RATIO,
        )

    first, second = tree.children
    return _with_children(
        tree,
        split_leaf(first, target_slot_id, new_slot_id, direction),
        split_leaf(second, target_slot_id, new_slot_id, direction),
    )


def remove_leaf(tree: TreeNode, slot_id: str) -> TreeNode | None:
    """Remove the leaf holding ``slot_id``.

    The removed leaf's sibling is promoted into its parent's place, so a split
    never ends up with a single child.

    Returns:
        The new tree, ``tree`` unchanged if the slot is not found, or None if
        the root itself was the removed leaf.
    """
    if isinstance(tree, LeafNode):
        return None if tree.slot_id == slot_id else tree

    first, second = tree.children

    # 直接子节点命中：提升兄弟节点
    if isinstance(first, LeafNode) and first.slot_id == slot_id:
        return second
    if isinstance(second, LeafNode) and second.slot_id == slot_id:
        return first

    new_first = remove_leaf(first, slot_id)
    new_second = remove_leaf(second, slot_id)

    # 子树塌缩：提升另一侧
    if new_first is None:
        return new_second
    if new_second is None:
        return new_first

    return _with_children(tree, new_first, new_second)


def update_ratio(tree: TreeNode, node_id: str, ratio: float) -> TreeNode:
    """Set the ratio of the split whose id is ``node_id``.

    The value is stored as given, without clamping. Leaves never match.

    Returns:
        The new tree, or ``tree`` unchanged if no split has that id.
    """
    if isinstance(tree, LeafNode):
        return tree

    if tree.id == node_id:
        return replace(tree, ratio=ratio)

    first, second = tree.children
    return _with_children(
        tree,
        update_ratio(first, node_id, ratio),
        update_ratio(second, node_id, ratio),
    )
