"""Split tree traversal

``collect_slot_ids`` defines the canonical pane order: depth-first, first
child before second. Numbered quick navigation (pane 1..9) and sibling lookup
both rely on it.
"""

from .types import LeafNode, TreeNode


def collect_slot_ids(tree: TreeNode) -> list[str]:
    """Collect all slot ids in depth-first order (left-to-right, top-to-bottom)."""
    if isinstance(tree, LeafNode):
        return [tree.slot_id]
    first, second = tree.children
    return collect_slot_ids(first) + collect_slot_ids(second)


def find_sibling_slot_id(tree: TreeNode, slot_id: str) -> str | None:
    """Find the slot to treat as adjacent to ``slot_id`` for focus cycling.

    When the target is a direct leaf child of a split, the answer is the first
    slot of the other child's subtree.

    Returns:
        The sibling slot id, or None if the slot is the root or not present.
    """
    if isinstance(tree, LeafNode):
        return None

    first, second = tree.children

    if isinstance(first, LeafNode) and first.slot_id == slot_id:
        return collect_slot_ids(second)[0]
    if isinstance(second, LeafNode) and second.slot_id == slot_id:
        return collect_slot_ids(first)[0]

    sibling = find_sibling_slot_id(first, slot_id)
    if sibling is not None:
        return sibling
    return find_sibling_slot_id(second, slot_id)


def find_node(tree: TreeNode, node_id: str) -> TreeNode | None:
    """Find a node (leaf or split) by id."""
    if tree.id == node_id:
        return tree
    if isinstance(tree, LeafNode):
        return None
    first, second = tree.children
    found = find_node(first, node_id)
    if found is not None:
        return found
    return find_node(second, node_id)
