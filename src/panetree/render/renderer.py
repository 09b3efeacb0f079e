"""Split tree to text renderer using Rich library."""

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from ..core.ids import short_id
from ..tree import LeafNode, SplitDirection, TreeNode

# 方向标记
DIRECTION_LABELS = {
    SplitDirection.HORIZONTAL: "─ horizontal",
    SplitDirection.VERTICAL: "│ vertical",
}


def _node_label(node: TreeNode, focused_slot_id: str | None) -> Text:
    """生成节点标签。"""
    if isinstance(node, LeafNode):
        label = Text(node.slot_id, style="bold green" if node.slot_id == focused_slot_id else "green")
        label.append(f"  #{short_id(node.id)}", style="dim")
        if node.slot_id == focused_slot_id:
            label.append("  *", style="bold yellow")
        return label

    label = Text(DIRECTION_LABELS[node.direction], style="cyan")
    label.append(f" {node.ratio:.2f}", style="magenta")
    label.append(f"  #{short_id(node.id)}", style="dim")
    return label


def build_rich_tree(tree: TreeNode, focused_slot_id: str | None = None) -> Tree:
    """将 split tree 转换为 Rich Tree。

    Args:
        tree: split tree
        focused_slot_id: 需要标记的 focus pane

    Returns:
        Rich Tree 对象
    """
    root = Tree(_node_label(tree, focused_slot_id))

    def add_children(parent: Tree, node: TreeNode) -> None:
        if isinstance(node, LeafNode):
            return
        for child in node.children:
            branch = parent.add(_node_label(child, focused_slot_id))
            add_children(branch, child)

    add_children(root, tree)
    return root


def format_tree(tree: TreeNode | None, focused_slot_id: str | None = None, width: int = 80) -> str:
    """将 split tree 渲染为纯文本。"""
    if tree is None:
        return "(empty)\n"

    console = Console(width=width, color_system=None)
    with console.capture() as capture:
        console.print(build_rich_tree(tree, focused_slot_id))
    return capture.get()
