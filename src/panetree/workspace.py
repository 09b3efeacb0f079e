"""Workspace - 布局状态持有者

持有一个 workspace 的当前 split tree，并以 snapshot-and-replace 方式应用
布局引擎的纯函数：
- 打开/关闭 pane
- 拖动分割线调整比例
- 数字快捷键 / 兄弟 pane 焦点切换
- 按旧版网格重建布局

Workspace 是唯一写入者；同一 workspace 的调用需串行（web 层运行在单个
事件循环中）。
"""

from collections.abc import Sequence
from typing import Any, Callable

from .config import QUICK_NAV_MAX
from .core.ids import short_id
from .telemetry import get_logger, metrics
from .tree import (
    LeafNode,
    SplitDirection,
    TreeNode,
    build_grid_tree,
    collect_slot_ids,
    compute_pane_rects,
    create_leaf,
    find_node,
    find_sibling_slot_id,
    node_to_dict,
    remove_leaf,
    split_leaf,
    update_ratio,
)

logger = get_logger(__name__)

# 回调类型
OnChangeCallback = Callable[["Workspace"], Any]


def _has_duplicates(slot_ids: Sequence[str]) -> bool:
    return len(set(slot_ids)) != len(slot_ids)


class Workspace:
    """单个 workspace 的布局状态

    Attributes:
        tree: 当前 split tree，没有 pane 时为 None
        focused_slot_id: 当前 focus 的 slot
    """

    def __init__(self, slot_ids: Sequence[str] | None = None):
        """初始化

        Args:
            slot_ids: 初始 pane 列表，按旧版网格排列

        Raises:
            ValueError: slot_ids 中有重复
        """
        if slot_ids and _has_duplicates(slot_ids):
            metrics.inc("workspace.rejected", {"reason": "duplicate"})
            raise ValueError(f"duplicate slot ids: {list(slot_ids)}")
        self._tree: TreeNode | None = build_grid_tree(slot_ids) if slot_ids else None
        self._focused: str | None = slot_ids[0] if slot_ids else None
        self._callbacks: list[OnChangeCallback] = []
        self._update_gauge()

    # === 状态 ===

    @property
    def tree(self) -> TreeNode | None:
        return self._tree

    @property
    def focused_slot_id(self) -> str | None:
        return self._focused

    @property
    def slot_ids(self) -> list[str]:
        """pane 顺序（与数字快捷键一致）"""
        return collect_slot_ids(self._tree) if self._tree is not None else []

    def on_change(self, callback: OnChangeCallback) -> None:
        """注册布局变化回调"""
        self._callbacks.append(callback)

    # === 布局操作 ===

    def open_pane(
        self,
        new_slot_id: str,
        target_slot_id: str | None = None,
        direction: SplitDirection = SplitDirection.VERTICAL,
    ) -> bool:
        """打开新 pane

        Args:
            new_slot_id: 新 session 的 slot id
            target_slot_id: 被分割的 pane，默认为当前 focus 的 pane
            direction: 分割方向

        Returns:
            是否成功
        """
        if self._tree is None:
            self._replace(create_leaf(new_slot_id))
            self._focused = new_slot_id
            metrics.inc("workspace.split")
            logger.debug(f"[Workspace] 首个 pane: {new_slot_id}")
            return True

        if new_slot_id in self.slot_ids:
            metrics.inc("workspace.rejected", {"reason": "duplicate"})
            logger.warning(f"[Workspace] slot 已存在，拒绝分割: {new_slot_id}")
            return False

        target = target_slot_id if target_slot_id is not None else self._focused
        if target is None:
            metrics.inc("workspace.rejected", {"reason": "no_target"})
            logger.warning(f"[Workspace] 没有可分割的目标 pane: {new_slot_id}")
            return False

        new_tree = split_leaf(self._tree, target, new_slot_id, direction)
        if new_tree is self._tree:
            metrics.inc("workspace.noop", {"op": "split"})
            logger.debug(f"[Workspace] 目标 pane 不存在: {target}")
            return False

        self._replace(new_tree)
        self._focused = new_slot_id
        metrics.inc("workspace.split")
        logger.debug(f"[Workspace] 分割 {target} -> {new_slot_id} ({direction.value})")
        return True

    def close_pane(self, slot_id: str) -> bool:
        """关闭 pane，兄弟 pane 提升到其位置

        Returns:
            是否成功（pane 不存在时返回 False）
        """
        if self._tree is None:
            metrics.inc("workspace.noop", {"op": "close"})
            return False

        # 先找兄弟节点，删除后就找不到了
        sibling = find_sibling_slot_id(self._tree, slot_id)
        new_tree = remove_leaf(self._tree, slot_id)
        if new_tree is self._tree:
            metrics.inc("workspace.noop", {"op": "close"})
            logger.debug(f"[Workspace] 关闭的 pane 不存在: {slot_id}")
            return False

        self._replace(new_tree)
        if self._focused == slot_id:
            self._focused = sibling if new_tree is not None else None
        metrics.inc("workspace.close")
        logger.debug(f"[Workspace] 关闭 {slot_id}, focus -> {self._focused}")
        return True

    def resize(self, node_id: str, ratio: float) -> bool:
        """调整 split 比例（不做 clamp）

        Returns:
            是否成功（node 不存在或不是 split 时返回 False）
        """
        if self._tree is None:
            metrics.inc("workspace.noop", {"op": "resize"})
            return False

        node = find_node(self._tree, node_id)
        if node is None or isinstance(node, LeafNode):
            metrics.inc("workspace.noop", {"op": "resize"})
            logger.debug(f"[Workspace] resize 目标无效: {short_id(node_id)}")
            return False

        self._replace(update_ratio(self._tree, node_id, ratio))
        metrics.inc("workspace.resize")
        return True

    def reset_grid(self, slot_ids: Sequence[str]) -> bool:
        """按旧版网格重建布局

        Returns:
            是否成功（slot_ids 有重复时返回 False，布局不变）
        """
        if _has_duplicates(slot_ids):
            metrics.inc("workspace.rejected", {"reason": "duplicate"})
            logger.warning(f"[Workspace] slot 重复，拒绝网格重建: {list(slot_ids)}")
            return False

        self._replace(build_grid_tree(slot_ids) if slot_ids else None)
        self._focused = slot_ids[0] if slot_ids else None
        logger.info(f"[Workspace] 网格重建: {len(slot_ids)} panes")
        return True

    # === 焦点 ===

    def focus(self, slot_id: str) -> bool:
        """直接 focus 指定 pane"""
        if slot_id not in self.slot_ids:
            return False
        self._focused = slot_id
        return True

    def focus_index(self, number: int) -> str | None:
        """数字快捷键：focus 第 N 个 pane（1-indexed）

        Returns:
            focus 的 slot id，超出范围时返回 None
        """
        ids = self.slot_ids
        if not 1 <= number <= min(QUICK_NAV_MAX, len(ids)):
            return None
        self._focused = ids[number - 1]
        return self._focused

    def focus_sibling(self) -> str | None:
        """focus 当前 pane 的兄弟 pane"""
        if self._tree is None or self._focused is None:
            return None
        sibling = find_sibling_slot_id(self._tree, self._focused)
        if sibling is not None:
            self._focused = sibling
        return sibling

    # === 视图 ===

    def to_dict(self) -> dict:
        """转换为字典（供 web/websocket 使用）"""
        if self._tree is None:
            return {"tree": None, "slot_ids": [], "focused_slot_id": None, "rects": []}
        return {
            "tree": node_to_dict(self._tree),
            "slot_ids": collect_slot_ids(self._tree),
            "focused_slot_id": self._focused,
            "rects": [rect.to_dict() for rect in compute_pane_rects(self._tree)],
        }

    # === 内部 ===

    def _replace(self, tree: TreeNode | None) -> None:
        self._tree = tree
        self._update_gauge()
        for callback in self._callbacks:
            callback(self)

    def _update_gauge(self) -> None:
        metrics.gauge("workspace.panes", len(self.slot_ids))
