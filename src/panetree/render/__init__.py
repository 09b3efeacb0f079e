"""Render 模块 - split tree 文本渲染"""

from .renderer import build_rich_tree, format_tree

__all__ = ["build_rich_tree", "format_tree"]
