"""Core module - node identity"""

from .ids import NodeIdGenerator, next_node_id, short_id

__all__ = [
    "NodeIdGenerator",
    "next_node_id",
    "short_id",
]
