"""Node identity utilities

Every node in a split tree carries an identifier so UI layers can key their
rendering and target a specific split handle when resizing.

ID format:
- node-<epoch_ms>-<n>  - n is a process-wide counter, never reused
"""

import itertools
import threading
import time

NODE_ID_PREFIX = "node"


class NodeIdGenerator:
    """Monotonic node id generator.

    Combines a coarse millisecond timestamp with a counter. The counter alone
    guarantees uniqueness within one process; the timestamp only makes ids
    easier to tell apart in logs.
    """

    def __init__(self, prefix: str = NODE_ID_PREFIX):
        self._prefix = prefix
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self) -> str:
        """Return a fresh node id."""
        with self._lock:
            n = next(self._counter)
        return f"{self._prefix}-{int(time.time() * 1000)}-{n}"


# 进程级唯一生成器
_default_generator = NodeIdGenerator()


def next_node_id() -> str:
    """Return a fresh id from the process-wide generator."""
    return _default_generator.next_id()


def short_id(node_id: str, length: int = 8) -> str:
    """Get a short display version of a node id for logging.

    Keeps the counter part (after the last '-') since the timestamp prefix is
    shared by every node created in the same millisecond.

    Args:
        node_id: The node id to shorten
        length: Maximum length (default 8)

    Returns:
        Shortened id for display in logs
    """
    tail = node_id.rsplit("-", 1)[-1] if "-" in node_id else node_id
    return tail[:length]
