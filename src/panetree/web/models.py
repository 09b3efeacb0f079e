"""Web 请求/响应模型

HTTP 路由和 WebSocket 消息共用同一套校验。
"""

from pydantic import BaseModel, Field

from ..tree import SplitDirection


class OpenPaneRequest(BaseModel):
    """打开 pane 请求体"""

    slot_id: str
    target_slot_id: str | None = None  # 默认分割当前 focus 的 pane
    direction: SplitDirection = SplitDirection.VERTICAL


class RatioRequest(BaseModel):
    """调整比例请求体"""

    node_id: str
    ratio: float = Field(gt=0.0, lt=1.0)


class FocusRequest(BaseModel):
    """焦点请求体（index / slot_id / sibling 三选一）"""

    index: int | None = None
    slot_id: str | None = None
    sibling: bool = False


class GridRequest(BaseModel):
    """网格重建请求体"""

    slot_ids: list[str]


class ActionResponse(BaseModel):
    """操作响应"""

    success: bool
    message: str
