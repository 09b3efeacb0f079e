"""WebSocket 消息处理器"""

import json
from dataclasses import dataclass
from typing import Awaitable, Callable

from fastapi import WebSocket
from pydantic import ValidationError

from ..telemetry import get_logger
from ..workspace import Workspace
from .models import OpenPaneRequest, RatioRequest

logger = get_logger(__name__)


@dataclass
class MessageHandler:
    """WebSocket 消息处理器

    文本协议:
    - "focus:<n>"       数字快捷键（1-indexed）
    - "sibling"         focus 兄弟 pane
    - "close:<slot_id>" 关闭 pane
    - JSON {"action": "split" | "resize", ...}
    """

    workspace: Workspace
    broadcast: Callable[[dict], Awaitable[None]]

    async def handle(self, websocket: WebSocket, data: str):
        """处理 WebSocket 消息"""
        if data.startswith("focus:"):
            await self._handle_focus(websocket, data)
        elif data == "sibling":
            await self._handle_sibling(websocket)
        elif data.startswith("close:"):
            await self._handle_close(websocket, data)
        elif data.startswith("{"):
            await self._handle_json(websocket, data)
        else:
            logger.debug(f"[MessageHandler] 未知消息: {data[:40]}")

    async def _handle_focus(self, websocket: WebSocket, data: str):
        """处理数字快捷键"""
        try:
            number = int(data.split(":", 1)[1])
        except ValueError:
            number = 0
        slot_id = self.workspace.focus_index(number)
        await websocket.send_json({"type": "focus_result", "slot_id": slot_id, "success": slot_id is not None})
        if slot_id is not None:
            await self.broadcast(self.workspace.to_dict())

    async def _handle_sibling(self, websocket: WebSocket):
        """处理兄弟 pane 切换"""
        slot_id = self.workspace.focus_sibling()
        await websocket.send_json({"type": "focus_result", "slot_id": slot_id, "success": slot_id is not None})
        if slot_id is not None:
            await self.broadcast(self.workspace.to_dict())

    async def _handle_close(self, websocket: WebSocket, data: str):
        """处理关闭 pane"""
        slot_id = data.split(":", 1)[1]
        success = self.workspace.close_pane(slot_id)
        await websocket.send_json({"type": "close_result", "slot_id": slot_id, "success": success})
        if success:
            await self.broadcast(self.workspace.to_dict())

    async def _handle_json(self, websocket: WebSocket, data: str):
        """处理 JSON 消息"""
        try:
            msg = json.loads(data)
        except json.JSONDecodeError as e:
            logger.warning(f"[MessageHandler] 无效 JSON: {e}")
            return

        action = msg.get("action")
        if action == "split":
            success = self._handle_split(msg)
            await websocket.send_json({
                "type": "split_result",
                "slot_id": msg.get("slot_id"),
                "success": success,
            })
        elif action == "resize":
            success = self._handle_resize(msg)
            await websocket.send_json({
                "type": "resize_result",
                "node_id": msg.get("node_id"),
                "success": success,
            })
        else:
            logger.debug(f"[MessageHandler] 未知 action: {action}")
            return

        if success:
            await self.broadcast(self.workspace.to_dict())

    def _handle_split(self, msg: dict) -> bool:
        """处理分割请求"""
        try:
            request = OpenPaneRequest.model_validate(msg)
        except ValidationError as e:
            logger.warning(f"[MessageHandler] 无效分割请求: {e.error_count()} errors")
            return False
        return self.workspace.open_pane(
            request.slot_id,
            target_slot_id=request.target_slot_id,
            direction=request.direction,
        )

    def _handle_resize(self, msg: dict) -> bool:
        """处理调整比例请求"""
        try:
            request = RatioRequest.model_validate(msg)
        except ValidationError as e:
            logger.warning(f"[MessageHandler] 无效 resize 请求: {e.error_count()} errors")
            return False
        return self.workspace.resize(request.node_id, request.ratio)
