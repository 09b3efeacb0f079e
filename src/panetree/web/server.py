"""Web 服务器"""

import logging

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse, PlainTextResponse

from ..render import format_tree
from ..telemetry import get_logger
from ..workspace import Workspace
from .handlers import MessageHandler
from .models import ActionResponse, FocusRequest, GridRequest, OpenPaneRequest, RatioRequest

logger = get_logger(__name__)


class WebServer:
    """布局 HTTP / WebSocket 服务器"""

    def __init__(self, workspace: Workspace):
        self.app = FastAPI(title="panetree")
        self.workspace = workspace
        self.clients: list[WebSocket] = []

        self._handler = MessageHandler(workspace=workspace, broadcast=self.broadcast)

        self._setup_routes()
        workspace.on_change(self._on_layout_change)

    def _on_layout_change(self, workspace: Workspace) -> None:
        """布局变化回调"""
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(
            "[WebServer] 布局更新:\n" + format_tree(workspace.tree, workspace.focused_slot_id)
        )

    async def _respond(self, success: bool, message: str) -> ActionResponse:
        if success:
            await self.broadcast(self.workspace.to_dict())
        return ActionResponse(success=success, message=message)

    def _setup_routes(self):
        @self.app.get("/api/layout")
        async def get_layout():
            """获取当前布局"""
            return self.workspace.to_dict()

        @self.app.get("/api/layout/text", response_class=PlainTextResponse)
        async def get_layout_text():
            """获取布局的文本渲染"""
            return format_tree(self.workspace.tree, self.workspace.focused_slot_id)

        @self.app.post("/api/panes", response_model=ActionResponse)
        async def open_pane(request: OpenPaneRequest):
            """打开 pane"""
            success = self.workspace.open_pane(
                request.slot_id,
                target_slot_id=request.target_slot_id,
                direction=request.direction,
            )
            message = "Pane opened" if success else f"Cannot open pane: {request.slot_id}"
            return await self._respond(success, message)

        @self.app.delete("/api/panes/{slot_id}", response_model=ActionResponse)
        async def close_pane(slot_id: str):
            """关闭 pane"""
            if not self.workspace.close_pane(slot_id):
                return JSONResponse(
                    status_code=404,
                    content=ActionResponse(success=False, message=f"Pane not found: {slot_id}").model_dump(),
                )
            return await self._respond(True, "Pane closed")

        @self.app.post("/api/ratio", response_model=ActionResponse)
        async def update_ratio(request: RatioRequest):
            """调整 split 比例"""
            success = self.workspace.resize(request.node_id, request.ratio)
            message = "Ratio updated" if success else f"Split not found: {request.node_id}"
            return await self._respond(success, message)

        @self.app.post("/api/focus", response_model=ActionResponse)
        async def focus(request: FocusRequest):
            """切换焦点"""
            if request.sibling:
                slot_id = self.workspace.focus_sibling()
            elif request.index is not None:
                slot_id = self.workspace.focus_index(request.index)
            elif request.slot_id is not None:
                slot_id = request.slot_id if self.workspace.focus(request.slot_id) else None
            else:
                return ActionResponse(success=False, message="No focus target given")

            if slot_id is None:
                return ActionResponse(success=False, message="No pane to focus")
            return await self._respond(True, slot_id)

        @self.app.post("/api/grid", response_model=ActionResponse)
        async def reset_grid(request: GridRequest):
            """按网格重建布局"""
            if not self.workspace.reset_grid(request.slot_ids):
                return ActionResponse(success=False, message="Duplicate slot ids")
            return await self._respond(True, f"Grid of {len(request.slot_ids)} panes")

        @self.app.websocket("/ws")
        async def websocket_endpoint(websocket: WebSocket):
            await websocket.accept()
            self.clients.append(websocket)
            try:
                await websocket.send_json(self.workspace.to_dict())
                while True:
                    data = await websocket.receive_text()
                    await self._handler.handle(websocket, data)
            except WebSocketDisconnect:
                logger.debug("[WebServer] 客户端断开")
            finally:
                if websocket in self.clients:
                    self.clients.remove(websocket)

    async def broadcast(self, data: dict):
        """广播消息给所有客户端"""
        for client in list(self.clients):
            try:
                await client.send_json(data)
            except (WebSocketDisconnect, RuntimeError) as e:
                logger.debug(f"[WebServer] 客户端已断开，移除: {e}")
                if client in self.clients:
                    self.clients.remove(client)
