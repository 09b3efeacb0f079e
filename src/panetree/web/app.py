"""FastAPI 应用初始化"""

import sys
from collections.abc import Sequence

import uvicorn

from .. import config
from ..telemetry import get_logger, setup_logging
from ..workspace import Workspace
from .server import WebServer

logger = get_logger(__name__)


def create_app(slot_ids: Sequence[str] | None = None) -> WebServer:
    """创建 Web 应用

    Args:
        slot_ids: 初始 pane 列表（按旧版网格排列）
    """
    return WebServer(Workspace(slot_ids))


def main():
    """入口函数

    命令行参数作为初始 slot id 列表。
    """
    setup_logging()
    slot_ids = sys.argv[1:]
    try:
        server = create_app(slot_ids)
    except ValueError as e:
        logger.error(f"[WebServer] 初始 pane 列表无效: {e}")
        sys.exit(2)

    logger.info(f"[WebServer] panetree 启动于 http://{config.WEB_HOST}:{config.WEB_PORT} ({len(slot_ids)} panes)")
    try:
        uvicorn.run(server.app, host=config.WEB_HOST, port=config.WEB_PORT, log_level=config.LOG_LEVEL.lower())
    except KeyboardInterrupt:
        print("\nServer stopped")
