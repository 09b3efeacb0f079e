"""Web 服务模块"""

from .app import create_app, main
from .server import WebServer

__all__ = ["create_app", "main", "WebServer"]
