from .definitions import LOG_QUERY, SHOW_DASHBOARD, TOOLS, ToolDefinition
from .dispatcher import ToolDispatcher, ToolResult
from .server import build_server, serve

__all__ = [
    "LOG_QUERY",
    "SHOW_DASHBOARD",
    "TOOLS",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolResult",
    "build_server",
    "serve",
]
