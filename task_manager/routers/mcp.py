"""Streamable HTTP endpoint for MCP (JSON responses only, no SSE)."""
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Receive, Scope, Send

from task_manager.mcp.server import MCPServer


def create_session_manager(mcp_server: MCPServer) -> StreamableHTTPSessionManager:
    """Stateless manager: every POST carries a complete JSON-RPC exchange."""
    return StreamableHTTPSessionManager(
        app=mcp_server.server,
        json_response=True,
        stateless=True,
    )


class MCPEndpoint:
    """ASGI endpoint handing /mcp requests to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.session_manager.handle_request(scope, receive, send)
