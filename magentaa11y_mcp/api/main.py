"""FastAPI application serving MCP over stateless HTTP JSON-RPC."""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from magentaa11y_mcp.api.jsonrpc import JsonRpcHandler
from magentaa11y_mcp.api.models import (
    INTERNAL_ERROR,
    PARSE_ERROR,
    JsonRpcError,
    JsonRpcResponse,
    ServerInfoResponse,
)
from magentaa11y_mcp.config import get_config
from magentaa11y_mcp.core.content import load_content
from magentaa11y_mcp.mcp_server.definitions import TOOL_DEFINITIONS
from magentaa11y_mcp.mcp_server.tools import A11yTools
from magentaa11y_mcp.models.config import ServerConfig

logger = logging.getLogger(__name__)


def create_app(
    tools: A11yTools | None = None, server_config: ServerConfig | None = None
) -> FastAPI:
    """Build the HTTP app.

    Args:
        tools: Tools to serve; loaded from the content store at startup if omitted
        server_config: Server identity; defaults to the process configuration
    """
    server_config = server_config or get_config().server

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        if not hasattr(app.state, "jsonrpc"):
            logger.info("Loading accessibility content for HTTP transport")
            # LoadError propagates and aborts startup
            content = load_content(get_config().content_path)
            app.state.jsonrpc = JsonRpcHandler(A11yTools(content), server_config)

        logger.info(f"{server_config.server_name} HTTP transport ready")
        yield
        logger.info(f"{server_config.server_name} HTTP transport shutdown complete")

    app = FastAPI(
        title="MagentaA11y MCP Server",
        description="MagentaA11y accessibility criteria over MCP JSON-RPC",
        version=server_config.server_version,
        lifespan=lifespan,
    )

    if tools is not None:
        app.state.jsonrpc = JsonRpcHandler(tools, server_config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Mcp-Session-Id"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=JsonRpcResponse(
                error=JsonRpcError(code=INTERNAL_ERROR, message="Internal server error")
            ).to_payload(),
        )

    def server_info() -> ServerInfoResponse:
        return ServerInfoResponse(
            name=server_config.server_name,
            version=server_config.server_version,
            tools=len(TOOL_DEFINITIONS),
        )

    @app.post("/mcp")
    async def mcp_endpoint(request: Request):
        """Handle a JSON-RPC request or batch."""
        body = await request.body()
        try:
            payload = json.loads(body)
        except ValueError as e:
            return JSONResponse(
                status_code=400,
                content=JsonRpcResponse(
                    error=JsonRpcError(code=PARSE_ERROR, message=f"Parse error: {e}")
                ).to_payload(),
            )

        response = request.app.state.jsonrpc.handle_payload(payload)
        if response is None:
            return Response(status_code=202)
        return JSONResponse(content=response)

    @app.get("/mcp", response_model=ServerInfoResponse)
    async def mcp_info():
        """Server info for plain GET requests (not MCP protocol)."""
        return server_info()

    @app.get("/health", response_model=ServerInfoResponse)
    async def health_check():
        """Health check endpoint."""
        return server_info()

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": "MagentaA11y MCP Server",
            "version": server_config.server_version,
            "endpoint": "/mcp",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level="info")
