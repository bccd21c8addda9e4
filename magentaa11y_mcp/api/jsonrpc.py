"""Stateless JSON-RPC handling of MCP requests.

Each request is answered on its own, without a session: the HTTP transport
can serve one request or a batch per call and keep nothing between calls.
"""

import logging
from typing import Any

from pydantic import ValidationError

from magentaa11y_mcp.api.models import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
)
from magentaa11y_mcp.mcp_server.definitions import TOOL_DEFINITIONS
from magentaa11y_mcp.mcp_server.errors import ToolValidationError
from magentaa11y_mcp.mcp_server.tools import A11yTools
from magentaa11y_mcp.models.config import ServerConfig

logger = logging.getLogger(__name__)


class JsonRpcHandler:
    """Answers MCP JSON-RPC methods against a set of tools."""

    def __init__(self, tools: A11yTools, server_config: ServerConfig | None = None):
        self.tools = tools
        self.server_config = server_config or ServerConfig()

    def handle_payload(self, payload: Any) -> dict[str, Any] | list[dict[str, Any]] | None:
        """Handle a decoded request body: a single request or a batch.

        A batch that produces exactly one response is answered with that
        response alone. Notifications produce no response.
        """
        if isinstance(payload, list):
            responses = [
                response
                for response in (self.handle_request(item) for item in payload)
                if response is not None
            ]
            return responses[0] if len(responses) == 1 else responses
        return self.handle_request(payload)

    def handle_request(self, raw: Any) -> dict[str, Any] | None:
        """Handle one request object; failures become JSON-RPC errors."""
        request_id = raw.get("id") if isinstance(raw, dict) else None
        if not isinstance(request_id, (int, str)):
            request_id = None

        try:
            request = JsonRpcRequest.model_validate(raw)
        except ValidationError as e:
            logger.info(f"Invalid JSON-RPC request: {e}")
            return self._error(request_id, INVALID_REQUEST, "Invalid Request")

        if request.is_notification:
            return None

        try:
            result = self._dispatch(request)
        except Exception as e:
            logger.warning(f"JSON-RPC method {request.method} failed: {e}")
            return self._error(request.id, INTERNAL_ERROR, str(e))

        return JsonRpcResponse(id=request.id, result=result).to_payload()

    def _dispatch(self, request: JsonRpcRequest) -> Any:
        if request.method == "initialize":
            return {
                "protocolVersion": self.server_config.protocol_version,
                "capabilities": {"tools": {}},
                "serverInfo": {
                    "name": self.server_config.server_name,
                    "version": self.server_config.server_version,
                },
            }

        if request.method == "tools/list":
            return {"tools": TOOL_DEFINITIONS}

        if request.method == "tools/call":
            name = request.params.get("name")
            if not isinstance(name, str) or not name:
                raise ToolValidationError("Missing required parameter: name")
            arguments = request.params.get("arguments") or {}
            if not isinstance(arguments, dict):
                raise ToolValidationError("Tool arguments must be an object")
            text = self.tools.call(name, arguments)
            return {"content": [{"type": "text", "text": text}]}

        if request.method == "ping":
            return {}

        raise ValueError(f"Unknown method: {request.method}")

    @staticmethod
    def _error(request_id: int | str | None, code: int, message: str) -> dict[str, Any]:
        return JsonRpcResponse(
            id=request_id, error=JsonRpcError(code=code, message=message)
        ).to_payload()
