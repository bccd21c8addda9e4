"""Pydantic models for the stateless HTTP JSON-RPC transport."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

JSONRPC_VERSION = "2.0"

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
INTERNAL_ERROR = -32603


class JsonRpcRequest(BaseModel):
    """A single JSON-RPC request or notification."""

    jsonrpc: str = JSONRPC_VERSION
    id: int | str | None = None
    method: str = Field(min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)

    @field_validator("params", mode="before")
    @classmethod
    def default_params(cls, v: Any) -> Any:
        """A null params member is the same as an empty one."""
        return {} if v is None else v

    @property
    def is_notification(self) -> bool:
        return self.method.startswith("notifications/")


class JsonRpcError(BaseModel):
    """Error member of a JSON-RPC response."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC response carrying either a result or an error."""

    jsonrpc: str = JSONRPC_VERSION
    id: int | str | None = None
    result: Any = None
    error: JsonRpcError | None = None

    def to_payload(self) -> dict[str, Any]:
        """Wire form: exactly one of result/error is present."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        return payload


class ServerInfoResponse(BaseModel):
    """Plain GET response describing the server (not part of MCP)."""

    name: str
    version: str
    status: str = "healthy"
    protocol: str = "MCP JSON-RPC 2.0"
    tools: int
