"""Server configuration models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from magentaa11y_mcp import __version__


class ServerConfig(BaseModel):
    """Transport settings shared by the stdio and HTTP servers."""

    model_config = ConfigDict(extra="forbid")

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    server_name: str = "magentaa11y-mcp"
    server_version: str = __version__
    protocol_version: str = "2024-11-05"

    @field_validator("host", "server_name")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate host and server name are not empty."""
        if not v or not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()


__all__ = ["ServerConfig"]
