"""HTTP transport: FastAPI app answering MCP JSON-RPC requests statelessly."""
