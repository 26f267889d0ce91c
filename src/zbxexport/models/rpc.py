"""JSON-RPC envelope models."""

from typing import Any

from pydantic import BaseModel, Field


class RPCRequest(BaseModel):
    """JSON-RPC 2.0 request body."""

    jsonrpc: str = "2.0"
    method: str
    params: dict[str, Any] = Field(default_factory=dict)
    auth: str | None = None
    id: int = 1

    def to_body(self) -> dict[str, Any]:
        """Serialize the request, omitting ``auth`` when unauthenticated."""
        return self.model_dump(exclude_none=True)


class RPCErrorPayload(BaseModel):
    """Error object carried by a failed call."""

    code: int = 0
    message: str = ""
    data: Any = None


class RPCResponse(BaseModel):
    """JSON-RPC 2.0 response envelope."""

    jsonrpc: str | None = None
    result: Any = None
    error: RPCErrorPayload | None = None
    id: int | str | None = None

    @property
    def failed(self) -> bool:
        """Whether the envelope carries a non-zero error code."""
        return self.error is not None and self.error.code != 0
