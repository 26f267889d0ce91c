"""Custom exceptions for zbxexport."""

from typing import Any


class ZbxExportError(Exception):
    """Base exception for zbxexport."""

    pass


class ConfigError(ZbxExportError):
    """Configuration related errors."""

    pass


class AuthenticationError(ZbxExportError):
    """Authentication failures."""

    pass


class APIError(ZbxExportError):
    """General API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize API error.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        super().__init__(message)
        self.status_code = status_code


class RPCError(APIError):
    """Error object returned inside a JSON-RPC envelope."""

    def __init__(self, method: str, code: int, message: str, data: Any = None) -> None:
        """Initialize RPC error.

        Args:
            method: JSON-RPC method that failed
            code: Error code from the envelope
            message: Error message from the envelope
            data: Additional error detail from the envelope
        """
        detail = f"{method}: {message} (code {code})"
        if data:
            detail = f"{detail}: {data}"
        super().__init__(detail)
        self.method = method
        self.code = code
        self.rpc_message = message
        self.data = data


class MalformedResponseError(APIError):
    """Response body is not a usable JSON-RPC envelope."""

    pass


class NetworkError(ZbxExportError):
    """Network related errors."""

    pass


class TimeoutError(ZbxExportError):
    """Request timeout errors."""

    pass


class PersistenceError(ZbxExportError):
    """Rendering or writing an export file failed."""

    pass
