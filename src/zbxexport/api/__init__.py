"""API client and authentication."""

from .auth import AuthHandler
from .client import ZabbixClient
from .exceptions import (
    APIError,
    AuthenticationError,
    ConfigError,
    MalformedResponseError,
    NetworkError,
    PersistenceError,
    RPCError,
    TimeoutError,
    ZbxExportError,
)

__all__ = [
    "APIError",
    "AuthHandler",
    "AuthenticationError",
    "ConfigError",
    "MalformedResponseError",
    "NetworkError",
    "PersistenceError",
    "RPCError",
    "TimeoutError",
    "ZabbixClient",
    "ZbxExportError",
]
