"""Data models."""

from .config import Settings
from .decode import Decoded, decode_records
from .host import (
    AVAILABLE,
    UNAVAILABLE,
    UNKNOWN,
    Group,
    Host,
    Interface,
    Template,
    availability_label,
    interface_availability_label,
)
from .item import Metric, Trigger
from .rpc import RPCErrorPayload, RPCRequest, RPCResponse

__all__ = [
    "AVAILABLE",
    "Decoded",
    "Group",
    "Host",
    "Interface",
    "Metric",
    "RPCErrorPayload",
    "RPCRequest",
    "RPCResponse",
    "Settings",
    "Template",
    "Trigger",
    "UNAVAILABLE",
    "UNKNOWN",
    "availability_label",
    "decode_records",
    "interface_availability_label",
]
