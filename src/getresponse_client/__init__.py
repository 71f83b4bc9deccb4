"""High-level GetResponse client entrypoints."""
from .auth import ApiKeyAuth
from .client import GetResponseClient
from .config import ClientConfig
from .exceptions import (
    DecodeError,
    ErrorCode,
    GetResponseError,
    RemoteError,
    RequestConstructionError,
    TransportError,
)

__all__ = [
    "GetResponseClient",
    "ClientConfig",
    "ApiKeyAuth",
    "GetResponseError",
    "RequestConstructionError",
    "TransportError",
    "RemoteError",
    "DecodeError",
    "ErrorCode",
]
