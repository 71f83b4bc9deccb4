"""Custom exception hierarchy for the GetResponse client."""
from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Numeric error codes documented at https://apidocs.getresponse.com/v3/errors."""

    INTERNAL_ERROR = 1
    VALIDATION_ERROR = 1000
    RELATED_RESOURCE_NOT_FOUND = 1001
    FORBIDDEN = 1002
    INVALID_PARAMETER_FORMAT = 1003
    INVALID_HASH = 1004
    MISSING_PARAMETER = 1005
    INVALID_PARAMETER_TYPE = 1006
    INVALID_PARAMETER_LENGTH = 1007
    RESOURCE_ALREADY_EXISTS = 1008
    RESOURCE_IN_USE = 1009
    EXTERNAL_ERROR = 1010
    MESSAGE_ALREADY_SENDING = 1011
    MESSAGE_PARSING = 1012
    RESOURCE_NOT_FOUND = 1013
    AUTHENTICATION_FAILURE = 1014
    REQUEST_QUOTA_REACHED = 1015
    TEMPORARILY_BLOCKED = 1016
    PERMANENTLY_BLOCKED = 1017
    IP_BLOCKED = 1018
    INVALID_REQUEST_HEADERS = 1021
    REQUEST_FORBIDDEN = 1023


class GetResponseError(RuntimeError):
    """Base error for GetResponse failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details

    def __reduce__(self):
        # Subclasses take keyword-only arguments, so rebuild from args and
        # state instead of calling cls(*args).
        return _restore_error, (self.__class__, self.args, self.__dict__.copy())


class RequestConstructionError(GetResponseError):
    """Raised when a request cannot be built from the base URL and path."""


class TransportError(GetResponseError):
    """Raised when the exchange fails below HTTP (connection, timeout, framing)."""


class RemoteError(GetResponseError):
    """Raised for a 4xx/5xx response carrying a decodable error body.

    The string form is the API supplied ``message``; an empty message is kept
    as-is rather than replaced.
    """

    def __init__(
        self,
        *,
        status_code: int,
        http_status: int = 0,
        code: int = 0,
        code_description: str = "",
        message: str = "",
        more_info: str = "",
        context: list[str] | None = None,
        uuid: str = "",
    ) -> None:
        super().__init__(message, status_code=status_code, details=code_description or None)
        self.http_status = http_status
        self.code = code
        self.code_description = code_description
        self.message = message
        self.more_info = more_info
        self.context = list(context or [])
        self.uuid = uuid

    @property
    def error_code(self) -> ErrorCode | None:
        try:
            return ErrorCode(self.code)
        except ValueError:
            return None

    @classmethod
    def from_payload(cls, status_code: int, payload: dict[str, Any]) -> RemoteError:
        """Build from an error body; a field of the wrong JSON type raises `TypeError`."""

        context = _typed(payload, "context", list, [])
        if not all(isinstance(item, str) for item in context):
            raise TypeError("context must be a JSON array of strings")
        return cls(
            status_code=status_code,
            http_status=_typed(payload, "httpStatus", int, 0),
            code=_typed(payload, "code", int, 0),
            code_description=_typed(payload, "codeDescription", str, ""),
            message=_typed(payload, "message", str, ""),
            more_info=_typed(payload, "moreInfo", str, ""),
            context=context,
            uuid=_typed(payload, "uuid", str, ""),
        )


class DecodeError(GetResponseError):
    """Raised when a response body cannot be interpreted as the expected shape."""

    def __init__(self, message: str, *, status_code: int, body: bytes, cause: Exception) -> None:
        super().__init__(message, status_code=status_code, details=body)
        self.body = body
        self.cause = cause


def _typed(payload: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise TypeError(f"{key} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _restore_error(cls: type[GetResponseError], args: tuple[Any, ...], state: dict[str, Any]):
    error = cls.__new__(cls, *args)
    error.args = args
    error.__dict__.update(state)
    return error
