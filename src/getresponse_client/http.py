"""HTTP utilities for GetResponse API access."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

import requests
from requests import PreparedRequest, Response, Session

from .exceptions import DecodeError, RemoteError, RequestConstructionError, TransportError

Timeout = Union[float, tuple[float, float]]


@dataclass(slots=True)
class Operation:
    """One outbound call before it is turned into a request."""

    method: str
    path: str
    params: Mapping[str, str] | None = None
    body: bytes | None = None


@dataclass(slots=True)
class HttpResponse:
    """Interpreted response envelope: decoded data plus the raw status and bytes."""

    status_code: int
    data: Any
    content: bytes
    headers: Mapping[str, str]


def encode_json(payload: Any) -> bytes:
    """Serialize a payload to the compact JSON bytes sent on the wire."""

    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def is_success(status_code: int) -> bool:
    """2xx and 3xx are success; only 4xx/5xx denote a failed request."""

    return 200 <= status_code < 400


def build_request(
    session: Session,
    method: str,
    url: str,
    *,
    params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    body: bytes | None = None,
) -> PreparedRequest:
    """Prepare a request through the session without touching the network.

    Session-level headers, auth and cookies are merged in; per-request
    headers take precedence.
    """

    try:
        return session.prepare_request(
            requests.Request(
                method=method.upper(),
                url=url,
                params=dict(params or {}),
                headers=dict(headers or {}),
                data=body,
            )
        )
    except (requests.RequestException, ValueError) as exc:
        raise RequestConstructionError(f"Invalid request URL {url!r}: {exc}", details=url) from exc


def send(
    session: Session,
    prepared: PreparedRequest,
    *,
    timeout: Timeout | None = None,
    verify: bool | str = True,
) -> Response:
    """Execute a prepared request, mapping `requests` failures to `TransportError`.

    Environment settings (proxies, ``REQUESTS_CA_BUNDLE``) are merged the way
    ``Session.request`` does.
    """

    try:
        settings = session.merge_environment_settings(prepared.url, {}, None, verify, None)
        return session.send(prepared, timeout=timeout, **settings)
    except requests.RequestException as exc:
        reason = str(exc).strip() or exc.__class__.__name__
        raise TransportError(
            f"Failed to communicate with GetResponse API: {reason}", details=reason
        ) from exc


def raise_for_error(status_code: int, body: bytes) -> None:
    """Raise `RemoteError` for a failed response, or `DecodeError` if the body is not one."""

    if is_success(status_code):
        return
    try:
        payload = json.loads(body)
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        error = RemoteError.from_payload(status_code, payload)
    except (TypeError, ValueError) as exc:
        raise DecodeError(
            f"Could not decode GetResponse error response (status {status_code})",
            status_code=status_code,
            body=body,
            cause=exc,
        ) from exc
    raise error


def parse_json(status_code: int, body: bytes) -> Any:
    """Parse a success body, raising `DecodeError` with the raw bytes on failure."""

    try:
        return json.loads(body)
    except ValueError as exc:
        raise DecodeError(
            f"Could not decode GetResponse response (status {status_code})",
            status_code=status_code,
            body=body,
            cause=exc,
        ) from exc


def interpret_response(status_code: int, body: bytes, *, expect_json: bool = True) -> Any:
    """Classify a completed exchange.

    Returns the decoded JSON payload for a success status, or ``None`` when
    ``expect_json`` is false and the body is discarded. Raises `RemoteError`
    or `DecodeError` for anything outside [200, 400).
    """

    raise_for_error(status_code, body)
    if not expect_json:
        return None
    return parse_json(status_code, body)
