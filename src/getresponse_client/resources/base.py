"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from ..exceptions import DecodeError
from ..http import HttpResponse, Operation, Timeout, encode_json

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import GetResponseClient

T = TypeVar("T")


def path_segment(value: str) -> str:
    """Percent-encode an identifier so it stays a single path segment."""

    return quote(str(value), safe="")


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: GetResponseClient) -> None:
        self._client = client

    def _get(
        self,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        timeout: Timeout | None = None,
    ) -> HttpResponse:
        return self._client.execute(Operation("GET", path, params=params), timeout=timeout)

    def _post(
        self,
        path: str,
        payload: Any,
        *,
        expect_json: bool = True,
        timeout: Timeout | None = None,
    ) -> HttpResponse:
        operation = Operation("POST", path, body=encode_json(payload))
        return self._client.execute(operation, expect_json=expect_json, timeout=timeout)

    def _delete(
        self,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        timeout: Timeout | None = None,
    ) -> HttpResponse:
        operation = Operation("DELETE", path, params=params)
        return self._client.execute(operation, expect_json=False, timeout=timeout)

    @staticmethod
    def _decode(response: HttpResponse, loader: Callable[[Any], T]) -> T:
        """Map a parsed JSON payload onto a model, or raise `DecodeError`."""

        try:
            return loader(response.data)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise DecodeError(
                f"Unexpected GetResponse payload shape: {exc}",
                status_code=response.status_code,
                body=response.content,
                cause=exc,
            ) from exc
