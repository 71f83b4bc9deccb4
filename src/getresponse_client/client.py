"""High-level GetResponse REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any
from urllib.parse import urlparse

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth.base import AuthStrategy
from .config import DEFAULT_BASE_URL, ClientConfig
from .exceptions import RequestConstructionError
from .http import HttpResponse, Operation, Timeout, build_request, interpret_response, send
from .resources import ContactsResource


logger = logging.getLogger(__name__)


class GetResponseClient:
    """Wrap GetResponse v3 REST endpoints with helper methods."""

    def __init__(
        self,
        *,
        auth_strategy: AuthStrategy,
        base_url: str = DEFAULT_BASE_URL,
        verify_ssl: bool | str = True,
        timeout: float = 30.0,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._validate_base_url(base_url)
        self.config = ClientConfig(
            base_url=base_url.rstrip("/"),
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
        )
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self._auth = auth_strategy
        self.contacts = ContactsResource(self)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> GetResponseClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        body: bytes | None = None,
        expect_json: bool = True,
        timeout: Timeout | None = None,
    ) -> Any:
        operation = Operation(method=method, path=path, params=params, body=body)
        return self.execute(operation, expect_json=expect_json, timeout=timeout).data

    def execute(
        self,
        operation: Operation,
        *,
        expect_json: bool = True,
        timeout: Timeout | None = None,
    ) -> HttpResponse:
        """Run one operation and return the interpreted response envelope."""

        url = self._resolve_url(operation.path)
        prepared = build_request(
            self._session,
            operation.method,
            url,
            params=operation.params,
            headers=self._prepare_headers(),
            body=operation.body,
        )
        self._log_request(operation.method, url)
        response = send(
            self._session,
            prepared,
            timeout=self.config.timeout if timeout is None else timeout,
            verify=self.config.verify_ssl,
        )
        data = interpret_response(response.status_code, response.content, expect_json=expect_json)
        return HttpResponse(
            status_code=response.status_code,
            data=data,
            content=response.content,
            headers=response.headers,
        )

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _resolve_url(self, path: str) -> str:
        normalized = path if path.startswith("/") else f"/{path}"
        return f"{self.config.base_url}{normalized}"

    def _prepare_headers(self) -> MutableMapping[str, str]:
        headers = self.config.resolved_headers()
        self._auth.apply(headers)
        return headers

    def _log_request(self, method: str, url: str) -> None:
        logger.info(
            "GetResponse request %s %s (%s)",
            method.upper(),
            url,
            self._auth.describe(),
        )

    @staticmethod
    def _validate_base_url(base_url: str) -> None:
        parsed = urlparse(base_url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise RequestConstructionError(
                f"Invalid GetResponse base URL {base_url!r}; expected http(s)://host[/prefix]",
                details=base_url,
            )

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
