"""API key authentication with optional account domain scoping."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

from ..config import AUTH_TOKEN_HEADER, DOMAIN_HEADER
from .base import AuthStrategy


@dataclass(slots=True, frozen=True)
class ApiKeyAuth(AuthStrategy):
    """Send ``X-Auth-Token: api-key <key>`` and, for Enterprise accounts, ``X-Domain``."""

    api_key: str
    domain: str | None = None

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers[AUTH_TOKEN_HEADER] = f"api-key {self.api_key}"
        if self.domain:
            headers[DOMAIN_HEADER] = self.domain
        else:
            headers.pop(DOMAIN_HEADER, None)

    def describe(self) -> str:
        return f"domain={self.domain or 'unspecified'}"
