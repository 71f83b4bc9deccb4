"""Configuration helpers for GetResponse client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.getresponse.com"
AUTH_TOKEN_HEADER = "X-Auth-Token"
DOMAIN_HEADER = "X-Domain"


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Typed configuration for `GetResponseClient`."""

    base_url: str = DEFAULT_BASE_URL
    verify_ssl: bool | str = True
    timeout: float = 30.0
    default_headers: Mapping[str, str] | None = None

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.default_headers:
            headers.update(self.default_headers)
        return headers
