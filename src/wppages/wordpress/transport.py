#!filepath: src/wppages/wordpress/transport.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

import requests
from requests import Response


class Transport(Protocol):
    """HTTP capability used by the client.

    Implementations send one request and return the response without raising on
    HTTP error statuses. Network failures raise whatever the implementation
    raises; the client does not wrap them.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json: Optional[Any] = None,
    ) -> Response: ...


@dataclass(frozen=True, slots=True)
class RequestsTransport:
    """Transport backed by ``requests``.

    A fresh session is opened per call, so nothing is shared between
    concurrent requests.

    Args:
        timeout_seconds: Connect and read timeout per request.
        user_agent: Value of the ``User-Agent`` header.
    """

    timeout_seconds: float = 30.0
    user_agent: str = "wppages/0.1"

    def session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update({"User-Agent": self.user_agent, "Accept": "application/json"})
        return s

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json: Optional[Any] = None,
    ) -> Response:
        with self.session() as s:
            return s.request(
                method=str(method).upper(),
                url=url,
                headers=dict(headers),
                json=json,
                timeout=float(self.timeout_seconds),
            )
