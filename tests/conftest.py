#!filepath: tests/conftest.py
from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pytest


def pytest_configure() -> None:
    """Ensure src layout is importable and logs stay out of the tree."""
    root = Path(__file__).resolve().parents[1]
    src = (root / "src").resolve()
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))
    os.environ.setdefault("WPPAGES_LOG_TO_FILE", "false")


@dataclass
class FakeResponse:
    """Just enough of ``requests.Response`` for the client."""

    status_code: int
    body: Any = None
    raw_text: Optional[str] = None

    @property
    def text(self) -> str:
        if self.raw_text is not None:
            return self.raw_text
        return json.dumps(self.body)

    def json(self) -> Any:
        if self.raw_text is not None:
            return json.loads(self.raw_text)
        return self.body


@dataclass
class SentRequest:
    method: str
    url: str
    headers: Dict[str, str]
    json: Any


@dataclass
class FakeTransport:
    """Records requests and replays queued responses in order."""

    responses: List[Any] = field(default_factory=list)
    sent: List[SentRequest] = field(default_factory=list)

    def queue(self, *responses: Any) -> FakeTransport:
        self.responses.extend(responses)
        return self

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json: Optional[Any] = None,
    ) -> Any:
        self.sent.append(SentRequest(method, url, dict(headers), json))
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    @property
    def last(self) -> SentRequest:
        return self.sent[-1]


SITE = "https://x.test"


def page_body(page_id: int = 5, status: str = "publish", **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "id": page_id,
        "link": f"{SITE}/page-{page_id}/",
        "date": "2026-01-02T10:00:00",
        "slug": f"page-{page_id}",
        "status": status,
        "title": {"rendered": f"Page {page_id}"},
        "content": {"rendered": "<p>x</p>", "protected": False},
    }
    body.update(extra)
    return body


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport):
    from wppages.wordpress.client import WordPressClient, WPConfig

    cfg = WPConfig(site_url=SITE, username="admin", application_password="abcd efgh")
    return WordPressClient(cfg, transport=transport)


_WP_ENV = ("WP_URL", "WP_USER", "WP_APP_PASSWORD", "WP_PAGE_ID", "WP_TITLE", "HTML_FILE", "WP_TIMEOUT")


@pytest.fixture(autouse=True)
def _clean_wp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _WP_ENV:
        monkeypatch.delenv(name, raising=False)
