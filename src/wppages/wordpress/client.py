#!filepath: src/wppages/wordpress/client.py
from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union
from urllib.parse import urlencode

from requests import Response

from wppages.wordpress.errors import decode_error_body, response_error
from wppages.wordpress.models import (
    CreatePageRequest,
    PageRef,
    PageStatus,
    SearchQuery,
    UpdatePageRequest,
    WordPressPage,
)
from wppages.wordpress.transport import RequestsTransport, Transport

if TYPE_CHECKING:
    from wppages.settings import WordPressSettings

logger = logging.getLogger(__name__)

API_PATH = "/wp-json/wp/v2"


def _basic_auth_header(username: str, application_password: str) -> str:
    creds = f"{username}:{application_password}"
    token = base64.b64encode(creds.encode("utf-8")).decode("ascii")
    return f"Basic {token}"


@dataclass(frozen=True, slots=True)
class WPConfig:
    """Connection settings for one WordPress site.

    ``api_root`` and ``auth_header`` are derived once here and never change.

    Args:
        site_url: Site base URL; one trailing slash is dropped.
        username: WordPress user name.
        application_password: Application password for that user.
    """

    site_url: str
    username: str
    application_password: str = field(repr=False)
    api_root: str = field(init=False)
    auth_header: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        site = str(self.site_url)
        if site.endswith("/"):
            site = site[:-1]
        object.__setattr__(self, "site_url", site)
        object.__setattr__(self, "api_root", f"{site}{API_PATH}")
        object.__setattr__(
            self,
            "auth_header",
            _basic_auth_header(self.username, self.application_password),
        )


class WordPressClient:
    """Client for the pages endpoints of the WordPress REST API.

    Each operation is a single request and response. The client keeps no
    mutable state, so one instance can be shared between threads.

    Args:
        cfg: Site configuration.
        transport: HTTP capability, ``RequestsTransport()`` by default.
    """

    def __init__(self, cfg: WPConfig, transport: Optional[Transport] = None) -> None:
        self._cfg = cfg
        self._transport: Transport = transport or RequestsTransport()

    @classmethod
    def from_settings(cls, settings: WordPressSettings) -> WordPressClient:
        """Build a client from environment settings.

        Raises:
            MissingCredentialsError: If site URL, user or password is missing.
        """
        return cls(
            settings.client_config(),
            RequestsTransport(timeout_seconds=float(settings.timeout)),
        )

    @property
    def cfg(self) -> WPConfig:
        """Return the configuration used by this client."""
        return self._cfg

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def api_root(self) -> str:
        return self._cfg.api_root

    def _url(self, path: str, params: Optional[Mapping[str, str]] = None) -> str:
        url = f"{self._cfg.api_root}/{str(path).lstrip('/')}"
        if params:
            url = f"{url}?{urlencode(params, safe=',')}"
        return url

    def _headers(self, *, with_json: bool = False) -> Dict[str, str]:
        headers = {"Authorization": self._cfg.auth_header}
        if with_json:
            headers["Content-Type"] = "application/json"
        return headers

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Response:
        url = self._url(path, params)
        logger.debug(f"{method} {url}")
        return self._transport.request(
            method,
            url,
            headers=self._headers(with_json=payload is not None),
            json=payload,
        )

    def _json_or_raise(self, response: Response, operation: str) -> Any:
        status = int(response.status_code)
        if not 200 <= status < 300:
            detail = decode_error_body(response)
            logger.debug(f"WordPress answered {status} to '{operation}'")
            raise response_error(operation, status, detail)
        return response.json()

    def test_connection(self) -> bool:
        """Probe ``/users/me``; ``True`` on any 2xx, ``False`` otherwise. Never raises."""
        try:
            response = self._send("GET", "users/me")
        except Exception as e:
            logger.warning(f"WordPress unreachable at {self._cfg.site_url}: {e}")
            return False
        ok = 200 <= int(response.status_code) < 300
        if not ok:
            logger.warning(
                f"WordPress probe at {self._cfg.site_url} answered {response.status_code}"
            )
        return ok

    def create_page(
        self,
        title: str,
        html_content: str,
        status: Union[PageStatus, str] = PageStatus.PUBLISH,
    ) -> PageRef:
        """Create a page from raw HTML.

        Args:
            title: Page title.
            html_content: Page body, sent as is.
            status: Publication status, ``publish`` by default.

        Returns:
            PageRef: Id and link of the new page; other server fields are kept as extras.

        Raises:
            WordPressResponseError: On a non-success status.
        """
        body = CreatePageRequest(title=title, content=html_content, status=status)
        response = self._send("POST", "pages", payload=body.to_payload())
        data = self._json_or_raise(response, "create page")
        page = PageRef.model_validate(data)
        logger.info(f"Created page {page.id} at {page.link}")
        return page

    def fetch_page_by_id(self, page_id: int) -> WordPressPage:
        """Fetch one page by id.

        Raises:
            WordPressNotFoundError: If the page does not exist.
            WordPressResponseError: On any other non-success status.
        """
        response = self._send("GET", f"pages/{page_id}")
        data = self._json_or_raise(response, f"fetch page {page_id}")
        return WordPressPage.model_validate(data)

    def search_pages(
        self, query: Optional[SearchQuery] = None, **filters: Any
    ) -> List[WordPressPage]:
        """List pages matching the given filters.

        Only one page of results is returned; ``per_page`` and ``page`` select it.

        Args:
            query: Prepared filters.
            **filters: ``SearchQuery`` fields, used when ``query`` is not given.

        Returns:
            List[WordPressPage]: Pages in server order.
        """
        q = query if query is not None else SearchQuery(**filters)
        response = self._send("GET", "pages", params=q.to_params())
        data = self._json_or_raise(response, "search pages")
        return [WordPressPage.model_validate(item) for item in data]

    def update_page_content(
        self,
        page_id: int,
        content_html: str,
        status: Optional[Union[PageStatus, str]] = None,
    ) -> WordPressPage:
        """Replace a page's content, and its status when one is given.

        Returns:
            WordPressPage: The page as stored after the update.

        Raises:
            WordPressResponseError: On a non-success status.
        """
        body = UpdatePageRequest(content=content_html, status=status)
        response = self._send("POST", f"pages/{page_id}", payload=body.to_payload())
        data = self._json_or_raise(response, f"update page {page_id}")
        page = WordPressPage.model_validate(data)
        logger.info(f"Updated page {page.id}")
        return page
