#!filepath: src/wppages/wordpress/models.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class PageStatus(str, Enum):
    """Publication status accepted by the pages endpoint."""

    PUBLISH = "publish"
    DRAFT = "draft"
    PRIVATE = "private"
    PENDING = "pending"


class RenderedField(BaseModel):
    """A field WordPress returns as ``{"rendered": ..., "protected": ...}``."""

    rendered: str
    protected: Optional[bool] = None

    model_config = {"extra": "allow"}


class PageRef(BaseModel):
    """Minimal reference to a remote page.

    Server fields beyond ``id`` and ``link`` are kept as extras.
    """

    id: int
    link: str

    model_config = {"extra": "allow"}


class WordPressPage(PageRef):
    """A WordPress page as returned by ``/wp/v2/pages``."""

    date: Optional[str] = None
    slug: Optional[str] = None
    # WordPress also returns future, trash and plugin statuses; those stay plain strings.
    status: Optional[Union[PageStatus, str]] = Field(
        default=None, union_mode="left_to_right"
    )
    title: Optional[RenderedField] = None
    content: Optional[RenderedField] = None

    @property
    def status_value(self) -> Optional[str]:
        if isinstance(self.status, PageStatus):
            return self.status.value
        return self.status

    @property
    def known_status(self) -> Optional[PageStatus]:
        """The status when it is one this client can send back, else ``None``."""
        return self.status if isinstance(self.status, PageStatus) else None

    @property
    def title_text(self) -> Optional[str]:
        return self.title.rendered if self.title else None

    def summary(self) -> Dict[str, Any]:
        """Short, JSON friendly view used by the command line."""
        return {
            "id": self.id,
            "status": self.status_value,
            "title": self.title_text,
            "link": self.link,
        }


class CreatePageRequest(BaseModel):
    """Outbound body for ``POST /pages``."""

    title: str
    content: str
    status: PageStatus = PageStatus.PUBLISH

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class UpdatePageRequest(BaseModel):
    """Outbound body for ``POST /pages/{id}``; ``status`` is sent only when set."""

    content: str
    status: Optional[PageStatus] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SearchQuery(BaseModel):
    """Filters for ``GET /pages``.

    Attributes:
        search: Free text search term.
        slug: Exact slug.
        status: One status or several, sent comma separated.
        per_page: Page size.
        page: Page number, 1 based.
    """

    search: Optional[str] = None
    slug: Optional[str] = None
    status: Optional[Union[PageStatus, List[PageStatus]]] = None
    per_page: Optional[int] = Field(default=None, ge=1)
    page: Optional[int] = Field(default=None, ge=1)

    model_config = {"extra": "forbid"}

    def to_params(self) -> Dict[str, str]:
        """Build query string parameters, omitting every filter not provided.

        Returns:
            Dict[str, str]: Parameters ready for the transport.
        """
        params: Dict[str, str] = {}
        if self.search:
            params["search"] = self.search
        if self.slug:
            params["slug"] = self.slug
        if self.per_page:
            params["per_page"] = str(self.per_page)
        if self.page:
            params["page"] = str(self.page)
        if self.status:
            if isinstance(self.status, list):
                params["status"] = ",".join(s.value for s in self.status)
            else:
                params["status"] = self.status.value
        return params
