#!filepath: src/wppages/settings.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wppages.wordpress.client import WPConfig


class SettingsError(RuntimeError):
    """Error while reading or validating settings."""


class MissingCredentialsError(SettingsError):
    """WP_URL, WP_USER or WP_APP_PASSWORD is not set."""


class MissingPageIdError(SettingsError):
    """WP_PAGE_ID is not set."""


class InvalidPageIdError(SettingsError):
    """WP_PAGE_ID is not an integer."""


class WordPressSettings(BaseSettings):
    """Settings read from the environment and ``.env``.

    Nothing is required at load time; each command asks for what it needs
    through ``client_config`` and ``resolve_page_id``.

    Attributes:
        site_url: ``WP_URL``.
        username: ``WP_USER``.
        application_password: ``WP_APP_PASSWORD``.
        page_id: ``WP_PAGE_ID``, kept raw so validation can report it.
        title: ``WP_TITLE``, title for new pages.
        html_file: ``HTML_FILE``, local HTML document to publish.
        timeout: ``WP_TIMEOUT``, transport timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    site_url: Optional[str] = Field(default=None, validation_alias="WP_URL")
    username: Optional[str] = Field(default=None, validation_alias="WP_USER")
    application_password: Optional[str] = Field(
        default=None, validation_alias="WP_APP_PASSWORD", repr=False
    )
    page_id: Optional[str] = Field(default=None, validation_alias="WP_PAGE_ID")
    title: str = Field(default="AI Generated Page", validation_alias="WP_TITLE")
    html_file: Optional[Path] = Field(default=None, validation_alias="HTML_FILE")
    timeout: float = Field(default=30.0, gt=0, validation_alias="WP_TIMEOUT")

    def missing_credentials(self) -> List[str]:
        """Return the names of unset credential variables."""
        pairs = (
            ("WP_URL", self.site_url),
            ("WP_USER", self.username),
            ("WP_APP_PASSWORD", self.application_password),
        )
        return [name for name, value in pairs if not str(value or "").strip()]

    def client_config(self) -> WPConfig:
        """Build the client configuration.

        Returns:
            WPConfig: Configuration for ``WordPressClient``.

        Raises:
            MissingCredentialsError: If any credential variable is unset.
        """
        missing = self.missing_credentials()
        if missing:
            raise MissingCredentialsError(
                f"Missing required env vars: {', '.join(missing)}. "
                "Please set WP_URL, WP_USER, WP_APP_PASSWORD"
            )
        return WPConfig(
            site_url=str(self.site_url).strip(),
            username=str(self.username).strip(),
            application_password=str(self.application_password),
        )

    def resolve_page_id(self) -> int:
        """Parse ``WP_PAGE_ID``.

        Raises:
            MissingPageIdError: If it is unset.
            InvalidPageIdError: If it is not an integer.
        """
        raw = str(self.page_id or "").strip()
        if not raw:
            raise MissingPageIdError(
                "Please set WP_PAGE_ID to the numeric page ID to edit."
            )
        try:
            return int(raw)
        except ValueError as e:
            raise InvalidPageIdError(f"WP_PAGE_ID must be a number, got {raw!r}.") from e
