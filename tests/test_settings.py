#!filepath: tests/test_settings.py
from __future__ import annotations

import pytest

from wppages.settings import (
    InvalidPageIdError,
    MissingCredentialsError,
    MissingPageIdError,
    WordPressSettings,
)


def _load() -> WordPressSettings:
    return WordPressSettings(_env_file=None)


def test_client_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WP_URL", "https://x.test/")
    monkeypatch.setenv("WP_USER", "admin")
    monkeypatch.setenv("WP_APP_PASSWORD", "abcd efgh")
    cfg = _load().client_config()
    assert cfg.api_root == "https://x.test/wp-json/wp/v2"
    assert cfg.username == "admin"


def test_missing_credentials_are_named(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WP_URL", "https://x.test")
    monkeypatch.setenv("WP_USER", "")
    with pytest.raises(MissingCredentialsError) as exc:
        _load().client_config()
    assert "WP_USER" in str(exc.value)
    assert "WP_APP_PASSWORD" in str(exc.value)
    assert "WP_URL," not in str(exc.value).split(".")[0]


def test_defaults() -> None:
    s = _load()
    assert s.title == "AI Generated Page"
    assert s.html_file is None
    assert s.timeout == 30.0


def test_page_id_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(MissingPageIdError):
        _load().resolve_page_id()

    monkeypatch.setenv("WP_PAGE_ID", "abc")
    with pytest.raises(InvalidPageIdError):
        _load().resolve_page_id()

    monkeypatch.setenv("WP_PAGE_ID", " 12 ")
    assert _load().resolve_page_id() == 12
