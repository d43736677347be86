#!filepath: src/wppages/cli.py
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from enum import IntEnum
from pathlib import Path
from typing import Any, Iterator, List, Optional

import typer

from wppages.sample_page import (
    default_sample_path,
    ensure_sample_html,
    render_update_html,
)
from wppages.settings import (
    InvalidPageIdError,
    MissingCredentialsError,
    MissingPageIdError,
    SettingsError,
    WordPressSettings,
)
from wppages.utils.logger import configure_logging
from wppages.wordpress.client import WordPressClient
from wppages.wordpress.models import PageStatus, SearchQuery

app = typer.Typer(help="Create, fetch, search and edit WordPress pages.", no_args_is_help=True)
logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    OK = 0
    FAILURE = 1
    CONNECTION_FAILED = 2
    MISSING_CREDENTIALS = 3
    MISSING_PAGE_ID = 4
    INVALID_PAGE_ID = 5


def _settings_exit_code(e: SettingsError) -> ExitCode:
    if isinstance(e, MissingCredentialsError):
        return ExitCode.MISSING_CREDENTIALS
    if isinstance(e, MissingPageIdError):
        return ExitCode.MISSING_PAGE_ID
    if isinstance(e, InvalidPageIdError):
        return ExitCode.INVALID_PAGE_ID
    return ExitCode.FAILURE


@contextmanager
def _exit_on_error() -> Iterator[None]:
    try:
        yield
    except typer.Exit:
        raise
    except SettingsError as e:
        logger.error(str(e))
        raise typer.Exit(code=int(_settings_exit_code(e))) from e
    except Exception as e:
        logger.error(f"{type(e).__name__}: {e}")
        raise typer.Exit(code=int(ExitCode.FAILURE)) from e


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request to stderr."),
) -> None:
    """Create, fetch, search and edit WordPress pages."""
    configure_logging(verbose=verbose)


def load_settings() -> WordPressSettings:
    return WordPressSettings()


def build_client(settings: WordPressSettings) -> WordPressClient:
    return WordPressClient.from_settings(settings)


def _echo_json(label: str, payload: Any) -> None:
    typer.echo(f"{label}: {json.dumps(payload, ensure_ascii=False)}")


def _require_connection(client: WordPressClient) -> None:
    if client.test_connection():
        typer.echo("Connected to WordPress.")
        return
    typer.echo("Failed to connect to WordPress.")
    raise typer.Exit(code=int(ExitCode.CONNECTION_FAILED))


@app.command()
def check() -> None:
    """Probe the credentials against /users/me."""
    with _exit_on_error():
        client = build_client(load_settings())
        _require_connection(client)


@app.command("create-page")
def create_page(
    status: PageStatus = typer.Option(PageStatus.PUBLISH, help="Status of the new page."),
) -> None:
    """Publish HTML_FILE (a sample is written if missing) as a new page titled WP_TITLE."""
    with _exit_on_error():
        settings = load_settings()
        client = build_client(settings)
        _require_connection(client)

        html_path = ensure_sample_html(settings.html_file or default_sample_path())
        html = html_path.read_text(encoding="utf-8")
        created = client.create_page(settings.title, html, status)
        _echo_json("Created page", created.model_dump(mode="json"))


@app.command("edit-page")
def edit_page(
    html_file: Optional[Path] = typer.Option(
        None, help="Replace the content with this file instead of a timestamped stub."
    ),
) -> None:
    """Rewrite the content of WP_PAGE_ID, keeping its current status."""
    with _exit_on_error():
        settings = load_settings()
        client = build_client(settings)
        page_id = settings.resolve_page_id()

        page = client.fetch_page_by_id(page_id)
        _echo_json("Current page", page.summary())

        if html_file is not None:
            html = html_file.read_text(encoding="utf-8")
        else:
            html = render_update_html(page_id)
        # Statuses outside PageStatus are left out; WordPress keeps the current one.
        updated = client.update_page_content(page_id, html, page.known_status)
        _echo_json(
            "Updated page",
            {
                "id": updated.id,
                "link": updated.link,
                "status": updated.status_value,
            },
        )


@app.command("fetch-page")
def fetch_page(
    page_id: Optional[int] = typer.Argument(None, help="Page id, WP_PAGE_ID by default."),
) -> None:
    """Show one page."""
    with _exit_on_error():
        settings = load_settings()
        client = build_client(settings)
        pid = page_id if page_id is not None else settings.resolve_page_id()
        page = client.fetch_page_by_id(pid)
        _echo_json("Page", page.summary())


@app.command("search-pages")
def search_pages(
    search: Optional[str] = typer.Option(None, help="Free text search."),
    slug: Optional[str] = typer.Option(None, help="Exact slug."),
    status: Optional[List[PageStatus]] = typer.Option(
        None, help="Status filter, repeatable."
    ),
    per_page: Optional[int] = typer.Option(None, min=1, help="Results per page."),
    page: Optional[int] = typer.Option(None, min=1, help="Result page number."),
) -> None:
    """List pages matching the filters, one result page only."""
    with _exit_on_error():
        client = build_client(load_settings())
        statuses = list(status or [])
        query = SearchQuery(
            search=search,
            slug=slug,
            status=statuses if len(statuses) > 1 else (statuses[0] if statuses else None),
            per_page=per_page,
            page=page,
        )
        pages = client.search_pages(query)
        _echo_json("Pages", [p.summary() for p in pages])


if __name__ == "__main__":
    app()
