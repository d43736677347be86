#!filepath: src/wppages/sample_page.py
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from wppages.utils.project_paths import ProjectPaths

logger = logging.getLogger(__name__)

SAMPLE_HTML = (
    '<!doctype html><html><head><meta charset="utf-8"/>'
    "<title>Published with wppages</title></head><body>"
    "<h1>Published with wppages</h1>"
    "<p>Sample page pushed via WordPressClient.</p>"
    "</body></html>"
)


def default_sample_path() -> Path:
    return ProjectPaths.discover().data_dir / "sample.html"


def ensure_sample_html(path: Path) -> Path:
    """Write the sample document to ``path`` unless a file is already there.

    Args:
        path: Target file.

    Returns:
        Path: The same path, now guaranteed to exist.
    """
    if path.exists():
        return path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    logger.info(f"Wrote sample HTML to {path}")
    return path


def render_update_html(page_id: int, now: Optional[datetime] = None) -> str:
    """Timestamped document used when editing a page without a source file."""
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    return (
        '<!doctype html><html><head><meta charset="utf-8"/>'
        "<title>Updated with wppages</title></head><body>"
        "<h1>Updated with wppages</h1>"
        f"<p>Page {page_id} updated at {stamp}.</p>"
        "</body></html>"
    )
