from __future__ import annotations

from pathlib import Path

import httpx
from loguru import logger

DEFAULT_MANIFEST_URL = (
    "https://raw.githubusercontent.com/gohugoio/hugoThemesSiteBuilder"
    "/refs/heads/main/themes.txt"
)


def _split_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines()]


def fetch_manifest(client: httpx.Client, url: str = DEFAULT_MANIFEST_URL) -> list[str]:
    """Download the newline-delimited list of repository URLs.

    A failed download is logged and yields an empty list; the run then goes
    on to produce a document without rows.
    """
    try:
        resp = client.get(url, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error("Failed to fetch manifest from {}: {}", url, exc)
        return []
    return _split_lines(resp.text)


def read_manifest(path: str | Path) -> list[str]:
    return _split_lines(Path(path).read_text(encoding="utf-8"))
