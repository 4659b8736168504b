from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from themestars.models import StarRecord
from themestars.urls import normalize

HEADER = """\
# Hugo Themes Sorted by GitHub/GitLab Stars

This list is automatically generated using the \
[Hugo Themes Site Builder](https://github.com/gohugoio/hugoThemesSiteBuilder) data.

Script last run: {timestamp}

| Repository | Stars |
|------------|-------|
"""


def format_timestamp(moment: datetime) -> str:
    """Format like ``date -u``, e.g. ``Sun Oct  4 12:00:00 UTC 2026``."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return f"{moment:%a %b} {moment.day:>2} {moment:%H:%M:%S} UTC {moment:%Y}"


def render_row(record: StarRecord) -> str:
    return f"| [{record.identifier}]({normalize(record.url)}) | {record.stars} |"


def render_document(records: Iterable[StarRecord], timestamp: str) -> str:
    lines = [render_row(r) for r in records]
    body = "\n".join(lines)
    return HEADER.format(timestamp=timestamp) + (body + "\n" if body else "")


def write_document(path: str | Path, text: str) -> Path:
    path = Path(path)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote {}", path)
    return path
