from __future__ import annotations

from types import TracebackType

import httpx
from loguru import logger

from themestars.models import StarRecord
from themestars.urls import encode_project_path, ensure_scheme, extract_project_path


class GitLabClient:
    """Star counts from the public GitLab REST API (no token)."""

    def __init__(
        self,
        *,
        timeout: float | None = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url="https://gitlab.com/api/v4",
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self) -> GitLabClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def fetch_record(self, url: str) -> StarRecord:
        url = ensure_scheme(url)
        project_path = extract_project_path(url)
        if project_path is None:
            logger.warning("Could not parse project path from {}", url)
            return StarRecord.unresolved(url)

        return StarRecord(self.get_stars(project_path), project_path, url)

    def get_stars(self, project_path: str) -> int:
        try:
            resp = self._client.get(f"/projects/{encode_project_path(project_path)}")
        except httpx.HTTPError as exc:
            logger.warning("Request for GitLab project {} failed: {}", project_path, exc)
            return 0

        try:
            stars = resp.json()["star_count"]
        except (ValueError, KeyError, TypeError):
            stars = None
        if not isinstance(stars, int) or isinstance(stars, bool) or stars < 0:
            logger.warning("Could not extract star count for GitLab project {}", project_path)
            logger.warning("API Response: {}", resp.text)
            return 0
        return stars

    def close(self) -> None:
        self._client.close()
