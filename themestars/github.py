from __future__ import annotations

from types import TracebackType

import httpx
from loguru import logger

from themestars.models import StarRecord
from themestars.urls import ensure_scheme, extract_owner_repo

RATE_LIMIT_MESSAGE = "API rate limit exceeded"


class GitHubClient:
    def __init__(
        self,
        token: str = "",
        *,
        timeout: float | None = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/vnd.github+json"}
        if token:
            headers["Authorization"] = f"token {token}"
        self._client = httpx.Client(
            base_url="https://api.github.com",
            headers=headers,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    # -- context manager ---------------------------------------------------

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    # -- public API ---------------------------------------------------------

    def fetch_record(self, url: str) -> StarRecord:
        """Look up the star count of the repository behind ``url``.

        Never raises for remote failures: a rate-limited, malformed or failed
        response yields a record with zero stars and a logged warning.
        """
        url = ensure_scheme(url)
        owner_repo = extract_owner_repo(url)
        if owner_repo is None:
            logger.warning("Could not parse owner/repo from {}", url)
            return StarRecord.unresolved(url)

        owner, repo = owner_repo
        full_name = f"{owner}/{repo}"
        return StarRecord(self.get_stars(full_name), full_name, url)

    def get_stars(self, full_name: str) -> int:
        try:
            resp = self._client.get(f"/repos/{full_name}")
        except httpx.HTTPError as exc:
            logger.warning("Request for {} failed: {}", full_name, exc)
            return 0

        if RATE_LIMIT_MESSAGE in resp.text:
            logger.warning(
                "GitHub API rate limit exceeded while fetching {}. "
                "Please wait or use a token.",
                full_name,
            )
            return 0

        try:
            stars = resp.json()["stargazers_count"]
        except (ValueError, KeyError, TypeError):
            stars = None
        if not isinstance(stars, int) or isinstance(stars, bool) or stars < 0:
            logger.warning("Could not extract star count for {}", full_name)
            logger.warning("API Response: {}", resp.text)
            return 0
        return stars

    def close(self) -> None:
        self._client.close()
