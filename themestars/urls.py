from __future__ import annotations

import re

from themestars.models import ProviderKind

_SCHEME_RE = re.compile(r"^https?://")
_GITHUB_RE = re.compile(r"github\.com/([^/]+)/([^/]+)")
_GITLAB_RE = re.compile(r"gitlab\.com/(.+)$")


def classify(url: str) -> ProviderKind:
    """Guess the hosting provider from a plain substring match."""
    if "github.com" in url:
        return ProviderKind.GITHUB
    if "gitlab.com" in url:
        return ProviderKind.GITLAB
    return ProviderKind.UNKNOWN


def ensure_scheme(url: str) -> str:
    if _SCHEME_RE.match(url):
        return url
    return f"https://{url}"


def _strip_query(value: str) -> str:
    return value.split("?", 1)[0].split("#", 1)[0]


def _strip_git_suffix(value: str) -> str:
    return value[: -len(".git")] if value.endswith(".git") else value


def extract_owner_repo(url: str) -> tuple[str, str] | None:
    """Return ``(owner, repo)`` from a GitHub URL, or None if it has no repo path.

    Subpaths (``/tree/main``), a ``.git`` suffix, query strings and fragments
    are dropped so the result can be used directly as an API key.
    """
    match = _GITHUB_RE.search(url)
    if not match:
        return None
    owner = match.group(1)
    repo = _strip_git_suffix(_strip_query(match.group(2)))
    repo = repo.split("/", 1)[0]
    if not repo:
        return None
    return owner, repo


def extract_project_path(url: str) -> str | None:
    """Return the full ``namespace/.../project`` path of a GitLab URL."""
    match = _GITLAB_RE.search(url)
    if not match:
        return None
    path = _strip_query(match.group(1))
    # GitLab separates the project path from files, trees and MRs with "/-/"
    path = path.split("/-/", 1)[0].rstrip("/")
    path = _strip_git_suffix(path)
    return path or None


def encode_project_path(path: str) -> str:
    return path.replace("/", "%2F")


def normalize(url: str) -> str:
    """Canonical repository link used in the rendered table."""
    owner_repo = extract_owner_repo(url)
    if owner_repo:
        owner, repo = owner_repo
        return f"https://github.com/{owner}/{repo}"

    project_path = extract_project_path(url)
    if project_path:
        return f"https://gitlab.com/{project_path}"

    return url
