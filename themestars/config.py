from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from themestars.manifest import DEFAULT_MANIFEST_URL


def _parse_timeout(raw: str) -> float | None:
    if raw.strip().lower() in ("", "none"):
        return None
    value = float(raw)
    if value < 0:
        raise ValueError(f"HTTP_TIMEOUT cannot be negative, got {raw!r}")
    if value == 0:
        return None
    return value


@dataclass
class Config:
    github_token: str = ""
    manifest_url: str = DEFAULT_MANIFEST_URL
    output_file: str = "README.md"
    http_timeout: float | None = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str = ".env.local") -> Config:
        load_dotenv(env_file)

        return cls(
            github_token=os.environ.get("GITHUB_TOKEN", ""),
            manifest_url=os.environ.get("MANIFEST_URL", DEFAULT_MANIFEST_URL),
            output_file=os.environ.get("OUTPUT_FILE", "README.md"),
            http_timeout=_parse_timeout(os.environ.get("HTTP_TIMEOUT", "30")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
