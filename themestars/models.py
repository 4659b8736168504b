from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

UNKNOWN_IDENTIFIER = "Unknown"


class ProviderKind(Enum):
    GITHUB = "github"
    GITLAB = "gitlab"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StarRecord:
    """Star count of one manifest entry."""

    stars: int
    identifier: str
    url: str

    def __post_init__(self) -> None:
        if self.stars < 0:
            raise ValueError(f"Star count cannot be negative: {self.stars}")

    @classmethod
    def unresolved(cls, url: str) -> StarRecord:
        """Record for a URL whose repository path could not be parsed."""
        return cls(stars=0, identifier=UNKNOWN_IDENTIFIER, url=url)


@dataclass
class AggregateResult:
    records: list[StarRecord] = field(default_factory=list)
    processed: int = 0
    skipped: int = 0
