from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from loguru import logger

from themestars.models import AggregateResult, ProviderKind, StarRecord
from themestars.urls import classify


class Resolver(Protocol):
    def fetch_record(self, url: str) -> StarRecord: ...


def collect_records(
    lines: Iterable[str], github: Resolver, gitlab: Resolver
) -> AggregateResult:
    """Resolve every GitHub/GitLab manifest line to a StarRecord, in order."""
    urls = [line.strip() for line in lines if line.strip()]
    total = len(urls)
    result = AggregateResult()

    for url in urls:
        result.processed += 1
        kind = classify(url)
        if kind is ProviderKind.UNKNOWN:
            logger.info("Skipping non-GitHub/GitLab URL: {}", url)
            result.skipped += 1
            continue

        logger.info("Processing ({}/{}): {}", result.processed, total, url)
        resolver = github if kind is ProviderKind.GITHUB else gitlab
        result.records.append(resolver.fetch_record(url))

    logger.info(
        "Processed {} themes, skipped {} non-GitHub/GitLab URLs",
        result.processed,
        result.skipped,
    )
    return result


def rank(records: Iterable[StarRecord]) -> list[StarRecord]:
    """Sort by star count, highest first. Equal counts keep their input order."""
    return sorted(records, key=lambda r: r.stars, reverse=True)
