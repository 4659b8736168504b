from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import httpx
from loguru import logger

from themestars.config import Config
from themestars.github import GitHubClient
from themestars.gitlab import GitLabClient
from themestars.manifest import fetch_manifest, read_manifest
from themestars.publish import GitPublisher
from themestars.ranking import collect_records, rank
from themestars.render import format_timestamp, render_document, write_document


def cmd_update(
    config: Config,
    *,
    manifest_file: str | None = None,
    limit: int | None = None,
    publish: bool = True,
    publisher: GitPublisher | None = None,
    transport: httpx.BaseTransport | None = None,
    now: datetime | None = None,
) -> Path:
    """Rank every manifest repository by stars and write the markdown table."""
    timestamp = format_timestamp(now or datetime.now(timezone.utc))

    if manifest_file:
        logger.info("Reading themes list from {}…", manifest_file)
        lines = read_manifest(manifest_file)
    else:
        logger.info("Fetching Hugo themes list…")
        with httpx.Client(timeout=config.http_timeout, transport=transport) as client:
            lines = fetch_manifest(client, config.manifest_url)
    lines = [line for line in lines if line]
    logger.info("Found {} themes to process", len(lines))

    if limit is not None:
        lines = lines[:limit]
        logger.info("Limited to first {} themes", limit)

    if not config.github_token:
        logger.warning("GITHUB_TOKEN not set; using unauthenticated GitHub requests")

    github = GitHubClient(
        config.github_token, timeout=config.http_timeout, transport=transport
    )
    gitlab = GitLabClient(timeout=config.http_timeout, transport=transport)
    with github, gitlab:
        result = collect_records(lines, github, gitlab)

    logger.info("Sorting themes by star count…")
    ranked = rank(result.records)
    output = write_document(config.output_file, render_document(ranked, timestamp))
    print(
        f"Done! {len(ranked)} repositories ranked, {result.skipped} skipped. "
        f"Output written to {output}"
    )

    if publish:
        (publisher or GitPublisher()).publish(output, timestamp)
    return output


class _InterceptHandler(logging.Handler):
    """Route stdlib logging (httpx, httpcore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _setup_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> None:
    _setup_logging()

    parser = argparse.ArgumentParser(
        prog="themestars",
        description="Rank Hugo theme repositories by GitHub/GitLab stars",
    )
    sub = parser.add_subparsers(dest="command")

    update_p = sub.add_parser(
        "update", help="Fetch star counts and regenerate the markdown list"
    )
    update_p.add_argument(
        "--env-file",
        default=".env.local",
        help="dotenv file to load before reading the environment (default: .env.local)",
    )
    update_p.add_argument(
        "--output",
        default=None,
        help="Markdown file to write (default: env OUTPUT_FILE or README.md)",
    )
    update_p.add_argument(
        "--manifest-url",
        default=None,
        help="URL of the newline-delimited repository list",
    )
    update_p.add_argument(
        "--manifest-file",
        default=None,
        help="Read the repository list from a local file instead of downloading it",
    )
    update_p.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Only process the first N themes (useful for testing)",
    )
    update_p.add_argument(
        "--no-publish",
        action="store_true",
        help="Write the file but do not git commit and push it",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = Config.from_env(args.env_file)
        _setup_logging(config.log_level)
    except ValueError as exc:
        _setup_logging()
        logger.error("Invalid configuration: {}", exc)
        sys.exit(1)

    if args.output:
        config.output_file = args.output
    if args.manifest_url:
        config.manifest_url = args.manifest_url

    if args.command == "update":
        cmd_update(
            config,
            manifest_file=args.manifest_file,
            limit=args.limit,
            publish=not args.no_publish,
        )
