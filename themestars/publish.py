from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from loguru import logger

Runner = Callable[[Sequence[str]], int]


def _run(cmd: Sequence[str]) -> int:
    return subprocess.run(list(cmd), check=False).returncode


class GitPublisher:
    """Commit and push the generated document.

    Every step runs even if an earlier one fails; failures are only logged.
    """

    def __init__(self, runner: Runner = _run) -> None:
        self._runner = runner

    def publish(self, path: str | Path, timestamp: str) -> bool:
        logger.info("Committing changes to Git…")
        steps = [
            ["git", "add", str(path)],
            ["git", "commit", "-m", f"Update theme stars - {timestamp}"],
            ["git", "push"],
        ]
        ok = True
        for cmd in steps:
            try:
                code = self._runner(cmd)
            except OSError as exc:
                logger.warning("`{}` could not be run: {}", " ".join(cmd[:2]), exc)
                ok = False
                continue
            if code != 0:
                logger.warning("`{}` exited with status {}", " ".join(cmd[:2]), code)
                ok = False

        if ok:
            logger.info("Changes committed and pushed to remote repository.")
        return ok
