from __future__ import annotations

import os

from loguru import logger

from .app_constants import RETRY_ALERT
from .channel import LineChannel
from .errors import DirectoryError


def retries_exhausted(failures: int, max_retries: int | None) -> bool:
    return max_retries is not None and failures > max_retries


def ensure_dir(channel: LineChannel, path: str, max_retries: int | None = None) -> None:
    """Create `path` and its parents, leaving existing entries untouched.

    A failure is shown to the operator, who confirms before the next attempt.
    """
    if not path:
        return
    failures = 0
    while True:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as exc:
            failures += 1
            logger.debug("dirs.failed path={} attempt={} error={}", path, failures, exc)
            if retries_exhausted(failures, max_retries):
                raise DirectoryError(f"Cannot create directory `{path}`: {exc}") from exc
            channel.acknowledge(RETRY_ALERT.format(error=exc))
            continue
        logger.debug("dirs.ready path={}", path)
        return
