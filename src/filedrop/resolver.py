from __future__ import annotations

import os
import shutil
from typing import BinaryIO

from loguru import logger

from .app_constants import (
    COPY_PROMPT,
    DIR_CREATED_ALERT,
    NOT_FOUND_PROMPT,
    QUOTE_CHAR,
    RETRY_ALERT,
    SOURCE_RETRY_PROMPT,
)
from .channel import LineChannel, unquote
from .dirs import ensure_dir, retries_exhausted
from .errors import DirectoryError, FileImportError


SEPARATORS = os.sep + (os.altsep or "")


class Resolver:
    """Maps logical names into the managed root, importing missing files.

    Missing files are requested from the operator as a path to copy from.
    """

    def __init__(self, channel: LineChannel, root: str = "", max_retries: int | None = None) -> None:
        self.channel = channel
        self.root = root
        self.max_retries = max_retries

    def managed_path(self, name: str) -> str:
        if not self.root:
            return name
        # Absolute names still land under the root.
        return os.path.join(self.root, name.lstrip(SEPARATORS))

    def open(self, name: str) -> BinaryIO:
        path = self.managed_path(name)
        while True:
            try:
                return open(path, "rb")
            except FileNotFoundError:
                logger.debug("resolver.missing path={}", path)
            except OSError as exc:
                raise FileImportError(f"Cannot open `{path}`: {exc}") from exc
            self.import_file(path, NOT_FOUND_PROMPT.format(path=path))

    def check(self, name: str) -> str:
        path = self.managed_path(name)
        while not os.path.exists(path):
            logger.debug("resolver.missing path={}", path)
            self.import_file(path, NOT_FOUND_PROMPT.format(path=path))
        return path

    def create(self, name: str) -> BinaryIO:
        return self._create_path(self.managed_path(name))

    def copy_into(self, directory: str) -> str:
        source, source_path = self._open_source(COPY_PROMPT)
        with source:
            target = os.path.join(self.managed_path(directory), os.path.basename(source_path))
            self._copy(source, source_path, target)
        return target

    def check_dir(self, directory: str) -> list[str]:
        path = self.managed_path(directory) or os.curdir
        failures = 0
        while True:
            try:
                with os.scandir(path) as entries:
                    return sorted(os.path.join(path, entry.name) for entry in entries if not entry.is_dir())
            except FileNotFoundError:
                ensure_dir(self.channel, path, self.max_retries)
                self.channel.acknowledge(DIR_CREATED_ALERT.format(path=path))
            except OSError as exc:
                failures += 1
                if retries_exhausted(failures, self.max_retries):
                    raise DirectoryError(f"Cannot list `{path}`: {exc}") from exc
                self.channel.acknowledge(RETRY_ALERT.format(error=exc))

    def import_file(self, target: str, prompt: str) -> None:
        source, source_path = self._open_source(prompt)
        with source:
            self._copy(source, source_path, target)

    def _open_source(self, prompt: str) -> tuple[BinaryIO, str]:
        failures = 0
        while True:
            source_path = unquote(self.channel.ask(prompt), QUOTE_CHAR)
            try:
                return open(source_path, "rb"), source_path
            except OSError as exc:
                failures += 1
                logger.debug("resolver.source_failed path={} error={}", source_path, exc)
                if retries_exhausted(failures, self.max_retries):
                    raise FileImportError(f"Cannot open source `{source_path}`: {exc}") from exc
                prompt = SOURCE_RETRY_PROMPT.format(error=exc)

    def _create_path(self, path: str) -> BinaryIO:
        while True:
            try:
                return open(path, "wb")
            except FileNotFoundError as exc:
                parent = os.path.dirname(path)
                if not parent or os.path.isdir(parent):
                    raise FileImportError(f"Cannot create `{path}`: {exc}") from exc
                ensure_dir(self.channel, parent, self.max_retries)
            except OSError as exc:
                raise FileImportError(f"Cannot create `{path}`: {exc}") from exc

    def _copy(self, source: BinaryIO, source_path: str, target: str) -> None:
        logger.debug("resolver.import source={} target={}", source_path, target)
        dest = self._create_path(target)
        try:
            with dest:
                shutil.copyfileobj(source, dest)
        except OSError as exc:
            try:
                os.remove(target)
            except OSError as cleanup_exc:
                logger.warning("resolver.cleanup_failed target={} error={}", target, cleanup_exc)
            raise FileImportError(f"Cannot copy `{source_path}` to `{target}`: {exc}") from exc
