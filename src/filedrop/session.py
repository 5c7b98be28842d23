from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from datetime import tzinfo
from typing import Any, BinaryIO, TextIO

from loguru import logger

from .answers import AnswerCache, ask_answer, get_answer
from .channel import LineChannel
from .dirs import ensure_dir
from .parsing import parse_as
from .resolver import Resolver
from .settings import Settings


@dataclass
class _State:
    channel: LineChannel
    answers: AnswerCache
    resolver: Resolver
    zone: tzinfo | None


class Session:
    """Operator-backed source of answers and managed files.

    `Session()` is usable as is: stdin/stdout, the working directory as the
    managed root and the local time zone. The channel and the answer cache
    are set up on first use, exactly once, even when several threads race
    for it. The managed root is fixed for the session's lifetime.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._reader = reader
        self._writer = writer
        self._init_lock = threading.Lock()
        self._state: _State | None = None

    def _init(self) -> _State:
        state = self._state
        if state is not None:
            return state
        with self._init_lock:
            if self._state is None:
                channel = LineChannel(self._reader or sys.stdin, self._writer or sys.stdout)
                self._state = _State(
                    channel=channel,
                    answers=AnswerCache(),
                    resolver=Resolver(channel, self.settings.root, self.settings.max_retries),
                    zone=self.settings.zone(),
                )
                logger.debug("session.init root={} zone={}", self.settings.root or ".", self._state.zone or "local")
            return self._state

    @property
    def channel(self) -> LineChannel:
        return self._init().channel

    @property
    def answers(self) -> AnswerCache:
        return self._init().answers

    @property
    def resolver(self) -> Resolver:
        return self._init().resolver

    @property
    def zone(self) -> tzinfo | None:
        return self._init().zone

    def get_answer(self, label: str) -> str:
        return get_answer(self.answers, self.channel, label)

    def forget(self, label: str) -> None:
        self.answers.forget(label)

    def parse_as(self, raw: str, kind: Any) -> Any:
        return parse_as(raw, kind, self.zone)

    def var(self, label: str, kind: Any = str) -> Any:
        """Answer for `label` converted to `kind`.

        Only answers that parse are remembered, so a rejected answer is asked
        for again next time. Raises `ParseError` for a rejected answer.
        """
        cached = self.answers.get(label)
        if cached is not None:
            return self.parse_as(cached, kind)
        raw = ask_answer(self.channel, label)
        value = self.parse_as(raw, kind)
        self.answers.put(label, raw)
        return value

    def alert(self, message: str) -> None:
        self.channel.acknowledge(message)

    def managed_path(self, name: str) -> str:
        return self.resolver.managed_path(name)

    def open(self, name: str) -> BinaryIO:
        return self.resolver.open(name)

    def check(self, name: str) -> str:
        return self.resolver.check(name)

    def create(self, name: str) -> BinaryIO:
        return self.resolver.create(name)

    def copy_into(self, directory: str) -> str:
        return self.resolver.copy_into(directory)

    def check_dir(self, directory: str) -> list[str]:
        return self.resolver.check_dir(directory)

    def ensure_dir(self, path: str) -> None:
        ensure_dir(self.channel, path, self.settings.max_retries)
