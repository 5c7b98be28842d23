from __future__ import annotations

import threading

from loguru import logger

from .app_constants import ANSWER_PROMPT
from .channel import LineChannel


class AnswerCache:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._answers: dict[str, str] = {}

    def get(self, label: str) -> str | None:
        with self._lock:
            return self._answers.get(label)

    def put(self, label: str, answer: str) -> None:
        with self._lock:
            self._answers[label] = answer

    def forget(self, label: str) -> None:
        with self._lock:
            self._answers.pop(label, None)

    def __contains__(self, label: object) -> bool:
        with self._lock:
            return label in self._answers


def ask_answer(channel: LineChannel, label: str) -> str:
    return channel.ask(ANSWER_PROMPT.format(label=label))


def get_answer(cache: AnswerCache, channel: LineChannel, label: str) -> str:
    cached = cache.get(label)
    if cached is not None:
        logger.debug("answers.hit label={}", label)
        return cached
    logger.debug("answers.miss label={}", label)
    answer = ask_answer(channel, label)
    cache.put(label, answer)
    return answer
