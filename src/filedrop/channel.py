from __future__ import annotations

from typing import TextIO

from loguru import logger

from .errors import ChannelError


def strip_line(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    return line.replace("\r", "")


def unquote(text: str, quote: str = '"') -> str:
    if len(text) > 2 and text[0] == quote and text[-1] == quote:
        return text[1:-1]
    return text


class LineChannel:
    """Operator channel: prompts go to `writer`, answers come from `reader`.

    Every read blocks for exactly one newline-terminated line. A stream that
    ends before a terminator is a `ChannelError`.
    """

    def __init__(self, reader: TextIO, writer: TextIO) -> None:
        self.reader = reader
        self.writer = writer

    def write(self, text: str) -> None:
        self.writer.write(text)
        self.writer.flush()

    def read_line(self) -> str:
        try:
            line = self.reader.readline()
        except (OSError, ValueError) as exc:
            raise ChannelError(f"cannot read operator input: {exc}") from exc
        if not line.endswith("\n"):
            logger.debug("channel.eof partial={!r}", line)
            raise ChannelError("operator input ended")
        return strip_line(line)

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        return self.read_line()

    def acknowledge(self, message: str) -> None:
        self.ask(message)
