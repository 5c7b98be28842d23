from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from filedrop import Session, Settings  # noqa: E402


class ScriptedInput(io.StringIO):
    """Operator input that records how many lines were requested."""

    def __init__(self, *lines: str) -> None:
        super().__init__("".join(f"{line}\n" for line in lines))
        self.reads = 0

    def readline(self, size: int = -1) -> str:  # type: ignore[override]
        self.reads += 1
        return super().readline(size)


def make_session(
    root: Path | str = "", *lines: str, **settings: Any
) -> tuple[Session, ScriptedInput, io.StringIO]:
    reader = ScriptedInput(*lines)
    writer = io.StringIO()
    session = Session(Settings(root=str(root), **settings), reader=reader, writer=writer)
    return session, reader, writer
