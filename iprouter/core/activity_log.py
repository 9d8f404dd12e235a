"""
Append-only activity log.

The router writes one line per decision-producing operation (``ADD``, ``DEL``,
``FWD``, ``DROP``) to an injected sink. The sink needs a single ``append``
method, so tests can use :class:`MemoryActivityLog` while the console entry
point opens a :class:`FileActivityLog` once for the whole session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Protocol, TextIO

from loguru import logger

from iprouter.datastructures.type_aliases import LogLine


class ActivityEventKind(StrEnum):
    ADD = "ADD"
    DEL = "DEL"
    FWD = "FWD"
    DROP = "DROP"


@dataclass(frozen=True, slots=True)
class ActivityRecord:
    kind: ActivityEventKind
    detail: str

    def to_line(self) -> LogLine:
        return f"{self.kind} {self.detail}"


class ActivityLogSink(Protocol):
    def append(self, line: LogLine) -> None: ...


@dataclass(slots=True)
class MemoryActivityLog:
    """In-memory sink that keeps every appended line."""

    lines: list[LogLine] = field(default_factory=list)

    def append(self, line: LogLine) -> None:
        self.lines.append(line)


@dataclass(eq=False, slots=True)
class FileActivityLog:
    """File sink opened once in append mode and flushed after every line."""

    path: Path
    _handle: TextIO | None = None

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.path.open("a", encoding="utf-8")
        logger.debug("Activity log opened: path={}", self.path)

    @property
    def closed(self) -> bool:
        return self._handle is None

    def append(self, line: LogLine) -> None:
        if self._handle is None:
            raise ValueError(f"Activity log {self.path} is closed")
        self._handle.write(f"{line}\n")
        self._handle.flush()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            logger.debug("Activity log closed: path={}", self.path)

    def __enter__(self) -> FileActivityLog:
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()
