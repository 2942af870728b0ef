"""Immutable run models shared between the loader and CLI layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FetchStatus(Enum):
    """Outcome kinds of a single network operation."""
    OK = "ok"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Explicit result of a probe or page fetch, switched on by callers."""

    status: FetchStatus
    error: Exception | None = None

    @classmethod
    def ok(cls) -> FetchResult:
        return cls(FetchStatus.OK)

    @classmethod
    def not_found(cls) -> FetchResult:
        return cls(FetchStatus.NOT_FOUND)

    @classmethod
    def failed(cls, error: Exception) -> FetchResult:
        return cls(FetchStatus.ERROR, error)

    def raise_for_error(self) -> None:
        """Re-raise the attached transport error, if any."""
        if self.status is FetchStatus.ERROR and self.error is not None:
            raise self.error


@dataclass(frozen=True, slots=True)
class DownloadSettings:
    """Resolved runtime settings for one download run."""

    download_root: Path
    max_delay: float = 1.0
    chunk_size: int = 64 * 1024


@dataclass(frozen=True, slots=True)
class ChapterRecord:
    """Result of one completed chapter page loop."""

    pages: int
    directory: Path

    @property
    def stored_pages(self) -> int:
        """Return the number of pages present on disk, excluding the terminating miss."""
        return max(self.pages - 1, 0)


@dataclass(slots=True)
class RunResult:
    """Series identifier plus the ordered chapter records of one run."""

    series: str
    chapters: dict[int, ChapterRecord] = field(default_factory=dict)

    def record(self, chapter: int, record: ChapterRecord) -> None:
        """Store the record of a finished chapter."""
        self.chapters[chapter] = record

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    @property
    def total_pages(self) -> int:
        return sum(record.stored_pages for record in self.chapters.values())
