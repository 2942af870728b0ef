"""Chapter enumeration and per-chapter page download loops."""

from __future__ import annotations

import logging
import random
import time
from itertools import count
from pathlib import Path
from typing import Callable, Iterator

from mprobe.constants import FIRST_CHAPTER, FIRST_PAGE
from mprobe.domain.models import ChapterRecord, DownloadSettings, FetchStatus, RunResult
from mprobe.manga_loader.fetch import build_page_url, chapter_missing, fetch_to_file
from mprobe.manga_loader.filesystem import (
    chapter_directory,
    ensure_directory,
    page_path,
    series_directory,
)
from mprobe.types import SessionLike

log = logging.getLogger(__name__)


def jitter_delay(
    max_delay: float,
    sleep: Callable[[float], None] = time.sleep,
    uniform: Callable[[float, float], float] = random.uniform,
) -> float:
    """Sleep a uniformly distributed delay between 0 and ``max_delay`` seconds."""
    delay = uniform(0, max_delay) if max_delay > 0 else 0.0
    if delay:
        sleep(delay)
    return delay


def download_page(
    session: SessionLike,
    series: str,
    chapter: int,
    page: int,
    chapter_dir: Path,
    settings: DownloadSettings,
) -> bool:
    """
    Download one page into ``chapter_dir``.

    Returns True when the page does not exist remotely, which ends the
    chapter. A page already on disk is skipped without contacting the remote.
    """
    destination = page_path(chapter_dir, page)
    if destination.exists():
        log.info(f"Skip page {page} of chapter {chapter}, already downloaded")
        return False

    url = build_page_url(series, chapter, page)
    result = fetch_to_file(session, url, destination, settings.chunk_size)

    if result.status is FetchStatus.NOT_FOUND:
        log.debug(f"Page {page} of chapter {chapter} not found: {url}")
        return True
    if result.status is FetchStatus.ERROR:
        log.error(f"Download of page {page} of chapter {chapter} failed: {url}")
        result.raise_for_error()

    log.info(f"Downloaded page {page} of chapter {chapter}")
    return False


def download_chapter(
    session: SessionLike,
    series: str,
    chapter: int,
    chapter_dir: Path,
    settings: DownloadSettings,
) -> ChapterRecord:
    """
    Download consecutive pages of ``chapter`` until the first missing one.

    The page count of the returned record includes the terminating miss.
    """
    for page in count(FIRST_PAGE):
        jitter_delay(settings.max_delay)
        if download_page(session, series, chapter, page, chapter_dir, settings):
            return ChapterRecord(pages=page, directory=chapter_dir)


def iter_chapters(
    session: SessionLike,
    series: str,
    settings: DownloadSettings,
) -> Iterator[int]:
    """Yield chapter indices from 0 upward while the remote has them."""
    for chapter in count(FIRST_CHAPTER):
        jitter_delay(settings.max_delay)
        if chapter_missing(session, series, chapter):
            log.debug(f"Chapter {chapter} not found, stopping enumeration")
            return
        yield chapter


def download_series(
    session: SessionLike,
    series: str,
    settings: DownloadSettings,
) -> RunResult:
    """
    Discover and download every chapter of ``series``.

    Any fatal error propagates unchanged; chapters completed before the
    failure are not reported.
    """
    log.info(f"Initialized download for '{series}'")
    series_dir = ensure_directory(series_directory(settings.download_root, series))
    result = RunResult(series=series)

    for chapter in iter_chapters(session, series, settings):
        chapter_dir = ensure_directory(chapter_directory(series_dir, chapter))
        record = download_chapter(session, series, chapter, chapter_dir, settings)
        result.record(chapter, record)
        log.info(f"    Chapter {chapter} done: {record.stored_pages} page(s) in '{chapter_dir}'")

    return result
