"""HTTP primitives for probing and fetching single page images."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from mprobe.constants import BASE_URL, FIRST_PAGE
from mprobe.domain.models import FetchResult, FetchStatus
from mprobe.types import SessionLike

log = logging.getLogger(__name__)

NOT_FOUND_STATUS = 404


def build_page_url(series: str, chapter: int, page: int) -> str:
    """Substitute series, chapter and page into the page URL template."""
    return BASE_URL.format(manga=series, chapter=chapter, picture=page)


def probe(session: SessionLike, url: str) -> FetchResult:
    """
    Check whether ``url`` exists without transferring its body.

    Redirects are followed, as for the page GET.

    A 404 answer is reported as ``NOT_FOUND``. Any other HTTP error status
    or transport failure is reported as ``ERROR`` with the exception attached.
    """
    try:
        response = session.head(url, allow_redirects=True)
        if response.status_code == NOT_FOUND_STATUS:
            return FetchResult.not_found()
        response.raise_for_status()
    except requests.RequestException as exc:
        return FetchResult.failed(exc)
    return FetchResult.ok()


def fetch_to_file(
    session: SessionLike,
    url: str,
    destination: Path,
    chunk_size: int = 64 * 1024,
) -> FetchResult:
    """
    Stream ``url`` into ``destination`` byte for byte.

    The body lands in a sibling ``.part`` file first and is renamed onto
    ``destination`` once the transfer completed.
    """
    partial = destination.with_name(destination.name + ".part")
    try:
        with session.get(url, stream=True) as response:
            if response.status_code == NOT_FOUND_STATUS:
                return FetchResult.not_found()
            response.raise_for_status()
            with partial.open("wb") as handle:
                for chunk in response.iter_content(chunk_size=chunk_size):
                    if chunk:
                        handle.write(chunk)
        partial.replace(destination)
    except requests.RequestException as exc:
        partial.unlink(missing_ok=True)
        return FetchResult.failed(exc)
    except BaseException:
        partial.unlink(missing_ok=True)
        raise
    return FetchResult.ok()


def chapter_missing(session: SessionLike, series: str, chapter: int) -> bool:
    """
    Return whether ``chapter`` is absent, using its first page as witness.

    Raises the underlying ``requests`` exception for anything other than a
    plain 404.
    """
    url = build_page_url(series, chapter, FIRST_PAGE)
    result = probe(session, url)
    if result.status is FetchStatus.ERROR:
        log.error(f"Probe for chapter {chapter} failed: {url}")
        result.raise_for_error()
    return result.status is FetchStatus.NOT_FOUND
