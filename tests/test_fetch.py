"""Tests for HTTP probe and page fetch primitives."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Any, Iterator

import pytest
import requests

from mprobe.domain.models import FetchStatus
from mprobe.manga_loader import fetch


class DummyResponse:
    """Streaming response double with a fixed status and body."""

    def __init__(self, status_code: int = 200, chunks: tuple[bytes, ...] = ()) -> None:
        self.status_code = status_code
        self.chunks = chunks
        self.chunk_sizes: list[int] = []

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        self.chunk_sizes.append(chunk_size)
        yield from self.chunks

    def __enter__(self) -> DummyResponse:
        return self

    def __exit__(self, *args: object) -> None:
        return None


class DummySession:
    """Session double returning one configured response for every request."""

    def __init__(self, response: DummyResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _answer(self) -> DummyResponse:
        if self.error is not None:
            raise self.error
        return self.response

    def head(self, url: str, **kwargs: Any) -> DummyResponse:
        self.calls.append(("HEAD", url, kwargs))
        return self._answer()

    def get(self, url: str, stream: bool = False) -> DummyResponse:
        self.calls.append(("GET", url, {"stream": stream}))
        return self._answer()


def test_build_page_url_substitutes_all_parts() -> None:
    """Verify series, chapter and page land in the template."""
    url = fetch.build_page_url("one-piece", 12, 3)

    assert url == "https://img.lermanga.org/S/one-piece/capitulo-12/3.jpg"


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [(200, FetchStatus.OK), (204, FetchStatus.OK), (404, FetchStatus.NOT_FOUND)],
)
def test_probe_maps_status_codes(status_code: int, expected: FetchStatus) -> None:
    """Verify probe uses HEAD and maps success and 404."""
    session = DummySession(DummyResponse(status_code))

    result = fetch.probe(session, "https://example.test/1.jpg")

    assert result.status is expected
    assert result.error is None
    assert session.calls == [("HEAD", "https://example.test/1.jpg", {"allow_redirects": True})]


def test_probe_reports_server_errors() -> None:
    """Verify non-404 error statuses are reported as errors, not absence."""
    result = fetch.probe(DummySession(DummyResponse(500)), "https://example.test/1.jpg")

    assert result.status is FetchStatus.ERROR
    assert isinstance(result.error, requests.HTTPError)


def test_probe_reports_transport_errors() -> None:
    """Verify transport exceptions are attached to the error result."""
    error = requests.Timeout("slow")

    result = fetch.probe(DummySession(error=error), "https://example.test/1.jpg")

    assert result.status is FetchStatus.ERROR
    assert result.error is error


def test_fetch_to_file_writes_body_verbatim(tmp_path: Path) -> None:
    """Verify the body is streamed byte for byte and empty chunks are ignored."""
    response = DummyResponse(200, (b"\x89PNG", b"", b"\x00\x01"))
    session = DummySession(response)
    destination = tmp_path / "1.jpg"

    result = fetch.fetch_to_file(session, "https://example.test/1.jpg", destination, chunk_size=8)

    assert result.status is FetchStatus.OK
    assert destination.read_bytes() == b"\x89PNG\x00\x01"
    assert response.chunk_sizes == [8]
    assert session.calls == [("GET", "https://example.test/1.jpg", {"stream": True})]
    assert not (tmp_path / "1.jpg.part").exists()


def test_fetch_to_file_not_found_writes_nothing(tmp_path: Path) -> None:
    """Verify a 404 leaves no file behind."""
    destination = tmp_path / "4.jpg"

    result = fetch.fetch_to_file(DummySession(DummyResponse(404)), "https://example.test/4.jpg", destination)

    assert result.status is FetchStatus.NOT_FOUND
    assert list(tmp_path.iterdir()) == []


def test_fetch_to_file_error_cleans_partial_file(tmp_path: Path) -> None:
    """Verify a broken stream does not leave a partial page."""

    class BrokenResponse(DummyResponse):
        def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
            yield b"half"
            raise requests.ConnectionError("reset")

    destination = tmp_path / "2.jpg"

    result = fetch.fetch_to_file(DummySession(BrokenResponse(200)), "https://example.test/2.jpg", destination)

    assert result.status is FetchStatus.ERROR
    assert isinstance(result.error, requests.ConnectionError)
    assert list(tmp_path.iterdir()) == []


def test_fetch_to_file_disk_error_cleans_partial_file(tmp_path: Path) -> None:
    """Verify a failing write propagates and removes the partial page."""

    class FullDiskResponse(DummyResponse):
        def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
            yield b"half"
            raise OSError(errno.ENOSPC, "No space left on device")

    destination = tmp_path / "3.jpg"

    with pytest.raises(OSError) as excinfo:
        fetch.fetch_to_file(DummySession(FullDiskResponse(200)), "https://example.test/3.jpg", destination)

    assert excinfo.value.errno == errno.ENOSPC
    assert list(tmp_path.iterdir()) == []


def test_chapter_missing_probes_first_page() -> None:
    """Verify the chapter probe targets page 1 of the chapter."""
    session = DummySession(DummyResponse(404))

    assert fetch.chapter_missing(session, "demo", 7) is True
    assert session.calls == [("HEAD", fetch.build_page_url("demo", 7, 1), {"allow_redirects": True})]


def test_chapter_missing_false_when_present() -> None:
    assert fetch.chapter_missing(DummySession(DummyResponse(200)), "demo", 0) is False


def test_chapter_missing_raises_on_error() -> None:
    """Verify probe errors are fatal."""
    with pytest.raises(requests.HTTPError):
        fetch.chapter_missing(DummySession(DummyResponse(502)), "demo", 0)
