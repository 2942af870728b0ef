"""Typed protocol contracts shared across runtime components."""

from __future__ import annotations

from typing import Iterator, MutableMapping, Protocol


class ResponseLike(Protocol):
    """Minimal HTTP response contract used by fetch primitives."""

    status_code: int

    def raise_for_status(self) -> None:
        """Raise for non-successful HTTP responses."""

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        """Yield the response body in chunks."""

    def __enter__(self) -> ResponseLike:
        """Enter a streaming response context."""

    def __exit__(self, *args: object) -> None:
        """Release the underlying connection."""


class SessionLike(Protocol):
    """Minimal HTTP session contract used by the loader."""

    headers: MutableMapping[str, str]

    def get(self, url: str, stream: bool = False) -> ResponseLike:
        """Perform an HTTP GET request and return a response object."""

    def head(self, url: str, allow_redirects: bool = False) -> ResponseLike:
        """Perform an HTTP HEAD request and return a response object."""
