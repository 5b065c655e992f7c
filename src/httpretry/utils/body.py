r"""Make request bodies replayable across attempts.

A request body can be a one-shot stream (a generator, a file, ...). The
retry executors read it fully into memory before the first attempt and
install a ``ReplayableByteStream`` over the captured bytes, so every
attempt sends the original content from offset zero.
"""

from __future__ import annotations

__all__ = ["ReplayableByteStream", "abuffer_request_body", "buffer_request_body"]

import io
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator

CHUNK_SIZE = 64 * 1024


class ReplayableByteStream(httpx.SyncByteStream, httpx.AsyncByteStream):
    """Seekable byte stream over an in-memory request body.

    Iterating the stream yields the bytes from the current position;
    ``rewind`` moves the position back to the start so the body can be
    sent again.

    Args:
        content: The captured request body.

    Example:
        ```pycon
        >>> from httpretry.utils.body import ReplayableByteStream
        >>> stream = ReplayableByteStream(b'{"key": "value"}')
        >>> b"".join(stream)
        b'{"key": "value"}'
        >>> b"".join(stream)
        b''
        >>> stream.rewind()
        >>> b"".join(stream)
        b'{"key": "value"}'

        ```
    """

    def __init__(self, content: bytes) -> None:
        self._buffer = io.BytesIO(content)

    def __iter__(self) -> Iterator[bytes]:
        while chunk := self._buffer.read(CHUNK_SIZE):
            yield chunk

    async def __aiter__(self) -> AsyncIterator[bytes]:
        while chunk := self._buffer.read(CHUNK_SIZE):
            yield chunk

    def getvalue(self) -> bytes:
        """Return the whole body, independently of the position."""
        return self._buffer.getvalue()

    def rewind(self) -> None:
        """Move the read position back to the start of the body."""
        self._buffer.seek(0)


def buffer_request_body(request: httpx.Request) -> ReplayableByteStream:
    """Read the body of a request into memory and make it replayable.

    The request stream is replaced by a ``ReplayableByteStream`` over
    the captured bytes. A request without a body gets an empty stream.

    Args:
        request: The request to prepare. It is modified in place.

    Returns:
        The stream installed on the request.

    Example:
        ```pycon
        >>> import httpx
        >>> from httpretry.utils.body import buffer_request_body
        >>> request = httpx.Request("POST", "https://example.com", content=iter([b"a", b"b"]))
        >>> stream = buffer_request_body(request)
        >>> stream.getvalue()
        b'ab'

        ```
    """
    if isinstance(request.stream, ReplayableByteStream):
        return request.stream
    stream = ReplayableByteStream(request.read())
    request.stream = stream
    return stream


async def abuffer_request_body(request: httpx.Request) -> ReplayableByteStream:
    """Asynchronous counterpart of ``buffer_request_body``.

    Args:
        request: The request to prepare. It is modified in place.

    Returns:
        The stream installed on the request.
    """
    if isinstance(request.stream, ReplayableByteStream):
        return request.stream
    stream = ReplayableByteStream(await request.aread())
    request.stream = stream
    return stream
