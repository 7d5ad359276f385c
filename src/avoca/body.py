r"""Implement the capture and replay of request bodies.

The body of a request is read once before the first attempt, and each
attempt gets its own independent view over the captured bytes. This
guarantees that every attempt sends exactly the same content.
"""

from __future__ import annotations

__all__ = ["Body", "capture_body", "replay_body"]

import io
import logging
from collections.abc import Iterable
from typing import IO, Union

from avoca.exceptions import BodyCaptureError

logger: logging.Logger = logging.getLogger(__name__)

Body = Union[bytes, bytearray, memoryview, str, IO[bytes], Iterable[bytes | str]]


def capture_body(body: Body | None) -> bytes | None:
    r"""Read the whole body and close the original source.

    Args:
        body: The request body. It can be ``None``, bytes-like, a string
            (encoded as UTF-8), a file-like object or an iterable of byte or
            text chunks. Text is encoded as UTF-8. File-like objects
            and iterables exposing a ``close`` method are closed once
            fully read.

    Returns:
        The captured bytes, or ``None`` if there is no body.

    Raises:
        BodyCaptureError: If reading or closing the body fails.
        TypeError: If the body type is not supported.

    Example:
        ```pycon
        >>> import io
        >>> from avoca.body import capture_body
        >>> capture_body(io.BytesIO(b'{"id": "me"}'))
        b'{"id": "me"}'
        >>> capture_body("abc")
        b'abc'
        >>> capture_body(None)

        ```
    """
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    if hasattr(body, "read"):
        return _read_and_close(body)
    if isinstance(body, Iterable):
        return _join_and_close(body)
    msg = f"Unsupported body type: {type(body).__qualname__}"
    raise TypeError(msg)


def replay_body(data: bytes | None) -> io.BytesIO | None:
    r"""Return a fresh readable view over captured body bytes.

    Each call returns a new stream with its own position, so reading or
    closing one view never affects another.

    Args:
        data: The bytes returned by ``capture_body``.

    Returns:
        A new stream over ``data``, or ``None`` if ``data`` is ``None``.

    Example:
        ```pycon
        >>> from avoca.body import replay_body
        >>> first, second = replay_body(b"abc"), replay_body(b"abc")
        >>> first.read()
        b'abc'
        >>> second.read()
        b'abc'
        >>> replay_body(None)

        ```
    """
    if data is None:
        return None
    return io.BytesIO(data)


def _read_and_close(body: IO[bytes]) -> bytes:
    try:
        data = body.read()
    except Exception as exc:
        raise BodyCaptureError(exc) from exc
    _close(body)
    if isinstance(data, str):
        data = data.encode("utf-8")
    logger.debug(f"Captured {len(data)} bytes of request body")
    return bytes(data)


def _join_and_close(body: Iterable[bytes | str]) -> bytes:
    try:
        data = b"".join(
            chunk.encode("utf-8") if isinstance(chunk, str) else chunk for chunk in body
        )
    except Exception as exc:
        raise BodyCaptureError(exc) from exc
    _close(body)
    logger.debug(f"Captured {len(data)} bytes of request body")
    return data


def _close(body: object) -> None:
    close = getattr(body, "close", None)
    if close is None:
        return
    try:
        close()
    except Exception as exc:
        raise BodyCaptureError(exc) from exc
