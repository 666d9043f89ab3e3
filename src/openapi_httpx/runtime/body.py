# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""HttpBody: an asynchronous byte sequence for request and response bodies."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable
from enum import Enum
from typing import Any

from openapi_httpx.kernel.exceptions import TooManyBytesException, TooManyIterationsException


class IterationBehavior(Enum):
    """How many times the bytes of a body can be iterated."""

    SINGLE = "single"
    MULTIPLE = "multiple"


class HttpBody:
    """Request or response body, buffered or streamed.

    A ``bytes`` source has a known length and can be iterated any number of
    times. An async-iterable source (e.g. ``httpx.Response.aiter_bytes()``)
    is single-pass with an unknown length unless told otherwise.

    Usage::

        body = HttpBody(b'{"name": "Maria"}')
        data = await body.collect()

        async with response_body:
            async for chunk in response_body:
                ...
    """

    def __init__(
        self,
        source: bytes | AsyncIterable[bytes] = b"",
        *,
        length: int | None = None,
        iteration_behavior: IterationBehavior | None = None,
        on_close: Callable[[], Awaitable[Any]] | None = None,
    ) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._buffer: bytes | None = bytes(source)
            self._stream: AsyncIterable[bytes] | None = None
            self.length: int | None = len(self._buffer)
            self.iteration_behavior = iteration_behavior or IterationBehavior.MULTIPLE
        else:
            self._buffer = None
            self._stream = source
            self.length = length
            self.iteration_behavior = iteration_behavior or IterationBehavior.SINGLE
        self._on_close = on_close
        self._iterated = False
        self._closed = False

    def __aiter__(self) -> AsyncIterator[bytes]:
        if self.iteration_behavior is IterationBehavior.SINGLE and self._iterated:
            raise TooManyIterationsException()
        self._iterated = True
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[bytes]:
        if self._buffer is not None:
            if self._buffer:
                yield self._buffer
            return
        assert self._stream is not None
        async for chunk in self._stream:
            if chunk:
                yield chunk

    async def collect(self, up_to: int | None = None) -> bytes:
        """Buffer the whole body into memory.

        Args:
            up_to: Maximum number of bytes accepted, ``None`` for no limit.

        Raises:
            TooManyBytesException: The body is longer than *up_to*. The
                byte source is closed before this is raised.
            TooManyIterationsException: A single-pass body was already consumed.
        """
        buffer = bytearray()
        try:
            if up_to is not None and self.length is not None and self.length > up_to:
                raise TooManyBytesException(up_to)
            async for chunk in self:
                buffer.extend(chunk)
                if up_to is not None and len(buffer) > up_to:
                    raise TooManyBytesException(up_to)
        except TooManyBytesException:
            await self.aclose()
            raise
        return bytes(buffer)

    async def aclose(self) -> None:
        """Release the underlying byte source. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._on_close is not None:
            await self._on_close()

    async def __aenter__(self) -> HttpBody:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        length = self.length if self.length is not None else "unknown"
        return f"HttpBody(length={length}, iteration_behavior={self.iteration_behavior.value})"
