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
"""Tests for HttpBody buffering, streaming and iteration limits."""

import pytest

from openapi_httpx.kernel.exceptions import TooManyBytesException, TooManyIterationsException
from openapi_httpx.runtime.body import HttpBody, IterationBehavior


async def _chunks(*parts: bytes):
    for part in parts:
        yield part


class TestBufferedBody:
    def test_bytes_source_has_known_length(self):
        body = HttpBody(b"[{}]")
        assert body.length == 4
        assert body.iteration_behavior is IterationBehavior.MULTIPLE

    @pytest.mark.asyncio
    async def test_collect_returns_same_bytes(self):
        assert await HttpBody(b'{"greeting": "Howdy"}').collect() == b'{"greeting": "Howdy"}'

    @pytest.mark.asyncio
    async def test_can_be_iterated_twice(self):
        body = HttpBody(b"abc")
        assert await body.collect() == b"abc"
        assert await body.collect() == b"abc"

    @pytest.mark.asyncio
    async def test_empty_body_yields_no_chunks(self):
        chunks = [chunk async for chunk in HttpBody()]
        assert chunks == []

    @pytest.mark.asyncio
    async def test_known_length_over_limit_fails_before_reading(self):
        with pytest.raises(TooManyBytesException) as exc_info:
            await HttpBody(b"0123456789").collect(up_to=5)
        assert exc_info.value.max_bytes == 5
        assert exc_info.value.code == "BODY_TOO_MANY_BYTES"

    @pytest.mark.asyncio
    async def test_limit_equal_to_length_is_accepted(self):
        assert await HttpBody(b"12345").collect(up_to=5) == b"12345"


class TestStreamedBody:
    def test_stream_defaults(self):
        body = HttpBody(_chunks(b"a"))
        assert body.length is None
        assert body.iteration_behavior is IterationBehavior.SINGLE

    @pytest.mark.asyncio
    async def test_collect_joins_chunks(self):
        body = HttpBody(_chunks(b"hello ", b"", b"world"), length=11)
        assert await body.collect() == b"hello world"

    @pytest.mark.asyncio
    async def test_second_iteration_fails(self):
        body = HttpBody(_chunks(b"once"))
        await body.collect()
        with pytest.raises(TooManyIterationsException):
            await body.collect()

    @pytest.mark.asyncio
    async def test_unknown_length_over_limit_fails_while_reading(self):
        body = HttpBody(_chunks(b"1234", b"5678"))
        with pytest.raises(TooManyBytesException):
            await body.collect(up_to=6)

    @pytest.mark.asyncio
    async def test_multiple_behavior_allows_reiteration_of_reusable_source(self):
        class Reusable:
            def __aiter__(self):
                return _chunks(b"x", b"y")

        body = HttpBody(Reusable(), iteration_behavior=IterationBehavior.MULTIPLE)
        assert await body.collect() == b"xy"
        assert await body.collect() == b"xy"


class TestClose:
    @pytest.mark.asyncio
    async def test_aclose_invokes_callback_once(self):
        calls = []

        async def on_close():
            calls.append(True)

        body = HttpBody(_chunks(b"data"), on_close=on_close)
        await body.aclose()
        await body.aclose()
        assert calls == [True]

    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        calls = []

        async def on_close():
            calls.append(True)

        async with HttpBody(_chunks(b"data"), on_close=on_close) as body:
            assert await body.collect() == b"data"
        assert calls == [True]

    @pytest.mark.asyncio
    async def test_byte_limit_while_reading_closes_source(self):
        calls = []

        async def on_close():
            calls.append(True)

        body = HttpBody(_chunks(b"1234", b"5678"), on_close=on_close)
        with pytest.raises(TooManyBytesException):
            await body.collect(up_to=6)
        assert calls == [True]

    @pytest.mark.asyncio
    async def test_byte_limit_on_known_length_closes_source(self):
        calls = []

        async def on_close():
            calls.append(True)

        body = HttpBody(_chunks(b"1234", b"5678"), length=8, on_close=on_close)
        with pytest.raises(TooManyBytesException):
            await body.collect(up_to=4)
        assert calls == [True]

    @pytest.mark.asyncio
    async def test_collect_within_limit_leaves_source_open(self):
        calls = []

        async def on_close():
            calls.append(True)

        body = HttpBody(_chunks(b"1234"), length=4, on_close=on_close)
        assert await body.collect(up_to=4) == b"1234"
        assert calls == []

    def test_repr(self):
        assert repr(HttpBody(b"ab")) == "HttpBody(length=2, iteration_behavior=multiple)"
        assert repr(HttpBody(_chunks())) == "HttpBody(length=unknown, iteration_behavior=single)"
