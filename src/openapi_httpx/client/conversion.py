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
"""Conversion between the runtime request/response types and httpx's."""

from __future__ import annotations

from typing import Any
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

import httpx

from openapi_httpx.kernel.exceptions import InvalidRequestUrlException
from openapi_httpx.runtime.body import HttpBody, IterationBehavior
from openapi_httpx.runtime.types import CustomMethod, HeaderField, HeaderFields, HttpMethod, Method, Request, Response

# pchar plus "/" and "%", so existing escapes survive
_PATH_SAFE = "/%:@!$&'()*+,;=~"

_BODYLESS_STATUS_CODES = frozenset({204, 304})


def as_httpx_method(method: Method) -> str:
    """Return the method token httpx expects for *method*."""
    if isinstance(method, HttpMethod):
        return method.value
    if isinstance(method, CustomMethod):
        return method.token
    raise TypeError(f"Unsupported method type: {type(method).__name__}")


def _split_base_url(base_url: str) -> SplitResult:
    parts = urlsplit(base_url)
    if not parts.scheme or not parts.hostname:
        raise ValueError(f"Base URL is not absolute: {base_url!r}")
    if any(ch.isspace() for ch in parts.netloc):
        raise ValueError(f"Base URL authority contains whitespace: {parts.netloc!r}")
    # .port raises ValueError for a non-numeric or out-of-range port
    _ = parts.port
    return parts


def convert_request(request: Request, body: HttpBody | None, base_url: Any) -> httpx.Request:
    """Build the httpx request for *request* relative to *base_url*.

    Raises:
        InvalidRequestUrlException: The base URL is malformed or the combined
            URL cannot be parsed by httpx.
    """
    try:
        parts = _split_base_url(str(base_url))
    except ValueError as exc:
        raise InvalidRequestUrlException(request, base_url) from exc

    path = parts.path + quote(request.path, safe=_PATH_SAFE)
    try:
        url = httpx.URL(urlunsplit((parts.scheme, parts.netloc, path, request.query or "", "")))
    except httpx.InvalidURL as exc:
        raise InvalidRequestUrlException(request, base_url) from exc

    headers = [(header.name.lower(), header.value) for header in request.header_fields]

    content: HttpBody | None = None
    if body is not None:
        content = body
        if body.length is not None and "content-length" not in request.header_fields:
            headers.append(("content-length", str(body.length)))

    return httpx.Request(as_httpx_method(request.method), url, headers=headers, content=content)


def response_body_expected(method: Method, status_code: int) -> bool:
    """Whether a response to *method* with *status_code* carries a body."""
    if method is HttpMethod.HEAD:
        return False
    return status_code not in _BODYLESS_STATUS_CODES


def _content_length(response: httpx.Response) -> int | None:
    if "content-encoding" in response.headers:
        return None
    value = response.headers.get("content-length")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def convert_response(
    response: httpx.Response,
    request_method: Method,
) -> tuple[Response, HttpBody | None]:
    """Build the runtime response and a lazy body handle from an httpx response.

    When no body is expected the httpx response is closed and the body is
    ``None``. Otherwise the body streams from the still-open response and
    closes it once fully read or on ``HttpBody.aclose()``.
    """
    header_fields = HeaderFields(HeaderField(name, value) for name, value in response.headers.multi_items())
    converted = Response(status_code=response.status_code, header_fields=header_fields)

    if not response_body_expected(request_method, response.status_code):
        await response.aclose()
        return converted, None

    body = HttpBody(
        response.aiter_bytes(),
        length=_content_length(response),
        iteration_behavior=IterationBehavior.SINGLE,
        on_close=response.aclose,
    )
    return converted, body
