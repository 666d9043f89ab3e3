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
"""Exception hierarchy for openapi-httpx.

Every exception raised by this package inherits from OpenApiHttpxException.
Errors raised by httpx itself (connection failures, timeouts, protocol
violations) are never wrapped and surface as their own httpx types.

Categories:
- TransportException: the adapter could not build the outgoing request
- BodyException: an HttpBody was consumed in a way it does not support
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from openapi_httpx.runtime.types import Request


# =============================================================================
# Base Exception
# =============================================================================


class OpenApiHttpxException(Exception):
    """Base exception for all openapi-httpx errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_REQUEST_URL").
        context: Arbitrary key-value pairs for diagnostics.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Transport Exceptions
# =============================================================================


class TransportException(OpenApiHttpxException):
    """Failures raised by the transport adapter itself."""


class InvalidRequestUrlException(TransportException):
    """The base URL and request path/query do not form a valid URL."""

    def __init__(self, request: Request, base_url: Any) -> None:
        query = request.query if request.query is not None else "<nil>"
        super().__init__(
            f"Invalid request URL from request path: {request.path}, "
            f"query: {query} relative to base URL: {base_url}",
            code="INVALID_REQUEST_URL",
            context={"path": request.path, "query": request.query, "base_url": str(base_url)},
        )
        self.request = request
        self.base_url = base_url


# =============================================================================
# Body Exceptions
# =============================================================================


class BodyException(OpenApiHttpxException):
    """An HttpBody was consumed in a way it does not support."""


class TooManyIterationsException(BodyException):
    """A single-iteration body was iterated more than once."""

    def __init__(self) -> None:
        super().__init__(
            "HttpBody can only be iterated once",
            code="BODY_TOO_MANY_ITERATIONS",
        )


class TooManyBytesException(BodyException):
    """Collecting a body exceeded the caller's byte limit."""

    def __init__(self, max_bytes: int) -> None:
        super().__init__(
            f"HttpBody contains more than the maximum allowed {max_bytes} bytes",
            code="BODY_TOO_MANY_BYTES",
            context={"max_bytes": max_bytes},
        )
        self.max_bytes = max_bytes
