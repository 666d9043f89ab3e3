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
"""Client transport that performs HTTP operations through httpx."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import httpx

from openapi_httpx.client.adapters.httpx_adapter import HttpxRequestSender
from openapi_httpx.client.conversion import convert_request, convert_response
from openapi_httpx.client.ports.outbound import HttpRequestSender
from openapi_httpx.config.properties.transport import TransportProperties
from openapi_httpx.core.config import Config
from openapi_httpx.runtime.body import HttpBody
from openapi_httpx.runtime.types import Request, Response

logger = logging.getLogger("openapi_httpx.transport")


@dataclass
class Configuration:
    """Configuration values for :class:`HttpxClientTransport`.

    The client is owned by the caller: the transport never opens or closes it.
    """

    client: httpx.AsyncClient
    timeout: timedelta = field(default_factory=lambda: timedelta(minutes=1))

    @classmethod
    def from_config(cls, client: httpx.AsyncClient, config: Config) -> Configuration:
        """Create a configuration with values bound from ``openapi_httpx.transport``."""
        properties = config.bind(TransportProperties)
        return cls(client=client, timeout=properties.timeout_delta)


class HttpxClientTransport:
    """Client transport backed by an ``httpx.AsyncClient``.

    Usage:

        async with httpx.AsyncClient() as http_client:
            transport = HttpxClientTransport(Configuration(client=http_client))
            response, body = await transport.send(
                Request(path="/health", method=HttpMethod.GET),
                None,
                "https://api.example.com/v1",
                "checkHealth",
            )
            if body is not None:
                data = await body.collect()
    """

    def __init__(
        self,
        configuration: Configuration,
        request_sender: HttpRequestSender | None = None,
    ) -> None:
        self.configuration = configuration
        self._request_sender: HttpRequestSender = request_sender or HttpxRequestSender()

    async def send(
        self,
        request: Request,
        body: HttpBody | None,
        base_url: Any,
        operation_id: str,
    ) -> tuple[Response, HttpBody | None]:
        """Send *request* to the server at *base_url*.

        Args:
            request: The request to send.
            body: The request body, if any.
            base_url: Server URL the request path is appended to.
            operation_id: Identifier of the API operation, used in log events only.

        Raises:
            InvalidRequestUrlException: The request URL could not be composed.
            httpx.HTTPError: Raised by httpx, passed through unchanged.
        """
        http_request = convert_request(request, body, base_url)
        logger.debug(
            "transport_request",
            extra={
                "operation_id": operation_id,
                "method": http_request.method,
                "url": str(http_request.url),
            },
        )
        http_response = await self._invoke_session(http_request)
        response, response_body = await convert_response(http_response, request.method)
        logger.debug(
            "transport_response",
            extra={
                "operation_id": operation_id,
                "status_code": response.status_code,
                "has_body": response_body is not None,
            },
        )
        return response, response_body

    async def _invoke_session(self, request: httpx.Request) -> httpx.Response:
        return await self._request_sender.send(
            request,
            self.configuration.client,
            self.configuration.timeout,
        )
