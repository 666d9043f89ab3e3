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
"""openapi-httpx client: httpx-backed transport for generated API clients."""

from openapi_httpx.client.adapters.httpx_adapter import HttpxRequestSender
from openapi_httpx.client.conversion import (
    as_httpx_method,
    convert_request,
    convert_response,
    response_body_expected,
)
from openapi_httpx.client.ports.outbound import HttpRequestSender
from openapi_httpx.client.transport import Configuration, HttpxClientTransport

__all__ = [
    "Configuration",
    "HttpRequestSender",
    "HttpxClientTransport",
    "HttpxRequestSender",
    "as_httpx_method",
    "convert_request",
    "convert_response",
    "response_body_expected",
]
