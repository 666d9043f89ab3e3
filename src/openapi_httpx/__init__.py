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
"""openapi-httpx: httpx client transport for generated OpenAPI clients."""

from openapi_httpx.client import Configuration, HttpRequestSender, HttpxClientTransport, HttpxRequestSender
from openapi_httpx.kernel.exceptions import (
    BodyException,
    InvalidRequestUrlException,
    OpenApiHttpxException,
    TooManyBytesException,
    TooManyIterationsException,
    TransportException,
)
from openapi_httpx.runtime import (
    ClientTransport,
    CustomMethod,
    HeaderField,
    HeaderFields,
    HttpBody,
    HttpMethod,
    IterationBehavior,
    Method,
    Request,
    Response,
    parse_method,
)

__version__ = "0.1.0"

__all__ = [
    "BodyException",
    "ClientTransport",
    "Configuration",
    "CustomMethod",
    "HeaderField",
    "HeaderFields",
    "HttpBody",
    "HttpMethod",
    "HttpRequestSender",
    "HttpxClientTransport",
    "HttpxRequestSender",
    "InvalidRequestUrlException",
    "IterationBehavior",
    "Method",
    "OpenApiHttpxException",
    "Request",
    "Response",
    "TooManyBytesException",
    "TooManyIterationsException",
    "TransportException",
    "__version__",
    "parse_method",
]
