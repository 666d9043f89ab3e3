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
"""Inbound port: the transport contract a generated client calls."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from openapi_httpx.runtime.body import HttpBody
from openapi_httpx.runtime.types import Request, Response


@runtime_checkable
class ClientTransport(Protocol):
    """Performs one HTTP operation for a generated client."""

    async def send(
        self,
        request: Request,
        body: HttpBody | None,
        base_url: Any,
        operation_id: str,
    ) -> tuple[Response, HttpBody | None]: ...
