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
"""Outbound port: sends a prepared httpx request."""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class HttpRequestSender(Protocol):
    """Performs the network call for the transport."""

    async def send(
        self,
        request: httpx.Request,
        client: httpx.AsyncClient,
        timeout: timedelta,
    ) -> httpx.Response: ...
