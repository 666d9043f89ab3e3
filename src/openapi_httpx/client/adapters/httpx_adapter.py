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
"""httpx-based request sender."""

from __future__ import annotations

from datetime import timedelta

import httpx


class HttpxRequestSender:
    """Request sender backed by ``httpx.AsyncClient.send``.

    The response is opened in streaming mode; reading and closing it is up
    to the caller.
    """

    async def send(
        self,
        request: httpx.Request,
        client: httpx.AsyncClient,
        timeout: timedelta,
    ) -> httpx.Response:
        request.extensions["timeout"] = httpx.Timeout(timeout.total_seconds()).as_dict()
        return await client.send(request, stream=True)
