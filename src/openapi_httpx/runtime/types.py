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
"""Transport-agnostic request and response types used by generated clients."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


class HttpMethod(Enum):
    """Standard HTTP methods."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    PATCH = "PATCH"
    TRACE = "TRACE"


@dataclass(frozen=True)
class CustomMethod:
    """An extension method outside :class:`HttpMethod`, carried by its raw token."""

    token: str

    def __post_init__(self) -> None:
        if not _TOKEN_RE.match(self.token):
            raise ValueError(f"Invalid HTTP method token: {self.token!r}")


Method = Union[HttpMethod, CustomMethod]


def parse_method(token: str) -> Method:
    """Return the standard method for *token*, or a CustomMethod carrying it."""
    try:
        return HttpMethod(token)
    except ValueError:
        return CustomMethod(token)


@dataclass(frozen=True)
class HeaderField:
    """A single header name/value pair. Names compare case-insensitively."""

    name: str
    value: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderField):
            return NotImplemented
        return self.name.lower() == other.name.lower() and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name.lower(), self.value))


class HeaderFields:
    """Ordered header multimap.

    Insertion order and duplicate names are preserved. Lookups match names
    case-insensitively; the original spelling is kept for iteration.
    """

    def __init__(self, fields: Iterable[HeaderField | tuple[str, str]] | None = None) -> None:
        self._fields: list[HeaderField] = []
        for item in fields or ():
            if isinstance(item, HeaderField):
                self._fields.append(item)
            else:
                name, value = item
                self._fields.append(HeaderField(name, value))

    def append(self, name: str, value: str) -> None:
        """Add a field after the existing ones, keeping any with the same name."""
        self._fields.append(HeaderField(name, value))

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for *name*, or *default*."""
        lowered = name.lower()
        for header in self._fields:
            if header.name.lower() == lowered:
                return header.value
        return default

    def get_all(self, name: str) -> list[str]:
        """Return every value for *name* in order."""
        lowered = name.lower()
        return [header.value for header in self._fields if header.name.lower() == lowered]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.get(name) is not None

    def __iter__(self) -> Iterator[HeaderField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderFields):
            return self._fields == other._fields
        if isinstance(other, list):
            return self == HeaderFields(other)
        return NotImplemented

    def __repr__(self) -> str:
        pairs = ", ".join(f"{h.name}: {h.value}" for h in self._fields)
        return f"HeaderFields([{pairs}])"


@dataclass
class Request:
    """An HTTP request as produced by a generated client.

    ``path`` is relative to the server URL and not yet percent-encoded.
    ``query`` is already percent-encoded and used verbatim. The body is
    passed to the transport separately.
    """

    path: str
    method: Method
    query: str | None = None
    header_fields: HeaderFields = field(default_factory=HeaderFields)

    def __post_init__(self) -> None:
        if not isinstance(self.header_fields, HeaderFields):
            self.header_fields = HeaderFields(self.header_fields)


@dataclass
class Response:
    """An HTTP response as consumed by a generated client."""

    status_code: int
    header_fields: HeaderFields = field(default_factory=HeaderFields)

    def __post_init__(self) -> None:
        if not isinstance(self.header_fields, HeaderFields):
            self.header_fields = HeaderFields(self.header_fields)
