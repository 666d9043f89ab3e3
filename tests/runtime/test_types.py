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
"""Tests for runtime request/response types."""

import pytest

from openapi_httpx.runtime.types import (
    CustomMethod,
    HeaderField,
    HeaderFields,
    HttpMethod,
    Request,
    Response,
    parse_method,
)


class TestParseMethod:
    def test_standard_tokens_map_to_enum(self):
        for method in HttpMethod:
            assert parse_method(method.value) is method

    def test_unknown_token_becomes_custom(self):
        assert parse_method("PURGE") == CustomMethod("PURGE")

    def test_lowercase_token_is_not_standard(self):
        # method tokens are case-sensitive
        assert parse_method("get") == CustomMethod("get")

    def test_custom_method_rejects_invalid_token(self):
        with pytest.raises(ValueError, match="Invalid HTTP method token"):
            CustomMethod("NOT VALID")

    def test_custom_method_rejects_empty_token(self):
        with pytest.raises(ValueError):
            CustomMethod("")


class TestHeaderField:
    def test_names_compare_case_insensitively(self):
        assert HeaderField("Content-Type", "text/plain") == HeaderField("content-type", "text/plain")

    def test_values_compare_exactly(self):
        assert HeaderField("accept", "text/plain") != HeaderField("accept", "Text/Plain")

    def test_hash_matches_equality(self):
        assert len({HeaderField("X-A", "1"), HeaderField("x-a", "1")}) == 1


class TestHeaderFields:
    def test_preserves_order_and_duplicates(self):
        fields = HeaderFields([("X-Trace", "a"), ("Accept", "*/*"), ("x-trace", "b")])
        assert [(h.name, h.value) for h in fields] == [("X-Trace", "a"), ("Accept", "*/*"), ("x-trace", "b")]

    def test_get_is_case_insensitive_and_returns_first(self):
        fields = HeaderFields([("X-Trace", "a"), ("x-trace", "b")])
        assert fields.get("X-TRACE") == "a"
        assert fields.get_all("x-Trace") == ["a", "b"]

    def test_get_missing_returns_default(self):
        assert HeaderFields().get("accept") is None
        assert HeaderFields().get("accept", "*/*") == "*/*"

    def test_append_never_replaces(self):
        fields = HeaderFields()
        fields.append("Set-Cookie", "a=1")
        fields.append("Set-Cookie", "b=2")
        assert len(fields) == 2
        assert fields.get_all("set-cookie") == ["a=1", "b=2"]

    def test_contains(self):
        fields = HeaderFields([HeaderField("Content-Type", "application/json")])
        assert "content-type" in fields
        assert "accept" not in fields
        assert 42 not in fields

    def test_equals_list_of_fields(self):
        fields = HeaderFields([("Content-Type", "application/json")])
        assert fields == [HeaderField("content-type", "application/json")]

    def test_order_matters_for_equality(self):
        assert HeaderFields([("a", "1"), ("b", "2")]) != HeaderFields([("b", "2"), ("a", "1")])


class TestRequestResponse:
    def test_request_defaults(self):
        request = Request(path="/health", method=HttpMethod.GET)
        assert request.query is None
        assert len(request.header_fields) == 0

    def test_request_coerces_header_list(self):
        request = Request(
            path="/pets",
            method=HttpMethod.POST,
            header_fields=[HeaderField("content-type", "application/json")],
        )
        assert isinstance(request.header_fields, HeaderFields)
        assert request.header_fields.get("Content-Type") == "application/json"

    def test_response_coerces_header_list(self):
        response = Response(status_code=201, header_fields=[("location", "/pets/1")])
        assert isinstance(response.header_fields, HeaderFields)
        assert response.header_fields.get("Location") == "/pets/1"
