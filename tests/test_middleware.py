"""
Tests for request logging middleware helpers
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from bookshelf.config import settings
from bookshelf.middleware import (
    extract_graphql_operation_name,
    operation_name_from_document,
    sanitize_query_params,
)


def make_request(method: str, path: str, query_params=None, body: bytes = b""):
    request = MagicMock()
    request.method = method
    request.url.path = path
    request.query_params = query_params or {}
    request.body = AsyncMock(return_value=body)
    return request


class TestOperationName:
    """Tests for operation_name_from_document."""

    def test_explicit_operation_name_wins(self):
        assert operation_name_from_document("{ books { id } }", "ListBooks") == "ListBooks"

    def test_named_query(self):
        assert operation_name_from_document("query AllBooks { books { id } }") == "AllBooks"

    def test_named_mutation(self):
        doc = 'mutation AddOne { addBook(name: "X", authorId: 1) { id } }'

        assert operation_name_from_document(doc) == "mutation:AddOne"

    def test_keywords_inside_arguments_are_ignored(self):
        mutation = 'mutation AddOne { addBook(name: "query X", authorId: 1) { id } }'
        query = '{ books { id } } # mutation Later'

        assert operation_name_from_document(mutation) == "mutation:AddOne"
        assert operation_name_from_document(query) == "unnamed_operation"

    def test_anonymous_operation(self):
        assert operation_name_from_document("{ books { id } }") == "unnamed_operation"

    def test_introspection(self):
        assert operation_name_from_document("{ __schema { types { name } } }") == "__introspection"

    def test_missing_query(self):
        assert operation_name_from_document(None) is None
        assert operation_name_from_document("") is None


class TestExtractGraphqlOperationName:
    """Tests for extract_graphql_operation_name."""

    @pytest.mark.asyncio
    async def test_other_paths_are_ignored(self):
        request = make_request("GET", "/health")

        assert await extract_graphql_operation_name(request) is None

    @pytest.mark.asyncio
    async def test_get_request(self):
        request = make_request(
            "GET", settings.graphql_path, query_params={"query": "query Q { books { id } }"}
        )

        assert await extract_graphql_operation_name(request) == "Q"

    @pytest.mark.asyncio
    async def test_post_request(self):
        body = json.dumps({"query": "{ authors { id } }", "operationName": "Authors"}).encode()
        request = make_request("POST", settings.graphql_path, body=body)

        assert await extract_graphql_operation_name(request) == "Authors"

    @pytest.mark.asyncio
    async def test_post_request_with_invalid_json(self):
        request = make_request("POST", settings.graphql_path, body=b"{not json")

        assert await extract_graphql_operation_name(request) is None

    @pytest.mark.asyncio
    async def test_post_request_with_batch_body(self):
        request = make_request("POST", settings.graphql_path, body=b"[]")

        assert await extract_graphql_operation_name(request) is None


def test_sanitize_query_params():
    sanitized = sanitize_query_params({"api_key": "abc", "Authorization": "x", "id": "1"})

    assert sanitized == {"api_key": "[REDACTED]", "Authorization": "[REDACTED]", "id": "1"}
