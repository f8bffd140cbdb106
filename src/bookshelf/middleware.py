"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Remove sensitive query parameters from logging.

    Args:
        params: Dictionary of query parameters

    Returns:
        Dictionary with sensitive parameters redacted
    """
    sensitive_keys = {
        "password",
        "token",
        "api_key",
        "secret",
        "auth",
        "authorization",
        "access_token",
        "refresh_token",
        "key",
        "session",
        "cookie",
        "credentials",
    }

    sanitized = {}
    for key, value in params.items():
        if any(sensitive in key.lower() for sensitive in sensitive_keys):
            sanitized[key] = "[REDACTED]"
        else:
            sanitized[key] = value

    return sanitized


def operation_name_from_document(
    query: Any, operation_name: Any = None
) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload."""
    if isinstance(operation_name, str) and operation_name:
        return operation_name

    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    # Only the leading operation keyword counts; string arguments may contain either word
    match = re.match(r"\s*(query|mutation)\s+(\w+)", query)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Extract the GraphQL operation name from a GET or POST request."""
    if request.url.path != settings.graphql_path:
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        return operation_name_from_document(params.get("query"), params.get("operationName"))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            if not isinstance(data, dict):
                return None
            return operation_name_from_document(data.get("query"), data.get("operationName"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        request_id = set_request_context(request.headers.get(REQUEST_ID_HEADER))

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(dict(request.query_params))
                # Never log raw GraphQL payloads sent in the query string
                if request.url.path == settings.graphql_path:
                    for k in ("query", "variables", "extensions"):
                        if k in sanitized_params:
                            sanitized_params[k] = "[REDACTED]"

            graphql_operation = await extract_graphql_operation_name(request)

            log_data = {
                "method": request.method,
                "path": request.url.path,
                "query_params": sanitized_params,
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }
            if graphql_operation:
                log_data["graphql_operation"] = graphql_operation

            logger.info("Request started", **log_data)

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
