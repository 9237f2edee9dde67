# notionloom/types.py
"""Core type definitions for the notionloom client.

This module defines the HTTP method literal accepted by endpoint descriptors
and the `RequestSpec` structure handed to the request dispatcher.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

HttpMethod = Literal["GET", "POST", "PATCH"]
"""HTTP methods used by the Notion API endpoints."""


class RequestSpec(BaseModel):
    """Encapsulates everything needed to dispatch a single API call.

    A spec is built fresh for every call and is immutable, so two calls with
    identical arguments produce equal specs.

    Attributes:
        path: Request path relative to the versioned API prefix,
            e.g. ``databases/abc123``.
        method: The HTTP method.
        query: Query-string parameters, or None when the call has none.
        body: JSON body, or None when no body should be sent at all.
        auth: Per-call auth token overriding the client default.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    method: HttpMethod
    query: dict[str, Any] | None = None
    body: dict[str, Any] | None = None
    auth: str | None = None
