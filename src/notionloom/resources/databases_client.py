# notionloom/resources/databases_client.py
"""Client for the Notion databases endpoints."""

from typing import Any

from ..endpoints import DATABASES_LIST, DATABASES_QUERY, DATABASES_RETRIEVE
from .base_client import BaseResourceClient


class DatabasesClient(BaseResourceClient):
    """Client for retrieving, querying and listing databases."""

    async def retrieve(self, database_id: str, *, auth: str | None = None) -> Any:
        """Retrieves a database object by its ID."""
        return await self._call(
            DATABASES_RETRIEVE, {"database_id": database_id}, auth=auth
        )

    async def query(
        self,
        database_id: str,
        *,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        start_cursor: str | None = None,
        page_size: int | None = None,
        auth: str | None = None,
    ) -> Any:
        """Queries a database for the pages matching a filter.

        All arguments except `database_id` are sent in the JSON body.

        Args:
            database_id: The ID of the database to query.
            filter: Notion filter object.
            sorts: List of Notion sort objects.
            start_cursor: Cursor returned by a previous page.
            page_size: Number of items per page.
            auth: Per-call token overriding the client default.

        Returns:
            The parsed query response.
        """
        args = {
            "database_id": database_id,
            "filter": filter,
            "sorts": sorts,
            "start_cursor": start_cursor,
            "page_size": page_size,
        }
        return await self._call(DATABASES_QUERY, args, auth=auth)

    async def list(
        self,
        *,
        start_cursor: str | None = None,
        page_size: int | None = None,
        auth: str | None = None,
    ) -> Any:
        """Lists the databases shared with the integration.

        Args:
            start_cursor: Cursor returned by a previous page.
            page_size: Number of items per page.
            auth: Per-call token overriding the client default.

        Returns:
            The parsed list response.
        """
        args = {"start_cursor": start_cursor, "page_size": page_size}
        return await self._call(DATABASES_LIST, args, auth=auth)
