# notionloom/resources/pages_client.py
"""Client for the Notion pages endpoints."""

from typing import Any

from ..endpoints import PAGES_CREATE, PAGES_RETRIEVE, PAGES_UPDATE
from .base_client import BaseResourceClient


class PagesClient(BaseResourceClient):
    """Client for creating, retrieving and updating pages."""

    async def create(
        self,
        *,
        parent: dict[str, Any],
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
        auth: str | None = None,
    ) -> Any:
        """Creates a page in a database or as a child of another page.

        Args:
            parent: Notion parent object, e.g. ``{"database_id": "..."}``.
            properties: Property values of the new page.
            children: Optional block objects for the page content.
            auth: Per-call token overriding the client default.

        Returns:
            The created page object.
        """
        args = {"parent": parent, "properties": properties, "children": children}
        return await self._call(PAGES_CREATE, args, auth=auth)

    async def retrieve(self, page_id: str, *, auth: str | None = None) -> Any:
        """Retrieves a page object by its ID."""
        return await self._call(PAGES_RETRIEVE, {"page_id": page_id}, auth=auth)

    async def update(
        self,
        page_id: str,
        *,
        properties: dict[str, Any] | None = None,
        archived: bool | None = None,
        auth: str | None = None,
    ) -> Any:
        """Updates page property values, or archives the page."""
        args = {"page_id": page_id, "properties": properties, "archived": archived}
        return await self._call(PAGES_UPDATE, args, auth=auth)
