# notionloom/resources/blocks_client.py
"""Client for the Notion blocks endpoints."""

from typing import TYPE_CHECKING, Any

from ..endpoints import BLOCKS_CHILDREN_APPEND, BLOCKS_CHILDREN_LIST
from .base_client import BaseResourceClient

if TYPE_CHECKING:
    from ..client import NotionClient


class BlockChildrenClient(BaseResourceClient):
    """Client for the children of a block (or page)."""

    async def append(
        self,
        block_id: str,
        *,
        children: list[dict[str, Any]],
        auth: str | None = None,
    ) -> Any:
        """Appends block objects to the children of a block."""
        args = {"block_id": block_id, "children": children}
        return await self._call(BLOCKS_CHILDREN_APPEND, args, auth=auth)

    async def list(
        self,
        block_id: str,
        *,
        start_cursor: str | None = None,
        page_size: int | None = None,
        auth: str | None = None,
    ) -> Any:
        """Lists the child blocks of a block.

        Args:
            block_id: The ID of the parent block or page.
            start_cursor: Cursor returned by a previous page.
            page_size: Number of items per page.
            auth: Per-call token overriding the client default.

        Returns:
            The parsed list response.
        """
        args = {
            "block_id": block_id,
            "start_cursor": start_cursor,
            "page_size": page_size,
        }
        return await self._call(BLOCKS_CHILDREN_LIST, args, auth=auth)


class BlocksClient(BaseResourceClient):
    """Client for block endpoints.

    Attributes:
        children (BlockChildrenClient): Client for a block's children.
    """

    def __init__(self, api_client: "NotionClient"):
        super().__init__(api_client)
        self._children = BlockChildrenClient(api_client)

    @property
    def children(self) -> BlockChildrenClient:
        return self._children
