# notionloom/resources/users_client.py
"""Client for the Notion users endpoints."""

from typing import Any

from ..endpoints import USERS_LIST, USERS_RETRIEVE
from .base_client import BaseResourceClient


class UsersClient(BaseResourceClient):
    async def list(
        self,
        *,
        start_cursor: str | None = None,
        page_size: int | None = None,
        auth: str | None = None,
    ) -> Any:
        """Lists the users of the workspace."""
        args = {"start_cursor": start_cursor, "page_size": page_size}
        return await self._call(USERS_LIST, args, auth=auth)

    async def retrieve(self, user_id: str, *, auth: str | None = None) -> Any:
        """Retrieves a user by its ID."""
        return await self._call(USERS_RETRIEVE, {"user_id": user_id}, auth=auth)
