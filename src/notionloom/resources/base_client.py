# notionloom/resources/base_client.py
"""Defines the base class for all Notion API resource clients."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..endpoints import EndpointDescriptor, build_request_spec
from ..log_config import logger

if TYPE_CHECKING:
    from ..client import NotionClient


class BaseResourceClient:
    """
    Base class for all resource clients.

    Holds a reference to the owning `NotionClient` and turns an endpoint
    descriptor plus call arguments into a dispatched request.
    """

    def __init__(self, api_client: "NotionClient"):
        """
        Initialize the base resource client.

        Args:
            api_client: An instance of NotionClient.
        """
        self._api_client = api_client
        logger.trace(f"{self.__class__.__name__} initialized")

    async def _call(
        self,
        endpoint: EndpointDescriptor,
        args: Mapping[str, Any],
        *,
        auth: str | None = None,
    ) -> Any:
        spec = build_request_spec(endpoint, args, auth=auth)
        return await self._api_client.dispatch(spec)
