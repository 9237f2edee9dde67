from unittest.mock import AsyncMock

import pytest

from notionloom.resources import BlockChildrenClient, BlocksClient
from notionloom.types import RequestSpec


@pytest.fixture
def mock_api_client():
    mock_client = AsyncMock()
    mock_client.dispatch.return_value = {"object": "list", "results": []}
    return mock_client


@pytest.fixture
def blocks_client(mock_api_client: AsyncMock) -> BlocksClient:
    return BlocksClient(api_client=mock_api_client)


def test_children_client_shares_api_client(
    blocks_client: BlocksClient, mock_api_client: AsyncMock
):
    assert isinstance(blocks_client.children, BlockChildrenClient)
    assert blocks_client.children._api_client is mock_api_client


@pytest.mark.asyncio
async def test_list_children(blocks_client: BlocksClient, mock_api_client: AsyncMock):
    await blocks_client.children.list("b1", page_size=100)

    mock_api_client.dispatch.assert_awaited_once_with(
        RequestSpec(
            path="blocks/b1/children", method="GET", query={"page_size": 100}
        )
    )


@pytest.mark.asyncio
async def test_append_children(
    blocks_client: BlocksClient, mock_api_client: AsyncMock
):
    children = [{"object": "block", "type": "paragraph", "paragraph": {}}]

    await blocks_client.children.append("b1", children=children)

    mock_api_client.dispatch.assert_awaited_once_with(
        RequestSpec(
            path="blocks/b1/children", method="PATCH", body={"children": children}
        )
    )
