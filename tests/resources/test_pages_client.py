from unittest.mock import AsyncMock

import pytest

from notionloom.resources import PagesClient
from notionloom.types import RequestSpec


@pytest.fixture
def mock_api_client():
    mock_client = AsyncMock()
    mock_client.dispatch.return_value = {"object": "page", "id": "p1"}
    return mock_client


@pytest.fixture
def pages_client(mock_api_client: AsyncMock) -> PagesClient:
    return PagesClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_create_page(pages_client: PagesClient, mock_api_client: AsyncMock):
    parent = {"database_id": "abc123"}
    properties = {"Name": {"title": [{"text": {"content": "Tuscan Kale"}}]}}

    result = await pages_client.create(parent=parent, properties=properties)

    mock_api_client.dispatch.assert_awaited_once_with(
        RequestSpec(
            path="pages",
            method="POST",
            body={"parent": parent, "properties": properties},
        )
    )
    assert result == {"object": "page", "id": "p1"}


@pytest.mark.asyncio
async def test_retrieve_page(pages_client: PagesClient, mock_api_client: AsyncMock):
    await pages_client.retrieve("p1", auth="tok")

    mock_api_client.dispatch.assert_awaited_once_with(
        RequestSpec(path="pages/p1", method="GET", auth="tok")
    )


@pytest.mark.asyncio
async def test_update_page_keeps_false_values(
    pages_client: PagesClient, mock_api_client: AsyncMock
):
    await pages_client.update("p1", archived=False)

    mock_api_client.dispatch.assert_awaited_once_with(
        RequestSpec(path="pages/p1", method="PATCH", body={"archived": False})
    )
