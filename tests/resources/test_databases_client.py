from unittest.mock import AsyncMock

import pytest

from notionloom.exceptions import ValidationError
from notionloom.resources import DatabasesClient
from notionloom.types import RequestSpec


@pytest.fixture
def mock_api_client():
    """Fixture to create a mock NotionClient whose dispatch returns a payload."""
    mock_client = AsyncMock()
    mock_client.dispatch.return_value = {"object": "database", "id": "abc123"}
    return mock_client


@pytest.fixture
def databases_client(mock_api_client: AsyncMock) -> DatabasesClient:
    return DatabasesClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_retrieve_database(
    databases_client: DatabasesClient, mock_api_client: AsyncMock
):
    result = await databases_client.retrieve("abc123")

    mock_api_client.dispatch.assert_awaited_once_with(
        RequestSpec(path="databases/abc123", method="GET")
    )
    assert result == {"object": "database", "id": "abc123"}


@pytest.mark.asyncio
async def test_query_database_sends_arguments_in_body(
    databases_client: DatabasesClient, mock_api_client: AsyncMock
):
    filter_ = {"property": "Status", "select": {"equals": "Done"}}
    sorts = [{"property": "Created", "direction": "descending"}]

    await databases_client.query(
        "abc123", filter=filter_, sorts=sorts, page_size=50, auth="tok1"
    )

    mock_api_client.dispatch.assert_awaited_once_with(
        RequestSpec(
            path="databases/abc123/query",
            method="POST",
            body={"filter": filter_, "sorts": sorts, "page_size": 50},
            auth="tok1",
        )
    )


@pytest.mark.asyncio
async def test_query_database_without_filter_sends_empty_body(
    databases_client: DatabasesClient, mock_api_client: AsyncMock
):
    await databases_client.query("abc123")

    spec = mock_api_client.dispatch.await_args.args[0]
    assert spec.body == {}
    assert spec.query is None


@pytest.mark.asyncio
async def test_list_databases_uses_query_string(
    databases_client: DatabasesClient, mock_api_client: AsyncMock
):
    await databases_client.list(start_cursor="cur", page_size=10)

    mock_api_client.dispatch.assert_awaited_once_with(
        RequestSpec(
            path="databases",
            method="GET",
            query={"start_cursor": "cur", "page_size": 10},
        )
    )


@pytest.mark.asyncio
async def test_identical_calls_dispatch_identical_specs(
    databases_client: DatabasesClient, mock_api_client: AsyncMock
):
    await databases_client.query("abc123", filter={"or": []}, auth="tok")
    await databases_client.query("abc123", filter={"or": []}, auth="tok")

    first, second = (call.args[0] for call in mock_api_client.dispatch.await_args_list)
    assert first == second


@pytest.mark.asyncio
async def test_retrieve_without_id_raises_before_dispatch(
    databases_client: DatabasesClient, mock_api_client: AsyncMock
):
    with pytest.raises(ValidationError):
        await databases_client.retrieve(None)

    mock_api_client.dispatch.assert_not_awaited()
