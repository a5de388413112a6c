"""
Unit tests for the todos GraphQL client.

HTTP calls are mocked with respx.
"""

import json
from unittest.mock import patch

import httpx
import pytest
import respx

from todos_appsync.client import TodosClient
from todos_appsync.config import Settings
from todos_appsync.exceptions import TodosApiError
from todos_appsync.models import Todo

ENDPOINT = "https://abc123.appsync-api.eu-west-1.amazonaws.com/graphql"
API_KEY = "da2-unit-test-key"


@pytest.fixture
def client():
    """Create a TodosClient with test credentials."""
    return TodosClient(endpoint=ENDPOINT, api_key=API_KEY)


def sent_payload(route) -> dict:
    """Decode the JSON body of the last request sent to a route."""
    return json.loads(route.calls.last.request.content)


# ===========================
# Construction Tests
# ===========================


def test_requires_endpoint():
    """Test an empty endpoint is rejected."""
    with pytest.raises(ValueError, match="endpoint"):
        TodosClient(endpoint="", api_key=API_KEY)


def test_requires_api_key():
    """Test an empty API key is rejected."""
    with pytest.raises(ValueError, match="API key"):
        TodosClient(endpoint=ENDPOINT, api_key="")


def test_from_settings():
    """Test the client picks endpoint, key and timeout from settings."""
    with patch.dict(
        "os.environ",
        {"GRAPHQL_ENDPOINT": ENDPOINT, "GRAPHQL_API_KEY": API_KEY, "HTTP_TIMEOUT": "3"},
    ):
        settings = Settings(_env_file=None)

    client = TodosClient.from_settings(settings)

    assert client.endpoint == ENDPOINT
    assert client.api_key == API_KEY
    assert client.timeout == 3.0


# ===========================
# Query Tests
# ===========================


@respx.mock
@pytest.mark.asyncio
async def test_get_todo_sends_api_key(client):
    """Test getTodo posts the query with the API key header."""
    route = respx.post(ENDPOINT).mock(
        return_value=httpx.Response(
            200, json={"data": {"getTodo": {"id": "1", "name": "Buy milk"}}}
        )
    )

    todo = await client.get_todo("1")

    assert todo == Todo(id="1", name="Buy milk")
    request = route.calls.last.request
    assert request.headers["x-api-key"] == API_KEY
    payload = sent_payload(route)
    assert payload["operationName"] == "GetTodo"
    assert payload["variables"] == {"id": "1"}
    assert "getTodo(id: $id)" in payload["query"]


@respx.mock
@pytest.mark.asyncio
async def test_get_todo_missing_returns_none(client):
    """Test an unknown id returns None."""
    respx.post(ENDPOINT).mock(
        return_value=httpx.Response(200, json={"data": {"getTodo": None}})
    )

    assert await client.get_todo("missing") is None


@respx.mock
@pytest.mark.asyncio
async def test_list_todos_without_arguments(client):
    """Test listTodos sends no paging variables when none are given."""
    route = respx.post(ENDPOINT).mock(
        return_value=httpx.Response(
            200,
            json={
                "data": {
                    "listTodos": {
                        "todos": [{"id": "1", "name": "a", "description": "x"}],
                        "nextToken": None,
                    }
                }
            },
        )
    )

    page = await client.list_todos()

    assert sent_payload(route)["variables"] == {}
    assert page.todos == [Todo(id="1", name="a", description="x")]
    assert page.next_token is None


@respx.mock
@pytest.mark.asyncio
async def test_list_todos_with_paging(client):
    """Test limit and nextToken are forwarded."""
    route = respx.post(ENDPOINT).mock(
        return_value=httpx.Response(
            200, json={"data": {"listTodos": {"todos": [], "nextToken": "t2"}}}
        )
    )

    page = await client.list_todos(limit=5, next_token="t1")

    assert sent_payload(route)["variables"] == {"limit": 5, "nextToken": "t1"}
    assert page.next_token == "t2"


@respx.mock
@pytest.mark.asyncio
async def test_iter_todos_follows_tokens(client):
    """Test iteration walks every page until the token runs out."""
    route = respx.post(ENDPOINT).mock(
        side_effect=[
            httpx.Response(
                200,
                json={
                    "data": {
                        "listTodos": {
                            "todos": [{"id": "1", "name": "a"}, None],
                            "nextToken": "t1",
                        }
                    }
                },
            ),
            httpx.Response(
                200,
                json={
                    "data": {
                        "listTodos": {
                            "todos": [{"id": "2", "name": "b"}],
                            "nextToken": None,
                        }
                    }
                },
            ),
        ]
    )

    ids = [todo.id async for todo in client.iter_todos(page_size=1)]

    assert ids == ["1", "2"]
    assert route.call_count == 2
    assert json.loads(route.calls[1].request.content)["variables"] == {
        "limit": 1,
        "nextToken": "t1",
    }


# ===========================
# Mutation Tests
# ===========================


@respx.mock
@pytest.mark.asyncio
async def test_create_todo_without_id(client):
    """Test createTodo omits the id so AppSync generates one."""
    route = respx.post(ENDPOINT).mock(
        return_value=httpx.Response(
            200,
            json={"data": {"createTodo": {"id": "generated", "name": "Write docs"}}},
        )
    )

    todo = await client.create_todo(name="Write docs")

    assert todo.id == "generated"
    assert sent_payload(route)["variables"] == {"input": {"name": "Write docs"}}


@respx.mock
@pytest.mark.asyncio
async def test_create_todo_with_id(client):
    """Test createTodo forwards an explicit id and description."""
    route = respx.post(ENDPOINT).mock(
        return_value=httpx.Response(
            200,
            json={
                "data": {
                    "createTodo": {"id": "t-1", "name": "n", "description": "d"}
                }
            },
        )
    )

    await client.create_todo(name="n", description="d", id="t-1")

    assert sent_payload(route)["variables"] == {
        "input": {"id": "t-1", "name": "n", "description": "d"}
    }


@respx.mock
@pytest.mark.asyncio
async def test_delete_todo(client):
    """Test deleteTodo sends the id inside the input object."""
    route = respx.post(ENDPOINT).mock(
        return_value=httpx.Response(
            200, json={"data": {"deleteTodo": {"id": "1", "name": "a"}}}
        )
    )

    deleted = await client.delete_todo("1")

    assert deleted == Todo(id="1", name="a")
    assert sent_payload(route)["variables"] == {"input": {"id": "1"}}


@respx.mock
@pytest.mark.asyncio
async def test_delete_todo_missing(client):
    """Test deleting an unknown id returns None."""
    respx.post(ENDPOINT).mock(
        return_value=httpx.Response(200, json={"data": {"deleteTodo": None}})
    )

    assert await client.delete_todo("missing") is None


# ===========================
# Error Tests
# ===========================


@respx.mock
@pytest.mark.asyncio
async def test_graphql_errors_raise(client):
    """Test a GraphQL errors array raises TodosApiError."""
    respx.post(ENDPOINT).mock(
        return_value=httpx.Response(
            200,
            json={
                "data": {"getTodo": None},
                "errors": [
                    {
                        "message": "Validation error",
                        "errorType": "MappingTemplate",
                        "path": ["getTodo"],
                    }
                ],
            },
        )
    )

    with pytest.raises(TodosApiError) as exc_info:
        await client.get_todo("1")

    assert exc_info.value.operation == "GetTodo"
    assert exc_info.value.errors[0].error_type == "MappingTemplate"


@respx.mock
@pytest.mark.asyncio
async def test_http_error_raises(client):
    """Test an unauthorized response raises HTTPStatusError."""
    respx.post(ENDPOINT).mock(
        return_value=httpx.Response(
            401, json={"errors": [{"errorType": "UnauthorizedException"}]}
        )
    )

    with pytest.raises(httpx.HTTPStatusError):
        await client.list_todos()


# ===========================
# Keyword Tests
# ===========================


@respx.mock
@pytest.mark.asyncio
async def test_methods_accept_id_keyword(client):
    """Test get, create and delete take the identifier as ``id``."""
    route = respx.post(ENDPOINT).mock(
        side_effect=[
            httpx.Response(200, json={"data": {"createTodo": {"id": "a", "name": "n"}}}),
            httpx.Response(200, json={"data": {"getTodo": {"id": "a", "name": "n"}}}),
            httpx.Response(200, json={"data": {"deleteTodo": {"id": "a", "name": "n"}}}),
        ]
    )

    created = await client.create_todo(name="n", id="a")
    fetched = await client.get_todo(id="a")
    deleted = await client.delete_todo(id="a")

    assert created == fetched == deleted == Todo(id="a", name="n")
    assert json.loads(route.calls[0].request.content)["variables"] == {
        "input": {"id": "a", "name": "n"}
    }
    assert json.loads(route.calls[1].request.content)["variables"] == {"id": "a"}
    assert json.loads(route.calls[2].request.content)["variables"] == {
        "input": {"id": "a"}
    }
