"""
GraphQL client for the deployed todos API.

Talks to the AppSync endpoint over HTTPS with the provisioned API key.

Usage:
    from todos_appsync.client import TodosClient
    from todos_appsync.config import get_settings

    client = TodosClient.from_settings(get_settings())
    todo = await client.create_todo(name="Write docs")
    async for item in client.iter_todos():
        print(item.name)
"""

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

import httpx

from todos_appsync.core.logging import logger
from todos_appsync.exceptions import TodosApiError
from todos_appsync.models import (
    CreateTodoInput,
    DeleteTodoInput,
    GraphQLErrorDetail,
    PaginatedTodos,
    Todo,
)

if TYPE_CHECKING:
    from todos_appsync.config import Settings

TODO_FIELDS = "id name description"

GET_TODO = f"""
query GetTodo($id: ID!) {{
  getTodo(id: $id) {{ {TODO_FIELDS} }}
}}
"""

LIST_TODOS = f"""
query ListTodos($limit: Int, $nextToken: String) {{
  listTodos(limit: $limit, nextToken: $nextToken) {{
    todos {{ {TODO_FIELDS} }}
    nextToken
  }}
}}
"""

CREATE_TODO = f"""
mutation CreateTodo($input: CreateTodoInput!) {{
  createTodo(input: $input) {{ {TODO_FIELDS} }}
}}
"""

DELETE_TODO = f"""
mutation DeleteTodo($input: DeleteTodoInput!) {{
  deleteTodo(input: $input) {{ {TODO_FIELDS} }}
}}
"""


class TodosClient:
    """
    Async client for the todos GraphQL API.

    Each call opens its own httpx.AsyncClient.
    """

    API_KEY_HEADER = "x-api-key"

    def __init__(self, endpoint: str, api_key: str, timeout: float = 10.0):
        """
        Initialize the client.

        Args:
            endpoint: GraphQL URL (TodosGraphQLUrl stack output)
            api_key: API key (TodosApiKeyValue stack output)
            timeout: HTTP timeout in seconds

        Raises:
            ValueError: If endpoint or api_key is empty
        """
        if not endpoint:
            raise ValueError("GraphQL endpoint is required")
        if not api_key:
            raise ValueError("API key is required")

        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TodosClient":
        """Create a client from GRAPHQL_ENDPOINT, GRAPHQL_API_KEY and HTTP_TIMEOUT."""
        return cls(
            endpoint=settings.graphql_endpoint,
            api_key=settings.graphql_api_key,
            timeout=settings.http_timeout,
        )

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> dict[str, Any]:
        """
        Execute a GraphQL document and return its ``data``.

        Args:
            query: GraphQL document
            variables: Operation variables
            operation_name: Operation to run, also used in errors and logs

        Returns:
            The ``data`` object of the response

        Raises:
            httpx.HTTPStatusError: If the endpoint answers with an HTTP error
            TodosApiError: If the response carries GraphQL errors
        """
        payload: dict[str, Any] = {"query": query, "variables": variables or {}}
        if operation_name:
            payload["operationName"] = operation_name

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                self.endpoint,
                json=payload,
                headers={
                    self.API_KEY_HEADER: self.api_key,
                    "Content-Type": "application/json",
                },
            )
            response.raise_for_status()
            body = response.json()

        errors = body.get("errors")
        if errors:
            details = [GraphQLErrorDetail.model_validate(error) for error in errors]
            logger.error(
                f"GraphQL operation {operation_name or '<anonymous>'} failed: "
                f"{[detail.message for detail in details]}"
            )
            raise TodosApiError(details, operation=operation_name)

        logger.debug(f"GraphQL operation {operation_name or '<anonymous>'} succeeded")
        return body.get("data") or {}

    async def get_todo(self, id: str) -> Todo | None:
        """
        Fetch one todo.

        Args:
            id: Todo identifier

        Returns:
            The todo, or None if no item has that id
        """
        data = await self.execute(GET_TODO, {"id": id}, "GetTodo")
        item = data.get("getTodo")
        return Todo.model_validate(item) if item else None

    async def list_todos(
        self, limit: int | None = None, next_token: str | None = None
    ) -> PaginatedTodos:
        """
        Fetch one page of todos.

        Args:
            limit: Page size, the server applies its default when None
            next_token: Continuation token from the previous page

        Returns:
            PaginatedTodos with the page and the next continuation token
        """
        variables: dict[str, Any] = {}
        if limit is not None:
            variables["limit"] = limit
        if next_token:
            variables["nextToken"] = next_token

        data = await self.execute(LIST_TODOS, variables, "ListTodos")
        return PaginatedTodos.model_validate(data.get("listTodos") or {})

    async def iter_todos(self, page_size: int | None = None) -> AsyncIterator[Todo]:
        """
        Iterate over every todo, following continuation tokens.

        Args:
            page_size: Scan limit per page, server default when None

        Yields:
            Todo items in scan order
        """
        next_token: str | None = None
        while True:
            page = await self.list_todos(limit=page_size, next_token=next_token)
            for todo in page.todos:
                if todo is not None:
                    yield todo
            if not page.next_token:
                return
            next_token = page.next_token

    async def create_todo(
        self,
        name: str,
        description: str | None = None,
        id: str | None = None,
    ) -> Todo:
        """
        Create (or overwrite) a todo.

        Args:
            name: Todo name
            description: Optional description
            id: Identifier, AppSync generates one when None

        Returns:
            The stored todo
        """
        todo_input = CreateTodoInput(id=id, name=name, description=description)
        data = await self.execute(
            CREATE_TODO,
            {"input": todo_input.model_dump(exclude_none=True)},
            "CreateTodo",
        )
        todo = Todo.model_validate(data["createTodo"])
        logger.info(f"Created todo {todo.id}")
        return todo

    async def delete_todo(self, id: str) -> Todo | None:
        """
        Delete a todo.

        Args:
            id: Identifier of the todo to delete

        Returns:
            The deleted todo, or None if nothing was stored under that id
        """
        todo_input = DeleteTodoInput(id=id)
        data = await self.execute(
            DELETE_TODO, {"input": todo_input.model_dump()}, "DeleteTodo"
        )
        item = data.get("deleteTodo")
        if item:
            logger.info(f"Deleted todo {id}")
        return Todo.model_validate(item) if item else None
