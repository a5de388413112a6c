"""Pydantic models mirroring the GraphQL types of the todos API."""

from todos_appsync.models.errors import GraphQLErrorDetail
from todos_appsync.models.todo import (
    CreateTodoInput,
    DeleteTodoInput,
    PaginatedTodos,
    Todo,
)

__all__ = [
    "CreateTodoInput",
    "DeleteTodoInput",
    "GraphQLErrorDetail",
    "PaginatedTodos",
    "Todo",
]
