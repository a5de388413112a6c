"""Models for the Todo, CreateTodoInput, DeleteTodoInput and PaginatedTodos types."""

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """A stored todo item.

    Attributes:
        id: Table key.
        name: Todo name.
        description: Optional free text.
    """

    id: str = Field(..., description="Todo identifier")
    name: str = Field(..., description="Todo name")
    description: str | None = Field(None, description="Todo description")


class CreateTodoInput(BaseModel):
    """Input of the createTodo mutation.

    A missing or blank id makes AppSync generate one.
    """

    id: str | None = Field(None, description="Identifier, generated when omitted")
    name: str = Field(..., description="Todo name")
    description: str | None = Field(None, description="Todo description")


class DeleteTodoInput(BaseModel):
    """Input of the deleteTodo mutation."""

    id: str | None = Field(None, description="Identifier of the todo to delete")


class PaginatedTodos(BaseModel):
    """One page of listTodos.

    ``todos`` may hold nulls, as the schema allows ``[Todo]``.
    """

    model_config = ConfigDict(populate_by_name=True)

    todos: list[Todo | None] = Field(default_factory=list, description="Page items")
    next_token: str | None = Field(
        None, alias="nextToken", description="Continuation token, None on last page"
    )
