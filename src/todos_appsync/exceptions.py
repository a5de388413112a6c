"""Exceptions raised by the Python-side tooling of the todos API."""

from todos_appsync.models.errors import GraphQLErrorDetail


class TodosAppsyncError(Exception):
    """Base class for todos_appsync errors."""


class TodosApiError(TodosAppsyncError):
    """The GraphQL response carried an ``errors`` array."""

    def __init__(self, errors: list[GraphQLErrorDetail], operation: str | None = None):
        self.errors = errors
        self.operation = operation
        messages = "; ".join(error.message for error in errors) or "unknown error"
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}{messages}")


class MappingTemplateError(TodosAppsyncError):
    """A mapping template could not be evaluated."""
