"""GraphQL error payload model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GraphQLErrorDetail(BaseModel):
    """One entry of the ``errors`` array in a GraphQL response.

    Attributes:
        message: Human-readable error message.
        error_type: AppSync error type (e.g. "DynamoDB:ConditionalCheckFailedException").
        path: Response path of the failing field.
        locations: Query locations of the failing field.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    message: str = Field(..., description="Error message")
    error_type: str | None = Field(None, alias="errorType", description="Error type")
    path: list[str | int] | None = Field(None, description="Response path")
    locations: list[dict[str, Any]] | None = Field(None, description="Query locations")
