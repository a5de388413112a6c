"""
VTL mapping templates for the todos resolvers.

AppSync evaluates these documents; nothing here runs them. The request
templates target the DynamoDB data source and every response template passes
the DynamoDB result straight through.
"""

from dataclasses import dataclass
from typing import Literal

MAPPING_TEMPLATE_VERSION = "2017-02-28"

PASSTHROUGH_RESPONSE = "$util.toJson($ctx.result)"

DynamoDBOperation = Literal["GetItem", "Scan", "PutItem", "DeleteItem"]


def get_todo_request() -> str:
    """Point read of one todo by ``$ctx.args.id``."""
    return f"""{{
        "version": "{MAPPING_TEMPLATE_VERSION}",
        "operation": "GetItem",
        "key": {{
          "id": $util.dynamodb.toDynamoDBJson($ctx.args.id)
        }}
      }}"""


def list_todos_request(default_limit: int = 20) -> str:
    """
    Bounded scan of the table.

    Args:
        default_limit: Scan limit used when the caller passes no ``limit``

    Returns:
        Request template; an empty or missing ``nextToken`` becomes null
    """
    return f"""{{
        "version": "{MAPPING_TEMPLATE_VERSION}",
        "operation": "Scan",
        "limit": $util.defaultIfNull($ctx.args.limit, {default_limit}),
        "nextToken": $util.toJson($util.defaultIfNullOrEmpty($ctx.args.nextToken, null))
      }}"""


def create_todo_request() -> str:
    """Point write keyed by ``input.id``, or a generated id when blank."""
    return f"""{{
          "version": "{MAPPING_TEMPLATE_VERSION}",
          "operation": "PutItem",
          "key": {{
            "id": $util.dynamodb.toDynamoDBJson($util.defaultIfNullOrBlank($ctx.args.input.id, $util.autoId()))
          }},
          "attributeValues": $util.dynamodb.toMapValuesJson($context.args.input)
        }}"""


def delete_todo_request() -> str:
    """Point delete by ``input.id``."""
    return f"""{{
          "version": "{MAPPING_TEMPLATE_VERSION}",
          "operation": "DeleteItem",
          "key": {{
            "id": $util.dynamodb.toDynamoDBJson($ctx.args.input.id)
          }}
        }}"""


@dataclass(frozen=True)
class ResolverDefinition:
    """Everything the stack needs to declare one field resolver."""

    construct_id: str
    type_name: str
    field_name: str
    operation: DynamoDBOperation
    request_template: str
    response_template: str = PASSTHROUGH_RESPONSE


def build_resolver_definitions(
    default_page_size: int = 20,
) -> tuple[ResolverDefinition, ...]:
    """
    Resolver definitions for the two queries and two mutations.

    Args:
        default_page_size: Scan limit for ``listTodos`` without ``limit``

    Returns:
        Definitions ordered get, list, create, delete
    """
    return (
        ResolverDefinition(
            construct_id="GetTodoQueryResolver",
            type_name="Query",
            field_name="getTodo",
            operation="GetItem",
            request_template=get_todo_request(),
        ),
        ResolverDefinition(
            construct_id="ListTodosQueryResolver",
            type_name="Query",
            field_name="listTodos",
            operation="Scan",
            request_template=list_todos_request(default_page_size),
        ),
        ResolverDefinition(
            construct_id="CreateTodoMutationResolver",
            type_name="Mutation",
            field_name="createTodo",
            operation="PutItem",
            request_template=create_todo_request(),
        ),
        ResolverDefinition(
            construct_id="DeleteTodoMutationResolver",
            type_name="Mutation",
            field_name="deleteTodo",
            operation="DeleteItem",
            request_template=delete_todo_request(),
        ),
    )
