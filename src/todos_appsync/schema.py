"""
GraphQL schema of the todos API.

The IDL is uploaded as-is to AppSync. graphql-core is only used locally to
check that the document parses and to introspect its root fields.
"""

from typing import Literal

from graphql import GraphQLSchema, build_schema

TODOS_SCHEMA = """
type Todo {
  id: ID!
  name: String!
  description: String
}

input CreateTodoInput {
  id: ID
  name: String!
  description: String
}

input DeleteTodoInput {
  id: ID
}

type PaginatedTodos {
  todos: [Todo]
  nextToken: String
}

type Mutation {
  createTodo(input: CreateTodoInput!): Todo
  deleteTodo(input: DeleteTodoInput!): Todo
}

type Query {
  getTodo(id: ID!): Todo
  listTodos(limit: Int, nextToken: String): PaginatedTodos
}
"""

RootKind = Literal["Query", "Mutation"]


def build_todos_schema(definition: str = TODOS_SCHEMA) -> GraphQLSchema:
    """
    Parse and validate the schema document.

    Args:
        definition: IDL document, defaults to the deployed schema

    Returns:
        GraphQLSchema built by graphql-core

    Raises:
        graphql.GraphQLError: If the document is not valid IDL
        TypeError: If the document does not form a valid schema
    """
    return build_schema(definition)


def root_fields(kind: RootKind, schema: GraphQLSchema | None = None) -> list[str]:
    """Names of the fields on the ``Query`` or ``Mutation`` root type."""
    schema = schema or build_todos_schema()
    root = schema.query_type if kind == "Query" else schema.mutation_type
    if root is None:
        return []
    return list(root.fields)
