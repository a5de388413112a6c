"""CDK stacks."""

from todos_appsync.stacks.todos_stack import TodosAppsyncStack

__all__ = ["TodosAppsyncStack"]
