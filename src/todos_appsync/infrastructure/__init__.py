"""
AWS control-plane helpers.

- MappingTemplateEvaluator: evaluates resolver templates with AppSync
"""

from todos_appsync.infrastructure.mapping_evaluator import (
    MappingTemplateEvaluator,
    build_context,
)

__all__ = ["MappingTemplateEvaluator", "build_context"]
