"""Mapping templates and resolver definitions."""

from todos_appsync.resolvers.templates import (
    MAPPING_TEMPLATE_VERSION,
    PASSTHROUGH_RESPONSE,
    ResolverDefinition,
    build_resolver_definitions,
)

__all__ = [
    "MAPPING_TEMPLATE_VERSION",
    "PASSTHROUGH_RESPONSE",
    "ResolverDefinition",
    "build_resolver_definitions",
]
