"""
AppSync mapping template evaluation.

Sends a VTL template and a resolver context to the AppSync
EvaluateMappingTemplate API, so the transcribed templates can be checked
against the managed interpreter without deploying.

Environment Variables:
- AWS_REGION / AWS_DEFAULT_REGION: region used when none is configured
- AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY: credentials (optional with a role)
"""

import json
from typing import Any

import boto3
from botocore.exceptions import ClientError

from todos_appsync.core.logging import logger
from todos_appsync.exceptions import MappingTemplateError
from todos_appsync.resolvers import ResolverDefinition


def build_context(
    arguments: dict[str, Any] | None = None,
    source: dict[str, Any] | None = None,
    identity: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build the resolver context passed to the interpreter.

    Args:
        arguments: Field arguments (``$ctx.args``)
        source: Parent object (``$ctx.source``)
        identity: Caller identity (``$ctx.identity``), empty for API-key callers

    Returns:
        Context dict in the shape EvaluateMappingTemplate expects
    """
    return {
        "arguments": arguments or {},
        "source": source or {},
        "identity": identity or {},
    }


class MappingTemplateEvaluator:
    """Evaluates mapping templates with the AppSync control plane."""

    def __init__(self, region_name: str | None = None):
        """Initialize the AppSync client.

        Args:
            region_name: AWS region, boto3's default resolution when None
        """
        self.region_name = region_name
        self.client = boto3.client("appsync", region_name=region_name)

        logger.info(
            f"Initialized MappingTemplateEvaluator with region={region_name or 'default'}"
        )

    def evaluate(
        self, template: str, arguments: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Evaluate a request template.

        Args:
            template: VTL mapping template
            arguments: Field arguments exposed as ``$ctx.args``

        Returns:
            The evaluated template parsed as JSON

        Raises:
            MappingTemplateError: If the call fails, the interpreter reports
                an error, or the result is not a JSON object
        """
        context = build_context(arguments)

        try:
            response = self.client.evaluate_mapping_template(
                template=template,
                context=json.dumps(context),
            )
        except ClientError as e:
            logger.error(f"EvaluateMappingTemplate call failed: {e}")
            raise MappingTemplateError(str(e)) from e

        error = response.get("error")
        if error:
            message = error.get("message", "unknown evaluation error")
            logger.error(f"Mapping template evaluation failed: {message}")
            raise MappingTemplateError(message)

        for line in response.get("logs", []):
            logger.debug(f"VTL: {line}")

        result = response.get("evaluationResult", "")
        try:
            parsed = json.loads(result)
        except json.JSONDecodeError as e:
            raise MappingTemplateError(
                f"Evaluated template is not valid JSON: {result!r}"
            ) from e

        if not isinstance(parsed, dict):
            raise MappingTemplateError(
                f"Evaluated template is not a JSON object: {result!r}"
            )
        return parsed

    def evaluate_resolver(
        self, definition: ResolverDefinition, arguments: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Evaluate a resolver's request template and check its operation.

        Args:
            definition: Resolver definition to evaluate
            arguments: Field arguments exposed as ``$ctx.args``

        Returns:
            The evaluated DynamoDB request

        Raises:
            MappingTemplateError: If evaluation fails or the request targets a
                different DynamoDB operation than the definition declares
        """
        request = self.evaluate(definition.request_template, arguments)

        operation = request.get("operation")
        if operation != definition.operation:
            raise MappingTemplateError(
                f"{definition.type_name}.{definition.field_name} produced "
                f"{operation!r}, expected {definition.operation!r}"
            )

        logger.debug(
            f"{definition.type_name}.{definition.field_name} -> {operation} {request}"
        )
        return request
