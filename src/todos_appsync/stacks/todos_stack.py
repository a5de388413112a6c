"""
CDK stack for the todos GraphQL API.

Declares the DynamoDB table, the AppSync API with its key, schema and
DynamoDB data source, and one resolver per root field. CloudFormation owns
creation order beyond the explicit dependencies declared here.
"""

from typing import Any

from aws_cdk import CfnOutput, RemovalPolicy, Stack
from aws_cdk import aws_appsync as appsync
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_iam as iam
from constructs import Construct
from loguru import logger

from todos_appsync.resolvers import ResolverDefinition, build_resolver_definitions
from todos_appsync.schema import TODOS_SCHEMA

TABLE_KEY = "id"
APPSYNC_PRINCIPAL = "appsync.amazonaws.com"
DATA_STORE_POLICY = "AmazonDynamoDBFullAccess"


class TodosAppsyncStack(Stack):
    """
    AppSync API for todos backed by a single DynamoDB table.

    Attributes:
        table: Todos table, removed with the stack
        role: Role AppSync assumes to reach the table
        api: GraphQL API authenticated with an API key
        api_key: The API key
        schema: Schema document attached to the API
        data_source: DynamoDB data source bound to the table
        resolvers: Field resolvers keyed by field name
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        table_name: str = "Todos",
        api_name: str = "todos-api",
        data_source_name: str = "TodosDynamoDBDataSource",
        default_page_size: int = 20,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.table = dynamodb.CfnTable(
            self,
            "TodosTable",
            table_name=table_name,
            key_schema=[
                dynamodb.CfnTable.KeySchemaProperty(
                    attribute_name=TABLE_KEY, key_type="HASH"
                )
            ],
            attribute_definitions=[
                dynamodb.CfnTable.AttributeDefinitionProperty(
                    attribute_name=TABLE_KEY, attribute_type="S"
                )
            ],
            billing_mode="PAY_PER_REQUEST",
        )
        self.table.apply_removal_policy(RemovalPolicy.DESTROY)

        self.role = iam.Role(
            self,
            "TodosDynamoDBRole",
            assumed_by=iam.ServicePrincipal(APPSYNC_PRINCIPAL),
        )
        self.role.add_managed_policy(
            iam.ManagedPolicy.from_aws_managed_policy_name(DATA_STORE_POLICY)
        )

        self.api = appsync.CfnGraphQLApi(
            self,
            "TodosApi",
            name=api_name,
            authentication_type="API_KEY",
        )

        self.api_key = appsync.CfnApiKey(
            self, "TodosApiKey", api_id=self.api.attr_api_id
        )

        self.schema = appsync.CfnGraphQLSchema(
            self,
            "TodosSchema",
            api_id=self.api.attr_api_id,
            definition=TODOS_SCHEMA,
        )
        self.schema.add_dependency(self.table)

        self.data_source = appsync.CfnDataSource(
            self,
            "TodosApiDataSource",
            api_id=self.api.attr_api_id,
            name=data_source_name,
            type="AMAZON_DYNAMODB",
            dynamo_db_config=appsync.CfnDataSource.DynamoDBConfigProperty(
                table_name=self.table.ref,
                aws_region=self.region,
            ),
            service_role_arn=self.role.role_arn,
        )

        self.resolvers: dict[str, appsync.CfnResolver] = {}
        for definition in build_resolver_definitions(default_page_size):
            self.resolvers[definition.field_name] = self._add_resolver(definition)

        self._add_outputs()

        logger.debug(
            f"Declared {construct_id}: table={table_name}, api={api_name}, "
            f"resolvers={sorted(self.resolvers)}"
        )

    def _add_resolver(self, definition: ResolverDefinition) -> appsync.CfnResolver:
        """Declare one unit resolver against the DynamoDB data source."""
        resolver = appsync.CfnResolver(
            self,
            definition.construct_id,
            api_id=self.api.attr_api_id,
            type_name=definition.type_name,
            field_name=definition.field_name,
            data_source_name=self.data_source.name,
            request_mapping_template=definition.request_template,
            response_mapping_template=definition.response_template,
        )
        # The data source is referenced by literal name, so order it explicitly
        resolver.add_dependency(self.schema)
        resolver.add_dependency(self.data_source)
        return resolver

    def _add_outputs(self) -> None:
        """Export the API id, GraphQL URL and API key."""
        CfnOutput(
            self,
            "TodosApiId",
            value=self.api.attr_api_id,
            description="AppSync API id",
        )
        CfnOutput(
            self,
            "TodosGraphQLUrl",
            value=self.api.attr_graph_ql_url,
            description="GraphQL endpoint of the todos API",
        )
        CfnOutput(
            self,
            "TodosApiKeyValue",
            value=self.api_key.attr_api_key,
            description="API key for the todos API",
        )
