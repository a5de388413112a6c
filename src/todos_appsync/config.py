"""
Application configuration and environment variables.

This module unifies configuration using pydantic-settings.
Variables can come from:
1. .env file
2. System environment variables (have priority)
3. Default values

Naming convention:
- In Python code: snake_case (table_name)
- In .env or ENV vars: UPPER_CASE (TABLE_NAME)
- Pydantic automatically converts between both
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified configuration for the CDK app and the Python-side tooling.

    All variables can be defined in:
    - .env file: VARIABLE_NAME=value
    - Environment variables: export VARIABLE_NAME=value

    Example:
        # In .env or as environment variable:
        STACK_NAME=AppsyncDynamodbStack
        TABLE_NAME=Todos
        LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allows using uppercase or lowercase
        extra="ignore",  # Ignores extra variables in .env
    )

    # ============================================================================
    # PROJECT SETTINGS
    # ============================================================================
    project_name: str = Field(default="todos-appsync", description="Project name")

    # ============================================================================
    # STACK SETTINGS
    # ============================================================================
    stack_name: str = Field(
        default="AppsyncDynamodbStack", description="CloudFormation stack name"
    )
    stack_description: str = Field(
        default="AppSync GraphQL API for todos backed by a DynamoDB table",
        description="CloudFormation stack description",
    )
    aws_account: str | None = Field(
        default=None,
        description="Target AWS account (stack is environment-agnostic if unset)",
    )
    aws_region: str | None = Field(
        default=None,
        description="Target AWS region (stack is environment-agnostic if unset)",
    )

    # ============================================================================
    # RESOURCE SETTINGS
    # ============================================================================
    table_name: str = Field(default="Todos", description="DynamoDB table name")
    api_name: str = Field(default="todos-api", description="AppSync API name")
    data_source_name: str = Field(
        default="TodosDynamoDBDataSource",
        description="AppSync data source name (alphanumeric and underscores)",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
    )
    default_page_size: int = Field(
        default=20,
        ge=1,
        description="Scan limit used by listTodos when the caller omits one",
    )

    # ============================================================================
    # CLIENT SETTINGS (deployed API)
    # ============================================================================
    graphql_endpoint: str = Field(
        default="",
        description="GraphQL URL of the deployed API (TodosGraphQLUrl output)",
    )
    graphql_api_key: str = Field(
        default="", description="API key of the deployed API (TodosApiKeyValue output)"
    )
    http_timeout: float = Field(
        default=10.0, gt=0, description="HTTP timeout in seconds for API calls"
    )

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",  # noqa: E501
        description="Log format",
    )
    logger_enqueue: bool = Field(
        default=False, description="Enqueue logs using multiprocessing"
    )

    # ============================================================================
    # HELPER METHODS
    # ============================================================================

    def has_explicit_environment(self) -> bool:
        """
        Check whether the stack should be bound to an account/region.

        Returns:
            bool: True if either the account or the region is configured.
        """
        return bool(self.aws_account or self.aws_region)


# ============================================================================
# SINGLETON PATTERN - Global settings instance
# ============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings (LRU cached).

    This function is cached, so the .env file is only read once.
    To refresh the configuration, clear the cache:
        get_settings.cache_clear()

    Usage:
        from todos_appsync.config import get_settings
        settings = get_settings()
        print(settings.table_name)

    Returns:
        Settings: Application configuration instance.
    """
    return Settings()


# Create global instance for use in modules configured at import time
settings = get_settings()
