"""Global pytest configuration and fixtures for all tests."""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    Provides a dummy endpoint, API key and region so that no test depends on
    a real deployment or on the developer's AWS configuration.

    These are NOT real credentials - just placeholders for testing.
    """
    # Store original values to restore after tests
    original_env = {}

    test_env_vars = {
        # Deployed API (dummy values for testing)
        "GRAPHQL_ENDPOINT": "https://example123.appsync-api.eu-west-1.amazonaws.com/graphql",
        "GRAPHQL_API_KEY": "da2-testapikeyfortestingonly",
        # AWS SDK (boto3 clients are mocked, but need a region to be created)
        "AWS_DEFAULT_REGION": "eu-west-1",
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        # Keep synthesized stacks environment-agnostic
        "AWS_ACCOUNT": "",
        "AWS_REGION": "",
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    # Restore original environment after all tests
    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value
