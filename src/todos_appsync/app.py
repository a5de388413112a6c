"""
CDK application entry point.

The CDK CLI runs this module (see cdk.json):
    cdk synth
    cdk deploy

It can also be run directly:
    python -m todos_appsync.app
"""

import aws_cdk as cdk

from todos_appsync.config import Settings, get_settings
from todos_appsync.core.logging import intercept_standard_logging, logger
from todos_appsync.stacks import TodosAppsyncStack


def create_app(settings: Settings | None = None, outdir: str | None = None) -> cdk.App:
    """
    Build the CDK app holding the todos stack.

    Args:
        settings: Settings to use, defaults to get_settings()
        outdir: Cloud assembly directory, defaults to the CDK CLI's choice

    Returns:
        cdk.App ready to synthesize
    """
    settings = settings or get_settings()
    app = cdk.App(outdir=outdir)

    env = None
    if settings.has_explicit_environment():
        env = cdk.Environment(account=settings.aws_account, region=settings.aws_region)

    TodosAppsyncStack(
        app,
        settings.stack_name,
        table_name=settings.table_name,
        api_name=settings.api_name,
        data_source_name=settings.data_source_name,
        default_page_size=settings.default_page_size,
        description=settings.stack_description,
        env=env,
    )

    logger.info(
        f"Created CDK app with stack {settings.stack_name} "
        f"(account={settings.aws_account or 'any'}, region={settings.aws_region or 'any'})"
    )
    return app


def main() -> None:
    """Instantiate the CDK app and synthesize the cloud assembly."""
    intercept_standard_logging()
    app = create_app()
    assembly = app.synth()
    logger.info(f"Synthesized cloud assembly to {assembly.directory}")


if __name__ == "__main__":
    main()
