"""
Loguru configuration for the application.

This module configures loguru with:
- Configurable level and format from settings
- Redirection of standard library logs (botocore, httpx, jsii) to loguru
"""

import logging
import sys

from loguru import logger

from todos_appsync.config import settings


def configure_logger() -> None:
    """
    Configures loguru with application settings.

    This function:
    1. Removes default loguru handlers
    2. Adds handler to stderr with custom configuration
    """
    # Remove default configuration
    logger.remove()

    logger.add(
        sink=sys.stderr,
        level=settings.log_level.upper(),
        format=settings.log_format,
        colorize=True,
        serialize=False,
        backtrace=True,
        diagnose=True,
        enqueue=settings.logger_enqueue,
    )


# Configure logger when importing the module
configure_logger()


__all__ = ["logger", "InterceptHandler", "intercept_standard_logging"]


class InterceptHandler(logging.Handler):
    """
    Handler to redirect standard logging logs to loguru.

    boto3/botocore, httpx and the jsii runtime behind aws-cdk-lib all log
    through the standard library.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """
        Redirects a standard logging record to loguru.

        Args:
            record: logging.LogRecord record
        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def intercept_standard_logging(level: int = logging.WARNING) -> None:
    """
    Configures redirection of standard logging to loguru.

    Intercepts logs from:
    - botocore / boto3 (AWS SDK)
    - httpx (HTTP client)
    - jsii (CDK runtime bridge)

    Args:
        level: Minimum level forwarded from the intercepted libraries
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=level)

    for logger_name in ["botocore", "boto3", "httpx", "jsii"]:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.setLevel(level)
        logging_logger.propagate = False
