"""AppSync + DynamoDB todos API declared with the AWS CDK."""

__version__ = "0.1.0"
