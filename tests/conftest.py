"""Shared fixtures for kinesis_logging tests."""

import boto3
import pytest
from botocore.stub import Stubber

from kinesis_logging import KinesisHandler

AWS_ENV_VARS = [
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_ACCESS_KEY",
    "AWS_SECRET_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_SECURITY_TOKEN",
    "AWS_CREDENTIAL_EXPIRATION",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ENDPOINT",
    "AWS_ENDPOINT_URL",
    "AWS_ENDPOINT_URL_KINESIS",
    "AWS_PROFILE",
]


@pytest.fixture(autouse=True)
def clean_aws_env(monkeypatch, tmp_path):
    """Isolate every test from the developer's AWS environment."""
    for name in AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "missing-credentials"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "missing-config"))


@pytest.fixture
def kinesis_client():
    return boto3.session.Session().client(
        "kinesis",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(kinesis_client):
    with Stubber(kinesis_client) as stub:
        yield stub


@pytest.fixture
def handler(kinesis_client):
    return KinesisHandler(kinesis_client, "default_stream")
