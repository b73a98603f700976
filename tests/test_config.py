"""Tests for credential, region and endpoint resolution."""

import pytest
from botocore.exceptions import NoCredentialsError

from kinesis_logging.config import (
    DEFAULT_REGION,
    STATIC_METHOD,
    KinesisConfig,
    env_endpoint,
    env_region,
)


@pytest.mark.parametrize(
    "access_key, secret_key, region, expected_region",
    [
        ("access_key", "secret_key", "region", "region"),
        ("access_key", "secret_key", "", DEFAULT_REGION),
    ],
)
def test_client_kwargs_with_static_keys(access_key, secret_key, region, expected_region):
    conf = KinesisConfig(access_key=access_key, secret_key=secret_key, region=region)

    kwargs = conf.client_kwargs()

    assert kwargs == {
        "region_name": expected_region,
        "aws_access_key_id": access_key,
        "aws_secret_access_key": secret_key,
    }


def test_client_kwargs_include_endpoint_when_set():
    conf = KinesisConfig(
        access_key="access_key", secret_key="secret_key", endpoint="http://localhost:4566"
    )
    assert conf.client_kwargs()["endpoint_url"] == "http://localhost:4566"


def test_client_kwargs_include_session_token_from_env(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "env_access")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "env_secret")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "env_token")

    kwargs = KinesisConfig().client_kwargs()

    assert kwargs["aws_access_key_id"] == "env_access"
    assert kwargs["aws_session_token"] == "env_token"


def test_static_credentials_without_env():
    conf = KinesisConfig(access_key="access_key", secret_key="secret_key")

    cred = conf.resolve_credentials()

    assert cred.method == STATIC_METHOD
    assert cred.access_key == "access_key"
    assert cred.secret_key == "secret_key"


def test_env_credentials_win_over_static(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "env_access")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "env_secret")
    conf = KinesisConfig(access_key="access_key", secret_key="secret_key")

    cred = conf.resolve_credentials()

    assert cred.method == "env"
    assert cred.access_key == "env_access"
    assert cred.secret_key == "env_secret"


def test_partial_env_credentials_fall_through_to_static(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "env_access")
    conf = KinesisConfig(access_key="access_key", secret_key="secret_key")

    cred = conf.resolve_credentials()

    assert cred.method == STATIC_METHOD
    assert cred.access_key == "access_key"


def test_shared_credentials_file_is_last_resort(monkeypatch, tmp_path):
    creds_file = tmp_path / "credentials"
    creds_file.write_text(
        "[default]\n"
        "aws_access_key_id = file_access\n"
        "aws_secret_access_key = file_secret\n"
        "[other]\n"
        "aws_access_key_id = other_access\n"
        "aws_secret_access_key = other_secret\n"
    )
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(creds_file))

    cred = KinesisConfig(access_key="access_key").resolve_credentials()
    assert cred.method == "shared-credentials-file"
    assert cred.access_key == "file_access"

    monkeypatch.setenv("AWS_PROFILE", "other")
    cred = KinesisConfig().resolve_credentials()
    assert cred.access_key == "other_access"
    assert cred.secret_key == "other_secret"


@pytest.mark.parametrize(
    "use_env, access_key, secret_key",
    [
        (True, "access_key", ""),
        (False, "access_key", ""),
        (False, "", "secret_key"),
        (False, "", ""),
    ],
)
def test_no_credentials(monkeypatch, use_env, access_key, secret_key):
    conf = KinesisConfig()
    if use_env:
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", access_key)
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", secret_key)
    else:
        conf.access_key = access_key
        conf.secret_key = secret_key

    with pytest.raises(NoCredentialsError):
        conf.resolve_credentials()


def test_get_region(monkeypatch):
    conf = KinesisConfig()
    assert conf.get_region() == DEFAULT_REGION, "empty config, empty env"

    monkeypatch.setenv("AWS_REGION", "env_region")
    assert conf.get_region() == "env_region", "empty config, set env"

    conf.region = "conf_region"
    assert conf.get_region() == "conf_region", "set config, set env"

    monkeypatch.delenv("AWS_REGION")
    assert conf.get_region() == "conf_region", "set config, empty env"


def test_get_endpoint(monkeypatch):
    conf = KinesisConfig()
    assert conf.get_endpoint() == "", "empty config, empty env"

    monkeypatch.setenv("AWS_ENDPOINT", "env_endpoint")
    assert conf.get_endpoint() == "env_endpoint", "empty config, set env"

    conf.endpoint = "conf_endpoint"
    assert conf.get_endpoint() == "conf_endpoint", "set config, set env"

    monkeypatch.delenv("AWS_ENDPOINT")
    assert conf.get_endpoint() == "conf_endpoint", "set config, empty env"


@pytest.mark.parametrize(
    "env_name, value, expected",
    [
        ("AWS_REGION", "foo", "foo"),
        ("AWS_REGION", "bar", "bar"),
        ("AWS_REGION1", "xxx", ""),
        ("AWS_REGIO", "xxx", ""),
    ],
)
def test_env_region(monkeypatch, env_name, value, expected):
    assert env_region() == ""
    monkeypatch.setenv(env_name, value)
    assert env_region() == expected


@pytest.mark.parametrize(
    "env_name, value, expected",
    [
        ("AWS_ENDPOINT", "foo", "foo"),
        ("AWS_ENDPOINT", "bar", "bar"),
        ("AWS_ENDPOINT1", "xxx", ""),
        ("AWS_ENDPOIN", "xxx", ""),
    ],
)
def test_env_endpoint(monkeypatch, env_name, value, expected):
    assert env_endpoint() == ""
    monkeypatch.setenv(env_name, value)
    assert env_endpoint() == expected


def test_legacy_env_credential_names(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY", "legacy_access")
    monkeypatch.setenv("AWS_SECRET_KEY", "legacy_secret")
    conf = KinesisConfig(access_key="access_key", secret_key="secret_key")

    cred = conf.resolve_credentials()

    assert cred.method == "env"
    assert cred.access_key == "legacy_access"
    assert cred.secret_key == "legacy_secret"


def test_standard_env_names_win_over_legacy(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "env_access")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "env_secret")
    monkeypatch.setenv("AWS_ACCESS_KEY", "legacy_access")
    monkeypatch.setenv("AWS_SECRET_KEY", "legacy_secret")

    cred = KinesisConfig().resolve_credentials()

    assert cred.access_key == "env_access"
    assert cred.secret_key == "env_secret"
