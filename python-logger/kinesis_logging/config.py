"""AWS settings for the Kinesis client."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict

from botocore.credentials import Credentials, EnvProvider, SharedCredentialProvider
from botocore.exceptions import NoCredentialsError, PartialCredentialsError

DEFAULT_REGION = "us-east-1"

REGION_ENV = "AWS_REGION"
ENDPOINT_ENV = "AWS_ENDPOINT"
SHARED_CREDENTIALS_FILE_ENV = "AWS_SHARED_CREDENTIALS_FILE"
PROFILE_ENV = "AWS_PROFILE"

DEFAULT_SHARED_CREDENTIALS_FILE = os.path.join("~", ".aws", "credentials")
DEFAULT_PROFILE = "default"

STATIC_METHOD = "static"

# Older variable names, read when the standard ones are unset.
LEGACY_CREDENTIAL_ENV = {
    "AWS_ACCESS_KEY_ID": "AWS_ACCESS_KEY",
    "AWS_SECRET_ACCESS_KEY": "AWS_SECRET_KEY",
}

logger = logging.getLogger(__name__)


@dataclass
class KinesisConfig:
    """
    AWS settings used to build the Kinesis client.

    Every field is optional. Empty values are resolved from the environment
    when the client is created.
    """

    access_key: str = ""
    secret_key: str = ""
    region: str = ""
    endpoint: str = ""

    def client_kwargs(self) -> Dict[str, Any]:
        """Build keyword arguments for ``Session.client("kinesis", ...)``."""
        credentials = self.resolve_credentials()
        kwargs: Dict[str, Any] = {
            "region_name": self.get_region(),
            "aws_access_key_id": credentials.access_key,
            "aws_secret_access_key": credentials.secret_key,
        }
        if credentials.token:
            kwargs["aws_session_token"] = credentials.token

        endpoint = self.get_endpoint()
        if endpoint:
            kwargs["endpoint_url"] = endpoint
        return kwargs

    def resolve_credentials(self) -> Credentials:
        """
        Pick credentials from the first source that provides a full key pair.

        Sources are tried in order: environment variables, the explicit
        access/secret key of this config, then the shared credentials file.

        Raises:
            NoCredentialsError: if none of the sources has usable credentials
        """
        # from env
        try:
            credentials = EnvProvider(environ=_credential_environ()).load()
        except PartialCredentialsError as e:
            logger.debug(f"Skipping environment credentials: {e}")
            credentials = None
        if _is_complete(credentials):
            return credentials

        # from param
        credentials = Credentials(self.access_key, self.secret_key, method=STATIC_METHOD)
        if _is_complete(credentials):
            return credentials

        # from local file
        try:
            credentials = SharedCredentialProvider(
                creds_filename=shared_credentials_file(),
                profile_name=os.getenv(PROFILE_ENV) or DEFAULT_PROFILE,
            ).load()
        except PartialCredentialsError as e:
            logger.debug(f"Skipping shared credentials file: {e}")
            credentials = None
        if _is_complete(credentials):
            return credentials

        raise NoCredentialsError()

    def get_region(self) -> str:
        """Return the configured region, falling back to env, then the default."""
        if self.region:
            return self.region
        return env_region() or DEFAULT_REGION

    def get_endpoint(self) -> str:
        """Return the configured endpoint, falling back to env; empty means service default."""
        if self.endpoint:
            return self.endpoint
        return env_endpoint()


def _is_complete(credentials) -> bool:
    return (
        credentials is not None
        and bool(credentials.access_key)
        and bool(credentials.secret_key)
    )


def _credential_environ() -> Dict[str, str]:
    environ = dict(os.environ)
    for name, legacy in LEGACY_CREDENTIAL_ENV.items():
        if not environ.get(name) and environ.get(legacy):
            environ[name] = environ[legacy]
    return environ


def shared_credentials_file() -> str:
    """Path of the shared credentials file."""
    path = os.getenv(SHARED_CREDENTIALS_FILE_ENV) or DEFAULT_SHARED_CREDENTIALS_FILE
    return os.path.expanduser(path)


def env_region() -> str:
    """Get the AWS region from the environment."""
    return os.getenv(REGION_ENV, "")


def env_endpoint() -> str:
    """Get the AWS endpoint from the environment."""
    return os.getenv(ENDPOINT_ENV, "")
