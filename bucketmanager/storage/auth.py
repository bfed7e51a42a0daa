"""
Builds authenticated bucket clients for a provider.
"""

import logging as py_logging
from typing import Callable, Dict

from bucketmanager.config import PROVIDER
from bucketmanager.credentials import ServiceAccountCredential
from bucketmanager.errors import (
    AuthenticationError,
    BucketManagerError,
    describe_error,
)
from bucketmanager.storage.bucket_client import BucketClient
from bucketmanager.storage.gcs_bucket_client import GCSBucketClient

LOGGER = py_logging.getLogger("bucketmanager.storage.auth")
LOGGER.addHandler(py_logging.NullHandler())

_CLIENT_BUILDERS: Dict[str, Callable[[ServiceAccountCredential], BucketClient]] = {
    PROVIDER: GCSBucketClient.from_service_account,
}


def authenticate(provider: str, credential: ServiceAccountCredential) -> BucketClient:
    """
    Build a bucket client for the given provider, authenticated as the service account.

    :param provider: provider selector, e.g. "google-cloud-storage"
    :param credential: service account email and private key
    :raises AuthenticationError: if the provider is unknown or the client cannot be built
    :raises ConfigurationError: if the client configuration is invalid
    """
    if provider not in _CLIENT_BUILDERS:
        raise AuthenticationError(f"Unknown provider: {provider}")

    try:
        client = _CLIENT_BUILDERS[provider](credential)
    except BucketManagerError:
        raise
    except Exception as e:
        raise AuthenticationError(
            f"Authenticating service account {credential.email_address} failed.\n{describe_error(e)}"
        ) from e

    LOGGER.debug(f"Authenticated {credential.email_address} against {provider}")
    return client
