"""
Configuration for the bucket manager.

Values are read once from environment variables; unset variables fall back to
the defaults below.
"""

import os
from typing import List

from bucketmanager.errors import ConfigurationError

# provider selector understood by `bucketmanager.storage.auth.authenticate`
PROVIDER = "google-cloud-storage"

STORAGE_API_NAME = "storage"
STORAGE_API_VERSION = "v1"

TOKEN_URI = os.environ.get(
    "BUCKET_MANAGER_TOKEN_URI", "https://oauth2.googleapis.com/token"
)

_SCOPES = os.environ.get(
    "BUCKET_MANAGER_SCOPES",
    "https://www.googleapis.com/auth/devstorage.full_control",
)
SCOPES: List[str] = [scope.strip() for scope in _SCOPES.split(",") if scope.strip()]

# seconds; parsed when a client is built
_HTTP_TIMEOUT = os.environ.get("BUCKET_MANAGER_HTTP_TIMEOUT", "300")

# no log file unless one is requested
LOG_FILE = os.environ.get("BUCKET_MANAGER_LOG_FILE")
LOG_LEVEL = os.environ.get("BUCKET_MANAGER_LOG_LEVEL", "INFO").upper()


def get_http_timeout() -> int:
    """
    Per-request HTTP timeout in seconds.

    :raises ConfigurationError: if BUCKET_MANAGER_HTTP_TIMEOUT is not a positive integer.
    """
    try:
        timeout = int(_HTTP_TIMEOUT)
    except ValueError:
        timeout = 0

    if timeout <= 0:
        raise ConfigurationError(
            f"BUCKET_MANAGER_HTTP_TIMEOUT must be a positive number of seconds, got: {_HTTP_TIMEOUT}"
        )
    return timeout
