"""
Errors raised while managing buckets.

Every error carries the message shown to the user; the command line handler
prints it to stderr and exits with status 1.
"""

from googleapiclient.errors import HttpError


class BucketManagerError(Exception):
    """
    Base class for all errors reported by the bucket manager.
    """


class UsageError(BucketManagerError):
    """
    Bad or missing arguments, or an unknown command.
    """


class CredentialFileError(BucketManagerError):
    """
    The service account private key file could not be read.
    """


class AuthenticationError(BucketManagerError):
    """
    The storage client could not be built from the given credentials.
    """


class OperationError(BucketManagerError):
    """
    A create, delete or list call failed.
    """


class ResourceReleaseError(BucketManagerError):
    """
    The storage client could not be closed.
    """


class ConfigurationError(BucketManagerError):
    """
    A configuration value from the environment is invalid.
    """


def describe_error(error: Exception) -> str:
    """
    Short human-readable description of an error raised by the client library.
    """
    if isinstance(error, HttpError):
        reason = getattr(error, "reason", None)
        if reason:
            return str(reason)
    return str(error)
