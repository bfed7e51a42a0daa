"""
Service account credentials for the bucket manager.
"""

import logging as py_logging
from dataclasses import dataclass, field

from bucketmanager.errors import CredentialFileError

LOGGER = py_logging.getLogger("bucketmanager.credentials")
LOGGER.addHandler(py_logging.NullHandler())


@dataclass(frozen=True)
class ServiceAccountCredential:
    """
    A service account email address and its PEM private key.

    The key is never transmitted; it is only used locally to sign token requests.
    """

    email_address: str
    private_key_pem: str = field(repr=False)


def read_private_key(private_key_path: str) -> str:
    """
    Read the whole private key file as text, using the platform default encoding.

    :param private_key_path: path to a PEM private key file without a password.
    :raises CredentialFileError: if the file cannot be opened or read.
    """
    try:
        with open(private_key_path, "r") as key_file:
            return key_file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialFileError(
            f"Cannot open service account private key PEM file: {private_key_path}\n{e}"
        ) from e


def load_credential(email_address: str, private_key_path: str) -> ServiceAccountCredential:
    """
    Build the credential for a service account from its email and private key file.
    """
    LOGGER.debug(f"Reading private key for {email_address} from {private_key_path}")
    return ServiceAccountCredential(
        email_address=email_address,
        private_key_pem=read_private_key(private_key_path),
    )
