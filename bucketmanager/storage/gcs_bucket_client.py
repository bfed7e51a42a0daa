import logging as py_logging
from typing import Iterator, Optional

from google.oauth2 import service_account
from googleapiclient import discovery

from bucketmanager.config import (
    SCOPES,
    STORAGE_API_NAME,
    STORAGE_API_VERSION,
    TOKEN_URI,
)
from bucketmanager.credentials import ServiceAccountCredential
from bucketmanager.storage.bucket_client import Bucket, BucketClient, BucketTemplate
from bucketmanager.utils.request_util import build_authorized_http

LOGGER = py_logging.getLogger("bucketmanager.storage.gcs_bucket_client")
LOGGER.addHandler(py_logging.NullHandler())


class GCSBucketClient(BucketClient):
    """
    Bucket client for Google Cloud Storage, backed by the JSON API (storage v1).
    """

    def __init__(self, credentials: service_account.Credentials) -> None:
        """
        :param credentials: service account credentials scoped for storage
        """
        self._credentials = credentials
        self._closed = False

        authorized_http = build_authorized_http(self._credentials)
        self._storage_service = discovery.build(
            STORAGE_API_NAME,
            STORAGE_API_VERSION,
            cache_discovery=False,
            http=authorized_http,
        )

    @classmethod
    def from_service_account(cls, credential: ServiceAccountCredential) -> "GCSBucketClient":
        """
        Build a client from a service account email and PEM private key.

        The key is parsed here; the token exchange happens on the first request.
        """
        LOGGER.debug(f"Building storage client for {credential.email_address}")
        credentials = service_account.Credentials.from_service_account_info(
            {
                "client_email": credential.email_address,
                "private_key": credential.private_key_pem,
                "token_uri": TOKEN_URI,
            },
            scopes=SCOPES,
        )
        return cls(credentials)

    def create_bucket(self, project_name: str, template: BucketTemplate) -> Optional[Bucket]:
        LOGGER.info(f"Creating bucket {template.name} in project {project_name}")
        resource = (
            self._storage_service.buckets()
            .insert(project=project_name, body=template.to_resource())
            .execute()
        )
        if not resource:
            return None

        return Bucket.from_resource(resource)

    def delete_bucket(self, bucket_name: str) -> None:
        LOGGER.info(f"Deleting bucket {bucket_name}")
        self._storage_service.buckets().delete(bucket=bucket_name).execute()

    def list_buckets(self, project_name: str) -> Iterator[Bucket]:
        """
        Lists the buckets of a project, fetching further pages as the iterator advances.
        """
        LOGGER.info(f"Listing buckets for project {project_name}")
        list_request = self._storage_service.buckets().list(project=project_name)

        while list_request is not None:
            list_response = list_request.execute()

            for resource in list_response.get("items", []):
                yield Bucket.from_resource(resource)

            list_request = self._storage_service.buckets().list_next(
                previous_request=list_request, previous_response=list_response
            )

    def close(self) -> None:
        if self._closed:
            return

        LOGGER.debug("Closing storage client")
        self._storage_service.close()
        self._closed = True
