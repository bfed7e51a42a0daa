import logging as py_logging
from typing import Iterator

from bucketmanager.errors import OperationError, ResourceReleaseError, describe_error
from bucketmanager.storage.bucket_client import Bucket, BucketClient, BucketTemplate

LOGGER = py_logging.getLogger("bucketmanager.manager")
LOGGER.addHandler(py_logging.NullHandler())


class BucketManager:
    """
    Creates, deletes and lists buckets through an authenticated bucket client.

    The manager owns the client and releases it exactly once, either through
    `close` or by leaving a `with` block. Failures of the client are raised as
    `OperationError` carrying the message shown to the user.
    """

    def __init__(self, client: BucketClient) -> None:
        self._client = client
        self._closed = False

    def __enter__(self) -> "BucketManager":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def create_bucket(self, project_name: str, bucket_name: str) -> Bucket:
        """
        Creates a bucket in a given project.
        :param project_name: Name of the project in which the bucket should be created.
        :param bucket_name: Name of the bucket to create.
        :return: The bucket returned by the provider.
        """
        try:
            bucket = self._client.create_bucket(
                project_name, BucketTemplate(name=bucket_name)
            )
        except Exception as e:
            LOGGER.warning(f"Creating bucket {bucket_name} failed: {e}")
            raise OperationError(
                f"Creating bucket {bucket_name} failed.\n{describe_error(e)}"
            ) from e

        # some providers signal failure by returning nothing
        if bucket is None:
            raise OperationError(f"Creating bucket {bucket_name} failed.")

        return bucket

    def delete_bucket(self, bucket_name: str) -> None:
        """
        Deletes a bucket.
        :param bucket_name: Name of the bucket to delete.
        """
        try:
            self._client.delete_bucket(bucket_name)
        except Exception as e:
            LOGGER.warning(f"Deleting bucket {bucket_name} failed: {e}")
            raise OperationError(
                f"Deleting bucket {bucket_name} failed.\n{describe_error(e)}"
            ) from e

    def list_buckets(self, project_name: str) -> Iterator[Bucket]:
        """
        Lists all buckets in a given project.

        The result can be consumed only once; a failure while fetching any page
        is raised from the iterator.
        :param project_name: Name of the project in which the buckets should be listed.
        """
        try:
            yield from self._client.list_buckets(project_name)
        except Exception as e:
            LOGGER.warning(f"Listing buckets for project {project_name} failed: {e}")
            raise OperationError(
                f"Listing buckets for project {project_name} failed.\n{describe_error(e)}"
            ) from e

    def close(self) -> None:
        """
        Releases the client. Calling this more than once has no further effect.
        """
        if self._closed:
            return

        # a failed close is not retried
        self._closed = True
        try:
            self._client.close()
        except Exception as e:
            raise ResourceReleaseError(
                f"Releasing storage client failed.\n{describe_error(e)}"
            ) from e
