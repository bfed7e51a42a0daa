from abc import ABC
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class BucketTemplate:
    """
    Desired properties of a bucket to create; only the name is supported.
    """

    name: str

    def to_resource(self) -> dict:
        return {"name": self.name}


@dataclass(frozen=True)
class Bucket:
    """
    A named top-level storage container, as returned by the storage provider.
    """

    name: str
    location: Optional[str] = None
    storage_class: Optional[str] = None
    time_created: Optional[str] = None

    @staticmethod
    def from_resource(resource: dict) -> "Bucket":
        """
        Build a bucket from a JSON API bucket resource.
        """
        return Bucket(
            name=resource["name"],
            location=resource.get("location"),
            storage_class=resource.get("storageClass"),
            time_created=resource.get("timeCreated"),
        )


class BucketClient(ABC):
    """
    An authenticated session with a storage provider.

    A client owns network connections and must be closed exactly once when done.
    """

    def create_bucket(self, project_name: str, template: BucketTemplate) -> Optional[Bucket]:
        """
        Creates a bucket in a project.
        :param project_name: The project that will own the bucket.
        :param template: Properties of the bucket to create.
        :return: The created bucket, or None if the provider did not return one.
        """
        raise NotImplementedError

    def delete_bucket(self, bucket_name: str) -> None:
        """
        Deletes an empty bucket.
        :param bucket_name: The bucket to delete.
        """
        raise NotImplementedError

    def list_buckets(self, project_name: str) -> Iterator[Bucket]:
        """
        Lists the buckets of a project, in the order returned by the provider.
        :param project_name: The project whose buckets are listed.
        """
        raise NotImplementedError

    def close(self) -> None:
        """
        Releases the underlying connections.
        """
        raise NotImplementedError
