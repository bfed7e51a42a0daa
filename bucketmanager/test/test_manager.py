import unittest
from unittest import mock

from bucketmanager.errors import OperationError, ResourceReleaseError
from bucketmanager.manager import BucketManager
from bucketmanager.storage.bucket_client import Bucket, BucketClient, BucketTemplate


class BucketManagerSuite(unittest.TestCase):
    """
    Tests error translation and client release in BucketManager.
    """

    def setUp(self):
        self._client = mock.create_autospec(BucketClient, instance=True)
        self._manager = BucketManager(self._client)

    def test_create_bucket(self):
        self._client.create_bucket.return_value = Bucket("mybucket")
        bucket = self._manager.create_bucket("myproj", "mybucket")
        self.assertEqual(bucket.name, "mybucket")
        self._client.create_bucket.assert_called_once_with(
            "myproj", BucketTemplate(name="mybucket")
        )

    def test_create_bucket_failure(self):
        self._client.create_bucket.side_effect = RuntimeError("quota exceeded")
        with self.assertRaises(OperationError) as context:
            self._manager.create_bucket("myproj", "mybucket")
        self.assertEqual(
            str(context.exception), "Creating bucket mybucket failed.\nquota exceeded"
        )

    def test_create_bucket_without_result(self):
        """
        A client returning nothing is treated as a failure.
        """
        self._client.create_bucket.return_value = None
        with self.assertRaises(OperationError) as context:
            self._manager.create_bucket("myproj", "mybucket")
        self.assertEqual(str(context.exception), "Creating bucket mybucket failed.")

    def test_delete_bucket_failure(self):
        self._client.delete_bucket.side_effect = RuntimeError("not empty")
        with self.assertRaises(OperationError) as context:
            self._manager.delete_bucket("mybucket")
        self.assertEqual(
            str(context.exception), "Deleting bucket mybucket failed.\nnot empty"
        )

    def test_list_buckets_preserves_order(self):
        self._client.list_buckets.return_value = iter([Bucket("b"), Bucket("a")])
        names = [bucket.name for bucket in self._manager.list_buckets("myproj")]
        self.assertEqual(names, ["b", "a"])

    def test_list_buckets_failure_mid_iteration(self):
        def pages(project_name):
            yield Bucket("a")
            raise RuntimeError("backend error")

        self._client.list_buckets.side_effect = pages
        buckets = self._manager.list_buckets("myproj")
        self.assertEqual(next(buckets).name, "a")
        with self.assertRaises(OperationError) as context:
            next(buckets)
        self.assertEqual(
            str(context.exception),
            "Listing buckets for project myproj failed.\nbackend error",
        )

    def test_close_once(self):
        with self._manager:
            pass
        self._manager.close()
        self._client.close.assert_called_once_with()

    def test_close_failure(self):
        self._client.close.side_effect = OSError("connection reset")
        with self.assertRaises(ResourceReleaseError):
            self._manager.close()
        # not retried
        self._manager.close()
        self._client.close.assert_called_once_with()
