"""In-memory object store used to observe what the publishing flow uploads and deletes."""
from fitmarket.errors import StorageError
from fitmarket.storage import Bucket, ObjectStorage


class RecordingStorage(ObjectStorage):
    def __init__(self, *, fail_upload=None, fail_remove=None):
        self.objects: dict[tuple[Bucket, str], bytes] = {}
        self.uploads: list[tuple[Bucket, str]] = []
        self.removals: list[tuple[Bucket, list[str]]] = []
        self.fail_upload = fail_upload
        self.fail_remove = fail_remove

    def upload(self, bucket, name, data, *, content_type):
        if self.fail_upload:
            raise StorageError(self.fail_upload)
        self.uploads.append((bucket, name))
        self.objects[(bucket, name)] = data

    def public_url(self, bucket, name):
        return f"https://store.test/{bucket.value}/{name}"

    def remove(self, bucket, names):
        self.removals.append((bucket, list(names)))
        if self.fail_remove:
            raise StorageError(self.fail_remove)
        for n in names:
            self.objects.pop((bucket, n), None)

    def list(self, bucket):
        return sorted(n for b, n in self.objects if b == bucket)
