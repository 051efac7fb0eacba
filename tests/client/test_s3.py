import io

import pytest
from botocore.exceptions import ClientError

from sanitation.client.storage.s3 import ObjectStorage
from sanitation.errors import StorageError


class FakeS3:
    def __init__(self, error=None):
        self.error = error
        self.objects = {}

    def put_object(self, Bucket, Key, Body, ContentType):
        if self.error:
            raise self.error
        self.objects[(Bucket, Key)] = (Body.read(), ContentType)


def test_upload_returns_public_url():
    fake = FakeS3()
    storage = ObjectStorage(client=fake, public_base_url="https://cdn.example/storage/")

    url = storage.upload("complaint-images", "user-1/1.jpg", io.BytesIO(b"jpeg"), "image/jpeg")

    assert url == "https://cdn.example/storage/complaint-images/user-1/1.jpg"
    assert fake.objects[("complaint-images", "user-1/1.jpg")] == (b"jpeg", "image/jpeg")


def test_upload_failure_is_storage_error():
    error = ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject")
    storage = ObjectStorage(client=FakeS3(error=error))

    with pytest.raises(StorageError):
        storage.upload("employee-photos", "user-1/2.png", io.BytesIO(b"png"), "image/png")
