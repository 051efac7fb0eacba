import logging
from typing import BinaryIO

import boto3
from botocore.exceptions import BotoCoreError, ClientError

import sanitation.config.config as configs
from sanitation.errors import StorageError

logger = logging.getLogger(__name__)


class ObjectStorage:
    """S3-compatible bucket access for user images."""

    def __init__(self, client=None, public_base_url: str = ""):
        self._client = client
        self._public_base_url = public_base_url.rstrip("/")

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                "s3",
                endpoint_url=configs.STORAGE_ENDPOINT_URL,
                aws_access_key_id=configs.STORAGE_ACCESS_KEY or None,
                aws_secret_access_key=configs.STORAGE_SECRET_KEY or None,
                region_name=configs.STORAGE_REGION,
            )
        return self._client

    def upload(self, bucket: str, path: str, body: BinaryIO, content_type: str) -> str:
        try:
            self.client.put_object(Bucket=bucket, Key=path, Body=body, ContentType=content_type)
        except (BotoCoreError, ClientError) as exc:
            logger.exception("storage upload failed bucket=%s key=%s", bucket, path)
            raise StorageError(str(exc)) from exc
        return self.public_url(bucket, path)

    def public_url(self, bucket: str, path: str) -> str:
        if self._public_base_url:
            return f"{self._public_base_url}/{bucket}/{path}"
        if configs.STORAGE_ENDPOINT_URL:
            return f"{configs.STORAGE_ENDPOINT_URL.rstrip('/')}/{bucket}/{path}"
        return f"https://{bucket}.s3.amazonaws.com/{path}"


object_storage = ObjectStorage(public_base_url=configs.STORAGE_PUBLIC_URL)
