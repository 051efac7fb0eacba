import logging
import time
from typing import BinaryIO

import sanitation.config.config as configs
from sanitation.client.storage.s3 import object_storage
from sanitation.errors import ValidationError
from sanitation.model.upload.upload_response import UploadResponse
from sanitation.service.validation import require_user

logger = logging.getLogger(__name__)


def validate_image(content_type: str | None, size: int) -> None:
    if not (content_type or "").startswith("image/"):
        raise ValidationError("Please upload an image file (JPG, PNG, etc.)")
    if size > configs.MAX_UPLOAD_BYTES:
        raise ValidationError("Please upload an image smaller than 5MB")


def object_path(user_id: str, filename: str | None) -> str:
    name = filename or ""
    ext = name.rsplit(".", 1)[-1].lower() if "." in name else "bin"
    return f"{user_id}/{int(time.time() * 1000)}.{ext}"


def upload_image(
    user_id: str | None,
    bucket: str,
    filename: str | None,
    content_type: str | None,
    body: BinaryIO,
    size: int,
) -> UploadResponse:
    owner = require_user(user_id)
    validate_image(content_type, size)
    path = object_path(owner, filename)
    url = object_storage.upload(bucket, path, body, content_type)
    logger.info("image uploaded bucket=%s key=%s", bucket, path)
    return UploadResponse(url=url, path=path)
