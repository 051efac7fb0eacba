from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile

import sanitation.config.config as configs
from sanitation.api.deps import current_user_id
from sanitation.model.contact.contact_request import ContactRequest
from sanitation.model.contact.contact_response import ContactResponse
from sanitation.model.upload.upload_response import UploadResponse
from sanitation.model.zone.zone_response import ZoneResponse
from sanitation.service.contact.contact import submit_contact_message
from sanitation.service.upload.upload import upload_image
from sanitation.service.zone.zone import list_zones

router = APIRouter()


@router.post("/contact", response_model=ContactResponse, status_code=201, tags=["contact"])
def contact(req: ContactRequest):
    return submit_contact_message(req)


@router.get("/zones", response_model=List[ZoneResponse], tags=["zones"])
def zones(day: Optional[str] = None):
    return list_zones(day)


def _upload(bucket: str, file: UploadFile, user_id: str | None) -> UploadResponse:
    file.file.seek(0, 2)
    size = file.file.tell()
    file.file.seek(0)
    return upload_image(user_id, bucket, file.filename, file.content_type, file.file, size)


@router.post("/uploads/complaint-images", response_model=UploadResponse, status_code=201, tags=["uploads"])
def upload_complaint_image(file: UploadFile = File(...), user_id: str | None = Depends(current_user_id)):
    return _upload(configs.COMPLAINT_IMAGES_BUCKET, file, user_id)


@router.post("/uploads/employee-photos", response_model=UploadResponse, status_code=201, tags=["uploads"])
def upload_employee_photo(file: UploadFile = File(...), user_id: str | None = Depends(current_user_id)):
    return _upload(configs.EMPLOYEE_PHOTOS_BUCKET, file, user_id)
