from typing import List

from fastapi import APIRouter, Depends

from sanitation.api.deps import current_user_id
from sanitation.model.complaint.complaint_request import ComplaintRequest
from sanitation.model.complaint.complaint_response import CategoryResponse, ComplaintResponse
from sanitation.service.complaint import complaint as complaint_service

router = APIRouter(tags=["complaints"])


@router.get("/complaint-categories", response_model=List[CategoryResponse])
def complaint_categories():
    return complaint_service.list_categories()


@router.post("/complaints", response_model=ComplaintResponse, status_code=201)
def submit_complaint(req: ComplaintRequest, user_id: str | None = Depends(current_user_id)):
    return complaint_service.submit_complaint(user_id, req)


@router.get("/complaints/mine", response_model=List[ComplaintResponse])
def my_complaints(user_id: str | None = Depends(current_user_id)):
    return complaint_service.list_my_complaints(user_id)
