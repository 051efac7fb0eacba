from typing import List, Optional

from fastapi import APIRouter, Depends

from sanitation.api.deps import current_user_id
from sanitation.model.employee.employee_response import EmployeeResponse, EncouragementResponse
from sanitation.model.employee.encouragement_request import EncouragementRequest
from sanitation.service.employee import encouragement as encouragement_service

router = APIRouter(tags=["employees"])


@router.get("/employees", response_model=List[EmployeeResponse])
def list_employees(zone: Optional[str] = None, q: Optional[str] = None):
    return encouragement_service.list_employees(zone=zone, query=q)


@router.post(
    "/employees/{employee_id}/encouragements",
    response_model=EncouragementResponse,
    status_code=201,
)
def encourage(employee_id: int, req: EncouragementRequest, user_id: str | None = Depends(current_user_id)):
    return encouragement_service.submit_encouragement(user_id, employee_id, req)
