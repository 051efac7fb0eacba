from fastapi import APIRouter

from sanitation.api.v1 import auth, complaints, employees, events, misc

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(complaints.router)
api_router.include_router(events.router)
api_router.include_router(employees.router)
api_router.include_router(misc.router)
