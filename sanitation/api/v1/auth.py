from fastapi import APIRouter, Depends, Response

from sanitation.api.deps import bearer_token, current_user, current_user_id
from sanitation.client.auth.gotrue import AuthUser
from sanitation.model.auth.auth_request import ProfileUpdateRequest, SignInRequest, SignUpRequest
from sanitation.model.auth.auth_response import MeResponse, ProfileResponse, SessionResponse, SignUpResponse
from sanitation.service.auth import auth as auth_service

router = APIRouter(tags=["auth"])


@router.post("/auth/signup", response_model=SignUpResponse, status_code=201)
def sign_up(req: SignUpRequest):
    return auth_service.sign_up(req)


@router.post("/auth/signin", response_model=SessionResponse)
def sign_in(req: SignInRequest):
    return auth_service.sign_in(req)


@router.post("/auth/signout", status_code=204)
def sign_out(token: str | None = Depends(bearer_token)):
    auth_service.sign_out(token)
    return Response(status_code=204)


@router.get("/auth/me", response_model=MeResponse)
def me(user: AuthUser | None = Depends(current_user)):
    return auth_service.me(user)


@router.get("/profile", response_model=ProfileResponse)
def get_profile(user_id: str | None = Depends(current_user_id)):
    return auth_service.get_my_profile(user_id)


@router.patch("/profile", response_model=ProfileResponse)
def update_profile(req: ProfileUpdateRequest, user_id: str | None = Depends(current_user_id)):
    return auth_service.update_my_profile(user_id, req)
