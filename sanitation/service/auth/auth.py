import logging

from sanitation.client.auth.gotrue import AuthUser, auth_client
from sanitation.client.db.psql import session_scope
from sanitation.db.repository import profiles as profile_repo
from sanitation.errors import AuthProviderError, AuthRequiredError, NotFoundError
from sanitation.model.auth.auth_request import ProfileUpdateRequest, SignInRequest, SignUpRequest
from sanitation.model.auth.auth_response import (
    MeResponse,
    ProfileResponse,
    SessionResponse,
    SignUpResponse,
    UserInfo,
)
from sanitation.service.validation import require_user

logger = logging.getLogger(__name__)

VERIFY_EMAIL_MESSAGE = "Please check your email to verify your account before logging in."
ALREADY_REGISTERED_MESSAGE = "This email is already registered. Please login instead."
INVALID_CREDENTIALS = "Invalid login credentials"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password. Please try again."


def sign_up(req: SignUpRequest) -> SignUpResponse:
    profile_fields = req.profile_fields()
    metadata = {
        key: value.isoformat() if hasattr(value, "isoformat") else value
        for key, value in profile_fields.items()
        if value is not None
    }
    metadata["role"] = req.role
    try:
        user, _ = auth_client.sign_up(str(req.email), req.password, metadata)
    except AuthProviderError as exc:
        if "already registered" in exc.message:
            raise AuthProviderError(ALREADY_REGISTERED_MESSAGE) from exc
        raise

    with session_scope() as db:
        profile_repo.insert_profile(db, user.id, profile_fields)
        profile_repo.insert_role(db, user.id, req.role)
    logger.info("account created user=%s role=%s", user.id, req.role)
    return SignUpResponse(user=UserInfo(id=user.id, email=user.email), message=VERIFY_EMAIL_MESSAGE)


def sign_in(req: SignInRequest) -> SessionResponse:
    try:
        session = auth_client.sign_in(str(req.email), req.password)
    except AuthProviderError as exc:
        # Only the bad-password case is reworded; anything else (e.g. unconfirmed email) goes out as is.
        if exc.message == INVALID_CREDENTIALS:
            raise AuthProviderError(INVALID_CREDENTIALS_MESSAGE) from exc
        raise
    return SessionResponse(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_in=session.expires_in,
        user=UserInfo(id=session.user.id, email=session.user.email),
    )


def sign_out(access_token: str | None) -> None:
    if not access_token:
        return
    auth_client.sign_out(access_token)


def resolve_user(access_token: str | None) -> AuthUser | None:
    if not access_token:
        return None
    try:
        return auth_client.get_user(access_token)
    except AuthProviderError as exc:
        raise AuthRequiredError("Your session has expired. Please login again.") from exc


def fetch_profile(user_id: str) -> ProfileResponse | None:
    with session_scope() as db:
        profile = profile_repo.get_profile(db, user_id)
        return ProfileResponse.model_validate(profile) if profile else None


def fetch_role(user_id: str) -> str | None:
    with session_scope() as db:
        return profile_repo.get_role(db, user_id)


def me(user: AuthUser | None) -> MeResponse:
    if user is None:
        raise AuthRequiredError()
    profile = None
    role = None
    # Profile and role are display data; failing to load them must not block the caller.
    try:
        profile = fetch_profile(user.id)
        role = fetch_role(user.id)
    except Exception:
        logger.exception("profile/role lookup failed user=%s", user.id)
    return MeResponse(user=UserInfo(id=user.id, email=user.email), profile=profile, role=role)


def update_my_profile(user_id: str | None, req: ProfileUpdateRequest) -> ProfileResponse:
    owner = require_user(user_id)
    changes = req.model_dump(exclude_unset=True)
    with session_scope() as db:
        profile = profile_repo.get_profile(db, owner)
        if profile is None:
            raise NotFoundError("Profile not found")
        profile = profile_repo.update_profile(db, profile, changes)
        return ProfileResponse.model_validate(profile)


def get_my_profile(user_id: str | None) -> ProfileResponse:
    owner = require_user(user_id)
    profile = fetch_profile(owner)
    if profile is None:
        raise NotFoundError("Profile not found")
    return profile
