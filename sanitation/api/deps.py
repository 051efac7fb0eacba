from fastapi import Depends, Header

from sanitation.client.auth.gotrue import AuthUser
from sanitation.service.auth import auth as auth_service


def bearer_token(authorization: str = Header(default="")) -> str | None:
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def current_user(token: str | None = Depends(bearer_token)) -> AuthUser | None:
    return auth_service.resolve_user(token)


def current_user_id(user: AuthUser | None = Depends(current_user)) -> str | None:
    return user.id if user else None
