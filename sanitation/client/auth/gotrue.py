"""HTTP client for the managed email/password auth provider.

Speaks the GoTrue REST dialect (``/signup``, ``/token``, ``/logout``, ``/user``).
Provider rejections are raised as ``AuthProviderError`` with the provider's own
message so the UI can show it unmodified.
"""
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

import sanitation.config.config as configs
from sanitation.errors import AuthProviderError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class AuthUser:
    id: str
    email: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class AuthSession:
    access_token: str
    user: AuthUser
    refresh_token: str | None = None
    expires_in: int | None = None


def _user_from_payload(data: dict[str, Any]) -> AuthUser:
    return AuthUser(
        id=str(data.get("id", "")),
        email=data.get("email"),
        metadata=data.get("user_metadata") or {},
    )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"auth provider error: {response.status_code}"
    if isinstance(body, dict):
        for key in ("msg", "error_description", "message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"auth provider error: {response.status_code}"


class AuthClient:
    def __init__(self, base_url: str, api_key: str, client: httpx.Client | None = None):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=configs.AUTH_TIMEOUT)

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        headers = {"apikey": self._api_key, "Content-Type": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, f"{self._base_url}{path}", **kwargs)
        except httpx.RequestError as exc:
            logger.exception("auth provider request failed path=%s", path)
            raise UpstreamError("Authentication service unavailable. Please try again later.") from exc
        if response.status_code >= 400:
            message = _error_message(response)
            logger.info("auth provider rejected path=%s status=%s", path, response.status_code)
            raise AuthProviderError(message)
        return response

    def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> tuple[AuthUser, AuthSession | None]:
        response = self._request(
            "POST",
            "/signup",
            headers=self._headers(),
            json={"email": email, "password": password, "data": metadata},
        )
        data = response.json()
        # With email confirmation on, the provider answers with the bare user and no session.
        if "access_token" in data:
            session = self._session_from_payload(data)
            return session.user, session
        return _user_from_payload(data), None

    def sign_in(self, email: str, password: str) -> AuthSession:
        response = self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            headers=self._headers(),
            json={"email": email, "password": password},
        )
        return self._session_from_payload(response.json())

    def sign_out(self, access_token: str) -> None:
        self._request("POST", "/logout", headers=self._headers(access_token))

    def get_user(self, access_token: str) -> AuthUser:
        response = self._request("GET", "/user", headers=self._headers(access_token))
        return _user_from_payload(response.json())

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _session_from_payload(data: dict[str, Any]) -> AuthSession:
        return AuthSession(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
            expires_in=data.get("expires_in"),
            user=_user_from_payload(data.get("user") or {}),
        )


auth_client = AuthClient(configs.AUTH_URL, configs.AUTH_API_KEY)
