"""Client-side session store.

For callers that hold a sign-in across calls (scripts, a UI backend) rather
than sending a bearer token per request, which is what the HTTP API does.
Holds the signed-in user together with their profile and role, and tells
subscribers whenever any of it changes.

States::

    anonymous --sign_in/sign_up--> authenticating --ok--> authenticated
                                                 \\--rejected--> error
    authenticated --sign_out--> anonymous
"""
import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Callable

from sanitation.client.auth.gotrue import AuthClient, AuthSession, AuthUser
from sanitation.errors import PortalError

logger = logging.getLogger(__name__)


class AuthState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    ERROR = "error"


@dataclass(frozen=True)
class SessionSnapshot:
    state: AuthState
    user: AuthUser | None = None
    profile: Any = None
    role: str | None = None
    error: str | None = None


Listener = Callable[[SessionSnapshot], None]


class SessionManager:
    def __init__(
        self,
        auth: AuthClient,
        profile_loader: Callable[[str], Any] | None = None,
        role_loader: Callable[[str], str | None] | None = None,
    ):
        self._auth = auth
        self._profile_loader = profile_loader
        self._role_loader = role_loader
        self._listeners: list[Listener] = []
        self._session: AuthSession | None = None
        self.state = AuthState.ANONYMOUS
        self.user: AuthUser | None = None
        self.profile: Any = None
        self.role: str | None = None
        self.last_error: str | None = None

    @property
    def session(self) -> AuthSession | None:
        return self._session

    @property
    def access_token(self) -> str | None:
        return self._session.access_token if self._session else None

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self.state,
            user=self.user,
            profile=self.profile,
            role=self.role,
            error=self.last_error,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    def _begin(self) -> None:
        self.state = AuthState.AUTHENTICATING
        self.last_error = None
        self._notify()

    def _fail(self, exc: PortalError) -> None:
        self.state = AuthState.ERROR
        self.last_error = exc.message
        self._notify()

    def sign_in(self, email: str, password: str) -> AuthSession:
        self._begin()
        try:
            session = self._auth.sign_in(email, password)
        except PortalError as exc:
            self._fail(exc)
            raise
        self.on_auth_state_change(session)
        return session

    def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> AuthUser:
        self._begin()
        try:
            user, session = self._auth.sign_up(email, password, metadata)
        except PortalError as exc:
            self._fail(exc)
            raise
        # No session until the email address is confirmed.
        self.on_auth_state_change(session)
        return user

    def sign_out(self) -> None:
        token = self.access_token
        try:
            if token:
                self._auth.sign_out(token)
        except PortalError:
            logger.warning("remote sign-out failed; clearing local session anyway")
        finally:
            self._teardown()

    def on_auth_state_change(self, session: AuthSession | None) -> None:
        if session is None:
            self._teardown()
            return
        self._session = session
        self.user = session.user
        self.state = AuthState.AUTHENTICATED
        self.last_error = None
        self.profile, self.role = self._load_display_data(session.user.id)
        self._notify()

    def _load_display_data(self, user_id: str) -> tuple[Any, str | None]:
        profile = None
        role = None
        try:
            if self._profile_loader is not None:
                profile = self._profile_loader(user_id)
            if self._role_loader is not None:
                role = self._role_loader(user_id)
        except Exception:
            logger.exception("profile/role load failed user=%s", user_id)
        return profile, role

    def _teardown(self) -> None:
        self._session = None
        self.user = None
        self.profile = None
        self.role = None
        self.state = AuthState.ANONYMOUS
        self._notify()


@lru_cache(maxsize=None)
def get_session_manager() -> SessionManager:
    """The shared store, wired to the auth provider and the profile tables on first use."""
    from sanitation.client.auth.gotrue import auth_client
    from sanitation.service.auth.auth import fetch_profile, fetch_role

    return SessionManager(auth_client, profile_loader=fetch_profile, role_loader=fetch_role)
