import pytest

from sanitation.client.auth.gotrue import AuthSession, AuthUser
from sanitation.errors import AuthProviderError, UpstreamError
from sanitation.service.auth.session import AuthState, SessionManager


class FakeAuth:
    def __init__(self):
        self.sign_in_error = None
        self.sign_out_error = None
        self.signed_out = []

    def sign_in(self, email, password):
        if self.sign_in_error:
            raise self.sign_in_error
        return AuthSession(access_token="token-1", user=AuthUser(id="user-1", email=email))

    def sign_up(self, email, password, metadata):
        return AuthUser(id="user-2", email=email), None

    def sign_out(self, access_token):
        self.signed_out.append(access_token)
        if self.sign_out_error:
            raise self.sign_out_error


@pytest.fixture
def auth():
    return FakeAuth()


@pytest.fixture
def manager(auth):
    return SessionManager(auth, profile_loader=lambda uid: {"user_id": uid}, role_loader=lambda uid: "citizen")


def test_sign_in_moves_to_authenticated_and_notifies(manager):
    seen = []
    manager.subscribe(lambda snap: seen.append(snap.state))

    manager.sign_in("citizen@example.com", "secret123")

    assert seen == [AuthState.AUTHENTICATING, AuthState.AUTHENTICATED]
    assert manager.user.id == "user-1"
    assert manager.profile == {"user_id": "user-1"}
    assert manager.role == "citizen"
    assert manager.access_token == "token-1"


def test_rejected_sign_in_records_error(manager, auth):
    auth.sign_in_error = AuthProviderError("Email not confirmed")
    seen = []
    manager.subscribe(seen.append)

    with pytest.raises(AuthProviderError):
        manager.sign_in("citizen@example.com", "secret123")

    assert manager.state is AuthState.ERROR
    assert seen[-1].error == "Email not confirmed"
    assert manager.user is None


def test_sign_up_without_session_stays_anonymous(manager):
    user = manager.sign_up("new@example.com", "secret123", {"role": "citizen"})

    assert user.id == "user-2"
    assert manager.state is AuthState.ANONYMOUS
    assert manager.session is None


def test_sign_out_tears_down_even_when_remote_fails(manager, auth):
    manager.sign_in("citizen@example.com", "secret123")
    auth.sign_out_error = UpstreamError()

    manager.sign_out()

    assert auth.signed_out == ["token-1"]
    assert manager.state is AuthState.ANONYMOUS
    assert manager.user is None
    assert manager.profile is None
    assert manager.role is None


def test_unsubscribe_stops_notifications(manager):
    seen = []
    unsubscribe = manager.subscribe(seen.append)
    unsubscribe()
    unsubscribe()

    manager.sign_in("citizen@example.com", "secret123")

    assert seen == []


def test_failing_loaders_do_not_block_authentication(auth):
    def broken(user_id):
        raise RuntimeError("profile store down")

    manager = SessionManager(auth, profile_loader=broken, role_loader=broken)

    manager.sign_in("citizen@example.com", "secret123")

    assert manager.state is AuthState.AUTHENTICATED
    assert manager.profile is None
    assert manager.role is None


def test_external_session_change_to_none_tears_down(manager):
    manager.sign_in("citizen@example.com", "secret123")
    seen = []
    manager.subscribe(seen.append)

    manager.on_auth_state_change(None)

    assert [snap.state for snap in seen] == [AuthState.ANONYMOUS]
    assert manager.access_token is None


def test_shared_store_is_built_once_and_wired_to_auth_provider():
    from sanitation.client.auth.gotrue import auth_client
    from sanitation.service.auth.auth import fetch_profile, fetch_role
    from sanitation.service.auth.session import get_session_manager

    manager = get_session_manager()

    assert get_session_manager() is manager
    assert manager._auth is auth_client
    assert manager._profile_loader is fetch_profile
    assert manager._role_loader is fetch_role
    assert manager.state is AuthState.ANONYMOUS
