from __future__ import annotations

import pytest

from userhub.application.services.credential_store import CredentialStore
from userhub.application.services.session_manager import SessionManager
from userhub.application.use_cases.users.list_users import ListUsersUseCase
from userhub.application.use_cases.users.login_user import LoginUserUseCase
from userhub.application.use_cases.users.logout_user import LogoutUserUseCase
from userhub.application.use_cases.users.register_user import RegisterUserUseCase
from userhub.domain.users.entities import TokenClaims
from userhub.domain.users.exceptions import AuthenticationFailure, DuplicateUsernameError
from userhub.infrastructure.sessions.memory_store import InMemorySessionStore
from userhub.infrastructure.tokens.jwt_issuer import JwtTokenIssuer
from userhub.shared.errors import StoreError
from userhub.tests.fakes import (
    BrokenUserRepository,
    CountingHasher,
    DeterministicHasher,
    InMemoryUserRepository,
)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def credentials(users: InMemoryUserRepository) -> CredentialStore:
    return CredentialStore(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def sessions() -> SessionManager:
    return SessionManager(InMemorySessionStore())


def test_register_user_stores_hash_not_plaintext(credentials: CredentialStore) -> None:
    user = RegisterUserUseCase(credentials=credentials).execute("alice", "secret123")

    stored = credentials.find_by_username("alice")
    assert stored == user
    assert stored.password_hash != "secret123"


def test_register_user_duplicate_raises(
    credentials: CredentialStore, users: InMemoryUserRepository
) -> None:
    register = RegisterUserUseCase(credentials=credentials)
    register.execute("alice", "secret123")

    with pytest.raises(DuplicateUsernameError):
        register.execute("alice", "other")
    assert len(users.list_all()) == 1


def test_register_user_propagates_store_errors() -> None:
    credentials = CredentialStore(
        users=BrokenUserRepository("disk full"), password_hasher=DeterministicHasher()
    )

    with pytest.raises(StoreError) as excinfo:
        RegisterUserUseCase(credentials=credentials).execute("alice", "secret123")
    assert str(excinfo.value) == "disk full"


def test_login_user_authenticates_session(
    credentials: CredentialStore, sessions: SessionManager
) -> None:
    RegisterUserUseCase(credentials=credentials).execute("alice", "secret123")
    sid = sessions.new_session_id()

    session = LoginUserUseCase(credentials=credentials, sessions=sessions).execute(
        sid, "alice", "secret123"
    )

    assert session.is_authenticated is True
    assert sessions.get(sid).username == "alice"


@pytest.mark.parametrize(
    ("username", "password"),
    [("alice", "wrong"), ("mallory", "secret123"), ("", "secret123")],
)
def test_login_user_invalid_credentials(
    credentials: CredentialStore, sessions: SessionManager, username: str, password: str
) -> None:
    RegisterUserUseCase(credentials=credentials).execute("alice", "secret123")
    sid = sessions.new_session_id()
    login = LoginUserUseCase(credentials=credentials, sessions=sessions)

    with pytest.raises(AuthenticationFailure):
        login.execute(sid, username, password)
    assert sessions.get(sid).is_authenticated is False


def test_logout_user_destroys_session(sessions: SessionManager) -> None:
    sid = sessions.new_session_id()
    sessions.authenticate(sid, "alice")

    LogoutUserUseCase(sessions=sessions).execute(sid)

    assert sessions.exists(sid) is False


def test_logout_without_session_is_noop(sessions: SessionManager) -> None:
    LogoutUserUseCase(sessions=sessions).execute(None)


def test_list_users_mints_fresh_tokens(credentials: CredentialStore) -> None:
    register = RegisterUserUseCase(credentials=credentials)
    register.execute("alice", "secret123")
    register.execute("bob", "hunter2")
    issuer = JwtTokenIssuer("unit-test-secret-with-at-least-32-bytes")
    use_case = ListUsersUseCase(credentials=credentials, tokens=issuer)

    first = use_case.execute()
    second = use_case.execute()

    assert [(item.id, item.username) for item in first] == [(1, "alice"), (2, "bob")]
    assert first[0].token != second[0].token
    assert issuer.decode(first[0].token) == issuer.decode(second[0].token)
    assert issuer.decode(second[1].token) == TokenClaims(id=2, username="bob")


@pytest.mark.parametrize("username", ["alice", "mallory"])
def test_login_failures_run_one_hash_comparison(
    sessions: SessionManager, username: str
) -> None:
    hasher = CountingHasher()
    credentials = CredentialStore(users=InMemoryUserRepository(), password_hasher=hasher)
    credentials.create("alice", "secret123")
    login = LoginUserUseCase(credentials=credentials, sessions=sessions)

    with pytest.raises(AuthenticationFailure):
        login.execute(sessions.new_session_id(), username, "wrong")
    assert hasher.verify_calls == 1
