"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from userhub.application.services.credential_store import CredentialStore
from userhub.application.services.password_hashing import WerkzeugPasswordHasher
from userhub.application.services.session_manager import SessionManager
from userhub.application.use_cases.users.list_users import ListUsersUseCase
from userhub.application.use_cases.users.login_user import LoginUserUseCase
from userhub.application.use_cases.users.logout_user import LogoutUserUseCase
from userhub.application.use_cases.users.register_user import RegisterUserUseCase
from userhub.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from userhub.infrastructure.sessions.memory_store import InMemorySessionStore
from userhub.infrastructure.tokens.jwt_issuer import JwtTokenIssuer
from userhub.interfaces.http.controllers.auth_controller import AuthController
from userhub.interfaces.http.controllers.health_controller import HealthController
from userhub.interfaces.http.controllers.pages_controller import PagesController
from userhub.interfaces.http.controllers.users_controller import UsersController
from userhub.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.security.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def credential_store(self) -> CredentialStore:
        return CredentialStore(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def session_store(self) -> InMemorySessionStore:
        return InMemorySessionStore()

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(self.session_store)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        tokens = self._config.tokens
        return JwtTokenIssuer(
            tokens.secret,
            algorithm=tokens.algorithm,
            ttl=timedelta(seconds=tokens.ttl_seconds),
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(credentials=self.credential_store)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(credentials=self.credential_store, sessions=self.session_manager)

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_manager)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(credentials=self.credential_store, tokens=self.token_issuer)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def pages_controller(self) -> PagesController:
        return PagesController()

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(list_users=self.list_users_use_case)

    @cached_property
    def health_controller(self) -> HealthController:
        return HealthController()
