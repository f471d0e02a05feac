from __future__ import annotations

from userhub.domain.users.entities import User
from userhub.domain.users.repositories import PasswordHasher, UserRepository
from userhub.shared.errors import StoreError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def list_all(self) -> list[User]:
        return sorted(self._users.values(), key=lambda user: user.id)

    def add(self, user: User) -> User:
        new_user = User(
            id=self._seq,
            username=user.username,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.username] = new_user
        return new_user


class BrokenUserRepository(InMemoryUserRepository):
    def __init__(self, message: str = "connection refused") -> None:
        super().__init__()
        self.message = message

    def add(self, user: User) -> User:
        raise StoreError(self.message)

    def list_all(self) -> list[User]:
        raise StoreError(self.message)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class CountingHasher(DeterministicHasher):
    def __init__(self) -> None:
        self.verify_calls = 0

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return super().verify(password, hashed)
