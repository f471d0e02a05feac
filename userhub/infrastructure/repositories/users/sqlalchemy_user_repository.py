# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from userhub.domain.users.entities import User as DomainUser
from userhub.domain.users.exceptions import DuplicateUsernameError
from userhub.domain.users.repositories import UserRepository
from userhub.infrastructure.db.models import User
from userhub.infrastructure.db.session import session_scope
from userhub.shared.errors import StoreError


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at or datetime.now(UTC)
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.query(User).filter(User.username == username).first()
                if not row:
                    return None
                return _to_domain(row)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def list_all(self) -> list[DomainUser]:
        try:
            with session_scope() as session:
                rows = session.query(User).order_by(User.id).all()
                return [_to_domain(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    username=user.username,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # unique index on username; a concurrent registration won the race
            raise DuplicateUsernameError(context={"username": user.username}) from exc
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
