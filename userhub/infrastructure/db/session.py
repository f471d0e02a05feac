# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from userhub.shared.config import DatabaseConfig, load_config
from userhub.shared.logging import logger

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Base(DeclarativeBase):
    pass


def _engine_options(database: DatabaseConfig) -> dict[str, Any]:
    if not database.url.startswith("sqlite"):
        return {
            "pool_pre_ping": True,
            "pool_size": database.pool_size,
            "max_overflow": database.max_overflow,
            "pool_timeout": database.pool_timeout,
        }

    options: dict[str, Any] = {
        "connect_args": {
            "check_same_thread": False,
            "timeout": int(database.pool_timeout),
        }
    }
    if database.url in _IN_MEMORY_URLS:
        # one shared connection, otherwise every checkout sees an empty database
        options["poolclass"] = StaticPool
    return options


def build_engine(database: DatabaseConfig) -> Engine:
    return create_engine(database.url, echo=False, **_engine_options(database))


ENGINE: Engine = build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    """Unit of work for one repository call: commit on success, roll back on error."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception as exc:
        logger.warning(f"db.session: rollback after {type(exc).__name__}")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()


def init_db() -> None:
    Base.metadata.create_all(bind=ENGINE)
    logger.info(f"db.init: schema ensured tables={sorted(Base.metadata.tables)}")
