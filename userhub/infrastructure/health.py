# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from userhub.infrastructure.db import ENGINE
from userhub.shared.logging import logger


@dataclass(slots=True, frozen=True)
class HealthReport:
    database: str

    @property
    def ok(self) -> bool:
        return self.database == "ok"

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "database": self.database}


def probe_database() -> HealthReport:
    try:
        with ENGINE.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        reason = str(getattr(exc, "orig", None) or exc)
        logger.error(f"health.database: unreachable ({type(exc).__name__})")
        return HealthReport(database=f"error: {reason}")
    return HealthReport(database="ok")


__all__ = ["HealthReport", "probe_database"]
