# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

import jwt

from userhub.domain.users.entities import TokenClaims
from userhub.domain.users.repositories import TokenIssuer
from userhub.shared.errors import ConfigurationError, InvalidTokenError

DEFAULT_TTL = timedelta(hours=24)


class JwtTokenIssuer(TokenIssuer):
    """Signs stateless bearer tokens with a shared secret.

    Tokens are never stored. Each issuance carries a random ``jti`` so two
    tokens minted for the same user in the same second still differ.
    """

    def __init__(
        self,
        secret: str | None,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TTL,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("JWT_SECRET")
        return self._secret

    def issue(self, claims: TokenClaims) -> str:
        secret = self._require_secret()
        now = datetime.now(UTC)
        payload = {
            "id": claims.id,
            "username": claims.username,
            "iat": now,
            "exp": now + self._ttl,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenClaims:
        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError() from exc

        try:
            return TokenClaims(id=payload["id"], username=payload["username"])
        except KeyError as exc:
            raise InvalidTokenError("missing_claim") from exc
