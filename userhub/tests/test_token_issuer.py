from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from userhub.domain.users.entities import TokenClaims
from userhub.infrastructure.tokens.jwt_issuer import JwtTokenIssuer
from userhub.shared.errors import ConfigurationError, InvalidTokenError

SECRET = "unit-test-secret-with-at-least-32-bytes"


def test_issue_and_decode_round_trip_claims() -> None:
    issuer = JwtTokenIssuer(SECRET)

    token = issuer.issue(TokenClaims(id=7, username="alice"))

    assert issuer.decode(token) == TokenClaims(id=7, username="alice")


def test_token_expires_after_24_hours() -> None:
    token = JwtTokenIssuer(SECRET).issue(TokenClaims(id=1, username="alice"))

    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert payload["exp"] - payload["iat"] == 24 * 60 * 60
    assert {"id", "username", "jti"} <= payload.keys()


def test_each_issuance_is_distinct() -> None:
    issuer = JwtTokenIssuer(SECRET)
    claims = TokenClaims(id=1, username="alice")

    assert issuer.issue(claims) != issuer.issue(claims)


@pytest.mark.parametrize("secret", [None, ""])
def test_missing_secret_is_a_configuration_error(secret: str | None) -> None:
    with pytest.raises(ConfigurationError):
        JwtTokenIssuer(secret).issue(TokenClaims(id=1, username="alice"))


def test_expired_token_is_rejected() -> None:
    issuer = JwtTokenIssuer(SECRET, ttl=timedelta(seconds=-5))
    token = issuer.issue(TokenClaims(id=1, username="alice"))

    with pytest.raises(InvalidTokenError) as excinfo:
        issuer.decode(token)
    assert excinfo.value.context == {"reason": "expired"}


def test_token_signed_with_other_secret_is_rejected() -> None:
    token = JwtTokenIssuer("another-secret-with-at-least-32-bytes!").issue(
        TokenClaims(id=1, username="alice")
    )

    with pytest.raises(InvalidTokenError):
        JwtTokenIssuer(SECRET).decode(token)
