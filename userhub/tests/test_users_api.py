from __future__ import annotations

from flask.testing import FlaskClient

from userhub.app import create_app
from userhub.container import Container
from userhub.infrastructure.tokens.jwt_issuer import JwtTokenIssuer
from userhub.tests.fakes import BrokenUserRepository


def _seed(container: Container, *names: str) -> None:
    for name in names:
        container.credential_store.create(name, f"{name}-pw")


def test_list_users_empty(client: FlaskClient) -> None:
    response = client.get("/api/users")

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "data": []}


def test_list_users_returns_tokens(client: FlaskClient, container: Container) -> None:
    _seed(container, "alice", "bob")

    response = client.get("/api/users")

    body = response.get_json()
    assert response.status_code == 200
    assert body["success"] is True
    assert [item["username"] for item in body["data"]] == ["alice", "bob"]
    for item in body["data"]:
        assert set(item) == {"id", "username", "token"}
        claims = container.token_issuer.decode(item["token"])
        assert claims.id == item["id"]
        assert claims.username == item["username"]


def test_list_users_mints_fresh_tokens_each_call(
    client: FlaskClient, container: Container
) -> None:
    _seed(container, "alice")

    first = client.get("/api/users").get_json()["data"][0]
    second = client.get("/api/users").get_json()["data"][0]

    assert first["token"] != second["token"]
    assert container.token_issuer.decode(first["token"]) == container.token_issuer.decode(
        second["token"]
    )


def test_list_users_never_exposes_password_hash(
    client: FlaskClient, container: Container
) -> None:
    _seed(container, "alice")

    raw = client.get("/api/users").get_data(as_text=True)

    assert "password" not in raw
    assert "alice-pw" not in raw


def test_list_users_store_failure(reset_database) -> None:
    container = Container()
    container.user_repository = BrokenUserRepository("connection refused")
    app = create_app(container)

    with app.test_client() as client:
        response = client.get("/api/users")

    assert response.status_code == 500
    assert response.get_json() == {"success": False, "error": "Failed to fetch users"}


def test_list_users_without_secret_is_server_error(reset_database) -> None:
    container = Container()
    container.token_issuer = JwtTokenIssuer(None)
    container.credential_store.create("alice", "pw")
    app = create_app(container)

    with app.test_client() as client:
        response = client.get("/api/users")

    assert response.status_code == 500
    assert response.get_json()["error"] == "configuration_error"
    assert "token" not in response.get_data(as_text=True)


def test_list_users_without_users_needs_no_secret(reset_database) -> None:
    container = Container()
    container.token_issuer = JwtTokenIssuer(None)
    app = create_app(container)

    with app.test_client() as client:
        response = client.get("/api/users")

    assert response.status_code == 200
    assert response.get_json()["data"] == []
