from __future__ import annotations

from typing import cast

import pytest
from flask import Flask, jsonify

from portfolio.application.use_cases.users.resolve_identity import ResolveIdentityUseCase
from portfolio.domain.users.entities import PublicIdentity
from portfolio.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    UserNotFoundError,
)
from portfolio.infrastructure.auth.gate import (
    RequestGate,
    auth_required,
    current_identity,
    extract_bearer_token,
)
from portfolio.shared.middleware.error_handler import configure_error_handling

UNIFORM_401 = {"message": "Not authorized", "error": "unauthenticated"}


class StubResolver:
    def __init__(self) -> None:
        self.seen: list[str] = []

    def execute(self, token: str) -> PublicIdentity:
        self.seen.append(token)
        if token == "good":
            return PublicIdentity(id=1, username="admin", email="a@x.com")
        if token == "expired":
            raise ExpiredTokenError()
        if token == "orphan":
            raise UserNotFoundError()
        raise InvalidTokenError()


@pytest.fixture()
def resolver() -> StubResolver:
    return StubResolver()


@pytest.fixture()
def gated_app(resolver: StubResolver) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    RequestGate(cast(ResolveIdentityUseCase, resolver)).init_app(app)

    @app.get("/protected")
    @auth_required
    def protected():
        return jsonify(current_identity().to_dict())

    return app


def test_valid_token_reaches_view_with_identity(gated_app: Flask) -> None:
    with gated_app.test_client() as client:
        response = client.get("/protected", headers={"Authorization": "Bearer good"})

    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "username": "admin", "email": "a@x.com"}


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": ""},
        {"Authorization": "Bearer "},
        {"Authorization": "Basic Z29vZA=="},
        {"Authorization": "good"},
        {"Authorization": "Bearer garbage"},
        {"Authorization": "Bearer expired"},
        {"Authorization": "Bearer orphan"},
    ],
)
def test_every_rejection_has_the_same_shape(gated_app: Flask, headers: dict[str, str]) -> None:
    with gated_app.test_client() as client:
        response = client.get("/protected", headers=headers)

    assert response.status_code == 401
    assert response.get_json() == UNIFORM_401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_missing_header_never_calls_resolver(gated_app: Flask, resolver: StubResolver) -> None:
    with gated_app.test_client() as client:
        client.get("/protected")

    assert resolver.seen == []


def test_token_is_only_read_from_authorization_header(gated_app: Flask) -> None:
    with gated_app.test_client() as client:
        client.set_cookie("auth_token", "good")
        response = client.get("/protected?token=good")

    assert response.status_code == 401


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc", "abc"),
        ("bearer abc", "abc"),
        ("Bearer   abc  ", "abc"),
        ("Bearer", None),
        ("Token abc", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header: str | None, expected: str | None) -> None:
    assert extract_bearer_token(header) == expected


def test_gate_must_be_installed() -> None:
    app = Flask(__name__)

    @app.get("/protected")
    @auth_required
    def protected():
        return "never"

    with app.test_client() as client:
        response = client.get("/protected")

    assert response.status_code == 500
