from __future__ import annotations

import json

from flask.testing import FlaskClient

from product_catalog.application.services.token_service import JwtTokenService
from product_catalog.shared.config import AppConfig


def test_register_then_login_flow(client: FlaskClient, config: AppConfig) -> None:
    register = client.post("/auth/register", json={"username": "alice", "password": "secret123"})
    assert register.status_code == 201
    assert register.get_json() == {"message": "User registered successfully"}
    assert "token" not in register.get_json()

    login = client.post("/auth/login", json={"username": "alice", "password": "secret123"})
    assert login.status_code == 200
    token = login.get_json()["token"]

    identity = JwtTokenService(secret=config.secret_key).verify(token)
    assert identity.username == "alice"

    stored = json.loads(config.users_path.read_text(encoding="utf-8"))
    assert [u["id"] for u in stored] == [identity.id]
    assert stored[0]["password"] != "secret123"


def test_duplicate_registration_is_rejected(client: FlaskClient, config: AppConfig) -> None:
    client.post("/auth/register", json={"username": "alice", "password": "secret123"})

    response = client.post("/auth/register", json={"username": "alice", "password": "other"})

    assert response.status_code == 400
    assert response.get_json()["message"] == "User already exists"
    stored = json.loads(config.users_path.read_text(encoding="utf-8"))
    assert len(stored) == 1


def test_login_failures_share_one_message(client: FlaskClient) -> None:
    client.post("/auth/register", json={"username": "alice", "password": "secret123"})

    wrong_password = client.post("/auth/login", json={"username": "alice", "password": "nope"})
    unknown_user = client.post("/auth/login", json={"username": "bob", "password": "secret123"})

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.get_json() == unknown_user.get_json()
    assert wrong_password.get_json()["message"] == "Invalid credentials"


def test_malformed_body_is_invalid_input(client: FlaskClient) -> None:
    response = client.post("/auth/register", json={"username": "alice"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "invalid_input"
    assert "password" in payload["context"]["fields"]
