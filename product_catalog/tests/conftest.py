from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from product_catalog.app import create_app
from product_catalog.shared.config import AppConfig

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        SECRET_KEY=TEST_SECRET,
        DATA_DIR=tmp_path / "data",
        PASSWORD_HASH_METHOD="pbkdf2:sha256:1000",
    )


@pytest.fixture()
def app(config: AppConfig) -> Flask:
    return create_app(config)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def register_and_login(client: FlaskClient) -> Callable[[str, str], str]:
    def _login(username: str = "alice", password: str = "secret123") -> str:
        client.post("/auth/register", json={"username": username, "password": password})
        response = client.post("/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200
        return response.get_json()["token"]

    return _login


@pytest.fixture()
def auth_headers(register_and_login: Callable[[str, str], str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {register_and_login('alice', 'secret123')}"}
