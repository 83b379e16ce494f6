from __future__ import annotations

import threading

import pytest

from product_catalog.application.services.token_service import JwtTokenService
from product_catalog.application.use_cases.users.login_user import LoginUserUseCase
from product_catalog.application.use_cases.users.register_user import RegisterUserUseCase
from product_catalog.domain.users.entities import Identity, User
from product_catalog.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from product_catalog.domain.users.repositories import PasswordHasher, UserRepository

SECRET = "unit-test-secret-with-enough-entropy-0123456789"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: list[User] = []
        self._lock = threading.RLock()

    def locked(self) -> threading.RLock:
        return self._lock

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users if u.username == username), None)

    def add(self, user: User) -> User:
        self._users.append(user)
        return user


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=SECRET)


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository, tokens: JwtTokenService) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user = register.execute("alice", "secret123")

    assert user.username == "alice"
    assert user.id
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_username("alice") == user


def test_register_user_duplicate_raises(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    register.execute("alice", "secret123")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        register.execute("alice", "other")

    assert exc_info.value.message == "User already exists"
    assert [u.username for u in users._users] == ["alice"]


def test_register_assigns_distinct_ids(register: RegisterUserUseCase) -> None:
    first = register.execute("alice", "secret123")
    second = register.execute("bob", "secret123")

    assert first.id != second.id


def test_login_returns_token_for_registered_user(
    register: RegisterUserUseCase, login: LoginUserUseCase, tokens: JwtTokenService
) -> None:
    user = register.execute("alice", "secret123")

    token = login.execute("alice", "secret123")

    assert tokens.verify(token) == Identity(id=user.id, username="alice")


def test_login_wrong_password_and_unknown_user_fail_identically(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice", "secret123")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("mallory", "secret123")

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()
    assert wrong_password.value.message == "Invalid credentials"
