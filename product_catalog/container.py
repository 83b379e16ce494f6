"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from product_catalog.application.services.password_hashing import WerkzeugPasswordHasher
from product_catalog.application.services.token_service import JwtTokenService
from product_catalog.application.use_cases.products import (
    CreateProductUseCase,
    DeleteProductsUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    QueryProductsUseCase,
    UpdateProductUseCase,
)
from product_catalog.application.use_cases.users import LoginUserUseCase, RegisterUserUseCase
from product_catalog.domain.products.entities import RECORD_KEYS as PRODUCT_RECORD_KEYS
from product_catalog.domain.users.entities import RECORD_KEYS as USER_RECORD_KEYS
from product_catalog.infrastructure.repositories import JsonProductRepository, JsonUserRepository
from product_catalog.infrastructure.storage import JsonCollectionStore
from product_catalog.interfaces.http.auth import AuthGate
from product_catalog.interfaces.http.controllers import (
    AuthController,
    MiscController,
    ProductController,
)
from product_catalog.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def users_store(self) -> JsonCollectionStore:
        return JsonCollectionStore(
            self.config.users_path, name="users", required_keys=USER_RECORD_KEYS
        )

    @cached_property
    def products_store(self) -> JsonCollectionStore:
        return JsonCollectionStore(
            self.config.products_path, name="products", required_keys=PRODUCT_RECORD_KEYS
        )

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.secret_key,
            ttl_seconds=self.config.token_ttl_seconds,
            algorithm=self.config.jwt_algorithm,
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(self.token_service)

    @cached_property
    def user_repository(self) -> JsonUserRepository:
        return JsonUserRepository(self.users_store)

    @cached_property
    def product_repository(self) -> JsonProductRepository:
        return JsonProductRepository(self.products_store)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def product_controller(self) -> ProductController:
        products = self.product_repository
        return ProductController(
            gate=self.auth_gate,
            query_use_case=QueryProductsUseCase(products=products),
            get_use_case=GetProductUseCase(products=products),
            create_use_case=CreateProductUseCase(products=products),
            update_use_case=UpdateProductUseCase(products=products),
            delete_use_case=DeleteProductUseCase(products=products),
            delete_many_use_case=DeleteProductsUseCase(products=products),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(stores=[self.users_store, self.products_store])
