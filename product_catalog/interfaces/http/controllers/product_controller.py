# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from product_catalog.application.use_cases.products import (
    CreateProductUseCase,
    DeleteProductsUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ProductQuery,
    QueryProductsUseCase,
    UpdateProductUseCase,
)
from product_catalog.domain.products.exceptions import InvalidProductIdsError
from product_catalog.interfaces.http.auth import AuthGate, current_identity
from product_catalog.interfaces.http.dto.products import DeleteProductsDTO, ProductWriteDTO
from product_catalog.shared.errors.validation import format_pydantic_errors, raise_validation_error
from product_catalog.shared.logging import logger


def _parse_product_body() -> ProductWriteDTO:
    try:
        return ProductWriteDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class ProductController:
    def __init__(
        self,
        *,
        gate: AuthGate,
        query_use_case: QueryProductsUseCase,
        get_use_case: GetProductUseCase,
        create_use_case: CreateProductUseCase,
        update_use_case: UpdateProductUseCase,
        delete_use_case: DeleteProductUseCase,
        delete_many_use_case: DeleteProductsUseCase,
    ) -> None:
        self._gate = gate
        self._query_use_case = query_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case
        self._delete_many_use_case = delete_many_use_case

    def list_products(self) -> tuple[Response, int]:
        query = ProductQuery(
            name=request.args.get("name"),
            min_price=request.args.get("minPrice"),
            max_price=request.args.get("maxPrice"),
            page=request.args.get("page"),
            limit=request.args.get("limit"),
        )
        result = self._query_use_case.execute(query)
        return jsonify(result.to_dict()), 200

    def get_product(self, product_id: str) -> tuple[Response, int]:
        product = self._get_use_case.execute(product_id)
        return jsonify(product.to_record()), 200

    def create(self) -> tuple[Response, int]:
        dto = _parse_product_body()
        product = self._create_use_case.execute(dto.supplied_fields())
        logger.debug(f"products.create: by user={current_identity().id}")
        return jsonify(product.to_record()), 201

    def update(self, product_id: str) -> tuple[Response, int]:
        dto = _parse_product_body()
        product = self._update_use_case.execute(product_id, dto.supplied_fields())
        logger.debug(f"products.update: by user={current_identity().id}")
        return jsonify(product.to_record()), 200

    def delete(self, product_id: str) -> tuple[str, int]:
        self._delete_use_case.execute(product_id)
        return "", 204

    def delete_many(self) -> tuple[str, int]:
        try:
            dto = DeleteProductsDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise InvalidProductIdsError(context=format_pydantic_errors(exc)) from exc
        self._delete_many_use_case.execute(dto.ids)
        return "", 204

    def as_blueprint(self) -> Blueprint:
        protect = self._gate.required
        bp = Blueprint("products", __name__, url_prefix="/products")
        bp.add_url_rule("", endpoint="list", view_func=self.list_products, methods=["GET"])
        bp.add_url_rule("", endpoint="create", view_func=protect(self.create), methods=["POST"])
        bp.add_url_rule(
            "", endpoint="delete_many", view_func=protect(self.delete_many), methods=["DELETE"]
        )
        bp.add_url_rule(
            "/<product_id>", endpoint="get", view_func=self.get_product, methods=["GET"]
        )
        bp.add_url_rule(
            "/<product_id>", endpoint="update", view_func=protect(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<product_id>", endpoint="delete", view_func=protect(self.delete), methods=["DELETE"]
        )
        return bp
