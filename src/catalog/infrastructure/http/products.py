"""HTTP routes for the product catalog, mounted at ``/api/products``."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Blueprint, current_app, jsonify, request, send_file

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ImageUpload, ProductFields
from catalog.application.query_products import (
    GetImageHandler,
    GetProductHandler,
    ListProductsHandler,
)
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.repository.image_store import ImageStore
from catalog.domain.repository.product_repository import ProductRepository

bp = Blueprint("products", __name__, url_prefix="/api/products")


@dataclass(frozen=True)
class CatalogServices:
    """Backends shared by every request, stored on ``app.extensions``."""

    product_repo: ProductRepository
    image_store: ImageStore


def _services() -> CatalogServices:
    return current_app.extensions["catalog"]


def _submitted_fields() -> ProductFields:
    if request.form:
        return ProductFields.from_mapping(request.form)
    return ProductFields.from_mapping(request.get_json(silent=True) or {})


def _uploaded_image() -> ImageUpload | None:
    upload = request.files.get("image")
    if upload is None or not upload.filename:
        return None
    return ImageUpload(filename=upload.filename, stream=upload.stream)


@bp.get("")
def list_products():
    products = ListProductsHandler(_services().product_repo).handle()
    return jsonify([p.to_json() for p in products]), 200


@bp.get("/category/<category>")
def list_products_by_category(category: str):
    products = ListProductsHandler(_services().product_repo).handle(category=category)
    return jsonify([p.to_json() for p in products]), 200


@bp.get("/images/<image_name>")
def get_image(image_name: str):
    path = GetImageHandler(_services().image_store).handle(image_name)
    return send_file(path.resolve())


@bp.get("/<product_id>")
def get_product(product_id: str):
    product = GetProductHandler(_services().product_repo).handle(product_id)
    return jsonify(product.to_json()), 200


@bp.post("")
def create_product():
    services = _services()
    handler = CreateProductHandler(services.product_repo, services.image_store)
    product = handler.handle(_submitted_fields(), _uploaded_image())
    return jsonify(product.to_json()), 201


@bp.put("/<product_id>")
def update_product(product_id: str):
    services = _services()
    handler = UpdateProductHandler(services.product_repo, services.image_store)
    product = handler.handle(product_id, _submitted_fields(), _uploaded_image())
    return jsonify(product.to_json()), 200


@bp.delete("/<product_id>")
def delete_product(product_id: str):
    services = _services()
    message = DeleteProductHandler(services.product_repo, services.image_store).handle(product_id)
    return jsonify({"message": message}), 200
