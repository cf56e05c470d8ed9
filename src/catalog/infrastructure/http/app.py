"""Flask application factory for the catalog API."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from catalog.config import Settings
from catalog.domain.repository.image_store import ImageStore
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure import bootstrap
from catalog.infrastructure.http.errors import register_error_handlers
from catalog.infrastructure.http.products import CatalogServices, bp as products_bp


def create_app(
    settings: Settings | None = None,
    product_repo: ProductRepository | None = None,
    image_store: ImageStore | None = None,
) -> Flask:
    """Build the API app.

    Backends not passed in are taken from the composition root, so tests
    can inject in-memory fakes while ``catalog serve`` uses the configured
    store.
    """
    settings = settings or bootstrap.settings()

    if product_repo is None:
        product_repo = bootstrap.product_repository(settings)
    if image_store is None:
        image_store = bootstrap.image_store(settings)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_mb * 1024 * 1024
    app.json.sort_keys = False
    app.extensions["catalog"] = CatalogServices(product_repo=product_repo, image_store=image_store)

    CORS(app, send_wildcard=True)
    app.register_blueprint(products_bp)
    register_error_handlers(app)
    return app
