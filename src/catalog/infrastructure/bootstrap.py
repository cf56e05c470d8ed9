"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from catalog.config import Settings
from catalog.domain.repository.image_store import ImageStore
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)
from catalog.infrastructure.storage.filesystem_image_store import (
    FilesystemImageStore,
)


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings.from_env()


def product_repository(config: Settings | None = None) -> ProductRepository:
    config = config or settings()
    json_path = config.json_store_path
    if json_path is not None:
        return JsonProductRepository(json_path)
    return MongoProductRepository.from_url(config.store_url)


def image_store(config: Settings | None = None) -> ImageStore:
    config = config or settings()
    return FilesystemImageStore(config.upload_dir)
