"""Integration tests for the DeleteProduct use case."""

import io

import pytest

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ImageUpload, ProductFields
from catalog.application.query_products import GetProductHandler, ListProductsHandler
from catalog.domain.exceptions import EntityNotFoundError
from catalog.infrastructure.storage.filesystem_image_store import FilesystemImageStore
from tests.fakes import FakeProductRepository, UndeletableImageStore


def _create(repo, store):
    fields = ProductFields(name="Mug", description="Ceramic mug", price="9.99", category="home")
    image = ImageUpload(filename="mug.png", stream=io.BytesIO(b"png"))
    return CreateProductHandler(repo, store).handle(fields, image)


class TestDeleteProduct:

    def test_removes_product_and_image(self, tmp_path):
        repo = FakeProductRepository()
        store = FilesystemImageStore(tmp_path)
        created = _create(repo, store)

        message = DeleteProductHandler(repo, store).handle(created.id)

        assert message == "Product deleted"
        assert ListProductsHandler(repo).handle() == []
        with pytest.raises(EntityNotFoundError):
            GetProductHandler(repo).handle(created.id)
        with pytest.raises(EntityNotFoundError):
            store.path_for(created.image)

    def test_unknown_id(self, tmp_path):
        handler = DeleteProductHandler(FakeProductRepository(), FilesystemImageStore(tmp_path))
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("missing")

    def test_missing_image_file_is_tolerated(self, tmp_path):
        repo = FakeProductRepository()
        store = FilesystemImageStore(tmp_path)
        created = _create(repo, store)
        store.delete(created.image)

        DeleteProductHandler(repo, store).handle(created.id)
        assert repo.find_by_id(created.id) is None

    def test_image_delete_failure_does_not_abort(self, tmp_path):
        repo = FakeProductRepository()
        store = UndeletableImageStore(tmp_path)
        created = _create(repo, store)

        DeleteProductHandler(repo, store).handle(created.id)
        assert repo.find_by_id(created.id) is None
