"""HTTP client used by the Catalog Client to talk to the catalog API."""

from __future__ import annotations

import logging

import requests

from catalog.client.state import CatalogItem, CatalogState

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class CatalogApiError(Exception):
    """The API could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CatalogApiClient:

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    def list_products(self) -> list[CatalogItem]:
        payload = self._get("/products")
        try:
            return [CatalogItem.from_json(item) for item in payload]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise CatalogApiError(f"Malformed product list: {exc!r}") from exc

    def image_url(self, image_name: str) -> str:
        return f"{self._base_url}/products/images/{image_name}"

    def load_catalog(self) -> CatalogState:
        """Fetch every product once and build the initial client state."""
        return CatalogState.loaded(self.list_products())

    # --- HTTP helpers ---------------------------------------------------------

    def _get(self, path: str):
        url = self._base_url + path
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.error("GET %s failed: %s", url, exc)
            raise CatalogApiError(f"Cannot reach catalog API: {exc}") from exc

        if not response.ok:
            raise CatalogApiError(_error_message(response), response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            logger.error("GET %s returned a non-JSON body", url)
            raise CatalogApiError(
                f"Invalid JSON from catalog API: {exc}", response.status_code
            ) from exc


def _error_message(response: requests.Response) -> str:
    try:
        return response.json().get("message") or response.reason
    except ValueError:
        return response.text or response.reason
