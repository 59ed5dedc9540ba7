import logging
from typing import Any, Dict

import requests

from core.entities import ProductId
from core.errors import CatalogSyncError
from core.ports import CatalogGateway

logger = logging.getLogger(__name__)


class HttpCatalogClient(CatalogGateway):
    """Cliente JSON del endpoint /products (una petición por llamada, sin timeout ni reintentos)."""

    def __init__(self, base_url: str, session: requests.Session = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    def _request(self, method: str, **kwargs) -> Any:
        url = f"{self.base_url}/products"
        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise CatalogSyncError(f"{method} {url} failed: {e}") from e

        if not resp.ok:
            raise CatalogSyncError(f"{method} {url} returned {resp.status_code}", status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise CatalogSyncError(f"{method} {url} returned invalid JSON") from e

    def list(self) -> Any:
        return self._request("GET")

    def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", json=document)

    def update(self, product_id: ProductId, document: Dict[str, Any]) -> Any:
        return self._request("PUT", json={"id": product_id, **document})

    def delete(self, product_id: ProductId) -> Any:
        return self._request("DELETE", params={"id": product_id})
