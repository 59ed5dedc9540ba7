import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional

from core.entities import Product, ProductId, ProductInput
from core.errors import CatalogSyncError
from core.ports import CatalogGateway

logger = logging.getLogger(__name__)


class RemoteSyncAdapter:
    """Traduce cada mutación del store en una única petición al servicio.

    Sin reintentos ni deduplicación; los errores se registran en el log y no
    llegan a quien llamó.
    """

    def __init__(self, gateway: CatalogGateway, executor: Optional[Executor] = None, max_workers: int = 4):
        self.gateway = gateway
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="catalog-sync")

    def load(self, store) -> Future:
        return self._submit(self._load, store)

    def push_create(self, store, provisional: Product, data: ProductInput) -> Future:
        return self._submit(self._create, store, provisional, data)

    def push_update(self, product_id: ProductId, data: ProductInput) -> Future:
        return self._submit(self._update, product_id, data)

    def push_delete(self, product_id: ProductId) -> Future:
        return self._submit(self._delete, product_id)

    def _submit(self, fn, *args) -> Future:
        return self.executor.submit(self._guarded, fn, *args)

    def _guarded(self, fn, *args):
        # cualquier error no previsto en un worker; los de red se registran en cada handler
        try:
            return fn(*args)
        except Exception:
            logger.exception("Catalog sync task failed")
            return None

    def close(self, wait: bool = True) -> None:
        if self._owns_executor:
            self.executor.shutdown(wait=wait)

    def _load(self, store) -> bool:
        try:
            data = self.gateway.list()
        except CatalogSyncError as e:
            logger.error("Failed to load products: %s", e)
            return False
        if not isinstance(data, list) or not data:
            logger.info("Remote catalog empty; keeping %d local products", len(store.products))
            return False
        store.replace_all(Product.from_document(doc) for doc in data)
        logger.info("Loaded %d products from catalog service", len(data))
        return True

    def _create(self, store, provisional: Product, data: ProductInput) -> Optional[Product]:
        try:
            created = self.gateway.create(data.to_document())
        except CatalogSyncError as e:
            logger.error("Failed to sync with API: %s", e)
            return None
        if not isinstance(created, dict) or created.get("_id") is None:
            logger.error("Catalog service returned no id for provisional product %s", provisional.id)
            return None
        confirmed = Product.from_document(created)
        store.reconcile(provisional.id, confirmed)
        return confirmed

    def _update(self, product_id: ProductId, data: ProductInput):
        try:
            return self.gateway.update(product_id, data.to_document())
        except CatalogSyncError as e:
            logger.error("Failed to update product %s: %s", product_id, e)
            return None

    def _delete(self, product_id: ProductId):
        try:
            return self.gateway.delete(product_id)
        except CatalogSyncError as e:
            logger.error("Failed to delete product %s: %s", product_id, e)
            return None

