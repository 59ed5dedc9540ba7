import logging
from concurrent.futures import ThreadPoolExecutor

from application.catalog_store import CatalogStore
from application.catalog_view import whatsapp_enquiry_url
from application.seed_data import default_products
from application.sync import RemoteSyncAdapter
from infrastructure.config import Config
from infrastructure.remote.catalog_client import HttpCatalogClient

logger = logging.getLogger(__name__)


class CatalogSession:
    """Dueño del store, el adaptador y el pool de hilos durante una sesión.

    Uso:
        with CatalogSession() as session:
            session.store.add_product(...)
    """

    def __init__(self, base_url: str = None, http_session=None, workers: int = None, seed_defaults: bool = True):
        self.executor = ThreadPoolExecutor(
            max_workers=workers or Config.SYNC_WORKERS,
            thread_name_prefix="catalog-sync",
        )
        self.gateway = HttpCatalogClient(base_url or Config.CATALOG_API_URL, session=http_session)
        self.sync = RemoteSyncAdapter(self.gateway, self.executor)
        self.store = CatalogStore(self.sync, initial=default_products() if seed_defaults else [])
        self.whatsapp_number = Config.WHATSAPP_NUMBER

    def open(self, wait: bool = False) -> "CatalogSession":
        future = self.store.load()
        if wait and future is not None:
            future.result()
        return self

    def enquiry_url(self, product) -> str:
        return whatsapp_enquiry_url(product, self.whatsapp_number)

    def close(self) -> None:
        self.store.wait_for_sync()
        self.executor.shutdown(wait=True)
        logger.debug("Catalog session closed")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
