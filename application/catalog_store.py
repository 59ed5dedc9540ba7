import logging
import threading
import time
from concurrent.futures import Future, wait
from typing import Callable, Iterable, List, Optional

from core.entities import Product, ProductId, ProductInput

logger = logging.getLogger(__name__)

Listener = Callable[[List[Product]], None]


def millis() -> int:
    return int(time.time() * 1000)


class CatalogStore:
    """Vista en memoria del catálogo del lado cliente.

    Las mutaciones se aplican localmente de forma síncrona (optimistas) y luego
    se delegan al adaptador de sincronización, que corre en otro hilo. No hay
    rollback: si la petición remota falla, el estado local queda como está.
    """

    def __init__(self, sync=None, initial: Optional[Iterable[Product]] = None, clock: Callable[[], int] = millis):
        self._sync = sync
        self._products: List[Product] = list(initial or [])
        self._lock = threading.Lock()
        self._listeners: List[Listener] = []
        self._pending = set()
        self._clock = clock

    # ========= lectura =========
    @property
    def products(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def get_product(self, product_id: ProductId) -> Optional[Product]:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ========= mutaciones =========
    def load(self) -> Optional[Future]:
        if self._sync is None:
            return None
        return self._track(self._sync.load(self))

    def add_product(self, data: ProductInput) -> Product:
        with self._lock:
            product = Product.from_input(self._provisional_id(), data)
            self._products.append(product)
        self._notify()
        if self._sync is not None:
            self._track(self._sync.push_create(self, product, data))
        return product

    def update_product(self, product_id: ProductId, data: ProductInput) -> Optional[Product]:
        updated = None
        with self._lock:
            for i, p in enumerate(self._products):
                if p.id == product_id:
                    updated = Product.from_input(product_id, data)
                    self._products[i] = updated
        self._notify()
        if self._sync is not None:
            self._track(self._sync.push_update(product_id, data))
        return updated

    def delete_product(self, product_id: ProductId) -> None:
        with self._lock:
            self._products = [p for p in self._products if p.id != product_id]
        self._notify()
        if self._sync is not None:
            self._track(self._sync.push_delete(product_id))

    # ========= usados por el adaptador =========
    def replace_all(self, products: Iterable[Product]) -> None:
        with self._lock:
            self._products = list(products)
        self._notify()

    def reconcile(self, provisional_id: ProductId, confirmed: Product) -> bool:
        """Cambia el registro provisional por el confirmado (mismo id provisional).

        Si ya no hay ningún registro con ese id, el confirmado se descarta.
        """
        replaced = False
        with self._lock:
            for i, p in enumerate(self._products):
                if p.id == provisional_id:
                    self._products[i] = confirmed
                    replaced = True
                    break
        if replaced:
            self._notify()
        else:
            logger.warning("No local product with provisional id %s; dropping confirmed %s", provisional_id, confirmed.id)
        return replaced

    def wait_for_sync(self, timeout: Optional[float] = None) -> bool:
        """Espera a que terminen las peticiones en curso. True si no queda ninguna."""
        pending = list(self._pending)
        if not pending:
            return True
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    # ========= internos =========
    def _provisional_id(self) -> int:
        # llamar con el lock tomado
        taken = {p.id for p in self._products}
        candidate = self._clock()
        while candidate in taken:
            candidate += 1
        return candidate

    def _track(self, future: Optional[Future]) -> Optional[Future]:
        if future is None:
            return None
        self._pending.add(future)
        future.add_done_callback(self._pending.discard)
        return future

    def _notify(self) -> None:
        snapshot = self.products
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Catalog listener failed")
