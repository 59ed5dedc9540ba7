from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from .entities import ProductId


class ProductRepository(ABC):
    """Puerto para acceso a documentos de productos (lado servidor)"""

    @abstractmethod
    def list_products(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def get_product_by_id(self, product_id: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def create_product(self, document: Dict[str, Any]) -> Dict[str, Any]:
        pass

    @abstractmethod
    def update_product(self, product_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def delete_product(self, product_id: str) -> bool:
        pass

    @abstractmethod
    def clear(self) -> int:
        pass


class CatalogGateway(ABC):
    """Puerto hacia el servicio de catálogo remoto (lado cliente)"""

    @abstractmethod
    def list(self) -> Any:
        pass

    @abstractmethod
    def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        pass

    @abstractmethod
    def update(self, product_id: ProductId, document: Dict[str, Any]) -> Any:
        pass

    @abstractmethod
    def delete(self, product_id: ProductId) -> Any:
        pass
