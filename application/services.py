import logging
from typing import Any, Dict, Iterable

from .use_cases import (
    CreateProductUseCase,
    DeleteProductUseCase,
    ListCategoriesUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repo):
        self.repo = repo
        self.list_use_case = ListProductsUseCase(repo)
        self.create_use_case = CreateProductUseCase(repo)
        self.update_use_case = UpdateProductUseCase(repo)
        self.delete_use_case = DeleteProductUseCase(repo)
        self.categories_use_case = ListCategoriesUseCase(repo)

    def list_products(self, query: str = "", category: str = ""):
        return self.list_use_case.execute(query, category)

    def create_product(self, document: Dict[str, Any]):
        return self.create_use_case.execute(document)

    def update_product(self, product_id, changes: Dict[str, Any]):
        return self.update_use_case.execute(product_id, changes)

    def delete_product(self, product_id):
        return self.delete_use_case.execute(product_id)

    def categories(self):
        return self.categories_use_case.execute()

    def seed(self, documents: Iterable[Dict[str, Any]]) -> int:
        """Vacía la colección y carga los productos de ejemplo."""
        removed = self.repo.clear()
        logger.info("Cleared %d existing products", removed)
        count = 0
        for doc in documents:
            self.create_use_case.execute(doc)
            count += 1
        logger.info("Added %d sample products", count)
        return count
