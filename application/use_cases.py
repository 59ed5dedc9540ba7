from typing import Any, Dict, List, Optional
from core.ports import ProductRepository
from core.text import matches_query
from core.validation import validate_document

ALL_CATEGORIES = "All"

# defaults del esquema de producto al crear
SCHEMA_DEFAULTS = {
    "images": [],
    "colors": [],
    "sizes": [],
    "features": [],
    "isNew": False,
    "isSale": False,
    "rating": 0,
    "reviews": 0,
}


class ListProductsUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    def execute(self, query: str = "", category: str = "") -> List[Dict[str, Any]]:
        docs = self.product_repository.list_products()
        if category and category != ALL_CATEGORIES:
            docs = [d for d in docs if d.get("category") == category]
        if query.strip():
            docs = [d for d in docs if matches_query(query, d.get("name"), d.get("category"))]
        return docs


class CreateProductUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    def execute(self, document: Dict[str, Any]) -> Dict[str, Any]:
        validate_document(document)
        body = dict(SCHEMA_DEFAULTS)
        body.update({k: v for k, v in document.items() if v is not None})
        return self.product_repository.create_product(body)


class UpdateProductUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    def execute(self, product_id, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        validate_document(changes, partial=True)
        return self.product_repository.update_product(product_id, changes)


class DeleteProductUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    def execute(self, product_id) -> bool:
        return self.product_repository.delete_product(product_id)


class ListCategoriesUseCase:
    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def execute(self) -> List[str]:
        seen = dict.fromkeys(d.get("category") for d in self.repo.list_products() if d.get("category"))
        return [ALL_CATEGORIES, *seen]
