from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Union

ProductId = Union[int, str]

# nombre interno -> clave JSON (la API habla camelCase)
WIRE_NAMES = {
    "original_price": "originalPrice",
    "is_new": "isNew",
    "is_sale": "isSale",
}


@dataclass
class ProductInput:
    """Datos de un producto tal como llegan de un formulario (sin id)."""
    name: str
    price: float
    image: str
    category: str
    original_price: Optional[float] = None
    images: Optional[List[str]] = None
    colors: List[str] = field(default_factory=list)
    sizes: List[str] = field(default_factory=list)
    description: str = ""
    features: List[str] = field(default_factory=list)
    rating: Optional[float] = None
    reviews: Optional[int] = None
    is_new: bool = False
    is_sale: bool = False

    def to_document(self) -> Dict[str, Any]:
        return _to_document(self)


@dataclass
class Product:
    id: ProductId
    name: str
    price: float
    image: str
    category: str
    original_price: Optional[float] = None
    images: Optional[List[str]] = None
    colors: List[str] = field(default_factory=list)
    sizes: List[str] = field(default_factory=list)
    description: str = ""
    features: List[str] = field(default_factory=list)
    rating: float = 0
    reviews: int = 0
    is_new: bool = False
    is_sale: bool = False

    @classmethod
    def from_input(cls, product_id: ProductId, data: ProductInput) -> "Product":
        values = {f.name: getattr(data, f.name) for f in fields(data)}
        values["rating"] = data.rating if data.rating is not None else 0
        values["reviews"] = data.reviews if data.reviews is not None else 0
        return cls(id=product_id, **values)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Product":
        """Construye un Product desde un documento del servicio (usa `_id` si existe)."""
        product_id = doc.get("_id", doc.get("id"))
        values = _from_document(doc)
        for required in ("name", "image", "category"):
            values.setdefault(required, "")
        values.setdefault("price", 0)
        if values.get("rating") is None:
            values["rating"] = 0
        if values.get("reviews") is None:
            values["reviews"] = 0
        return cls(id=product_id, **values)

    @property
    def gallery(self) -> List[str]:
        """Imágenes para mostrar; sin `images` se usa la imagen principal."""
        return list(self.images) if self.images else [self.image]

    def to_document(self) -> Dict[str, Any]:
        doc = _to_document(self)
        doc["id"] = self.id
        return doc


def _to_document(obj) -> Dict[str, Any]:
    doc: Dict[str, Any] = {}
    for f in fields(obj):
        if f.name == "id":
            continue
        value = getattr(obj, f.name)
        if value is None:
            continue
        doc[WIRE_NAMES.get(f.name, f.name)] = list(value) if isinstance(value, list) else value
    return doc


def _from_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for f in fields(ProductInput):
        key = WIRE_NAMES.get(f.name, f.name)
        if key in doc:
            values[f.name] = doc[key]
    return values

