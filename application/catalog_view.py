"""Lógica no visual que usan las tarjetas, el modal y la barra de filtros."""
import math
from typing import Iterable, List
from urllib.parse import quote

from core.entities import Product
from core.text import matches_query

ALL = "All"

CATEGORY_PREFIXES = {
    "Blouse": "BLS",
    "Kids Frock": "KFR",
    "Chudithar": "CHU",
    "Churidhar": "CHU",
    "Boutique Gown": "BGW",
    "Aari Work": "ARI",
    "Embroidery": "EMB",
}


def category_options(products: Iterable[Product]) -> List[str]:
    seen = dict.fromkeys(p.category for p in products if p.category)
    return [ALL, *seen]


def filter_products(products: Iterable[Product], category: str = ALL, query: str = "") -> List[Product]:
    out = []
    for p in products or []:
        if not p or not p.name or not p.category:
            continue
        if category and category != ALL and p.category != category:
            continue
        if not matches_query(query, p.name, p.category):
            continue
        out.append(p)
    return out


def discount_percentage(product: Product) -> int:
    if not product.original_price:
        return 0
    # redondeo "half up", no el bancario de round()
    return math.floor((product.original_price - product.price) / product.original_price * 100 + 0.5)


def show_sale_badge(product: Product) -> bool:
    return bool(product.is_sale) and discount_percentage(product) > 0


def gallery(product: Product) -> List[str]:
    return product.gallery


def step_image(index: int, count: int, step: int = 1) -> int:
    """Índice siguiente/anterior del carrusel, con vuelta al inicio."""
    if count <= 0:
        return 0
    return (index + step) % count


def whatsapp_enquiry_url(product: Product, phone: str) -> str:
    message = f"Hi, I'm interested in Product ID: {product.id} - {product.name}"
    digits = "".join(ch for ch in str(phone) if ch.isdigit())
    text = quote(message, safe="!~*'()")
    return f"https://wa.me/{digits}?text={text}"


def suggest_product_code(category: str, products: Iterable[Product]) -> str:
    """Código sugerido en el alta: prefijo de categoría + correlativo de 3 dígitos."""
    prefix = CATEGORY_PREFIXES.get(category, "PRD")
    count = sum(1 for p in products if p.category == category)
    return f"{prefix}{count + 1:03d}"
