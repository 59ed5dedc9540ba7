import re
from typing import Any, Dict, List, Mapping, Optional

from .entities import ProductInput
from .errors import ValidationError

DEFAULT_CATEGORY = "New Arrivals"
REQUIRED_FIELDS = ("name", "price", "category", "image")

PRICE_MESSAGE = "Please provide a valid price for the product."
RATING_MESSAGE = "Rating must be between 0 and 5."


# ========= utils =========
def clean_number(raw) -> Optional[float]:
    """'₹ 1,299.00' -> 1299.0 ; None si no queda nada parseable."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    digits = re.sub(r"[^0-9.]", "", str(raw))
    try:
        return float(digits)
    except ValueError:
        return None


def split_list(raw, sep: str = ",", upper: bool = False) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        items = [str(x) for x in raw]
    else:
        items = str(raw).split(sep)
    out = [x.strip() for x in items]
    if upper:
        out = [x.upper() for x in out]
    return [x for x in out if x]


def as_flag(raw) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw or "").strip().lower() in {"1", "true", "on", "yes"}


def check_rating(rating) -> None:
    if rating is not None and not 0 <= rating <= 5:
        raise ValidationError(RATING_MESSAGE, field="rating")


# ========= formulario =========
def parse_product_form(form: Mapping[str, Any]) -> ProductInput:
    """Convierte los campos crudos del formulario de alta/edición en un ProductInput.

    Lanza ValidationError con el mensaje a mostrar en línea; nada se envía
    mientras el formulario no sea válido.
    """
    price = clean_number(form.get("price"))
    if price is None or price <= 0:
        raise ValidationError(PRICE_MESSAGE, field="price")

    original_price = clean_number(form.get("originalPrice")) if form.get("originalPrice") else None

    rating = None
    if form.get("rating") not in (None, ""):
        try:
            rating = float(form.get("rating"))
        except (TypeError, ValueError):
            raise ValidationError(RATING_MESSAGE, field="rating")
        check_rating(rating)

    reviews = None
    if form.get("reviews") not in (None, ""):
        try:
            reviews = int(str(form.get("reviews")).strip())
        except ValueError:
            raise ValidationError("Reviews must be a whole number.", field="reviews")

    name = str(form.get("name") or "").strip()
    if not name:
        raise ValidationError("Please provide a name for the product.", field="name")

    image = str(form.get("image") or "").strip()
    if not image:
        raise ValidationError("Please provide an image for the product.", field="image")

    images = split_list(form.get("images"), sep="\n")

    return ProductInput(
        name=name,
        price=price,
        original_price=original_price,
        image=image,
        images=images or None,
        category=(str(form.get("category") or "").strip() or DEFAULT_CATEGORY),
        colors=split_list(form.get("colors")),
        sizes=split_list(form.get("sizes"), upper=True),
        description=str(form.get("description") or "").strip(),
        features=split_list(form.get("features"), sep="\n"),
        rating=rating,
        reviews=reviews,
        is_new=as_flag(form.get("isNew")),
        is_sale=as_flag(form.get("isSale")),
    )


# ========= documentos (servicio) =========
def validate_document(doc: Dict[str, Any], partial: bool = False) -> None:
    """Reglas del esquema del servicio: requeridos, precio positivo, rating 0..5."""
    if not isinstance(doc, dict):
        raise ValidationError("Product document must be a JSON object")

    if not partial:
        missing = [k for k in REQUIRED_FIELDS if doc.get(k) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}", field=missing[0])

    if "price" in doc:
        price = doc["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)) or price <= 0:
            raise ValidationError(PRICE_MESSAGE, field="price")

    if doc.get("rating") is not None:
        rating = doc["rating"]
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            raise ValidationError(RATING_MESSAGE, field="rating")
        check_rating(rating)
