# controllers.py
import json
import logging
from flask import request, current_app
from application.services import ProductService
from core.errors import ValidationError

logger = logging.getLogger(__name__)


def json_response(payload, status: int = 200):
    return current_app.response_class(
        response=json.dumps(payload, ensure_ascii=False),
        status=status,
        mimetype="application/json; charset=utf-8",
    )


def error_response(message: str, status: int = 500):
    return json_response({"error": message}, status)


# ========= controlador =========
class ProductController:
    def __init__(self, product_service: ProductService):
        self.product_service = product_service

    def ping(self):
        return json_response({"status": "ok"})

    def list_products(self):
        try:
            q = (request.args.get("q") or "").strip()
            category = (request.args.get("category") or "").strip()
            return json_response(self.product_service.list_products(q, category))
        except Exception:
            logger.exception("API Error")
            return error_response("Failed to fetch products")

    def categories(self):
        try:
            return json_response(self.product_service.categories())
        except Exception:
            logger.exception("API Error")
            return error_response("Failed to fetch categories")

    def create_product(self):
        body = request.get_json(silent=True)
        try:
            created = self.product_service.create_product(body)
            return json_response(created)
        except ValidationError as e:
            return error_response(e.message, 400)
        except Exception:
            logger.exception("API Error")
            return error_response("Failed to create product")

    def update_product(self):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return error_response("Product document must be a JSON object", 400)
        # {id, ...campos}
        changes = dict(body)
        product_id = changes.pop("id", None)
        try:
            updated = self.product_service.update_product(product_id, changes)
            return json_response(updated)
        except ValidationError as e:
            return error_response(e.message, 400)
        except Exception:
            logger.exception("API Error")
            return error_response("Failed to update product")

    def delete_product(self):
        try:
            product_id = request.args.get("id")
            self.product_service.delete_product(product_id)
            return json_response({"success": True})
        except Exception:
            logger.exception("API Error")
            return error_response("Failed to delete product")
