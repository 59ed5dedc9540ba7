import logging
from flask import Flask, jsonify, request
from flask_cors import CORS

from infrastructure.config import Config, configure_logging
from infrastructure.database.repositories import SQLiteProductRepository
from infrastructure.database.models import DatabaseConfig

from infrastructure.web.controllers import ProductController

from application.seed_data import SAMPLE_PRODUCTS
from application.services import ProductService

logger = logging.getLogger(__name__)


def create_app(db_path: str = None):
    configure_logging()
    app = Flask(__name__)
    CORS(app,
         resources={r"/*": {"origins": "*"}},
         methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
         allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
         send_wildcard=True)

    # Inyección de dependencias
    db_config = DatabaseConfig(db_path=db_path or Config.DATABASE_PATH, products_table=Config.PRODUCTS_TABLE)
    product_repository = SQLiteProductRepository(db_config)
    product_service = ProductService(product_repository)
    product_controller = ProductController(product_service)

    app.extensions["product_service"] = product_service

    # Rutas
    @app.route("/ping", methods=["GET", "OPTIONS"])
    def ping():
        if request.method == "OPTIONS":
            return ("", 204)
        return product_controller.ping()

    @app.route("/products", methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    def products():
        if request.method == "OPTIONS":
            return ("", 204)
        if request.method == "POST":
            return product_controller.create_product()
        if request.method == "PUT":
            return product_controller.update_product()
        if request.method == "DELETE":
            return product_controller.delete_product()
        return product_controller.list_products()

    @app.route("/products/categories", methods=["GET", "OPTIONS"])
    def categories():
        if request.method == "OPTIONS":
            return ("", 204)
        return product_controller.categories()

    @app.cli.command("seed")
    def seed():
        """Vacía la colección y carga los productos de ejemplo."""
        count = product_service.seed(SAMPLE_PRODUCTS)
        print(f"Database seeded successfully! ({count} products)")

    # Manejo de errores
    @app.errorhandler(Exception)
    def handle_any_error(e):
        code = getattr(e, "code", None)
        if isinstance(code, int) and 400 <= code < 500:
            return jsonify({"error": getattr(e, "description", str(e))}), code
        logger.exception("Unhandled error")
        return jsonify({"error": str(e)}), 500

    logger.info("Catalog service ready (db=%s)", db_config.db_path)
    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
