"""
Configuración
=============

Configuración centralizada; se lee de variables de entorno (y de un `.env`
en la raíz del proyecto si existe).
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


class Config:
    """Configuración de la aplicación"""

    # Servidor
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", 5057))
    DEBUG = os.getenv("DEBUG", "False").lower() == "true"

    # Base de datos
    DATABASE_PATH = os.getenv("DATABASE_PATH", str(BASE_DIR / "catalog.sqlite"))
    PRODUCTS_TABLE = os.getenv("PRODUCTS_TABLE", "products")

    # Cliente del servicio de catálogo
    CATALOG_API_URL = os.getenv("CATALOG_API_URL", f"http://{HOST}:{PORT}")
    SYNC_WORKERS = int(os.getenv("SYNC_WORKERS", 4))

    # Tienda
    WHATSAPP_NUMBER = os.getenv("WHATSAPP_NUMBER", "919876543210")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or Config.LOG_LEVEL), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

