import json
import logging
import secrets
import sqlite3
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from core.ports import ProductRepository
from .models import DatabaseConfig

logger = logging.getLogger(__name__)

# campos que gestiona el repositorio; nunca se guardan dentro del documento
RESERVED_KEYS = ("_id", "id", "createdAt", "updatedAt")


def quote_ident(s: str) -> str:
    """Cita un identificador SQLite, escapando comillas dobles."""
    return '"' + str(s).replace('"', '""') + '"'


def new_object_id() -> str:
    """Id de 24 hex al estilo ObjectId: 4 bytes de timestamp + 8 aleatorios."""
    return f"{int(time.time()):08x}{secrets.token_hex(8)}"


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SQLiteProductRepository(ProductRepository):
    """Adaptador SQLite que guarda cada producto como un documento JSON."""

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self._verify_database()

    def _verify_database(self):
        path = Path(self.config.db_path)
        if not path.exists() and not self.config.create_if_missing:
            raise FileNotFoundError(f"Database not found: {self.config.db_path}")
        if str(path) != ":memory:":
            path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._get_connection()
        try:
            table = quote_ident(self.config.products_table)
            conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {table} (
                    id TEXT PRIMARY KEY,
                    document TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self):
        conn = sqlite3.connect(self.config.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _row_to_document(self, row) -> Dict[str, Any]:
        doc = json.loads(row["document"])
        doc["_id"] = row["id"]
        doc["createdAt"] = row["created_at"]
        doc["updatedAt"] = row["updated_at"]
        return doc

    @staticmethod
    def _strip_reserved(document: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in (document or {}).items() if k not in RESERVED_KEYS}

    def list_products(self) -> List[Dict[str, Any]]:
        conn = self._get_connection()
        try:
            table = quote_ident(self.config.products_table)
            rows = conn.execute(f"SELECT * FROM {table} ORDER BY created_at ASC, rowid ASC").fetchall()
            return [self._row_to_document(r) for r in rows]
        finally:
            conn.close()

    def get_product_by_id(self, product_id: str) -> Optional[Dict[str, Any]]:
        conn = self._get_connection()
        try:
            return self._fetch(conn, product_id)
        finally:
            conn.close()

    def _fetch(self, conn, product_id: str) -> Optional[Dict[str, Any]]:
        table = quote_ident(self.config.products_table)
        row = conn.execute(f"SELECT * FROM {table} WHERE id = ?", [str(product_id)]).fetchone()
        return self._row_to_document(row) if row else None

    def create_product(self, document: Dict[str, Any]) -> Dict[str, Any]:
        body = self._strip_reserved(document)
        product_id = new_object_id()
        now = utc_now()
        conn = self._get_connection()
        try:
            table = quote_ident(self.config.products_table)
            conn.execute(
                f"INSERT INTO {table} (id, document, created_at, updated_at) VALUES (?, ?, ?, ?)",
                [product_id, json.dumps(body, ensure_ascii=False), now, now],
            )
            conn.commit()
            logger.debug("Created product %s", product_id)
            return self._fetch(conn, product_id)
        finally:
            conn.close()

    def update_product(self, product_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Mezcla `changes` sobre el documento guardado; None si el id no existe."""
        if product_id is None:
            return None
        conn = self._get_connection()
        try:
            current = self._fetch(conn, product_id)
            if current is None:
                return None
            merged = self._strip_reserved(current)
            merged.update(self._strip_reserved(changes))
            table = quote_ident(self.config.products_table)
            conn.execute(
                f"UPDATE {table} SET document = ?, updated_at = ? WHERE id = ?",
                [json.dumps(merged, ensure_ascii=False), utc_now(), str(product_id)],
            )
            conn.commit()
            return self._fetch(conn, product_id)
        finally:
            conn.close()

    def delete_product(self, product_id: str) -> bool:
        if product_id is None:
            return False
        conn = self._get_connection()
        try:
            table = quote_ident(self.config.products_table)
            cur = conn.execute(f"DELETE FROM {table} WHERE id = ?", [str(product_id)])
            conn.commit()
            return cur.rowcount > 0
        finally:
            conn.close()

    def clear(self) -> int:
        conn = self._get_connection()
        try:
            table = quote_ident(self.config.products_table)
            cur = conn.execute(f"DELETE FROM {table}")
            conn.commit()
            return cur.rowcount
        finally:
            conn.close()
