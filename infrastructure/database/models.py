from dataclasses import dataclass

@dataclass
class DatabaseConfig:
    db_path: str
    products_table: str = "products"
    create_if_missing: bool = True
