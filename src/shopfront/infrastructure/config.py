"""Configuration for the shopfront backend.

Settings are read from environment variables once and cached, so that
the CLI, the HTTP app and the composition root never touch os.environ
directly.  Tests call ``get_settings.cache_clear()`` after changing the
environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_dir: Path
    products_file: str
    users_file: str
    carts_file: str
    orders_file: str
    log_level: str
    host: str
    port: int

    @property
    def products_path(self) -> Path:
        return self.data_dir / self.products_file

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.users_file

    @property
    def carts_path(self) -> Path:
        return self.data_dir / self.carts_file

    @property
    def orders_path(self) -> Path:
        return self.data_dir / self.orders_file


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int) -> int:
        try:
            return int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return default

    data_dir = os.getenv("SHOPFRONT_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
        products_file=os.getenv("SHOPFRONT_PRODUCTS_FILE", "products.json"),
        users_file=os.getenv("SHOPFRONT_USERS_FILE", "users.json"),
        carts_file=os.getenv("SHOPFRONT_CARTS_FILE", "carts.json"),
        orders_file=os.getenv("SHOPFRONT_ORDERS_FILE", "orders.json"),
        log_level=(os.getenv("SHOPFRONT_LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("SHOPFRONT_HOST", "127.0.0.1"),
        port=_int(os.getenv("SHOPFRONT_PORT"), 8000),
    )
