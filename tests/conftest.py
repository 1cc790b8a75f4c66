from __future__ import annotations

import pytest

from shopfront.infrastructure.config import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        data_dir=tmp_path / "data",
        products_file="products.json",
        users_file="users.json",
        carts_file="carts.json",
        orders_file="orders.json",
        log_level="DEBUG",
        host="127.0.0.1",
        port=8000,
    )
