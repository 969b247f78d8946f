"""Shared fixtures: an isolated file-backed store per test."""

import pytest

from config.database import create_store_engine
from repositories.store_db import StoreDB
from schemas.employee import EmployeeSchema
from schemas.product import ProductSchema


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'store.db'}"


@pytest.fixture
def store(database_url):
    store = StoreDB(create_store_engine(database_url))
    store.init_schema()
    yield store
    store.close()


def make_product(**overrides) -> ProductSchema:
    values = {
        "name": "Whole milk 1l",
        "category": "dairy",
        "quantity": 40,
        "bar_code": 8586000123456,
        "cost_price": 0.79,
        "sell_price": 1.19,
    }
    values.update(overrides)
    return ProductSchema(**values)


def make_employee(**overrides) -> EmployeeSchema:
    values = {"name": "Jana", "surname": "Novakova", "position": "Cashier"}
    values.update(overrides)
    return EmployeeSchema(**values)
