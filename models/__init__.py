"""Models package."""

from models.base import Base
from models.employee import Employee
from models.product import Product

__all__ = [
    "Base",
    "Employee",
    "Product",
]
