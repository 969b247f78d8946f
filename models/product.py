"""Product table."""

from sqlalchemy import BigInteger, Column, Float, ForeignKey, Integer, String, Text

from models.base import Base


class Product(Base):
    """Product model mapping to the products table.

    ``employee_id`` declares a foreign key to employees.id. SQLite leaves it
    unenforced unless ``PRAGMA foreign_keys`` is switched on, which the store
    never does.
    """

    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    status = Column(Integer)
    bar_code = Column(BigInteger, nullable=False)
    cost_price = Column(Float, nullable=False)
    sell_price = Column(Float, nullable=False)
    description = Column(Text)
    brand = Column(Text)
    supplier = Column(Text)
    employee_id = Column(Integer, ForeignKey("employees.id"))
    date_added = Column(String(10))
    date_remove = Column(String(10))
