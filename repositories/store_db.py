"""Store handle owning the engine and the per-entity repositories."""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from config.database import create_store_engine
from config.settings import Settings
from models import Base
from repositories.entity_repository import EntityRepository
from repositories.exceptions import StoreError
from repositories.table_specs import EMPLOYEE_TABLE, PRODUCT_TABLE
from schemas.employee import EmployeeSchema
from schemas.product import ProductSchema

logger = logging.getLogger(__name__)


class StoreDB:
    """Employees and products persisted through one shared connection pool.

    The handle is created once per application (or per test) and passed to
    whoever needs it; nothing about it is global.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.employees: EntityRepository[EmployeeSchema] = EntityRepository(
            engine, EMPLOYEE_TABLE, EmployeeSchema
        )
        self.products: EntityRepository[ProductSchema] = EntityRepository(
            engine, PRODUCT_TABLE, ProductSchema
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "StoreDB":
        """Open a store on the database and pool size named in ``settings``.

        Args:
            settings: Application configuration.

        Returns:
            A store whose schema is not yet initialized.
        """
        return cls(create_store_engine(settings.database_url, settings.pool_size))

    def init_schema(self) -> None:
        """Create the employees and products tables if they are absent."""
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StoreError("Failed to create store schema") from e
        logger.info("Store schema ready: url=%s", self.engine.url.render_as_string(hide_password=True))

    def close(self) -> None:
        """Dispose the engine and close every pooled connection."""
        self.engine.dispose()
