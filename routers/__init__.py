"""API router aggregation."""

from fastapi import APIRouter

from routers.employees import router as employees_router
from routers.products import router as products_router

router = APIRouter()

router.include_router(
    employees_router,
    prefix="/employees",
    tags=["Employees"],
)
router.include_router(
    products_router,
    prefix="/products",
    tags=["Products"],
)
