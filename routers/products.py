"""Product API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from config.database import get_store
from repositories.exceptions import MissingFieldError, StoreError
from repositories.store_db import StoreDB
from routers.errors import internal_error
from schemas.limits import UINT32_MAX
from schemas.product import ProductSchema
from schemas.responses import CreatedResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

ProductId = Annotated[int, Path(ge=0, le=UINT32_MAX, description="Product identifier")]


@router.get("", response_model=list[ProductSchema], summary="List Products")
def list_products(
    store: Annotated[StoreDB, Depends(get_store)],
) -> list[ProductSchema]:
    """Return every product."""
    try:
        return store.products.query()
    except StoreError as e:
        logger.exception("Failed to list products")
        raise internal_error() from e


@router.post(
    "/search",
    response_model=list[ProductSchema],
    summary="Search Products",
    description="""
    Return the products matching every field set in the body.

    `name` and `description` match as substrings, all other fields must be
    equal.
    """,
)
def search_products(
    product_filter: ProductSchema,
    store: Annotated[StoreDB, Depends(get_store)],
) -> list[ProductSchema]:
    """Return the products matching the filter in the body."""
    try:
        return store.products.query(product_filter)
    except StoreError as e:
        logger.exception("Failed to search products")
        raise internal_error() from e


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
    responses={
        400: {"model": ErrorResponse, "description": "Required field missing"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def create_product(
    product: ProductSchema,
    store: Annotated[StoreDB, Depends(get_store)],
) -> CreatedResponse:
    """Create a product. Any id in the body is ignored."""
    try:
        new_id = store.products.create(product)
    except MissingFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except StoreError as e:
        logger.exception("Failed to create product")
        raise internal_error() from e

    return CreatedResponse(id=new_id)


@router.put(
    "/{product_id}",
    response_model=ProductSchema,
    summary="Update Product",
    responses={
        404: {"model": ErrorResponse, "description": "Product not found or nothing to change"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def update_product(
    product_id: ProductId,
    product: ProductSchema,
    store: Annotated[StoreDB, Depends(get_store)],
) -> ProductSchema:
    """Change the fields set in the body; the id in the path wins over the body.

    Returns:
        The product as stored after the update.
    """
    product.id = product_id
    try:
        updated = store.products.update(product)
        current = store.products.query(ProductSchema(id=product_id)) if updated else []
    except StoreError as e:
        logger.exception("Failed to update product id=%s", product_id)
        raise internal_error() from e

    if not current:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with ID {product_id} not found",
        )
    return current[0]


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Product",
    responses={404: {"model": ErrorResponse, "description": "Product not found"}},
)
def delete_product(
    product_id: ProductId,
    store: Annotated[StoreDB, Depends(get_store)],
) -> Response:
    """Delete a product by id."""
    try:
        deleted = store.products.delete(product_id)
    except StoreError as e:
        logger.exception("Failed to delete product id=%s", product_id)
        raise internal_error() from e

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with ID {product_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
