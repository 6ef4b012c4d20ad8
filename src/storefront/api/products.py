"""FastAPI endpoints for the product catalogue."""

from decimal import Decimal
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from storefront.api.guards import admin_principal
from storefront.api.schemas import (
    CreateProductRequest,
    MessageResponse,
    ProductListResponse,
    ProductResponse,
    ProductView,
    UpdateProductRequest,
)
from storefront.catalogue import operations

router = APIRouter(prefix="/products", tags=["products"])


@router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    dependencies=[Depends(admin_principal)],
)
async def create_product(body: CreateProductRequest) -> dict:
    return operations.create_product(
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
        category=body.category,
    )


@router.get("", response_model=ProductListResponse)
async def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    category: str | None = None,
    min_price: Decimal | None = Query(None, ge=0, alias="minPrice"),
    max_price: Decimal | None = Query(None, ge=0, alias="maxPrice"),
    search: str | None = None,
    sort_by: Literal["name", "price", "createdAt"] = Query("createdAt", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("desc", alias="sortOrder"),
) -> dict:
    return operations.find_all(
        page=page,
        limit=limit,
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    return operations.get_categories()


@router.get("/{product_id}", response_model=ProductView)
async def get_product(product_id: UUID) -> dict:
    return operations.find_one(str(product_id))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    dependencies=[Depends(admin_principal)],
)
async def update_product(product_id: UUID, body: UpdateProductRequest) -> dict:
    return operations.update_product(str(product_id), **body.model_dump(exclude_unset=True))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    dependencies=[Depends(admin_principal)],
)
async def delete_product(product_id: UUID) -> dict:
    return operations.remove_product(str(product_id))
