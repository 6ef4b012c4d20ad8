"""FastAPI endpoints for placing and reading orders."""

from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from storefront.api.guards import admin_principal, current_principal
from storefront.api.schemas import (
    AllOrdersResponse,
    CreateOrderRequest,
    OrderDetail,
    OrderListResponse,
    OrderStats,
    PlaceOrderResponse,
)
from storefront.ordering import operations

router = APIRouter(prefix="/orders", tags=["orders"])

OrderSortField = Literal["total", "createdAt"]
SortOrder = Literal["asc", "desc"]


@router.post("", status_code=201, response_model=PlaceOrderResponse)
async def place_order(body: CreateOrderRequest, principal: dict = Depends(current_principal)) -> dict:
    return operations.place_order(
        user_id=principal["id"],
        items=[{"product_id": item.product_id, "quantity": item.quantity} for item in body.items],
    )


@router.get("", response_model=OrderListResponse)
async def list_my_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    sort_by: OrderSortField = Query("createdAt", alias="sortBy"),
    sort_order: SortOrder = Query("desc", alias="sortOrder"),
    principal: dict = Depends(current_principal),
) -> dict:
    return operations.find_all_by_user(
        principal["id"],
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/all", response_model=AllOrdersResponse, dependencies=[Depends(admin_principal)])
async def list_all_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    sort_by: OrderSortField = Query("createdAt", alias="sortBy"),
    sort_order: SortOrder = Query("desc", alias="sortOrder"),
) -> dict:
    return operations.find_all(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)


@router.get("/stats", response_model=OrderStats, dependencies=[Depends(admin_principal)])
async def order_stats() -> dict:
    return operations.get_order_stats()


@router.get("/{order_id}", response_model=OrderDetail)
async def get_order(order_id: UUID, principal: dict = Depends(current_principal)) -> dict:
    return operations.find_one(str(order_id), principal["id"], is_admin=principal["is_admin"])
