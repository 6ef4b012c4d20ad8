"""Pydantic request/response schemas for the Storefront API.

Field names are snake_case in Python and camelCase on the wire. Money is
rendered as a JSON number.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    message: str


class PaginationView(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool


# --- Auth ---


class RegisterRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ada Lovelace",
                    "email": "ada@example.com",
                    "password": "analytical",
                    "isAdmin": False,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    is_admin: bool = False


class LoginRequest(CamelModel):
    model_config = {
        "json_schema_extra": {"examples": [{"email": "ada@example.com", "password": "analytical"}]}
    }

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserSummary(CamelModel):
    id: str
    name: str
    email: str


class RegisteredUser(UserSummary):
    is_admin: bool
    created_at: datetime


class UserView(RegisteredUser):
    updated_at: datetime | None = None


class RegisterResponse(CamelModel):
    message: str
    user: RegisteredUser
    access_token: str = Field(..., alias="access_token")


class LoginResponse(CamelModel):
    message: str
    user: UserSummary
    access_token: str = Field(..., alias="access_token")


# --- Products ---


class CreateProductRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Mechanical Keyboard",
                    "description": "Tenkeyless, brown switches",
                    "price": 89.99,
                    "stock": 25,
                    "category": "Electronics",
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    stock: int = Field(..., ge=0)
    category: str = Field(..., min_length=1, max_length=100)


class UpdateProductRequest(CamelModel):
    model_config = {"json_schema_extra": {"examples": [{"price": 79.99, "stock": 40}]}}

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(None, gt=0, max_digits=10, decimal_places=2)
    stock: int | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1, max_length=100)


class ProductView(CamelModel):
    id: str
    name: str
    description: str | None = None
    price: float
    stock: int
    category: str
    created_at: datetime
    updated_at: datetime | None = None


class ProductResponse(CamelModel):
    message: str
    product: ProductView


class ProductFilters(CamelModel):
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    search: str | None = None
    sort_by: str
    sort_order: str


class ProductListResponse(CamelModel):
    products: list[ProductView]
    pagination: PaginationView
    filters: ProductFilters


# --- Orders ---


class OrderItemRequest(CamelModel):
    product_id: UUID
    quantity: int = Field(..., ge=1)


class CreateOrderRequest(CamelModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"items": [{"productId": "6f1c2a9e-4b1d-4c8e-9a51-2f0f5d3b7c11", "quantity": 2}]}
            ]
        }
    }

    items: list[OrderItemRequest] = Field(..., min_length=1)


class ProductSummary(CamelModel):
    id: str
    name: str
    category: str


class ProductDetail(ProductSummary):
    description: str | None = None


class OwnerView(CamelModel):
    id: str
    name: str
    email: str


class OrderLine(CamelModel):
    id: str
    quantity: int
    price: float
    product: ProductSummary | None = None


class OrderLineDetail(CamelModel):
    id: str
    quantity: int
    price: float
    subtotal: float
    product: ProductDetail | None = None


class PlacedOrder(CamelModel):
    id: str
    total: float
    created_at: datetime
    items: list[OrderLine]


class PlaceOrderResponse(CamelModel):
    message: str
    order: PlacedOrder


class OrderSummary(CamelModel):
    id: str
    total: float
    created_at: datetime
    items_count: int
    items: list[OrderLine]


class OwnedOrderSummary(OrderSummary):
    user: OwnerView | None = None


class OrderListResponse(CamelModel):
    orders: list[OrderSummary]
    pagination: PaginationView


class AllOrdersResponse(CamelModel):
    orders: list[OwnedOrderSummary]
    pagination: PaginationView


class OrderDetail(CamelModel):
    id: str
    total: float
    created_at: datetime
    updated_at: datetime | None = None
    user: OwnerView | None = None
    items: list[OrderLineDetail]


class OrderStats(CamelModel):
    total_orders: int
    total_revenue: float
    avg_order_value: float
