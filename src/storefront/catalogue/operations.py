"""Catalogue operations exposed to the HTTP layer.

Writes go through the product commands; reads go straight to
``ProductRepository``. Unexpected failures are reported with a fixed message
per operation.
"""

from protean.utils.globals import current_domain

from storefront.catalogue.creation import AddProduct
from storefront.catalogue.maintenance import RemoveProduct, UpdateProduct, load_product
from storefront.catalogue.product import Product
from storefront.errors import flatten_errors
from storefront.pagination import page_window
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def product_view(product: Product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "stock": product.stock,
        "category": product.category,
        "created_at": product.created_at,
        "updated_at": product.updated_at,
    }


@flatten_errors("Failed to create product")
def create_product(name, price, stock, category, description=None) -> dict:
    command = AddProduct(
        name=name,
        description=description,
        price=price,
        stock=stock,
        category=category,
    )
    product_id = current_domain.process(command, asynchronous=False)
    logger.info("product.added", product_id=product_id, category=category)
    return {
        "message": "Product created successfully",
        "product": product_view(load_product(product_id)),
    }


@flatten_errors("Failed to fetch products")
def find_all(
    page=None,
    limit=None,
    category=None,
    min_price=None,
    max_price=None,
    search=None,
    sort_by="createdAt",
    sort_order="desc",
) -> dict:
    window = page_window(page, limit)
    results = current_domain.repository_for(Product).search(
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        offset=window.offset,
        limit=window.size,
    )
    return {
        "products": [product_view(product) for product in results.items],
        "pagination": window.describe(results.total),
        "filters": {
            "category": category,
            "min_price": min_price,
            "max_price": max_price,
            "search": search,
            "sort_by": sort_by,
            "sort_order": sort_order,
        },
    }


def find_one(product_id) -> dict:
    return product_view(load_product(product_id))


@flatten_errors("Failed to update product")
def update_product(product_id, **changes) -> dict:
    current_domain.process(UpdateProduct(product_id=product_id, **changes), asynchronous=False)
    logger.info("product.updated", product_id=product_id, fields=sorted(changes))
    return {
        "message": "Product updated successfully",
        "product": product_view(load_product(product_id)),
    }


@flatten_errors("Failed to delete product")
def remove_product(product_id) -> dict:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    logger.info("product.removed", product_id=product_id)
    return {"message": "Product deleted successfully"}


@flatten_errors("Failed to fetch categories")
def get_categories() -> list[str]:
    return current_domain.repository_for(Product).categories()
