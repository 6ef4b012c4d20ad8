"""Repository for the Product aggregate, with the catalogue's query methods."""

from protean.utils.query import Q

from storefront.catalogue.product import Product
from storefront.domain import storefront

SORTABLE_FIELDS = {"name": "name", "price": "price", "createdAt": "created_at"}


def _sort_key(sort_by: str, sort_order: str) -> str:
    field = SORTABLE_FIELDS[sort_by]
    return f"-{field}" if sort_order == "desc" else field


@storefront.repository(part_of=Product)
class ProductRepository:
    def search(
        self,
        category=None,
        min_price=None,
        max_price=None,
        search=None,
        sort_by="createdAt",
        sort_order="desc",
        offset=0,
        limit=10,
    ):
        """Filter, sort and page through the catalogue.

        ``category`` and ``search`` match case-insensitive substrings; ``search``
        looks at the name OR the description. Price bounds are inclusive.
        Returns the protean ``ResultSet``; ``.total`` counts every match.
        """
        criteria = Q()
        if category:
            criteria &= Q(category__icontains=category)
        if min_price is not None:
            criteria &= Q(price__gte=min_price)
        if max_price is not None:
            criteria &= Q(price__lte=max_price)
        if search:
            criteria &= Q(name__icontains=search) | Q(description__icontains=search)

        query = self._dao.query
        if criteria:
            query = query.filter(criteria)

        return (
            query.order_by(_sort_key(sort_by, sort_order))
            .offset(offset)
            .limit(limit)
            .all()
        )

    def categories(self) -> list[str]:
        """Distinct category values, alphabetically ordered."""
        products = self._dao.query.limit(None).all().items
        return sorted({product.category for product in products})
