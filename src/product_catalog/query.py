from dataclasses import dataclass
from math import ceil, isfinite
from typing import Iterable, List, Optional

from .models import Product


@dataclass(frozen=True)
class ProductFilter:
    category: Optional[str] = None
    search: Optional[str] = None
    in_stock: Optional[bool] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None

    @classmethod
    def from_args(cls, args) -> "ProductFilter":
        """Build a filter from query-string ``args``; bad numbers are dropped."""
        in_stock = args.get("inStock")
        return cls(
            category=args.get("category") or None,
            search=args.get("search") or None,
            in_stock=in_stock.lower() == "true" if in_stock else None,
            min_price=_to_float(args.get("minPrice")),
            max_price=_to_float(args.get("maxPrice")),
        )

    def matches(self, product: Product) -> bool:
        if self.category is not None and product.category.lower() != self.category.lower():
            return False
        if self.search is not None and not matches_term(product, self.search):
            return False
        if self.in_stock is not None and product.in_stock != self.in_stock:
            return False
        if self.min_price is not None and product.price < self.min_price:
            return False
        if self.max_price is not None and product.price > self.max_price:
            return False
        return True


@dataclass(frozen=True)
class Page:
    page: int
    limit: int
    total: int
    items: List[Product]

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit)

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
            "data": [p.to_dict() for p in self.items],
        }


def _to_float(value: Optional[str]) -> Optional[float]:
    if not value or "_" in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if isfinite(number) else None


def positive_int(value: Optional[str], default: int) -> int:
    try:
        number = int(value) if value is not None else default
    except ValueError:
        return default
    return number if number > 0 else default


def matches_term(product: Product, term: str) -> bool:
    needle = term.lower()
    return needle in product.name.lower() or needle in product.description.lower()


def filter_products(products: Iterable[Product], criteria: ProductFilter) -> List[Product]:
    return [p for p in products if criteria.matches(p)]


def search_products(products: Iterable[Product], term: str) -> List[Product]:
    return [p for p in products if matches_term(p, term)]


def paginate(products: List[Product], page: int, limit: int) -> Page:
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    start = (page - 1) * limit
    return Page(page=page, limit=limit, total=len(products), items=products[start:start + limit])
