from typing import Any, Dict, Sequence

from .models import Product


def compute_stats(products: Sequence[Product]) -> Dict[str, Any]:
    categories: Dict[str, int] = {}
    for product in products:
        categories[product.category] = categories.get(product.category, 0) + 1

    in_stock = sum(1 for p in products if p.in_stock)
    price_range = {"min": 0, "max": 0, "average": 0}
    if products:
        prices = [p.price for p in products]
        price_range = {
            "min": min(prices),
            "max": max(prices),
            "average": sum(prices) / len(prices),
        }

    return {
        "totalProducts": len(products),
        "inStock": in_stock,
        "outOfStock": len(products) - in_stock,
        "categories": categories,
        "priceRange": price_range,
    }
